"""
繁體 → 簡體正規化

逐字查表替換，不增刪字元，所以輸出長度與輸入相同；
對已是簡體的字串再做一次不會有任何變化。
"""

from typing import Mapping


class SimplifiedNormalizer:
    """
    以 SimplifiedTable 做逐字正規化

    Args:
        table: 繁體字 → 簡體字 的唯讀映射
    """

    def __init__(self, table: Mapping[str, str]):
        self._table = table

    def normalize_char(self, char: str) -> str:
        return self._table.get(char, char)

    def normalize(self, text: str) -> str:
        table = self._table
        return "".join(table.get(char, char) for char in text)

"""
全域配置模組

提供統一的配置類別，控制日誌、計時與字典建置等行為。

使用方式:
    from pinyinkit import PinyinEngine

    # 簡單開啟 verbose 模式
    engine = PinyinEngine(verbose=True)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("pinyinkit").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .utils.logger import setup_logger

# 多音詞最大長度：經典資料集的詞條皆為 2~4 字
DEFAULT_MAX_PHRASE_LENGTH = 4

DEFAULT_SEPARATOR = ","


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass
class PinyinConfig:
    """
    轉換器配置類別

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        max_phrase_length: 由 pypinyin 建置字典時保留的最長詞條字數
        default_separator: convert_to_pinyin 未指定分隔符時使用

    使用範例:
        config = PinyinConfig(verbose=True, max_phrase_length=4)
        engine = PinyinEngine(config=config)
    """

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None
    max_phrase_length: int = DEFAULT_MAX_PHRASE_LENGTH
    default_separator: str = DEFAULT_SEPARATOR

    def __post_init__(self):
        if self.max_phrase_length < 1:
            raise ValueError(f"max_phrase_length 必須 >= 1，收到 {self.max_phrase_length}")
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = PinyinConfig(verbose=False)

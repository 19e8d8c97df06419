"""
拼音字典資料模型

PinyinDictionary 把三張查詢表包成一個不可變物件，在啟動時建立一次，
再以參考傳給 Resolver / Converter。測試可直接用幾筆資料建立小字典。
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from pinyinkit.core.tone import PINYIN_SEPARATOR
from pinyinkit.exceptions import DictionaryLoadError

from .loader import PathLike, load_table


@dataclass(frozen=True)
class PinyinDictionary:
    """
    三張唯讀查詢表

    Attributes:
        single: 單字 → 帶調拼音（逗號分隔，多音字依常用度排列）
        multi: 多字詞 → 帶調拼音（逗號分隔，每字一個音節）
        simplified: 繁體字 → 簡體字
        max_phrase_length: multi 中最長詞條的字數（至少為 1），即 Resolver 的最大視窗

    Raises:
        DictionaryLoadError: multi 的詞條音節數與字數不符，或 simplified 的值不是單一字元
    """

    single: Mapping[str, str] = field(default_factory=dict)
    multi: Mapping[str, str] = field(default_factory=dict)
    simplified: Mapping[str, str] = field(default_factory=dict)
    max_phrase_length: int = field(init=False)

    def __post_init__(self):
        for word, pinyin in self.multi.items():
            syllable_count = len(pinyin.split(PINYIN_SEPARATOR))
            if syllable_count != len(word):
                raise DictionaryLoadError(
                    f"多音詞 {word!r} 有 {len(word)} 個字，但拼音 {pinyin!r} 有 {syllable_count} 個音節"
                )
        for traditional, simple in self.simplified.items():
            if len(traditional) != 1 or len(simple) != 1:
                raise DictionaryLoadError(f"繁簡對照必須是單字對單字: {traditional!r}={simple!r}")

        # frozen dataclass 只能透過 object.__setattr__ 設值
        object.__setattr__(self, "single", MappingProxyType(dict(self.single)))
        object.__setattr__(self, "multi", MappingProxyType(dict(self.multi)))
        object.__setattr__(self, "simplified", MappingProxyType(dict(self.simplified)))
        object.__setattr__(self, "max_phrase_length", max((len(k) for k in self.multi), default=1))

    @classmethod
    def from_files(
        cls,
        single_path: PathLike,
        multi_path: PathLike,
        simplified_path: Optional[PathLike] = None,
    ) -> "PinyinDictionary":
        """
        由 key=value 文字檔建立字典

        Args:
            single_path: 單字拼音檔
            multi_path: 多音詞檔
            simplified_path: 繁簡對照檔，省略時不做繁簡轉換

        Raises:
            DictionaryLoadError: 任一檔案不存在或格式錯誤
        """
        return cls(
            single=load_table(single_path),
            multi=load_table(multi_path),
            simplified=load_table(simplified_path) if simplified_path is not None else {},
        )

    def stats(self) -> dict:
        return {
            "single": len(self.single),
            "multi": len(self.multi),
            "simplified": len(self.simplified),
            "max_phrase_length": self.max_phrase_length,
        }

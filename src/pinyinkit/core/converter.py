"""
字串轉拼音

PinyinConverter 串起繁簡正規化、漢字判斷與讀音解析:

    converter = PinyinConverter(dictionary)
    converter.convert("重庆火锅", " ", PinyinFormat.WITH_TONE_NUMBER)
    # 'chong2 qing4 huo3 guo1'
    converter.acronym("你好世界")
    # 'nhsj'

非漢字原樣保留；分隔符只出現在音節之間或漢字/非漢字交界處，不會重複，也不會出現在結尾。
"""

from typing import TYPE_CHECKING, Iterator, List

from .charset import is_chinese
from .resolver import PronunciationResolver
from .simplified import SimplifiedNormalizer
from .tone import PINYIN_SEPARATOR, PinyinFormat

if TYPE_CHECKING:
    from pinyinkit.dictionary.tables import PinyinDictionary


class PinyinConverter:
    """
    字串轉換器

    Args:
        dictionary: PinyinDictionary
    """

    def __init__(self, dictionary: "PinyinDictionary"):
        self.normalizer = SimplifiedNormalizer(dictionary.simplified)
        self.resolver = PronunciationResolver(dictionary)

    def _iter_resolutions(self, text: str, pinyin_format: PinyinFormat) -> Iterator[tuple]:
        """
        逐段走訪已正規化的文字

        Yields:
            (is_chinese, pos, syllables, consumed)；非漢字的 syllables 為 None
        """
        pos = 0
        length = len(text)
        while pos < length:
            char = text[pos]
            if is_chinese(char):
                resolution = self.resolver.resolve(text, pos, pinyin_format)
                yield True, pos, resolution.syllables, resolution.consumed
                pos += resolution.consumed
            else:
                yield False, pos, None, 1
                pos += 1

    def convert(
        self,
        text: str,
        separator: str = PINYIN_SEPARATOR,
        pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
    ) -> str:
        """
        將字串轉為拼音

        Args:
            text: 輸入文字（可含繁體與非中文字元）
            separator: 拼音分隔符
            pinyin_format: 輸出格式

        Returns:
            str: 轉換結果
        """
        text = self.normalizer.normalize(text)
        length = len(text)
        parts: List[str] = []

        for chinese, pos, syllables, consumed in self._iter_resolutions(text, pinyin_format):
            if chinese:
                parts.append(separator.join(syllables))
                if pos + consumed < length:
                    parts.append(separator)
            else:
                parts.append(text[pos])
                if pos + 1 < length and is_chinese(text[pos + 1]):
                    parts.append(separator)

        return "".join(parts)

    def convert_to_list(
        self,
        text: str,
        pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
    ) -> List[str]:
        """
        將字串轉為片段列表：每個漢字一個音節，連續的非漢字合併為一個片段

        範例:
            >>> converter.convert_to_list("我有3个苹果")
            ['wǒ', 'yǒu', '3', 'gè', 'píng', 'guǒ']
        """
        text = self.normalizer.normalize(text)
        items: List[str] = []
        literal: List[str] = []

        for chinese, pos, syllables, _ in self._iter_resolutions(text, pinyin_format):
            if chinese:
                if literal:
                    items.append("".join(literal))
                    literal = []
                items.extend(syllables)
            else:
                literal.append(text[pos])

        if literal:
            items.append("".join(literal))
        return items

    def acronym(self, text: str) -> str:
        """
        取每個字拼音的首字母，非漢字原樣保留

        連續的漢字整段交給 Resolver，才能套用多音詞讀音（例如 重庆 → cq）。
        輸出長度必定等於輸入長度。
        """
        output: List[str] = []
        pos = 0
        length = len(text)

        while pos < length:
            if not is_chinese(text[pos]):
                output.append(text[pos])
                pos += 1
                continue

            end = pos + 1
            while end < length and is_chinese(text[end]):
                end += 1

            run = self.normalizer.normalize(text[pos:end])
            for chinese, run_pos, syllables, _ in self._iter_resolutions(run, PinyinFormat.WITHOUT_TONE):
                if not chinese:
                    output.append(run[run_pos])
                    continue
                for offset, syllable in enumerate(syllables):
                    output.append(syllable[:1] or run[run_pos + offset])
            pos = end

        return "".join(output)

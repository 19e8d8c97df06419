"""
讀音決定（多音字消歧）

在字串的某個位置上，先以最長匹配查多音詞表，找不到再查單字表，
仍找不到則原字輸出。Resolver 本身不移動任何指標，
只回報「輸出哪些音節、吃掉幾個字」，由呼叫端的迴圈負責前進。
"""

from typing import TYPE_CHECKING, List, NamedTuple, Tuple

from .tone import PinyinFormat, format_pinyin

if TYPE_CHECKING:
    from pinyinkit.dictionary.tables import PinyinDictionary


class Resolution(NamedTuple):
    """單次解析結果"""
    syllables: Tuple[str, ...]
    consumed: int


class PronunciationResolver:
    """
    讀音解析器

    Args:
        dictionary: PinyinDictionary；視窗上限取自 dictionary.max_phrase_length
    """

    def __init__(self, dictionary: "PinyinDictionary"):
        self._single = dictionary.single
        self._multi = dictionary.multi
        self._max_window = dictionary.max_phrase_length

    @property
    def max_window(self) -> int:
        return self._max_window

    def resolve(
        self,
        text: str,
        pos: int,
        pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
    ) -> Resolution:
        """
        解析 text[pos] 起的讀音

        1. 視窗由長到短（max_window ~ 2）查多音詞表，第一個命中者勝出
        2. 查單字表，取第一個讀音
        3. 都查不到：原字輸出

        Args:
            text: 已正規化為簡體的文字
            pos: 目前位置，text[pos] 必須是漢字
            pinyin_format: 輸出格式

        Returns:
            Resolution: (音節, 消耗字數)
        """
        remaining = len(text) - pos
        for window in range(min(self._max_window, remaining), 1, -1):
            word = text[pos:pos + window]
            pinyin = self._multi.get(word)
            if pinyin is not None:
                # 詞語逐字讀音不可去重，否則音節數會少於字數（如 谢谢 → xie, xie）
                syllables = format_pinyin(pinyin, pinyin_format, dedupe=False)
                return Resolution(tuple(syllables), window)

        char = text[pos]
        readings = self.lookup_char(char, pinyin_format)
        if readings:
            return Resolution((readings[0],), 1)
        return Resolution((char,), 1)

    def lookup_char(self, char: str, pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK) -> List[str]:
        """單字的所有讀音（依常用度），查無此字回傳空列表"""
        pinyin = self._single.get(char)
        if not pinyin:
            return []
        return format_pinyin(pinyin, pinyin_format)

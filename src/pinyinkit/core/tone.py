"""
聲調格式轉換

字典裡的拼音一律以「帶聲調符號」儲存，多個讀音以逗號分隔，例如 "zhōng,zhòng"。
本模組負責把它轉成三種輸出格式:

- WITH_TONE_MARK:   zhōng   (原樣)
- WITH_TONE_NUMBER: zhong1  (聲調改為數字後綴，輕聲為 5)
- WITHOUT_TONE:     zhong   (去掉聲調，並去除重複讀音)

ü 在數字與無調格式中一律寫成 v（lǜ → lv4 / lv）。
"""

from enum import Enum
from functools import lru_cache
from typing import Dict, List, Tuple

PINYIN_SEPARATOR = ","

# 帶聲調母音，依 a e i o u ü 排列，每個母音 1~4 聲
ALL_MARKED_VOWEL = "āáǎàēéěèīíǐìōóǒòūúǔùǖǘǚǜ"
ALL_UNMARKED_VOWEL = "aeiouv"

NEUTRAL_TONE = 5


class PinyinFormat(Enum):
    """拼音輸出格式"""
    WITH_TONE_MARK = "with_tone_mark"      # 帶聲調符號
    WITH_TONE_NUMBER = "with_tone_number"  # 數字聲調
    WITHOUT_TONE = "without_tone"          # 不帶聲調


def _build_vowel_tables() -> Tuple[Dict[str, Tuple[str, int]], Dict[int, str]]:
    """帶調母音 → (無調母音, 聲調)，以及給 str.translate 用的去調表"""
    vowel_tones = {}
    for index, marked in enumerate(ALL_MARKED_VOWEL):
        vowel_tones[marked] = (ALL_UNMARKED_VOWEL[index // 4], index % 4 + 1)

    strip_table = {ord(marked): plain for marked, (plain, _) in vowel_tones.items()}
    strip_table[ord("ü")] = "v"
    return vowel_tones, strip_table


VOWEL_TONES, _STRIP_TONE_TABLE = _build_vowel_tables()


def syllable_to_tone_number(syllable: str) -> str:
    """
    單一音節 → 數字聲調格式

    從右往左找第一個帶調母音，替換成無調母音並加上聲調數字；
    找不到帶調母音即為輕聲，補 5。不在帶調母音表內的非 ASCII 字元（如 ń）
    會被略過並原樣保留。

    範例:
        >>> syllable_to_tone_number("lǜ")
        'lv4'
        >>> syllable_to_tone_number("de")
        'de5'
    """
    syllable = syllable.replace("ü", "v")
    for char in reversed(syllable):
        if "a" <= char <= "z":
            continue
        found = VOWEL_TONES.get(char)
        if found is None:
            continue
        plain, tone = found
        return syllable.replace(char, plain) + str(tone)
    return syllable + str(NEUTRAL_TONE)


def strip_tone(pinyin: str) -> str:
    """去除所有聲調符號，ü 改寫為 v（不拆分、不去重）"""
    return pinyin.translate(_STRIP_TONE_TABLE)


def _dedupe(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


@lru_cache(maxsize=50000)
def _format_pinyin_cached(pinyin: str, pinyin_format: PinyinFormat, dedupe: bool) -> Tuple[str, ...]:
    if pinyin_format is PinyinFormat.WITH_TONE_MARK:
        return tuple(pinyin.split(PINYIN_SEPARATOR))
    if pinyin_format is PinyinFormat.WITH_TONE_NUMBER:
        return tuple(syllable_to_tone_number(s) for s in pinyin.split(PINYIN_SEPARATOR))
    if pinyin_format is PinyinFormat.WITHOUT_TONE:
        syllables = strip_tone(pinyin).split(PINYIN_SEPARATOR)
        # 去掉聲調後不同讀音可能重複（如 a, ā, á），保留首次出現的順序
        return tuple(_dedupe(syllables) if dedupe else syllables)
    raise ValueError(f"不支援的拼音格式: {pinyin_format!r}")


def format_pinyin(
    pinyin: str,
    pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
    dedupe: bool = True,
) -> List[str]:
    """
    將帶聲調拼音（逗號分隔）格式化為指定格式的音節列表

    Args:
        pinyin: 帶聲調拼音，例如 "hǎo,hào" 或 "xiè,xie"
        pinyin_format: 輸出格式
        dedupe: WITHOUT_TONE 時是否去除重複。單字的多個讀音應去重；
                詞語的逐字讀音必須保留重複，否則字數會對不上。

    Returns:
        List[str]: 音節列表，順序與輸入相同

    Raises:
        ValueError: pinyin_format 不是 PinyinFormat

    範例:
        >>> format_pinyin("zhōng,guó", PinyinFormat.WITH_TONE_NUMBER)
        ['zhong1', 'guo2']
        >>> format_pinyin("ā,á,ǎ,à,a", PinyinFormat.WITHOUT_TONE)
        ['a']
    """
    if not isinstance(pinyin_format, PinyinFormat):
        raise ValueError(f"不支援的拼音格式: {pinyin_format!r}")
    return list(_format_pinyin_cached(pinyin, pinyin_format, dedupe))


def get_format_cache_stats() -> Dict[str, int]:
    """取得格式化快取統計 (hits, misses, currsize, maxsize)"""
    info = _format_pinyin_cached.cache_info()
    return {
        "hits": info.hits,
        "misses": info.misses,
        "currsize": info.currsize,
        "maxsize": info.maxsize,
    }


def clear_format_cache() -> None:
    _format_pinyin_cached.cache_clear()

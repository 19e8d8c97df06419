"""
由 pypinyin / hanziconv 內建資料建立字典

- 單字表:   pypinyin.pinyin_dict（碼位 → "zhōng,zhòng"）
- 多音詞表: pypinyin.phrases_dict 中 2 ~ max_phrase_length 字的詞，每字取第一個讀音
- 繁簡表:   以 hanziconv 逐字探測 CJK 基本區，保留會改變的字
"""

from typing import Dict

from pinyinkit.config import DEFAULT_MAX_PHRASE_LENGTH
from pinyinkit.core.charset import CJK_END, CJK_START
from pinyinkit.core.tone import PINYIN_SEPARATOR
from pinyinkit.utils.lazy_imports import _get_hanziconv, _get_pypinyin_data
from pinyinkit.utils.logger import TimingContext, get_logger, log_timing

from .tables import PinyinDictionary

logger = get_logger(__name__)


def build_single_table() -> Dict[str, str]:
    pinyin_dict = _get_pypinyin_data()["pinyin_dict"]
    return {chr(code): pinyin for code, pinyin in pinyin_dict.items() if pinyin}


def build_multi_table(max_phrase_length: int = DEFAULT_MAX_PHRASE_LENGTH) -> Dict[str, str]:
    """
    擷取多字詞讀音

    Args:
        max_phrase_length: 保留的最長詞條字數

    Returns:
        Dict[str, str]: 詞 → 逐字讀音（逗號分隔）
    """
    phrases_dict = _get_pypinyin_data()["phrases_dict"]
    table = {}
    skipped = 0
    for phrase, readings in phrases_dict.items():
        if not 2 <= len(phrase) <= max_phrase_length:
            continue
        # 音節數與字數不一致的詞條（兒化、含標點等）無法逐字對齊
        if len(readings) != len(phrase) or not all(readings):
            skipped += 1
            continue
        table[phrase] = PINYIN_SEPARATOR.join(reading[0] for reading in readings)

    if skipped:
        logger.debug(f"Skipped {skipped} misaligned phrases")
    return table


@log_timing("build_simplified_table")
def build_simplified_table() -> Dict[str, str]:
    """
    繁體 → 簡體 對照

    只保留一對一且確實改變的字；若簡體結果本身仍在表中則沿鏈解析，
    確保正規化可重複套用而結果不變。
    """
    hanziconv = _get_hanziconv()
    table = {}
    for code in range(CJK_START, CJK_END + 1):
        char = chr(code)
        simplified = hanziconv.toSimplified(char)
        if len(simplified) == 1 and simplified != char:
            table[char] = simplified

    for char, simplified in table.items():
        seen = {char}
        while simplified in table and simplified not in seen:
            seen.add(simplified)
            simplified = table[simplified]
        table[char] = simplified
    return table


def build_from_pypinyin(max_phrase_length: int = DEFAULT_MAX_PHRASE_LENGTH) -> PinyinDictionary:
    """
    建立預設字典

    Args:
        max_phrase_length: 多音詞最長字數（即 Resolver 視窗上限）

    Raises:
        ImportError: 未安裝 pypinyin 或 hanziconv
    """
    with TimingContext("build_from_pypinyin", logger):
        dictionary = PinyinDictionary(
            single=build_single_table(),
            multi=build_multi_table(max_phrase_length),
            simplified=build_simplified_table(),
        )
    logger.info(f"Dictionary built: {dictionary.stats()}")
    return dictionary

"""
轉換核心

純函式的漢字判斷、繁簡正規化、聲調格式化、讀音解析與字串轉換；
所有元件只讀取傳入的 PinyinDictionary，不持有可變狀態。
"""

from .charset import CHINESE_LING, contains_chinese, is_chinese
from .converter import PinyinConverter
from .resolver import PronunciationResolver, Resolution
from .simplified import SimplifiedNormalizer
from .tone import PinyinFormat, format_pinyin, strip_tone, syllable_to_tone_number

__all__ = [
    "CHINESE_LING",
    "is_chinese",
    "contains_chinese",
    "SimplifiedNormalizer",
    "PinyinFormat",
    "format_pinyin",
    "strip_tone",
    "syllable_to_tone_number",
    "PronunciationResolver",
    "Resolution",
    "PinyinConverter",
]

"""
pinyinkit - 漢字轉拼音 (Chinese → Pinyin)

核心概念：
- 三張唯讀查詢表（單字讀音、多音詞讀音、繁簡對照）在啟動時建立一次
- 轉換時先繁轉簡，再以最長匹配決定多音字讀音，最後格式化為指定的聲調格式
- 支援帶聲調符號、數字聲調、不帶聲調三種輸出，以及拼音首字母

官方入口（穩定 API）：
- `pinyinkit.PinyinEngine`
- `pinyinkit.convert_to_pinyin` 等模組層級便捷函數（使用預設引擎）
"""

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from pinyinkit.engine import (
    PinyinEngine,
    convert_char_to_pinyin,
    convert_to_pinyin,
    convert_to_pinyin_list,
    get_acronym,
    get_default_engine,
    normalize_to_simplified,
    set_default_engine,
)

# =============================================================================
# 核心型別與純函式
# =============================================================================
from pinyinkit.core import PinyinFormat, contains_chinese, is_chinese

# =============================================================================
# 字典與配置
# =============================================================================
from pinyinkit.config import PinyinConfig
from pinyinkit.dictionary import PinyinDictionary, load_table, write_table
from pinyinkit.exceptions import DictionaryLoadError, PinyinkitError

# =============================================================================
# 日誌工具
# =============================================================================
from pinyinkit.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Engine
    "PinyinEngine",
    "get_default_engine",
    "set_default_engine",
    # Public operations
    "is_chinese",
    "contains_chinese",
    "normalize_to_simplified",
    "convert_char_to_pinyin",
    "convert_to_pinyin",
    "convert_to_pinyin_list",
    "get_acronym",
    "PinyinFormat",
    # Dictionary & config
    "PinyinDictionary",
    "PinyinConfig",
    "load_table",
    "write_table",
    # Errors
    "PinyinkitError",
    "DictionaryLoadError",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"

"""
字典模組

提供三張查詢表（單字、多音詞、繁簡對照）的資料模型、檔案讀寫與預設建置。

主要類別/函式:
- PinyinDictionary: 不可變字典物件
- load_table / write_table: key=value 檔讀寫
- build_from_pypinyin: 由 pypinyin / hanziconv 建置
- get_default_dictionary: 執行緒安全的預設字典單例
"""

from .backend import (
    DictionaryBackend,
    get_default_dictionary,
    get_dictionary_backend,
    reset_default_dictionary,
)
from .builder import build_from_pypinyin
from .loader import load_table, write_table
from .tables import PinyinDictionary

__all__ = [
    "PinyinDictionary",
    "load_table",
    "write_table",
    "build_from_pypinyin",
    "DictionaryBackend",
    "get_dictionary_backend",
    "get_default_dictionary",
    "reset_default_dictionary",
]

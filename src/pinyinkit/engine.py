"""
拼音引擎 (PinyinEngine)

持有共享的字典與轉換器，對外提供所有公開操作。
Engine 應在應用程式啟動時建立一次，之後可被多個執行緒同時使用。

使用方式:
    from pinyinkit import PinyinEngine, PinyinFormat

    engine = PinyinEngine()
    engine.convert_to_pinyin("中國", ",", PinyinFormat.WITH_TONE_NUMBER)  # 'zhong1,guo2'
    engine.get_acronym("你好世界")                                          # 'nhsj'

也可注入自訂字典（例如測試用的小字典，或由 key=value 檔載入）:
    engine = PinyinEngine(PinyinDictionary.from_files("pinyin.db", "mutil_pinyin.db", "chinese.db"))
"""

import logging
import threading
from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional

from pinyinkit.config import DEFAULT_MAX_PHRASE_LENGTH, PinyinConfig
from pinyinkit.core.charset import contains_chinese, is_chinese
from pinyinkit.core.converter import PinyinConverter
from pinyinkit.core.tone import PinyinFormat, get_format_cache_stats
from pinyinkit.dictionary import PinyinDictionary, build_from_pypinyin, get_default_dictionary
from pinyinkit.utils.logger import TimingContext, get_logger, setup_logger


class PinyinEngine:
    """
    拼音轉換引擎

    Args:
        dictionary: 字典；省略時使用預設字典（pypinyin / hanziconv）
        config: PinyinConfig；省略時由 verbose / on_timing 組成
        verbose: 是否開啟 DEBUG 日誌（與 config 併用時，True 會覆蓋 config.verbose）
        on_timing: 計時回呼 (operation, elapsed_seconds)；與 config 併用時取代 config.on_timing
    """

    _engine_name = "pinyin"

    def __init__(
        self,
        dictionary: Optional[PinyinDictionary] = None,
        config: Optional[PinyinConfig] = None,
        *,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        if config is None:
            config = PinyinConfig(verbose=verbose, on_timing=on_timing)
        elif verbose or on_timing is not None:
            # 關鍵字參數覆蓋 config 中對應的設定
            config = replace(
                config,
                verbose=verbose or config.verbose,
                on_timing=on_timing if on_timing is not None else config.on_timing,
            )
        self._config = config
        self._init_logger(verbose=self._config.verbose, on_timing=self._config.on_timing)

        with self._log_timing("PinyinEngine.__init__"):
            if dictionary is None:
                dictionary = self._load_default_dictionary()
            self._dictionary = dictionary
            self._converter = PinyinConverter(dictionary)

        self._logger.info("PinyinEngine initialized")
        self._logger.debug(f"  [Dictionary] {dictionary.stats()}")

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    def _load_default_dictionary(self) -> PinyinDictionary:
        max_phrase_length = self._config.max_phrase_length
        if max_phrase_length == DEFAULT_MAX_PHRASE_LENGTH:
            return get_default_dictionary()
        # 非預設視窗無法共用單例，另外建一份
        return build_from_pypinyin(max_phrase_length)

    @property
    def dictionary(self) -> PinyinDictionary:
        return self._dictionary

    @property
    def converter(self) -> PinyinConverter:
        return self._converter

    @property
    def config(self) -> PinyinConfig:
        return self._config

    # ========== 公開操作 ==========

    @staticmethod
    def is_chinese(char: str) -> bool:
        return is_chinese(char)

    @staticmethod
    def contains_chinese(text: str) -> bool:
        return contains_chinese(text)

    def normalize_to_simplified(self, text: str) -> str:
        """繁體轉簡體（單字或字串皆可），長度不變"""
        return self._converter.normalizer.normalize(text)

    def convert_char_to_pinyin(
        self,
        char: str,
        pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
    ) -> List[str]:
        """
        單字的所有讀音

        Returns:
            List[str]: 依常用度排列的讀音；WITHOUT_TONE 會去除重複；查無此字回傳空列表
        """
        return self._converter.resolver.lookup_char(char, pinyin_format)

    def convert_to_pinyin(
        self,
        text: str,
        separator: Optional[str] = None,
        pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
    ) -> str:
        """
        字串轉拼音

        Args:
            text: 輸入文字
            separator: 拼音分隔符，省略時使用 config.default_separator
            pinyin_format: 輸出格式
        """
        if separator is None:
            separator = self._config.default_separator
        return self._converter.convert(text, separator, pinyin_format)

    def convert_to_pinyin_list(
        self,
        text: str,
        pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
    ) -> List[str]:
        """字串轉拼音片段列表（每個漢字一個音節，連續非漢字合併成一段）"""
        return self._converter.convert_to_list(text, pinyin_format)

    def get_acronym(self, text: str) -> str:
        """拼音首字母，例如 "你好世界" → "nhsj"；非漢字原樣保留"""
        return self._converter.acronym(text)

    # ========== 診斷 ==========

    def get_cache_stats(self) -> Dict[str, Any]:
        """
        取得格式化快取統計

        Returns:
            Dict: {"format": {hits, misses, currsize, maxsize}, "dictionary": {...}}
        """
        return {
            "format": get_format_cache_stats(),
            "dictionary": self._dictionary.stats(),
        }


# =============================================================================
# 預設引擎 (模組層級便捷函數使用)
# =============================================================================

_default_engine: Optional[PinyinEngine] = None
_default_engine_lock = threading.Lock()


def get_default_engine() -> PinyinEngine:
    """
    取得預設 PinyinEngine 單例（第一次呼叫時建置預設字典）
    """
    global _default_engine

    if _default_engine is not None:
        return _default_engine

    with _default_engine_lock:
        if _default_engine is None:
            _default_engine = PinyinEngine()
    return _default_engine


def set_default_engine(engine: Optional[PinyinEngine]) -> None:
    """替換預設引擎；傳入 None 則下次使用時重建"""
    global _default_engine
    with _default_engine_lock:
        _default_engine = engine


def normalize_to_simplified(text: str) -> str:
    return get_default_engine().normalize_to_simplified(text)


def convert_char_to_pinyin(
    char: str,
    pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
) -> List[str]:
    return get_default_engine().convert_char_to_pinyin(char, pinyin_format)


def convert_to_pinyin(
    text: str,
    separator: Optional[str] = None,
    pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
) -> str:
    return get_default_engine().convert_to_pinyin(text, separator, pinyin_format)


def convert_to_pinyin_list(
    text: str,
    pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
) -> List[str]:
    return get_default_engine().convert_to_pinyin_list(text, pinyin_format)


def get_acronym(text: str) -> str:
    return get_default_engine().get_acronym(text)

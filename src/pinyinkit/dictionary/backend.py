"""
預設字典後端

負責預設字典的延遲建置與共享，實作為執行緒安全的單例。
建置完成後字典只讀，可被多個執行緒同時使用。
"""

import threading
from typing import Any, Dict, Optional

from pinyinkit.config import DEFAULT_MAX_PHRASE_LENGTH
from pinyinkit.utils.lazy_imports import check_data_dependencies
from pinyinkit.utils.logger import get_logger

from .builder import build_from_pypinyin
from .tables import PinyinDictionary

logger = get_logger(__name__)


# =============================================================================
# 全域狀態
# =============================================================================

_instance: Optional["DictionaryBackend"] = None
_instance_lock = threading.Lock()


class DictionaryBackend:
    """
    預設字典後端 (單例)

    職責:
    - 第一次使用時由 pypinyin / hanziconv 建置字典（只做一次）
    - 提供共享的 PinyinDictionary

    使用方式:
        backend = get_dictionary_backend()
        dictionary = backend.get_dictionary()
    """

    def __init__(self, max_phrase_length: int = DEFAULT_MAX_PHRASE_LENGTH):
        """
        注意：請使用 get_dictionary_backend() 取得單例，不要直接呼叫此建構函數。
        """
        self._max_phrase_length = max_phrase_length
        self._dictionary: Optional[PinyinDictionary] = None
        self._init_lock = threading.Lock()

    def initialize(self) -> None:
        """
        建置字典

        此方法是執行緒安全的，多次呼叫不會重複建置。
        建置失敗（例如缺少依賴）時例外直接往外拋，下次呼叫會重試。
        """
        if self._dictionary is not None:
            return

        with self._init_lock:
            if self._dictionary is not None:
                return
            check_data_dependencies()
            logger.debug("Building default dictionary")
            self._dictionary = build_from_pypinyin(self._max_phrase_length)

    def is_initialized(self) -> bool:
        return self._dictionary is not None

    def get_dictionary(self) -> PinyinDictionary:
        if self._dictionary is None:
            self.initialize()
        return self._dictionary

    def get_stats(self) -> Dict[str, Any]:
        if self._dictionary is None:
            return {"initialized": False}
        return {"initialized": True, **self._dictionary.stats()}


# =============================================================================
# 便捷函數
# =============================================================================

def get_dictionary_backend() -> DictionaryBackend:
    """
    取得 DictionaryBackend 單例

    Returns:
        DictionaryBackend: 單例實例
    """
    global _instance

    if _instance is not None:
        return _instance

    with _instance_lock:
        if _instance is None:
            _instance = DictionaryBackend()
    return _instance


def get_default_dictionary() -> PinyinDictionary:
    """取得（必要時建置）預設字典"""
    return get_dictionary_backend().get_dictionary()


def reset_default_dictionary() -> None:
    """
    丟棄預設字典單例，下次使用時重新建置（主要用於測試）

    持有舊字典的預設引擎一併丟棄，模組層級函數下次呼叫時改用新字典。
    """
    global _instance
    with _instance_lock:
        _instance = None

    # engine 模組依賴本模組，只能在此延遲導入
    from pinyinkit.engine import set_default_engine

    set_default_engine(None)

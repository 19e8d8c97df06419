"""
延遲導入 (Lazy Import) 工具

pypinyin 的字典模組與 hanziconv 載入成本不低（數十 MB 的字典常數），
只有在需要建立預設字典時才載入。
"""

import importlib.util
from typing import Any, Dict, List, Optional

from .logger import get_logger

logger = get_logger(__name__)

DATA_INSTALL_HINT = (
    "缺少字典資料依賴。請執行:\n"
    "  pip install pypinyin hanziconv\n"
    "或重新安裝:\n"
    "  pip install pinyinkit"
)

_pypinyin_data: Optional[Dict[str, Any]] = None
_hanziconv: Optional[Any] = None


def _get_pypinyin_data() -> Dict[str, Any]:
    """
    延遲載入 pypinyin 內建字典

    Returns:
        Dict: {"pinyin_dict": {碼位: "zhōng,zhòng"}, "phrases_dict": {詞: [[音], ...]}}

    Raises:
        ImportError: 未安裝 pypinyin
    """
    global _pypinyin_data
    if _pypinyin_data is None:
        try:
            from pypinyin.phrases_dict import phrases_dict
            from pypinyin.pinyin_dict import pinyin_dict
        except ImportError as e:
            logger.error("無法載入 pypinyin")
            raise ImportError(DATA_INSTALL_HINT) from e
        _pypinyin_data = {"pinyin_dict": pinyin_dict, "phrases_dict": phrases_dict}
    return _pypinyin_data


def _get_hanziconv() -> Any:
    """
    延遲載入 hanziconv.HanziConv

    Raises:
        ImportError: 未安裝 hanziconv
    """
    global _hanziconv
    if _hanziconv is None:
        try:
            from hanziconv import HanziConv
        except ImportError as e:
            logger.error("無法載入 hanziconv")
            raise ImportError(DATA_INSTALL_HINT) from e
        _hanziconv = HanziConv
    return _hanziconv


def _missing_modules() -> List[str]:
    return [name for name in ("pypinyin", "hanziconv") if importlib.util.find_spec(name) is None]


def is_data_available() -> bool:
    """檢查預設字典所需的套件是否已安裝（不實際載入）"""
    return not _missing_modules()


def check_data_dependencies() -> None:
    """
    確認預設字典依賴，缺少時拋出帶安裝提示的 ImportError
    """
    missing = _missing_modules()
    if missing:
        raise ImportError(f"缺少套件: {', '.join(missing)}\n{DATA_INSTALL_HINT}")

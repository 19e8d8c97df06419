"""
工具模組

提供日誌、計時、延遲導入等通用工具。
"""

from .lazy_imports import (
    DATA_INSTALL_HINT,
    check_data_dependencies,
    is_data_available,
)
from .logger import (
    TimingContext,
    enable_debug_logging,
    enable_timing_logging,
    get_logger,
    log_timing,
    setup_logger,
)

__all__ = [
    # 日誌工具
    "get_logger",
    "setup_logger",
    "log_timing",
    "TimingContext",
    "enable_debug_logging",
    "enable_timing_logging",

    # 依賴檢查
    "is_data_available",
    "check_data_dependencies",
    "DATA_INSTALL_HINT",
]

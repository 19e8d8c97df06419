"""
日誌與計時工具

所有模組透過 get_logger() 取得 "pinyinkit" 命名空間下的 logger。
函式庫預設不輸出任何訊息，需要時再由使用者開啟:

    import logging
    logging.getLogger("pinyinkit").setLevel(logging.DEBUG)

或直接使用:

    from pinyinkit import enable_debug_logging
    enable_debug_logging()
"""

import logging
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER_NAME = "pinyinkit"
TIMING_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.timing"

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# 函式庫慣例：根 logger 掛 NullHandler，避免 "No handler found" 警告
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 pinyinkit 命名空間下的 logger

    Args:
        name: 子 logger 名稱，例如 "engine" 或模組的 __name__

    Returns:
        logging.Logger: "pinyinkit.<name>" logger
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = _DEFAULT_FORMAT) -> logging.Logger:
    """
    為 pinyinkit 根 logger 掛上 StreamHandler

    重複呼叫只會調整等級，不會重複掛 handler。
    過濾只由 logger 等級決定，handler 維持 NOTSET，子 logger（如 pinyinkit.timing）
    調低等級後仍能輸出。
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    has_stream = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
        for h in logger.handlers
    )
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    return logger


def enable_debug_logging() -> None:
    """開啟完整 DEBUG 日誌"""
    setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> None:
    """只開啟計時日誌 (pinyinkit.timing)"""
    setup_logger(level=logging.INFO)
    logging.getLogger(TIMING_LOGGER_NAME).setLevel(logging.DEBUG)


class TimingContext:
    """
    計時 context manager

    使用範例:
        with TimingContext("build_dictionary", logger):
            ...

    離開區塊時以指定等級記錄耗時，並呼叫 callback(operation, elapsed)。
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or logging.getLogger(TIMING_LOGGER_NAME)
        self.level = level
        self.callback = callback
        self.start_time = 0.0
        self.elapsed = 0.0

    def __enter__(self) -> "TimingContext":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.elapsed = time.perf_counter() - self.start_time
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    Args:
        operation: 記錄用的操作名稱，預設為函式 __qualname__
        level: 日誌等級
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, logging.getLogger(TIMING_LOGGER_NAME), level):
                return func(*args, **kwargs)

        return wrapper

    return decorator

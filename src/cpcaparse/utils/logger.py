"""
日誌與計時工具

所有 logger 都掛在 `cpcaparse` 根 logger 之下，預設不輸出任何東西，
交由使用者透過標準 logging 控制。

使用方式:
    from cpcaparse.utils.logger import get_logger, TimingContext

    logger = get_logger("parser")
    with TimingContext("build", logger):
        ...
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "cpcaparse"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

TimingCallback = Callable[[str, float], None]

_handler: Optional[logging.Handler] = None

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """取得 `cpcaparse.<name>` logger"""
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為根 logger 掛上 stream handler（只掛一次）

    Args:
        level: 日誌等級
        fmt: 輸出格式

    Returns:
        logging.Logger: 根 logger
    """
    global _handler

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(_handler)
    root.setLevel(level)
    return root


def enable_debug_logging() -> None:
    """開啟 DEBUG 日誌（包含計時）"""
    setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> None:
    """只開啟計時日誌"""
    setup_logger(level=logging.DEBUG)
    # 子 logger 的紀錄不會經過根 logger 的 filter，所以掛在 handler 上
    if not any(isinstance(f, _TimingOnlyFilter) for f in _handler.filters):
        _handler.addFilter(_TimingOnlyFilter())


class _TimingOnlyFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno > logging.DEBUG or getattr(record, "timing", False)


class TimingContext:
    """
    計時 context manager

    離開區塊時以指定等級記錄耗時，並呼叫 callback(operation, elapsed)。
    callback 失敗只記錄，不影響主流程。

    範例:
        >>> with TimingContext("AddressIndex.build", logger) as t:
        ...     build()
        >>> t.elapsed
        0.0123
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[TimingCallback] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger()
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(
            self.level,
            f"[Timing] {self.operation}: {self.elapsed * 1000:.2f} ms",
            extra={"timing": True},
        )
        if self.callback is not None:
            try:
                self.callback(self.operation, self.elapsed)
            except Exception:
                self.logger.exception("on_timing 回呼執行失敗")
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    Args:
        operation: 操作名稱，預設為函數的 qualname
        level: 日誌等級
    """

    def decorator(func):
        name = operation or func.__qualname__
        logger = logging.getLogger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, logger, level):
                return func(*args, **kwargs)

        return wrapper

    return decorator

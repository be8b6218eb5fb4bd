"""
工具模組

提供日誌、計時、延遲導入與多模式字串匹配等通用工具。
"""

from .aho_corasick import AhoCorasick, Match
from .lazy_imports import (
    TRADITIONAL_INSTALL_HINT,
    check_traditional_dependencies,
    is_traditional_available,
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
    # 字串匹配
    "AhoCorasick",
    "Match",

    # 日誌工具
    "get_logger",
    "setup_logger",
    "log_timing",
    "TimingContext",
    "enable_debug_logging",
    "enable_timing_logging",

    # 依賴檢查
    "is_traditional_available",
    "check_traditional_dependencies",
    "TRADITIONAL_INSTALL_HINT",
]

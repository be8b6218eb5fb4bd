"""
cpcaparse - 中文地址省市區鄉鎮解析器

核心概念：
- 以全國行政區劃名稱建立 Aho-Corasick 自動機，一次線性掃描找出所有命中
- 反向索引把每個名稱對應到它可能所屬的 (省, 市, 區縣, 鄉鎮) 區劃鏈
- 依「完整度 > 層級分數 > 命中長度」選出最佳的區劃鏈；無法區分時全部返回

官方入口（穩定 API）：
- `cpcaparse.AddressParser`
- `cpcaparse.FilterCondition`
- `cpcaparse.ParseResult`
"""

# =============================================================================
# Parser 層（官方入口）
# =============================================================================
from cpcaparse.parser import AddressIndex, AddressParser, AddressSupport, ShortNameDict

# =============================================================================
# 資料模型
# =============================================================================
from cpcaparse.core.models import (
    AddressTrace,
    Area,
    City,
    FilterCondition,
    ParseResult,
    Province,
    Town,
)

# =============================================================================
# 錯誤與事件
# =============================================================================
from cpcaparse.core.errors import CpcaError, DataLoadError, DataValidationError, UsageError
from cpcaparse.core.events import ParseEvent, ParseEventHandler

# =============================================================================
# 配置與日誌工具
# =============================================================================
from cpcaparse.config import DEFAULT_DIVISION_RESOURCE, DEFAULT_SHORT_NAME_RESOURCE, ParserConfig
from cpcaparse.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 進階用途
# =============================================================================
from cpcaparse.utils.aho_corasick import AhoCorasick, Match

__all__ = [
    # Parser
    "AddressParser",
    "AddressIndex",
    "AddressSupport",
    "ShortNameDict",
    # Models
    "Province",
    "City",
    "Area",
    "Town",
    "AddressTrace",
    "ParseResult",
    "FilterCondition",
    # Errors / events
    "CpcaError",
    "DataLoadError",
    "DataValidationError",
    "UsageError",
    "ParseEvent",
    "ParseEventHandler",
    # Config
    "ParserConfig",
    "DEFAULT_DIVISION_RESOURCE",
    "DEFAULT_SHORT_NAME_RESOURCE",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Advanced
    "AhoCorasick",
    "Match",
]

__version__ = "0.1.0"

"""
核心層

資料模型、錯誤類型與事件模型。
"""

from .errors import CpcaError, DataLoadError, DataValidationError, UsageError
from .events import ParseEvent, ParseEventHandler
from .models import (
    AddressTrace,
    Area,
    City,
    FilterCondition,
    ParseResult,
    Province,
    Town,
)

__all__ = [
    "Province",
    "City",
    "Area",
    "Town",
    "AddressTrace",
    "ParseResult",
    "FilterCondition",
    "CpcaError",
    "DataLoadError",
    "DataValidationError",
    "UsageError",
    "ParseEvent",
    "ParseEventHandler",
]

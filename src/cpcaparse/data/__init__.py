"""
資料層

區劃 JSON / 簡稱 CSV 的載入與驗證。
"""

from .loader import (
    list_resources,
    load_division_file,
    load_division_resource,
    load_short_name_file,
    load_short_name_resource,
    parse_short_name_lines,
)
from .validator import validate_provinces

__all__ = [
    "load_division_resource",
    "load_division_file",
    "load_short_name_resource",
    "load_short_name_file",
    "parse_short_name_lines",
    "list_resources",
    "validate_provinces",
]

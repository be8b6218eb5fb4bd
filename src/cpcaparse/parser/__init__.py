"""
解析層

- AddressIndex: 區劃樹與反向索引
- ShortNameDict / AddressSupport: 簡稱詞典與正規化
- AddressParser: 解析入口
"""

from .index import AddressIndex
from .parser import AddressParser
from .selection import ScoredResult, calculate_match_score, deduplicate_and_sort, find_best_combination
from .support import AddressSupport, ShortNameDict, get_default_short_names, to_full_name

__all__ = [
    "AddressIndex",
    "AddressParser",
    "AddressSupport",
    "ShortNameDict",
    "get_default_short_names",
    "to_full_name",
    "ScoredResult",
    "calculate_match_score",
    "find_best_combination",
    "deduplicate_and_sort",
]

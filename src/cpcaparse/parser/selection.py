"""
評分與最佳組合選擇

對每個候選結果計算三個排序鍵（越大越好，依序比較）：
1. complete: 省、市、區縣皆存在
2. score: 4·省命中 + 3·市命中 + 2·區縣命中 + 1·鄉鎮命中
3. length: 候選結果中各名稱在輸入中所有命中區間的長度總和

回傳與第一名三個鍵完全相同的所有結果；不再套用其他啟發式規則。
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import AbstractSet, Dict, Iterable, List, Mapping, Sequence, Tuple

from cpcaparse.core.models import ParseResult
from cpcaparse.utils.aho_corasick import Match

# 省 > 市 > 區縣 > 鄉鎮
TIER_WEIGHTS = (4, 3, 2, 1)


@dataclass(frozen=True)
class ScoredResult:
    result: ParseResult
    complete: bool
    score: int
    length: int

    @property
    def rank_key(self) -> Tuple[bool, int, int]:
        return (self.complete, self.score, self.length)


def calculate_match_score(result: ParseResult, matched_keywords: AbstractSet[str]) -> int:
    score = 0
    for weight, name in zip(TIER_WEIGHTS, result.names()):
        if name is not None and name in matched_keywords:
            score += weight
    return score


def keyword_lengths(matches: Iterable[Match]) -> Dict[str, int]:
    """keyword -> 該 keyword 所有命中區間的長度總和"""
    lengths: Dict[str, int] = defaultdict(int)
    for match in matches:
        lengths[match.keyword] += match.end - match.start
    return dict(lengths)


def matched_length(result: ParseResult, lengths: Mapping[str, int]) -> int:
    names = {name for name in result.names() if name is not None}
    return sum(lengths.get(name, 0) for name in names)


def score_results(results: Iterable[ParseResult], matches: Sequence[Match]) -> List[ScoredResult]:
    lengths = keyword_lengths(matches)
    matched_keywords = lengths.keys()
    return [
        ScoredResult(
            result=result,
            complete=result.is_complete,
            score=calculate_match_score(result, matched_keywords),
            length=matched_length(result, lengths),
        )
        for result in results
    ]


def find_best_combination(results: Sequence[ParseResult], matches: Sequence[Match]) -> List[ParseResult]:
    """
    找到最佳的地址組合

    Args:
        results: 所有候選結果（可含重複）
        matches: 自動機的命中列表

    Returns:
        List[ParseResult]: 與最佳候選在 (complete, score, length) 上並列的所有結果，保留輸入順序
    """
    if not results:
        return []

    scored = score_results(results, matches)
    best = max(item.rank_key for item in scored)
    return [item.result for item in scored if item.rank_key == best]


def deduplicate_and_sort(results: Iterable[ParseResult]) -> List[ParseResult]:
    return sorted(set(results))

"""
評分與最佳組合選擇測試
"""
from cpcaparse import Match, ParseResult
from cpcaparse.parser.selection import (
    calculate_match_score,
    deduplicate_and_sort,
    find_best_combination,
    score_results,
)


def _result(province=None, city=None, area=None, town=None):
    return ParseResult(province=province, city=city, area=area, town=town)


class TestScore:
    def test_tier_weights(self):
        result = _result("湖北省", "黄石市", "下陆区", "团城山街道")

        assert calculate_match_score(result, {"湖北省"}) == 4
        assert calculate_match_score(result, {"黄石市"}) == 3
        assert calculate_match_score(result, {"下陆区"}) == 2
        assert calculate_match_score(result, {"团城山街道"}) == 1
        assert calculate_match_score(result, {"湖北省", "黄石市", "下陆区", "团城山街道"}) == 10
        assert calculate_match_score(result, set()) == 0

    def test_scored_fields(self):
        matches = [Match("黄石市", 0, 3), Match("保安镇", 3, 6), Match("保安镇", 8, 11)]
        (scored,) = score_results([_result("湖北省", "黄石市", "大冶市", "保安镇")], matches)

        assert scored.complete
        assert scored.score == 4
        assert scored.length == 9
        assert scored.rank_key == (True, 4, 9)


class TestFindBestCombination:
    def test_empty(self):
        assert find_best_combination([], []) == []

    def test_complete_beats_higher_score(self):
        matches = [Match("湖北省", 0, 3), Match("黄石市", 3, 6), Match("保安镇", 6, 9)]
        incomplete = _result("湖北省", "黄石市")
        complete = _result("河南省", "平顶山市", "叶县", "保安镇")

        assert find_best_combination([incomplete, complete], matches) == [complete]

    def test_higher_score_wins(self):
        matches = [Match("湖北省", 0, 3), Match("保安镇", 3, 6)]
        hubei = _result("湖北省", "黄石市", "大冶市", "保安镇")
        henan = _result("河南省", "平顶山市", "叶县", "保安镇")

        assert find_best_combination([henan, hubei], matches) == [hubei]

    def test_longer_match_breaks_score_tie(self):
        matches = [Match("保安镇", 0, 3), Match("安镇", 1, 3)]
        long_town = _result("甲省", "乙市", "丙县", "保安镇")
        short_town = _result("丁省", "戊市", "己县", "安镇")

        assert find_best_combination([short_town, long_town], matches) == [long_town]

    def test_all_ties_returned(self):
        matches = [Match("保安镇", 0, 3)]
        candidates = [
            _result("河南省", "平顶山市", "叶县", "保安镇"),
            _result("湖北省", "黄石市", "大冶市", "保安镇"),
        ]

        assert find_best_combination(candidates, matches) == candidates

    def test_same_name_on_two_tiers_counted_once(self):
        matches = [Match("北京市", 0, 3)]
        (scored,) = score_results([_result("北京市", "北京市")], matches)

        assert scored.score == 7
        assert scored.length == 3


class TestDeduplicateAndSort:
    def test_dedup(self):
        result = _result("河南省", "平顶山市", "叶县", "保安镇")

        assert deduplicate_and_sort([result, _result("河南省", "平顶山市", "叶县", "保安镇")]) == [result]

    def test_lexicographic_none_last(self):
        results = [
            _result("湖北省"),
            _result("湖北省", "黄石市"),
            _result("河南省", "平顶山市", "叶县", "保安镇"),
            _result("河南省", "平顶山市", "叶县"),
        ]

        assert deduplicate_and_sort(results) == [
            _result("河南省", "平顶山市", "叶县", "保安镇"),
            _result("河南省", "平顶山市", "叶县"),
            _result("湖北省", "黄石市"),
            _result("湖北省"),
        ]

    def test_ordering_operators(self):
        assert _result("a") < _result("b")
        assert _result("a", "b") < _result("a")
        assert _result("a") >= _result("a")
        assert _result(None) > _result("z")

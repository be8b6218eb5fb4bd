"""
省市區解析器測試
"""
import logging

import pytest

from cpcaparse import (
    AddressParser,
    FilterCondition,
    ParseResult,
    ParserConfig,
    ShortNameDict,
)
from cpcaparse.parser.support import get_default_short_names
from cpcaparse.utils import logger as logger_module


class TestScenarios:
    """端到端情境"""

    def test_complete_address(self, parser):
        """全稱測試"""
        assert parser.parse("湖北省黄石市下陆区团城山") == [
            ParseResult("湖北省", "黄石市", "下陆区", None)
        ]

    def test_partial_address(self, parser):
        """部分地址：全國多個保安镇，全部返回"""
        results = parser.parse("保安镇大王村")

        assert len(results) == 6
        assert all(r.town == "保安镇" for r in results)
        assert len({(r.province, r.city, r.area) for r in results}) == 6
        assert results[0].to_dict() == {
            "province": "四川省",
            "city": "广安市",
            "area": "岳池县",
            "town": "保安镇",
        }

    def test_with_filter(self, parser):
        """指定限定區劃以縮小結果"""
        results = parser.parse("保安镇大王村", FilterCondition(city="平顶山市"))

        assert results == [ParseResult("河南省", "平顶山市", "叶县", "保安镇")]

    def test_short_address(self, parser):
        """簡稱地址解析出完整區劃"""
        assert parser.parse("新疆伊犁霍尔果斯市") == [
            ParseResult("新疆维吾尔自治区", "伊犁哈萨克自治州", "霍尔果斯市", None)
        ]

    def test_empty(self, parser):
        assert parser.parse("") == []

    def test_unknown_text(self, parser):
        assert parser.parse("火星基地") == []


class TestBoundaries:
    @pytest.mark.parametrize("text", [None, "", "   ", "\t\n", 123])
    def test_blank_or_invalid_input(self, parser, text):
        assert parser.parse(text) == []

    def test_abbreviation_equals_full_name(self, parser):
        assert parser.parse("新疆") == parser.parse("新疆维吾尔自治区")
        assert parser.parse("伊犁") == parser.parse("伊犁哈萨克自治州")

    def test_empty_filter_is_ignored(self, parser):
        assert parser.parse("保安镇大王村", FilterCondition()) == parser.parse("保安镇大王村")

    def test_filter_mismatch_is_empty(self, parser):
        assert parser.parse("保安镇", FilterCondition(province="火星省")) == []

    def test_filter_by_province(self, parser):
        assert parser.parse("保安镇", FilterCondition(province="湖北省")) == [
            ParseResult("湖北省", "黄石市", "大冶市", "保安镇")
        ]

    def test_filter_by_area(self, parser):
        results = parser.parse("保安镇", FilterCondition(province="陕西省", area="志丹县"))

        assert results == [ParseResult("陕西省", "延安市", "志丹县", "保安镇")]


class TestDisambiguation:
    def test_same_area_name_in_two_cities(self, parser):
        assert parser.parse("朝阳区") == [
            ParseResult("北京市", "市辖区", "朝阳区", None),
            ParseResult("吉林省", "长春市", "朝阳区", None),
        ]

    def test_city_resolves_area(self, parser):
        assert parser.parse("长春市朝阳区") == [ParseResult("吉林省", "长春市", "朝阳区", None)]

    def test_abbreviated_province_resolves_area(self, parser):
        assert parser.parse("北京朝阳区建外街道") == [
            ParseResult("北京市", "市辖区", "朝阳区", "建外街道")
        ]

    def test_area_resolves_town(self, parser):
        assert parser.parse("大冶市保安镇") == [ParseResult("湖北省", "黄石市", "大冶市", "保安镇")]

    def test_incomplete_chain_when_text_has_no_area(self, parser):
        assert parser.parse("湖北省黄石市") == [ParseResult("湖北省", "黄石市", None, None)]

    def test_single_province(self, parser):
        assert parser.parse("河南省") == [ParseResult("河南省", None, None, None)]

    def test_town_name_containing_abbreviation(self):
        """鄉鎮名稱含有省份簡稱時不應被改寫成省份"""
        parser = AddressParser.from_provinces(
            [
                {
                    "name": "广东省",
                    "code": "440000000",
                    "citys": [
                        {
                            "name": "广州市",
                            "code": "440100000",
                            "areas": [
                                {
                                    "name": "越秀区",
                                    "code": "440104000",
                                    "towns": [{"name": "北京街道", "code": "440104003"}],
                                }
                            ],
                        }
                    ],
                },
                {"name": "北京市", "code": "110000000"},
            ],
            short_names=get_default_short_names(),
        )

        assert parser.parse("北京街道") == [ParseResult("广东省", "广州市", "越秀区", "北京街道")]
        assert parser.parse("北京") == [ParseResult("北京市", None, None, None)]


class TestProperties:
    INPUTS = [
        "湖北省黄石市下陆区团城山",
        "保安镇大王村",
        "新疆伊犁霍尔果斯市",
        "朝阳区",
        "湖北黄石大冶市保安镇",
        "河南平顶山叶县",
        "湖北省保安镇",
    ]

    def test_every_registered_name_is_recognized(self, parser):
        for name in sorted(parser.index.keywords()):
            results = parser.parse(name)
            assert results, name
            assert all(name in result.names() for result in results), name

    @pytest.mark.parametrize("text", INPUTS)
    def test_results_distinct_and_sorted(self, parser, text):
        results = parser.parse(text)

        assert len(results) == len(set(results))
        assert all(a < b for a, b in zip(results, results[1:]))

    @pytest.mark.parametrize("text", INPUTS)
    def test_completeness_never_mixed(self, parser, text):
        results = parser.parse(text)

        if any(r.is_complete for r in results):
            assert all(r.is_complete for r in results)

    @pytest.mark.parametrize(
        "text, condition",
        [
            ("保安镇大王村", FilterCondition(city="平顶山市")),
            ("保安镇大王村", FilterCondition(province="湖南省")),
            ("朝阳区", FilterCondition(province="吉林省")),
            ("湖北省黄石市下陆区团城山", FilterCondition(area="下陆区")),
            ("湖北省黄石市下陆区团城山", FilterCondition(area="叶县")),
        ],
    )
    def test_filter_gives_subset(self, parser, text, condition):
        assert set(parser.parse(text, condition)) <= set(parser.parse(text))

    def test_parser_is_reusable(self, parser):
        first = parser.parse("保安镇大王村")

        parser.parse("新疆伊犁霍尔果斯市")
        assert parser.parse("保安镇大王村") == first


class TestConstruction:
    def test_from_resource(self):
        parser = AddressParser.from_resource("cpca_2025.json")

        assert parser.parse("河南平顶山叶县") == [ParseResult("河南省", "平顶山市", "叶县", None)]

    def test_from_path(self, tmp_path, small_provinces):
        import json

        path = tmp_path / "divisions.json"
        path.write_text(json.dumps(small_provinces, ensure_ascii=False), encoding="utf-8")

        parser = AddressParser.from_path(path)

        assert parser.parse("黄石市下陆区") == [ParseResult("湖北省", "黄石市", "下陆区", None)]
        assert parser.parse("叶县") == []

    def test_from_provinces_with_injected_short_names(self, small_provinces):
        short_names = ShortNameDict({"黄石": "黄石市", "鄂": "湖北省"})
        parser = AddressParser.from_provinces(small_provinces, short_names=short_names)

        assert parser.short_names is short_names
        assert parser.parse("鄂黄石下陆区") == [ParseResult("湖北省", "黄石市", "下陆区", None)]

    def test_find_keywords(self, parser):
        keywords = [m.keyword for m in parser.find_keywords("新疆伊犁霍尔果斯市")]

        assert keywords == ["新疆维吾尔自治区", "伊犁哈萨克自治州", "霍尔果斯市"]
        assert parser.find_keywords("  ") == []

    def test_automaton_holds_every_keyword(self, parser):
        assert len(parser.automaton) == len(parser.index.keywords())


class TestEventsAndTiming:
    def test_parsed_event(self, small_provinces):
        events = []
        parser = AddressParser.from_provinces(
            small_provinces, config=ParserConfig(on_event=events.append)
        )

        parser.parse("湖北省黄石市下陆区")

        (event,) = events
        assert event["type"] == "parsed"
        assert event["match_count"] == 3
        assert event["result_count"] == 1

    def test_internal_error_degrades_to_empty(self, small_provinces, monkeypatch, caplog):
        events = []
        parser = AddressParser.from_provinces(
            small_provinces, config=ParserConfig(on_event=events.append)
        )

        def _boom(text):
            raise RuntimeError("boom")

        monkeypatch.setattr(parser.automaton, "find_all", _boom)

        with caplog.at_level("ERROR", logger="cpcaparse"):
            assert parser.parse("湖北省黄石市") == []

        assert "Error parsing address" in caplog.text
        (event,) = events
        assert event["type"] == "degraded"
        assert event["stage"] == "scan"
        assert event["exception_type"] == "RuntimeError"

    def test_event_handler_failure_is_contained(self, small_provinces):
        def _bad_handler(event):
            raise ValueError("handler failed")

        parser = AddressParser.from_provinces(
            small_provinces, config=ParserConfig(on_event=_bad_handler)
        )

        assert parser.parse("黄石市下陆区") == [ParseResult("湖北省", "黄石市", "下陆区", None)]

    def test_timing_callback(self, small_provinces):
        timings = []
        AddressParser.from_provinces(
            small_provinces,
            config=ParserConfig(on_timing=lambda op, elapsed: timings.append(op)),
        )

        assert "AddressParser.build_index" in timings
        assert "AddressParser.build_automaton" in timings

    def test_verbose_constructor(self, restore_logging):
        parser = AddressParser(verbose=True, on_event=lambda event: None)

        assert parser.config.verbose
        assert restore_logging.level == logging.DEBUG
        assert logger_module._handler in restore_logging.handlers


def test_traditional_input():
    pytest.importorskip("hanziconv")
    parser = AddressParser(config=ParserConfig(convert_traditional=True))

    assert parser.parse("湖北省黃石市下陸區團城山") == [ParseResult("湖北省", "黄石市", "下陆区", None)]

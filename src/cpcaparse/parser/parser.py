"""
省市區解析器 (AddressParser)

從自由文字的中文地址中抽出 省 / 市 / 區縣 / 鄉鎮街道。

使用方式:
    from cpcaparse import AddressParser, FilterCondition

    parser = AddressParser()
    parser.parse("湖北省黄石市下陆区团城山")
    # [ParseResult(province='湖北省', city='黄石市', area='下陆区', town=None)]

    parser.parse("保安镇大王村", FilterCondition(city="平顶山市"))
    # [ParseResult(province='河南省', city='平顶山市', area='叶县', town='保安镇')]

解析流程:
    簡稱正規化 -> 自動機掃描 -> 反查區劃鏈 -> 條件過濾 -> 評分選擇 -> 去重排序

建立之後所有結構都不可變，同一個 parser 可在多執行緒間共享。
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from cpcaparse.config import DEFAULT_SHORT_NAME_RESOURCE, ParserConfig
from cpcaparse.core.events import ParseEvent, ParseEventHandler
from cpcaparse.core.models import FilterCondition, ParseResult
from cpcaparse.data.loader import PathLike, load_division_file, load_division_resource
from cpcaparse.utils.aho_corasick import AhoCorasick, Match
from cpcaparse.utils.lazy_imports import check_traditional_dependencies
from cpcaparse.utils.logger import TimingContext, get_logger

from .index import AddressIndex
from .selection import deduplicate_and_sort, find_best_combination
from .support import AddressSupport, ShortNameDict, get_default_short_names


class AddressParser:
    """
    省市區解析器

    建立方式:
        AddressParser()                         # 內建資源 cpca_2025.json
        AddressParser("my_divisions.json")      # 其他內建資源
        AddressParser.from_path("/data/cpca.json")
        AddressParser.from_provinces([...])     # 已解碼的資料

    Args:
        resource_name: 內建資源檔名，預設取 config.division_resource
        config: ParserConfig
        short_names: 注入的簡稱詞典；未提供時使用 config.short_name_resource
        verbose / on_timing / on_event: 未提供 config 時用來建立預設配置
    """

    def __init__(
        self,
        resource_name: Optional[str] = None,
        *,
        config: Optional[ParserConfig] = None,
        short_names: Optional[ShortNameDict] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[ParseEventHandler] = None,
    ):
        config = config or ParserConfig(verbose=verbose, on_timing=on_timing, on_event=on_event)
        resource_name = resource_name or config.division_resource
        self._init_logger(config)

        with self._log_timing("AddressParser.load"):
            data = load_division_resource(resource_name)
        self._initialize(data, resource_name, config, short_names)

    @classmethod
    def from_resource(cls, resource_name: str, **kwargs) -> "AddressParser":
        return cls(resource_name, **kwargs)

    @classmethod
    def from_path(
        cls,
        path: PathLike,
        *,
        config: Optional[ParserConfig] = None,
        short_names: Optional[ShortNameDict] = None,
    ) -> "AddressParser":
        """使用外部檔案路徑初始化"""
        config = config or ParserConfig()
        instance = cls.__new__(cls)
        instance._init_logger(config)
        with instance._log_timing("AddressParser.load"):
            data = load_division_file(path)
        instance._initialize(data, str(path), config, short_names)
        return instance

    @classmethod
    def from_provinces(
        cls,
        provinces: Any,
        *,
        config: Optional[ParserConfig] = None,
        short_names: Optional[ShortNameDict] = None,
    ) -> "AddressParser":
        """使用已解碼的區劃資料（省份 dict 列表）初始化"""
        config = config or ParserConfig()
        instance = cls.__new__(cls)
        instance._init_logger(config)
        instance._initialize(provinces, "<provinces>", config, short_names)
        return instance

    def _init_logger(self, config: ParserConfig) -> None:
        self._config = config
        self._timing_callback = config.on_timing
        self._on_event = config.on_event
        self._logger = get_logger("parser")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    def _initialize(
        self,
        data: Any,
        source: str,
        config: ParserConfig,
        short_names: Optional[ShortNameDict],
    ) -> None:
        if config.convert_traditional:
            check_traditional_dependencies()

        with self._log_timing("AddressParser.build_index"):
            self._index = AddressIndex.from_data(data)

        with self._log_timing("AddressParser.build_automaton"):
            self._automaton = self._build_automaton(self._index)

        if short_names is None:
            if config.short_name_resource == DEFAULT_SHORT_NAME_RESOURCE:
                short_names = get_default_short_names()
            else:
                short_names = ShortNameDict.from_resource(config.short_name_resource)
        self._support = AddressSupport(
            short_names,
            keywords=self._index.keywords(),
            convert_traditional=config.convert_traditional,
        )

        self._logger.info(
            f"AddressParser initialized from {source}: "
            f"{len(self._index.provinces)} provinces, {len(self._automaton)} keywords, "
            f"{len(short_names)} short names"
        )

    @staticmethod
    def _build_automaton(index: AddressIndex) -> AhoCorasick:
        automaton = AhoCorasick()
        # 排序只為了讓 trie 的建立順序穩定，不影響匹配結果
        for keyword in sorted(index.keywords()):
            automaton.add_pattern(keyword)
        return automaton.build()

    @property
    def index(self) -> AddressIndex:
        return self._index

    @property
    def automaton(self) -> AhoCorasick:
        return self._automaton

    @property
    def support(self) -> AddressSupport:
        return self._support

    @property
    def short_names(self) -> ShortNameDict:
        return self._support.short_names

    @property
    def config(self) -> ParserConfig:
        return self._config

    def find_keywords(self, text: str) -> List[Match]:
        """回傳正規化後文字的所有命中（除錯用）"""
        if not isinstance(text, str) or not text.strip():
            return []
        return self._automaton.find_all(self._support.normalize(text))

    def parse(self, text: Optional[str], condition: Optional[FilterCondition] = None) -> List[ParseResult]:
        """
        解析地址

        Args:
            text: 任意中文地址文字
            condition: 限定條件；非 None 的欄位必須完全相等

        Returns:
            List[ParseResult]: 去重並排序後的結果；空白或無法辨識的輸入回傳空列表
        """
        if not isinstance(text, str) or not text.strip():
            return []

        stage = "normalize"
        try:
            normalized = self._support.normalize(text)

            stage = "scan"
            matches = self._automaton.find_all(normalized)

            stage = "select"
            candidates = self._expand(matches, condition)
            results = deduplicate_and_sort(find_best_combination(candidates, matches))
        except Exception as e:
            self._logger.exception(f"Error parsing address: {text}")
            self._emit_event(
                {
                    "type": "degraded",
                    "text": text,
                    "stage": stage,
                    "exception_type": type(e).__name__,
                    "exception_message": str(e),
                }
            )
            return []

        self._emit_event(
            {
                "type": "parsed",
                "text": text,
                "normalized": normalized,
                "match_count": len(matches),
                "candidate_count": len(candidates),
                "result_count": len(results),
            }
        )
        return results

    def _expand(self, matches: List[Match], condition: Optional[FilterCondition]) -> List[ParseResult]:
        """把每個命中的 keyword 反查成區劃鏈，並套用限定條件"""
        if condition is not None and condition.is_empty():
            condition = None

        candidates: List[ParseResult] = []
        # 同一個 keyword 命中多次時只展開一次，結果最後會去重
        for keyword in dict.fromkeys(match.keyword for match in matches):
            for trace in self._index.trace_up(keyword):
                result = trace.to_result()
                if condition is None or condition.accepts(result):
                    candidates.append(result)
        return candidates

    def _emit_event(self, event: ParseEvent) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")

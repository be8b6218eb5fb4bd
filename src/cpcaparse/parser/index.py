"""
區劃索引 (AddressIndex)

持有區劃樹，並回答兩個問題：
- 所有名稱的集合是什麼？（作為 Aho-Corasick 的 pattern）
- 以某個名稱結尾的區劃鏈有哪些？（反向索引）

同一個名稱可能出現在不同層級、同一層級也可能出現多次
（全國有多個「保安镇」），因此反向索引是 name -> [AddressTrace]。
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Sequence, Tuple

from cpcaparse.core.models import AddressTrace, Area, City, Province, Town
from cpcaparse.data.validator import validate_provinces
from cpcaparse.utils.logger import get_logger

_logger = get_logger("parser.index")


class AddressIndex:
    def __init__(self, provinces: Sequence[Province]):
        self._provinces: Tuple[Province, ...] = tuple(provinces)
        self._reverse_index: Dict[str, Tuple[AddressTrace, ...]] = {}
        self._keywords: FrozenSet[str] = frozenset()
        self._node_count = 0
        self._build()

    @classmethod
    def from_data(cls, data: Any) -> "AddressIndex":
        """由 json 解碼後的資料建立索引（先驗證）"""
        validate_provinces(data)
        return cls([Province.from_dict(p) for p in data])

    def _build(self) -> None:
        """前序走訪：收集名稱並依走訪順序加入反向索引"""
        index: Dict[str, List[AddressTrace]] = {}
        for trace in self._walk():
            index.setdefault(trace.terminal.name, []).append(trace)
            self._node_count += 1

        self._reverse_index = {name: tuple(traces) for name, traces in index.items()}
        self._keywords = frozenset(self._reverse_index)
        _logger.debug(
            f"AddressIndex built: {len(self._provinces)} provinces, "
            f"{self._node_count} nodes, {len(self._keywords)} keywords"
        )

    def _walk(self) -> Iterator[AddressTrace]:
        for province in self._provinces:
            yield AddressTrace(province)
            for city in province.cities:
                yield AddressTrace(province, city)
                for area in city.areas:
                    yield AddressTrace(province, city, area)
                    for town in area.towns:
                        yield AddressTrace(province, city, area, town)

    @property
    def provinces(self) -> Tuple[Province, ...]:
        return self._provinces

    @property
    def node_count(self) -> int:
        return self._node_count

    def keywords(self) -> FrozenSet[str]:
        return self._keywords

    def trace_up(self, name: Optional[str]) -> List[AddressTrace]:
        """回傳以 name 結尾的所有區劃鏈（前序走訪順序）；查無時回傳空列表"""
        if not name:
            return []
        return list(self._reverse_index.get(name, ()))

    def __contains__(self, name: object) -> bool:
        return name in self._reverse_index

    def __len__(self) -> int:
        return len(self._keywords)

    # ------------------------------------------------------------------
    # 逐層查詢（不在 parse 熱路徑上，線性掃描即可）
    # ------------------------------------------------------------------

    def province_by_name(self, name: Optional[str]) -> Optional[Province]:
        if name is None:
            return None
        return next((p for p in self._provinces if p.name == name), None)

    def city_by_name(self, province_name: Optional[str], city_name: Optional[str]) -> Optional[City]:
        province = self.province_by_name(province_name)
        if province is None or city_name is None:
            return None
        return next((c for c in province.cities if c.name == city_name), None)

    def area_by_name(
        self,
        province_name: Optional[str],
        city_name: Optional[str],
        area_name: Optional[str],
    ) -> Optional[Area]:
        city = self.city_by_name(province_name, city_name)
        if city is None or area_name is None:
            return None
        return next((a for a in city.areas if a.name == area_name), None)

    def town_by_name(
        self,
        province_name: Optional[str],
        city_name: Optional[str],
        area_name: Optional[str],
        town_name: Optional[str],
    ) -> Optional[Town]:
        area = self.area_by_name(province_name, city_name, area_name)
        if area is None or town_name is None:
            return None
        return next((t for t in area.towns if t.name == town_name), None)

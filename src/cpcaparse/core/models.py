"""
資料模型

- Province / City / Area / Town: 四層行政區劃節點，建好之後不可變
- AddressTrace: 一條由省往下的區劃鏈（可截斷，但不可跳層）
- ParseResult: 對外輸出的解析結果（四個可為 None 的字串）
- FilterCondition: 解析時的限定條件

區劃節點以 identity 比較（eq=False）：同名節點在全國可能出現多次，
只有「同一個節點」才算相等。
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Dict, Optional, Tuple

TIERS = ("province", "city", "area", "town")


@dataclass(frozen=True, eq=False)
class Town:
    name: str
    code: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Town":
        return cls(name=data["name"], code=data["code"])


@dataclass(frozen=True, eq=False)
class Area:
    name: str
    code: str
    towns: Tuple[Town, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Area":
        towns = data.get("towns") or ()
        return cls(
            name=data["name"],
            code=data["code"],
            towns=tuple(Town.from_dict(t) for t in towns),
        )


@dataclass(frozen=True, eq=False)
class City:
    name: str
    code: str
    areas: Tuple[Area, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "City":
        areas = data.get("areas") or ()
        return cls(
            name=data["name"],
            code=data["code"],
            areas=tuple(Area.from_dict(a) for a in areas),
        )


@dataclass(frozen=True, eq=False)
class Province:
    name: str
    code: str
    # JSON 欄位名稱是 "citys"（與官方資料檔相容）
    cities: Tuple[City, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Province":
        cities = data.get("citys") or ()
        return cls(
            name=data["name"],
            code=data["code"],
            cities=tuple(City.from_dict(c) for c in cities),
        )


@dataclass(frozen=True)
class AddressTrace:
    """
    區劃鏈 (Province?, City?, Area?, Town?)

    只持有節點的引用，節點由區劃樹擁有；鏈的生命週期不超過區劃樹。
    """

    province: Optional[Province] = None
    city: Optional[City] = None
    area: Optional[Area] = None
    town: Optional[Town] = None

    def __post_init__(self):
        nodes = (self.province, self.city, self.area, self.town)
        for upper, lower in zip(nodes, nodes[1:]):
            if upper is None and lower is not None:
                raise ValueError("AddressTrace 不可跳層")

    @property
    def is_complete(self) -> bool:
        return self.province is not None and self.city is not None and self.area is not None

    @property
    def terminal(self):
        for node in (self.town, self.area, self.city, self.province):
            if node is not None:
                return node
        return None

    @property
    def codes(self) -> Tuple[Optional[str], ...]:
        return tuple(
            node.code if node is not None else None
            for node in (self.province, self.city, self.area, self.town)
        )

    def to_result(self) -> "ParseResult":
        return ParseResult(
            province=self.province.name if self.province is not None else None,
            city=self.city.name if self.city is not None else None,
            area=self.area.name if self.area is not None else None,
            town=self.town.name if self.town is not None else None,
        )


def _none_last(value: Optional[str]) -> Tuple[bool, str]:
    return (value is None, value or "")


@total_ordering
@dataclass(frozen=True)
class ParseResult:
    """
    解析結果

    相等性比較四個欄位；排序為 (province, city, area, town) 字典序，None 排最後。
    """

    province: Optional[str] = None
    city: Optional[str] = None
    area: Optional[str] = None
    town: Optional[str] = None

    def sort_key(self) -> Tuple[Tuple[bool, str], ...]:
        return tuple(_none_last(getattr(self, tier)) for tier in TIERS)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ParseResult):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    @property
    def is_complete(self) -> bool:
        return self.province is not None and self.city is not None and self.area is not None

    def names(self) -> Tuple[Optional[str], ...]:
        return (self.province, self.city, self.area, self.town)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {tier: getattr(self, tier) for tier in TIERS}


@dataclass(frozen=True)
class FilterCondition:
    """
    限定條件：非 None 的欄位必須與結果完全相等

    範例:
        >>> parser.parse("保安镇大王村", FilterCondition(city="平顶山市"))
        [ParseResult(province='河南省', city='平顶山市', area='叶县', town='保安镇')]
    """

    province: Optional[str] = None
    city: Optional[str] = None
    area: Optional[str] = None

    def accepts(self, result: ParseResult) -> bool:
        if self.province is not None and self.province != result.province:
            return False
        if self.city is not None and self.city != result.city:
            return False
        return self.area is None or self.area == result.area

    def is_empty(self) -> bool:
        return self.province is None and self.city is None and self.area is None

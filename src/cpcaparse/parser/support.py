"""
簡稱詞典與簡稱正規化

ShortNameDict 保存「簡稱 -> 全稱」對照（來自 `全称,简称` 格式的 CSV），
AddressSupport 在匹配前把地址中的簡稱替換成全稱，例如：

    新疆伊犁霍尔果斯市 -> 新疆维吾尔自治区伊犁哈萨克自治州霍尔果斯市

替換規則（leftmost-longest）：
- 交替式由所有簡稱、它們的全稱以及區劃名稱組成（後兩者對應到自己），
  依長度遞減排序
- Python re 在最左位置取第一個能匹配的分支，因此等同最長匹配
- 已經是全稱或區劃名稱的片段會原樣保留，不會被其中的簡稱重複替換
  （例如「北京街道」不會變成「北京市街道」），
  所以 to_full_name(to_full_name(x)) == to_full_name(x)
"""

from __future__ import annotations

import re
import threading
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Pattern

from cpcaparse.config import DEFAULT_SHORT_NAME_RESOURCE
from cpcaparse.data.loader import PathLike, load_short_name_file, load_short_name_resource
from cpcaparse.utils.lazy_imports import to_simplified
from cpcaparse.utils.logger import get_logger

_logger = get_logger("parser.support")


class ShortNameDict:
    """簡稱 -> 全稱 對照表，建立後不可變"""

    def __init__(self, mapping: Mapping[str, str]):
        self._map: Mapping[str, str] = MappingProxyType(
            {abbr: full for abbr, full in mapping.items() if abbr and full}
        )

    @classmethod
    def from_resource(cls, resource_name: str = DEFAULT_SHORT_NAME_RESOURCE) -> "ShortNameDict":
        mapping = load_short_name_resource(resource_name)
        _logger.debug(f"Loaded {len(mapping)} short names from resource {resource_name}")
        return cls(mapping)

    @classmethod
    def from_path(cls, path: PathLike) -> "ShortNameDict":
        mapping = load_short_name_file(path)
        _logger.debug(f"Loaded {len(mapping)} short names from {path}")
        return cls(mapping)

    @property
    def abbreviations(self) -> Mapping[str, str]:
        return self._map

    def to_full_name(self, short_or_full: str) -> str:
        """根據簡稱或全稱取得全稱；未登錄時原樣返回"""
        return self._map.get(short_or_full, short_or_full)

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, abbr: object) -> bool:
        return abbr in self._map


def _overlaps(name: str, abbr: str) -> bool:
    """abbr 出現在 name 中，或 abbr 的前綴是 name 的後綴（會跨過 name 的結尾）"""
    if abbr in name:
        return True
    return any(name.endswith(abbr[:i]) for i in range(1, len(abbr)))


_default_lock = threading.Lock()
_default_short_names: Optional[ShortNameDict] = None


def get_default_short_names() -> ShortNameDict:
    """取得內建簡稱詞典（第一次呼叫時載入，之後共用同一份）"""
    global _default_short_names

    if _default_short_names is None:
        with _default_lock:
            if _default_short_names is None:
                _default_short_names = ShortNameDict.from_resource(DEFAULT_SHORT_NAME_RESOURCE)
    return _default_short_names


class AddressSupport:
    """
    地址正規化器

    Args:
        short_names: 簡稱詞典，預設使用內建詞典
        keywords: 區劃名稱集合；這些名稱原樣保留，不會被其中的簡稱改寫
        convert_traditional: 先把繁體字轉成簡體（需要 hanziconv）
    """

    def __init__(
        self,
        short_names: Optional[ShortNameDict] = None,
        *,
        keywords: Iterable[str] = (),
        convert_traditional: bool = False,
    ):
        self._short_names = short_names if short_names is not None else get_default_short_names()
        self._convert_traditional = convert_traditional
        self._replacements: Dict[str, str] = self._build_replacements(self._short_names, keywords)
        self._pattern: Optional[Pattern[str]] = self._compile(self._replacements)

    @property
    def short_names(self) -> ShortNameDict:
        return self._short_names

    @staticmethod
    def _build_replacements(short_names: ShortNameDict, keywords: Iterable[str] = ()) -> Dict[str, str]:
        abbreviations = short_names.abbreviations
        # 只有可能被簡稱改寫的名稱需要保護，其餘名稱不必進入交替式
        protected = (kw for kw in keywords if kw and any(_overlaps(kw, abbr) for abbr in abbreviations))
        replacements = {kw: kw for kw in protected}
        replacements.update((full, full) for full in abbreviations.values())
        # 某個全稱或區劃名稱同時是別人的簡稱時，以簡稱對照為準
        replacements.update(abbreviations)
        return replacements

    @staticmethod
    def _compile(replacements: Mapping[str, str]) -> Optional[Pattern[str]]:
        if not replacements:
            return None
        alternatives = sorted(replacements, key=lambda word: (-len(word), word))
        return re.compile("|".join(re.escape(word) for word in alternatives))

    def to_full_name(self, raw: str) -> str:
        """將地址中的簡稱替換為全稱，其餘文字原樣保留"""
        if not raw or self._pattern is None:
            return raw
        return self._pattern.sub(lambda m: self._replacements[m.group()], raw)

    def normalize(self, raw: str) -> str:
        """匹配前的完整正規化：（可選）繁轉簡，再做簡稱替換"""
        if not raw:
            return raw
        if self._convert_traditional:
            raw = to_simplified(raw)
        return self.to_full_name(raw)


def to_full_name(raw: str) -> str:
    """使用內建簡稱詞典替換簡稱"""
    return _default_support().to_full_name(raw)


_default_support_instance: Optional[AddressSupport] = None


def _default_support() -> AddressSupport:
    global _default_support_instance

    if _default_support_instance is None:
        short_names = get_default_short_names()
        with _default_lock:
            if _default_support_instance is None:
                _default_support_instance = AddressSupport(short_names)
    return _default_support_instance

"""
區劃資料驗證

在建立索引之前檢查解碼後的 JSON 結構：
- 頂層必須是非空的省份列表
- 每個節點都要有非空的 name 與 9 位數字的 code
- 子節點集合（citys / areas / towns）可以不存在，存在時必須是列表

驗證失敗拋出 DataValidationError，並帶上層級、名稱、代碼與上層路徑。
"""

import re
from typing import Any, List

from cpcaparse.core.errors import DataValidationError
from cpcaparse.utils.logger import get_logger

CODE_PATTERN = re.compile(r"[0-9]{9}")

# (層級, 中文名稱, 子節點欄位)
_TIER_SPECS = (
    ("province", "省份", "citys"),
    ("city", "城市", "areas"),
    ("area", "区县", "towns"),
    ("town", "街道/镇", None),
)

_logger = get_logger("data.validator")


def validate_provinces(provinces: Any) -> None:
    """
    驗證完整的區劃資料

    Args:
        provinces: json.load 的結果

    Raises:
        DataValidationError: 資料不符合格式
    """
    if not isinstance(provinces, list):
        raise DataValidationError(
            f"区划数据顶层必须是省份列表，实际为 {type(provinces).__name__}"
        )
    if not provinces:
        raise DataValidationError("区划数据必须包含至少一个省份")

    for province in provinces:
        _validate_node(province, depth=0, parents=[])

    _logger.info(f"区划数据格式验证通过 ({len(provinces)} 个省份)")


def _validate_node(node: Any, depth: int, parents: List[str]) -> None:
    tier, label, children_key = _TIER_SPECS[depth]
    path = "/".join(parents)

    if not isinstance(node, dict):
        raise DataValidationError(f"{label}节点必须是对象", tier=tier, path=path)

    name = node.get("name")
    code = node.get("code")

    if not isinstance(name, str) or not name.strip():
        raise DataValidationError(f"{label}名称不能为空", tier=tier, code=_as_text(code), path=path)
    if code is None or (isinstance(code, str) and not code.strip()):
        raise DataValidationError(f"{label}代码不能为空", tier=tier, name=name, path=path)
    if not isinstance(code, str) or not CODE_PATTERN.fullmatch(code):
        raise DataValidationError(
            f"{label}代码必须是9位数字", tier=tier, name=name, code=_as_text(code), path=path
        )

    if children_key is None:
        return

    children = node.get(children_key)
    if children is None:
        return
    if not isinstance(children, list):
        raise DataValidationError(
            f"{label}的 {children_key} 必须是列表", tier=tier, name=name, code=code, path=path
        )

    for child in children:
        _validate_node(child, depth + 1, parents + [name])


def _as_text(value: Any):
    return None if value is None else str(value)

"""
錯誤類型

- DataLoadError: 資源不存在、讀取失敗、JSON/CSV 解碼失敗
- DataValidationError: 名稱缺失、代碼不是 9 位數字、省份列表為空
- UsageError: 自動機 build() 之後仍嘗試加入 pattern

載入與驗證錯誤只會在建構 parser 時拋出；parse() 不因使用者輸入拋錯。
"""

from __future__ import annotations

from typing import Optional


class CpcaError(Exception):
    """cpcaparse 所有錯誤的基類"""


class DataLoadError(CpcaError):
    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message if source is None else f"{message}: {source}")
        self.source = source


class DataValidationError(CpcaError, ValueError):
    """
    區劃資料驗證失敗

    Attributes:
        tier: 出錯的層級（province / city / area / town），頂層結構錯誤時為 None
        name: 節點名稱（可能為空）
        code: 節點代碼（可能為空）
        path: 上層節點名稱路徑，例如 "湖北省/黄石市"
    """

    def __init__(
        self,
        message: str,
        *,
        tier: Optional[str] = None,
        name: Optional[str] = None,
        code: Optional[str] = None,
        path: str = "",
    ):
        details = []
        if tier:
            details.append(f"tier={tier}")
        if path:
            details.append(f"path={path}")
        if name:
            details.append(f"name={name!r}")
        if code is not None:
            details.append(f"code={code!r}")
        super().__init__(f"{message} ({', '.join(details)})" if details else message)
        self.tier = tier
        self.name = name
        self.code = code
        self.path = path


class UsageError(CpcaError, RuntimeError):
    pass

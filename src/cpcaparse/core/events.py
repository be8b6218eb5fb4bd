"""
事件模型（Event Model）

parser 不直接輸出到 stdout。
若需要取得「本次解析命中了多少關鍵字、是否降級」等資訊，請使用事件回呼（event handler）。

設計原則：
- parse() 對使用者輸入永遠不拋錯：內部錯誤會降級為空結果，
  但會透過 "degraded" 事件與 logger.exception 留下紀錄，不允許「默默」降級。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class ParseEvent(TypedDict, total=False):
    type: Literal["parsed", "degraded"]

    text: str
    normalized: str

    # parsed
    match_count: int
    candidate_count: int
    result_count: int

    # degraded
    stage: Literal["normalize", "scan", "select"]
    exception_type: str
    exception_message: str


ParseEventHandler = Callable[[ParseEvent], None]

"""
延遲導入

hanziconv 只在開啟繁體輸入轉換（convert_traditional=True）時才需要，
因此不在模組載入時導入。
"""

from __future__ import annotations

TRADITIONAL_INSTALL_HINT = (
    "缺少繁簡轉換依賴。請執行:\n"
    "  pip install hanziconv"
)

_hanziconv = None


def _get_hanziconv():
    """延遲載入 hanziconv 模組"""
    global _hanziconv

    if _hanziconv is not None:
        return _hanziconv

    try:
        from hanziconv import HanziConv

        _hanziconv = HanziConv
        return _hanziconv
    except ImportError:
        raise ImportError(TRADITIONAL_INSTALL_HINT)


def is_traditional_available() -> bool:
    try:
        _get_hanziconv()
        return True
    except ImportError:
        return False


def check_traditional_dependencies() -> None:
    """缺少 hanziconv 時拋出帶安裝提示的 ImportError"""
    _get_hanziconv()


def to_simplified(text: str) -> str:
    """繁體轉簡體"""
    return _get_hanziconv().toSimplified(text)

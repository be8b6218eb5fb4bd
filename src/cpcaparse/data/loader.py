"""
資料載入

負責把區劃 JSON 與簡稱 CSV 讀成 Python 物件，來源可以是：
- 套件內建資源（cpcaparse/data/resources/ 之下的檔名）
- 檔案系統路徑

這裡只處理 I/O 與解碼，結構驗證交給 validator，索引建立交給 AddressIndex。
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from cpcaparse.core.errors import DataLoadError
from cpcaparse.utils.logger import get_logger

RESOURCE_PACKAGE = "cpcaparse.data.resources"

PathLike = Union[str, Path]

_logger = get_logger("data.loader")


def read_resource_text(resource_name: str) -> str:
    """讀取套件內建資源（UTF-8，允許 BOM）"""
    if not resource_name:
        raise DataLoadError("Resource name is empty")
    try:
        resource = resources.files(RESOURCE_PACKAGE).joinpath(resource_name)
        if not resource.is_file():
            raise DataLoadError("Resource not found", resource_name)
        return resource.read_text(encoding="utf-8-sig")
    except DataLoadError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        _logger.error(f"Failed to read resource: {resource_name}")
        raise DataLoadError("Failed to read resource", resource_name) from e


def read_path_text(path: PathLike) -> str:
    """讀取檔案系統上的文字檔（UTF-8，允許 BOM）"""
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise DataLoadError("File not found", str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        _logger.error(f"Failed to read file: {path}")
        raise DataLoadError("Failed to read file", str(path)) from e


def decode_division_json(text: str, source: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        _logger.error(f"Malformed JSON in {source}: {e}")
        raise DataLoadError(f"Malformed JSON (line {e.lineno}, column {e.colno})", source) from e


def load_division_resource(resource_name: str) -> Any:
    """載入內建區劃資源，回傳 json 解碼結果（尚未驗證）"""
    data = decode_division_json(read_resource_text(resource_name), resource_name)
    _logger.debug(f"Loaded division resource {resource_name}")
    return data


def load_division_file(path: PathLike) -> Any:
    """載入檔案系統上的區劃 JSON，回傳 json 解碼結果（尚未驗證）"""
    data = decode_division_json(read_path_text(path), str(path))
    _logger.debug(f"Loaded division file {path}")
    return data


def parse_short_name_lines(lines: Iterable[str]) -> Dict[str, str]:
    """
    解析簡稱 CSV

    格式：每行 `全称,简称`，空行與 # 開頭的行忽略，欄位前後空白去除；
    欄位數不是 2 或有空欄位的行直接略過。

    Returns:
        Dict[str, str]: 簡稱 -> 全稱（同一簡稱出現多次時以最後一筆為準）
    """
    mapping: Dict[str, str] = {}
    skipped = 0
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split(",")
        if len(parts) != 2:
            skipped += 1
            continue

        full_name, abbr = parts[0].strip(), parts[1].strip()
        if not full_name or not abbr:
            skipped += 1
            continue
        mapping[abbr] = full_name

    if skipped:
        _logger.debug(f"Skipped {skipped} malformed short-name lines")
    return mapping


def load_short_name_resource(resource_name: str) -> Dict[str, str]:
    return parse_short_name_lines(read_resource_text(resource_name).splitlines())


def load_short_name_file(path: PathLike) -> Dict[str, str]:
    return parse_short_name_lines(read_path_text(path).splitlines())


def list_resources() -> List[str]:
    """列出內建資源檔名"""
    root = resources.files(RESOURCE_PACKAGE)
    return sorted(
        entry.name
        for entry in root.iterdir()
        if entry.is_file() and entry.name.endswith((".json", ".csv"))
    )

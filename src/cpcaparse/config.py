"""
全域配置模組

提供預設資源名稱與 parser 配置類別，控制資料來源、日誌、計時等行為。

使用方式:
    from cpcaparse import AddressParser

    # 簡單開啟 verbose 模式
    parser = AddressParser(verbose=True)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("cpcaparse").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .core.events import ParseEventHandler
from .utils.logger import setup_logger

# 內建資源（位於 cpcaparse/data/resources/）
DEFAULT_DIVISION_RESOURCE = "cpca_2025.json"
DEFAULT_SHORT_NAME_RESOURCE = "short_name_2025.csv"


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass
class ParserConfig:
    """
    Parser 配置類別 (進階用途)

    一般使用者直接用 AddressParser() 即可。

    屬性:
        division_resource: 內建區劃資源檔名
        short_name_resource: 內建簡稱資源檔名
        convert_traditional: 解析前先把繁體字轉成簡體（需要 hanziconv）
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        on_event: 每次 parse 的事件回呼

    使用範例:
        config = ParserConfig(convert_traditional=True)
        parser = AddressParser(config=config)
        parser.parse("湖北省黃石市下陸區")
    """

    division_resource: str = DEFAULT_DIVISION_RESOURCE
    short_name_resource: str = DEFAULT_SHORT_NAME_RESOURCE
    convert_traditional: bool = False

    # 日誌控制
    verbose: bool = False

    # 回呼
    on_timing: Optional[Callable[[str, float], None]] = None
    on_event: Optional[ParseEventHandler] = None

    def __post_init__(self):
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = ParserConfig()

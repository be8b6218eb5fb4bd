import logging

import pytest

from cpcaparse import AddressParser
from cpcaparse.utils import logger as logger_module


@pytest.fixture(scope="session")
def parser():
    """內建資料建立的 parser（所有測試共享，建立後不可變）"""
    return AddressParser()


@pytest.fixture
def restore_logging(monkeypatch):
    """還原 verbose 模式掛上的 handler 與等級，避免影響後續測試"""
    root = logging.getLogger(logger_module.ROOT_LOGGER_NAME)
    handlers = list(root.handlers)
    level = root.level
    monkeypatch.setattr(logger_module, "_handler", None)

    yield root

    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def small_provinces():
    return [
        {
            "name": "湖北省",
            "code": "420000000",
            "citys": [
                {
                    "name": "黄石市",
                    "code": "420200000",
                    "areas": [
                        {
                            "name": "下陆区",
                            "code": "420204000",
                            "towns": [{"name": "团城山街道", "code": "420204003"}],
                        },
                        {"name": "大冶市", "code": "420281000"},
                    ],
                }
            ],
        },
        {"name": "河南省", "code": "410000000"},
    ]

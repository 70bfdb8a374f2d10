import logging

import pytest
from pythonjsonlogger import jsonlogger

from dim_explorer.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_json_by_default(monkeypatch):
    monkeypatch.delenv("DIM_EXPLORER_LOG_FORMAT", raising=False)
    configure_logging()

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_configure_logging_plain_from_env(monkeypatch):
    monkeypatch.setenv("DIM_EXPLORER_LOG_FORMAT", "plain")
    configure_logging(level=logging.DEBUG)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)

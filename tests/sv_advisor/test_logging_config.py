from __future__ import annotations

import logging

from pythonjsonlogger import jsonlogger

from sv_advisor.logging_config import configure_logging


def test_plain_format_replaces_handlers():
    configure_logging(level=logging.DEBUG, force_format="plain")
    configure_logging(level=logging.DEBUG, force_format="plain")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
    # Transport loggers never go below WARNING
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_json_format_from_env(monkeypatch):
    monkeypatch.setenv("SV_ADVISOR_LOG_FORMAT", "json")
    monkeypatch.setenv("SV_ADVISOR_LOG_LEVEL", "WARNING")

    configure_logging()

    root = logging.getLogger()
    assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
    assert root.level == logging.WARNING

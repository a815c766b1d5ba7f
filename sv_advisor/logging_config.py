from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Libraries whose DEBUG output would echo request headers (Authorization)
_QUIET_LOGGERS = ("urllib3", "requests")


def _resolve_format(force_format: Optional[str]) -> str:
    if force_format is not None:
        return force_format.lower()
    return os.getenv("SV_ADVISOR_LOG_FORMAT", "json").lower()


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    resolved = logging.getLevelName(os.getenv("SV_ADVISOR_LOG_LEVEL", "INFO").upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure root logger for the advisor

    Modes:
    - JSON (default), one object per line with the ``extra`` fields merged in
    - plain text for local development

    Selection Order:
        1) explicit arguments if provided
        2) env vars SV_ADVISOR_LOG_FORMAT / SV_ADVISOR_LOG_LEVEL
        3) default = "json" at INFO
    """
    resolved_level = _resolve_level(level)

    if _resolve_format(force_format) == "plain":
        formatter: logging.Formatter = logging.Formatter(PLAIN_FORMAT)
    else:
        formatter = jsonlogger.JsonFormatter(JSON_FORMAT)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(resolved_level)
    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved_level, logging.WARNING))

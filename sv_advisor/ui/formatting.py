"""
Per-record display formatting for the adverts table.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any
from zoneinfo import ZoneInfo

from dateutil.parser import isoparse

from sv_advisor.core.coercion import to_optional_number

PLACEHOLDER = "—"
DEFAULT_TIMEZONE = "Europe/Lisbon"

_DATE_ONLY = re.compile(r"^\d{4}(-\d{2}(-\d{2})?)?$")


def _parse_timestamp(value: Any, tz_name: str = DEFAULT_TIMEZONE) -> datetime | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        # Epoch milliseconds, as the browser Date() constructor takes them
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    text = str(value).strip()
    if not text:
        return None
    try:
        # Fractions longer than microseconds are truncated
        parsed = isoparse(text)
    except (ValueError, OverflowError):
        return None

    if parsed.tzinfo is None:
        # Date-only forms are UTC; date-times without an offset are local wall-clock
        local = timezone.utc if _DATE_ONLY.match(text) else ZoneInfo(tz_name)
        parsed = parsed.replace(tzinfo=local)
    return parsed


def format_lisbon_date(value: Any, tz_name: str = DEFAULT_TIMEZONE) -> str:
    """ISO timestamp -> "YYYY-MM-DD HH:MM" in the display timezone (24h)."""
    parsed = _parse_timestamp(value, tz_name)
    if parsed is None:
        return PLACEHOLDER
    return parsed.astimezone(ZoneInfo(tz_name)).strftime("%Y-%m-%d %H:%M")


def _grouped_integer(number: float) -> str:
    rounded = Decimal(str(number)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = Decimal(0)
    return f"{int(rounded):,}"


def format_number(value: Any) -> str:
    number = to_optional_number(value)
    if number is None:
        return PLACEHOLDER
    return _grouped_integer(number)


def format_diff_title(label: str, min_price: Any, below_price: Any) -> str:
    """Tooltip for a percentile column: how far it sits under minPrice."""
    a = to_optional_number(min_price)
    b = to_optional_number(below_price)
    if a is None or b is None:
        return ""
    return f"{label}: {_grouped_integer(a - b)} €"


def display_text(value: Any) -> str:
    if value is None:
        return PLACEHOLDER
    text = str(value)
    return text if text.strip() else PLACEHOLDER


def is_at_or_below_min(diff: Any) -> bool:
    number = to_optional_number(diff)
    return number is not None and number <= 0

from __future__ import annotations

import math
from typing import Any, Optional


def to_optional_number(value: Any) -> Optional[float]:
    """
    Convert loosely-typed input into a finite float, or None.

    Blank/absent input, unparseable text and non-finite results (nan, inf)
    all map to None so that a bad filter bound behaves like an unset one.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else None

    text = str(value).strip()
    # float() accepts digit separators, the browser Number() does not
    if not text or "_" in text:
        return None

    try:
        number = float(text)
    except ValueError:
        return None

    return number if math.isfinite(number) else None


def text_or_empty(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def is_null_for_sort(value: Any, numeric: bool) -> bool:
    """
    Null-for-comparison predicate.

    Numeric fields: absent or not parseable to a finite number.
    Text fields: absent or blank once trimmed.
    """
    if value is None:
        return True
    if numeric:
        return to_optional_number(value) is None
    return str(value).strip() == ""

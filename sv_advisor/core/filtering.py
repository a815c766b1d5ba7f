from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from sv_advisor.core.coercion import text_or_empty, to_optional_number
from sv_advisor.core.fields import COMPLETENESS_FIELDS, Record
from sv_advisor.core.filter_state import FilterState


@dataclass(frozen=True)
class _Bounds:
    """Filter bounds parsed once per filtering pass."""
    year_min: Optional[float]
    year_max: Optional[float]
    price_min: Optional[float]
    price_max: Optional[float]
    diff_max: Optional[float]
    query: str

    @classmethod
    def from_filters(cls, filters: FilterState) -> _Bounds:
        return cls(
            year_min=to_optional_number(filters.year_min),
            year_max=to_optional_number(filters.year_max),
            price_min=to_optional_number(filters.price_min),
            price_max=to_optional_number(filters.price_max),
            diff_max=to_optional_number(filters.diff_max),
            query=filters.text.strip().lower(),
        )


def _matches_category(record: Record, key: str, wanted: str) -> bool:
    if not wanted:
        return True
    value = record.get(key)
    return value is not None and str(value) == wanted


def _within(value: Any, lower: Optional[float], upper: Optional[float]) -> bool:
    if lower is None and upper is None:
        return True
    # An active bound excludes records whose value cannot be read as a number
    number = to_optional_number(value)
    if number is None:
        return False
    if lower is not None and number < lower:
        return False
    if upper is not None and number > upper:
        return False
    return True


def is_incomplete(record: Record) -> bool:
    """True when any completeness field is absent or null (zero counts as present)."""
    return any(record.get(key) is None for key in COMPLETENESS_FIELDS)


def _matches(record: Record, filters: FilterState, bounds: _Bounds) -> bool:
    if not _matches_category(record, "brand", filters.brand):
        return False
    if not _matches_category(record, "fuelType", filters.fuel_type):
        return False
    if not _matches_category(record, "gearbox", filters.gearbox):
        return False

    if not _within(record.get("year"), bounds.year_min, bounds.year_max):
        return False
    if not _within(record.get("price"), bounds.price_min, bounds.price_max):
        return False
    if not _within(record.get("diffPriceMinPrice"), None, bounds.diff_max):
        return False

    if bounds.query:
        haystack = f"{text_or_empty(record.get('title'))} {text_or_empty(record.get('brand'))}".lower()
        if bounds.query not in haystack:
            return False

    if filters.only_missing and not is_incomplete(record):
        return False

    return True


def matches_filters(record: Record, filters: FilterState) -> bool:
    """
    Evaluate one record against the active filters.

    Inactive constraints (blank bound, empty selection, unchecked toggle)
    never disqualify a record.
    """
    return _matches(record, filters, _Bounds.from_filters(filters))


def filter_records(records: Iterable[Record], filters: FilterState) -> List[Record]:
    bounds = _Bounds.from_filters(filters)
    return [rec for rec in records if _matches(rec, filters, bounds)]

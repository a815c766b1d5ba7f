from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, List, Set

from sv_advisor.core.fields import Record
from sv_advisor.core.filter_state import FilterState


@dataclass(frozen=True)
class FilterOptions:
    """
    Distinct categorical values present in the current dataset, used to
    populate the brand / fuel / gearbox dropdowns.
    """
    brands: List[Any] = field(default_factory=list)
    fuels: List[Any] = field(default_factory=list)
    gearboxes: List[Any] = field(default_factory=list)


def _sorted_distinct(values: Iterable[Any]) -> List[Any]:
    return sorted(set(values), key=str)


def _collect(target: Set[Any], value: Any) -> None:
    # Lists and objects from the payload cannot be offered as a choice
    if value and isinstance(value, (str, int, float)):
        target.add(value)


def derive_filter_options(records: Iterable[Record]) -> FilterOptions:
    """Scan the dataset once, ignoring absent, empty and non-scalar values."""
    brands: Set[Any] = set()
    fuels: Set[Any] = set()
    gearboxes: Set[Any] = set()
    for rec in records:
        _collect(brands, rec.get("brand"))
        _collect(fuels, rec.get("fuelType"))
        _collect(gearboxes, rec.get("gearbox"))

    return FilterOptions(
        brands=_sorted_distinct(brands),
        fuels=_sorted_distinct(fuels),
        gearboxes=_sorted_distinct(gearboxes),
    )


def reconcile_filter_state(filters: FilterState, options: FilterOptions) -> FilterState:
    """
    Clear any categorical selection that is no longer offered by the
    freshly derived options, so the UI never holds an invisible selection.
    """
    changes = {}
    if filters.brand and filters.brand not in {str(v) for v in options.brands}:
        changes["brand"] = ""
    if filters.fuel_type and filters.fuel_type not in {str(v) for v in options.fuels}:
        changes["fuel_type"] = ""
    if filters.gearbox and filters.gearbox not in {str(v) for v in options.gearboxes}:
        changes["gearbox"] = ""

    if not changes:
        return filters
    return replace(filters, **changes)

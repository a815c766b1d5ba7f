"""
Field names recognised on advertisement records.

Records are plain mappings straight from the adverts endpoint; none of these
keys is required.
"""
from __future__ import annotations

from typing import Any, Mapping, Tuple

Record = Mapping[str, Any]

CATEGORICAL_FIELDS: Tuple[str, ...] = ("brand", "fuelType", "gearbox")

NUMERIC_SORT_KEYS = frozenset(
    {
        "price",
        "minPrice",
        "minPrice30Below",
        "minPrice25Below",
        "minPrice20Below",
        "maxPrice",
        "diffPriceMinPrice",
        "year",
    }
)

# A record lacking any of these is "incomplete" (price bands not computed yet).
COMPLETENESS_FIELDS: Tuple[str, ...] = (
    "advertId",
    "minPrice",
    "maxPrice",
    "diffPriceMinPrice",
    "lastDifference",
    "minPrice20Below",
    "minPrice30Below",
    "minPrice25Below",
)

# Table column order; every column is sortable.
SORTABLE_FIELDS: Tuple[str, ...] = (
    "title",
    "advertCreatedAt",
    "price",
    "minPrice",
    "minPrice20Below",
    "minPrice25Below",
    "minPrice30Below",
    "maxPrice",
    "diffPriceMinPrice",
    "brand",
    "fuelType",
    "gearbox",
    "year",
)

PERCENTILE_FIELDS: Tuple[str, ...] = ("minPrice20Below", "minPrice25Below", "minPrice30Below")

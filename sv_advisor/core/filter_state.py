from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict

from sv_advisor.core.fields import SORTABLE_FIELDS

ASC = "asc"
DESC = "desc"

DEFAULT_SORT_KEY = "advertCreatedAt"


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current user filters over the adverts table.

    Fields:

    - brand / fuel_type / gearbox: exact-match categorical filters, "" means any.
    - year_min / year_max / price_min / price_max: range bounds as typed by the user.
    - diff_max: upper bound on diffPriceMinPrice.
    - text: case-insensitive substring over "title brand".
    - only_missing: keep only records lacking one of the completeness fields.

    Bounds are kept as raw text; a blank or unparseable bound is "no constraint".
    """

    # Categorical selections
    brand: str = ""
    fuel_type: str = ""
    gearbox: str = ""

    # Numeric bounds
    year_min: str = ""
    year_max: str = ""
    price_min: str = ""
    price_max: str = ""
    diff_max: str = ""

    # Free text + toggles
    text: str = ""
    only_missing: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> FilterState:
        data = data or {}

        def text(key: str) -> str:
            value = data.get(key)
            return "" if value is None else str(value)

        return cls(
            brand=text("brand"),
            fuel_type=text("fuel_type"),
            gearbox=text("gearbox"),
            year_min=text("year_min"),
            year_max=text("year_max"),
            price_min=text("price_min"),
            price_max=text("price_max"),
            diff_max=text("diff_max"),
            text=text("text"),
            only_missing=bool(data.get("only_missing", False)),
        )

    def with_value(self, name: str, value: Any) -> FilterState:
        known = {f.name for f in fields(self)}
        if name not in known:
            raise KeyError(f"Unknown filter '{name}'")
        if name == "only_missing":
            return replace(self, only_missing=bool(value))
        return replace(self, **{name: "" if value is None else str(value)})

    @classmethod
    def reset(cls) -> FilterState:
        return cls()


@dataclass(frozen=True)
class SortState:
    """
    Active sort column and direction. Exactly one key is active at a time.
    """

    key: str = DEFAULT_SORT_KEY
    direction: str = DESC

    def __post_init__(self) -> None:
        if self.direction not in (ASC, DESC):
            raise ValueError(f"Invalid sort direction '{self.direction}'")

    @property
    def descending(self) -> bool:
        return self.direction == DESC

    def request_sort(self, key: str) -> SortState:
        """Same key flips the direction, a new key starts ascending."""
        if key == self.key:
            return SortState(key=key, direction=ASC if self.descending else DESC)
        return SortState(key=key, direction=ASC)

    def indicator(self, key: str) -> str:
        if key != self.key:
            return ""
        return " ▼" if self.descending else " ▲"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> SortState:
        data = data or {}
        key = data.get("key") or DEFAULT_SORT_KEY
        if key not in SORTABLE_FIELDS:
            key = DEFAULT_SORT_KEY
        direction = data.get("direction")
        if direction not in (ASC, DESC):
            direction = DESC
        return cls(key=str(key), direction=direction)

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from dash import html

from sv_advisor.core.fields import Record
from sv_advisor.core.filter_state import FilterState
from sv_advisor.core.options import FilterOptions
from sv_advisor.ui.formatting import (
    DEFAULT_TIMEZONE,
    PLACEHOLDER,
    display_text,
    format_diff_title,
    format_lisbon_date,
    format_number,
    is_at_or_below_min,
)
from sv_advisor.ui.ids import FILTER_CONTROLS, ONLY_MISSING_VALUE

# (field, header label, alignment) in table order
COLUMNS: Tuple[Tuple[str, str, str], ...] = (
    ("title", "Title", "left"),
    ("advertCreatedAt", "Created", "left"),
    ("price", "Price (€)", "right"),
    ("minPrice", "Min (€)", "right"),
    ("minPrice20Below", "Min 20% (€)", "right"),
    ("minPrice25Below", "Min 25% (€)", "right"),
    ("minPrice30Below", "Min 30% (€)", "right"),
    ("maxPrice", "Max (€)", "right"),
    ("diffPriceMinPrice", "Diff vs Min (€)", "right"),
    ("brand", "Brand", "left"),
    ("fuelType", "Fuel", "left"),
    ("gearbox", "Gearbox", "left"),
    ("year", "Year", "right"),
)

EMPTY_MESSAGE = "No results match current filters."


# ---------------------------------------------------------
# Filter controls <-> FilterState
# ---------------------------------------------------------
def get_filter_dropdown_options(options: FilterOptions) -> Tuple[List[dict], List[dict], List[dict]]:
    def to_options(values: Sequence[Any]) -> List[dict]:
        return [{"label": str(v), "value": str(v)} for v in values]

    return to_options(options.brands), to_options(options.fuels), to_options(options.gearboxes)


def filter_state_from_controls(values: Sequence[Any]) -> FilterState:
    """Control values arrive in FILTER_CONTROLS order."""
    data = dict(zip(FILTER_CONTROLS.keys(), values))
    data["only_missing"] = ONLY_MISSING_VALUE in (data.get("only_missing") or [])
    return FilterState.from_dict(data)


def controls_from_filter_state(filters: FilterState) -> List[Any]:
    data = filters.to_dict()
    values: List[Any] = []
    for name in FILTER_CONTROLS:
        if name == "only_missing":
            values.append([ONLY_MISSING_VALUE] if data[name] else [])
        elif name in ("brand", "fuel_type", "gearbox"):
            # Dropdowns show their placeholder ("All") for None
            values.append(data[name] or None)
        else:
            values.append(data[name])
    return values


# ---------------------------------------------------------
# Table rendering
# ---------------------------------------------------------
def _title_cell(rec: Record) -> html.Td:
    title = rec.get("title")
    url = rec.get("trackingUrl") or rec.get("url")
    if url:
        content = html.A(title or "Open", href=url, target="_blank", rel="noreferrer")
    else:
        content = title or PLACEHOLDER
    return html.Td(content, className="sva-title-cell")


def _number_cell(rec: Record, key: str, title: str = "", highlight: bool = False) -> html.Td:
    style = {"textAlign": "right"}
    if highlight:
        style["color"] = "green"
    return html.Td(format_number(rec.get(key)), title=title or None, style=style)


def build_table_rows(records: Sequence[Record], tz_name: str = DEFAULT_TIMEZONE) -> List[html.Tr]:
    rows = []
    for rec in records:
        rows.append(
            html.Tr(
                [
                    _title_cell(rec),
                    html.Td(format_lisbon_date(rec.get("advertCreatedAt"), tz_name)),
                    _number_cell(rec, "price"),
                    _number_cell(rec, "minPrice"),
                    _number_cell(rec, "minPrice20Below", format_diff_title("Net", rec.get("minPrice"), rec.get("minPrice20Below"))),
                    _number_cell(rec, "minPrice25Below", format_diff_title("Net", rec.get("minPrice"), rec.get("minPrice25Below"))),
                    _number_cell(rec, "minPrice30Below", format_diff_title("Net", rec.get("minPrice"), rec.get("minPrice30Below"))),
                    _number_cell(rec, "maxPrice"),
                    _number_cell(rec, "diffPriceMinPrice", highlight=is_at_or_below_min(rec.get("diffPriceMinPrice"))),
                    html.Td(display_text(rec.get("brand") or None)),
                    html.Td(display_text(rec.get("fuelType") or None)),
                    html.Td(display_text(rec.get("gearbox") or None)),
                    html.Td(display_text(rec.get("year")), style={"textAlign": "right"}),
                ]
            )
        )
    return rows


def empty_row() -> html.Tr:
    return html.Tr(
        html.Td(EMPTY_MESSAGE, colSpan=len(COLUMNS), className="text-center text-muted p-4")
    )


def status_count_text(shown: int, total: int) -> str:
    return f"Showing {shown} of {total}"

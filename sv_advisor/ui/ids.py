from __future__ import annotations

__all__ = ["IDs", "FILTER_CONTROLS", "sort_header_id", "sort_label_id"]


class IDs:
    class Store:
        # Durable credential slot (browser localStorage)
        AUTH_TOKEN = "auth-token"
        ADVERTS = "adverts-data"
        SORT_STATE = "sort-state"
        UI_STATUS = "ui-status"

    class Control:
        # Views
        LOGIN_PANEL = "login-panel"
        DATA_PANEL = "data-panel"

        # Login form
        USERNAME = "login-username"
        PASSWORD = "login-password"
        LOGIN_BTN = "login-btn"
        LOGIN_ERROR = "login-error"

        # Filters
        BRAND_SELECT = "brand-select"
        FUEL_SELECT = "fuel-select"
        GEARBOX_SELECT = "gearbox-select"
        YEAR_MIN = "year-min"
        YEAR_MAX = "year-max"
        PRICE_MIN = "price-min"
        PRICE_MAX = "price-max"
        DIFF_MAX = "diff-max"
        SEARCH_TEXT = "search-text"
        ONLY_MISSING = "only-missing"

        # Actions
        REFRESH_BTN = "refresh-btn"
        CLEAR_BTN = "clear-btn"
        LOGOUT_BTN = "logout-btn"

        # Status + table
        STATUS_ERROR = "status-error"
        STATUS_COUNT = "status-count"
        TABLE_BODY = "adverts-table-body"
        TABLE_LOADING = "adverts-table-loading"

    class Pattern:
        # pattern-matching "type" strings
        SORT_HEADER = "sort-header"
        SORT_LABEL = "sort-label"


ONLY_MISSING_VALUE = "only_missing"

# FilterState field -> control id, in panel order
FILTER_CONTROLS = {
    "brand": IDs.Control.BRAND_SELECT,
    "fuel_type": IDs.Control.FUEL_SELECT,
    "gearbox": IDs.Control.GEARBOX_SELECT,
    "year_min": IDs.Control.YEAR_MIN,
    "year_max": IDs.Control.YEAR_MAX,
    "price_min": IDs.Control.PRICE_MIN,
    "price_max": IDs.Control.PRICE_MAX,
    "diff_max": IDs.Control.DIFF_MAX,
    "text": IDs.Control.SEARCH_TEXT,
    "only_missing": IDs.Control.ONLY_MISSING,
}


def sort_header_id(key: str) -> dict:
    return {"type": IDs.Pattern.SORT_HEADER, "index": key}


def sort_label_id(key: str) -> dict:
    return {"type": IDs.Pattern.SORT_LABEL, "index": key}

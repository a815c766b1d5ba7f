from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from sv_advisor.ui.ids import IDs, ONLY_MISSING_VALUE


def _dropdown(label: str, control_id: str) -> dbc.Col:
    return dbc.Col(
        [
            html.Label(label, className="form-label"),
            dcc.Dropdown(
                id=control_id,
                options=[],
                placeholder="All",
                clearable=True,
            ),
        ],
        md=2,
    )


def _text_input(label: str, control_id: str, placeholder: str, numeric: bool = True) -> dbc.Col:
    return dbc.Col(
        [
            html.Label(label, className="form-label"),
            dbc.Input(
                id=control_id,
                value="",
                placeholder=placeholder,
                inputMode="numeric" if numeric else "text",
                autoComplete="off",
                debounce=True,
            ),
        ],
        md=2,
    )


def build_filter_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    dbc.Row(
                        [
                            _dropdown("Brand", IDs.Control.BRAND_SELECT),
                            _dropdown("Fuel", IDs.Control.FUEL_SELECT),
                            _dropdown("Gearbox", IDs.Control.GEARBOX_SELECT),
                            _text_input("Year min", IDs.Control.YEAR_MIN, "e.g. 2015"),
                            _text_input("Year max", IDs.Control.YEAR_MAX, "e.g. 2021"),
                            _text_input("Price min (€)", IDs.Control.PRICE_MIN, "e.g. 5000"),
                        ],
                        className="g-3 mb-3",
                    ),
                    dbc.Row(
                        [
                            _text_input("Price max (€)", IDs.Control.PRICE_MAX, "e.g. 30000"),
                            _text_input("Max diff vs min (€)", IDs.Control.DIFF_MAX, "e.g. 1000"),
                            _text_input("Search text", IDs.Control.SEARCH_TEXT, "title or brand", numeric=False),
                            dbc.Col(
                                dbc.Checklist(
                                    id=IDs.Control.ONLY_MISSING,
                                    options=[{"label": " Only without MinMax", "value": ONLY_MISSING_VALUE}],
                                    value=[],
                                    switch=True,
                                ),
                                md=2,
                                className="d-flex align-items-end",
                            ),
                            dbc.Col(
                                html.Div(
                                    [
                                        dbc.Button("Refresh", id=IDs.Control.REFRESH_BTN, color="secondary", size="sm"),
                                        dbc.Button("Clear", id=IDs.Control.CLEAR_BTN, color="secondary", size="sm"),
                                        dbc.Button(
                                            "Logout",
                                            id=IDs.Control.LOGOUT_BTN,
                                            color="danger",
                                            outline=True,
                                            size="sm",
                                            className="ms-auto",
                                        ),
                                    ],
                                    className="d-flex gap-2",
                                ),
                                md=4,
                                className="d-flex align-items-end",
                            ),
                        ],
                        className="g-3",
                    ),
                ]
            ),
        ],
        className="sva-filters mb-3",
    )

from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from sv_advisor.ui.helpers import COLUMNS
from sv_advisor.ui.ids import IDs, sort_header_id, sort_label_id


def _header_cell(key: str, label: str, align: str) -> html.Th:
    return html.Th(
        html.Span(label, id=sort_label_id(key)),
        id=sort_header_id(key),
        n_clicks=0,
        style={"textAlign": align, "cursor": "pointer", "userSelect": "none"},
    )


def build_table_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Span(id=IDs.Control.STATUS_ERROR, className="text-danger"),
                        html.Span(id=IDs.Control.STATUS_COUNT, className="ms-auto"),
                    ],
                    className="d-flex align-items-center gap-3",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                dcc.Loading(
                    id=IDs.Control.TABLE_LOADING,
                    type="default",
                    children=html.Div(
                        html.Table(
                            [
                                html.Thead(html.Tr([_header_cell(*col) for col in COLUMNS])),
                                html.Tbody(id=IDs.Control.TABLE_BODY),
                            ],
                            className="table table-sm table-hover",
                        ),
                        className="sva-table-container",
                    ),
                ),
            ),
        ],
        className="sva-maincard",
    )

from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from sv_advisor.core.filter_state import SortState
from sv_advisor.ui.ids import IDs
from sv_advisor.ui.layout.build_filter_panel import build_filter_panel
from sv_advisor.ui.layout.build_login_panel import build_login_panel
from sv_advisor.ui.layout.build_navbar import build_navbar
from sv_advisor.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from sv_advisor.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    return dbc.Container(
        fluid=True,
        className="sva-root",
        children=[
            build_navbar(ctx.global_config),

            # App-level stores
            dcc.Store(id=IDs.Store.AUTH_TOKEN, storage_type="local"),
            dcc.Store(id=IDs.Store.ADVERTS, storage_type="memory"),
            dcc.Store(id=IDs.Store.SORT_STATE, storage_type="memory", data=SortState().to_dict()),
            dcc.Store(id=IDs.Store.UI_STATUS, storage_type="memory"),

            build_login_panel(),
            html.Div(
                [
                    build_filter_panel(),
                    build_table_panel(),
                ],
                id=IDs.Control.DATA_PANEL,
                className="mt-3",
                style={"display": "none"},
            ),
        ],
    )

from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from sv_advisor.ui.ids import IDs


def build_login_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Login", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("Username", className="form-label"),
                    dbc.Input(
                        id=IDs.Control.USERNAME,
                        value="",
                        autoComplete="username",
                        className="mb-3",
                    ),
                    html.Label("Password", className="form-label"),
                    dbc.Input(
                        id=IDs.Control.PASSWORD,
                        type="password",
                        value="",
                        autoComplete="current-password",
                        className="mb-3",
                    ),
                    html.Div(id=IDs.Control.LOGIN_ERROR, className="text-danger mb-2"),
                    dbc.Button(
                        "Login",
                        id=IDs.Control.LOGIN_BTN,
                        color="primary",
                    ),
                ]
            ),
        ],
        id=IDs.Control.LOGIN_PANEL,
        className="sva-login mx-auto mt-5",
        style={"display": "none"},
    )

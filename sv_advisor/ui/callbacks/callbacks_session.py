from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State
from dash.exceptions import PreventUpdate

from sv_advisor.ui.callbacks.callbacks_utils import (
    controller_from_stores,
    error_text,
    records_to_store,
    status_to_store,
)
from sv_advisor.ui.helpers import (
    controls_from_filter_state,
    filter_state_from_controls,
    get_filter_dropdown_options,
)
from sv_advisor.ui.ids import FILTER_CONTROLS, IDs

if TYPE_CHECKING:
    from sv_advisor.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_session_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Login / refresh / clear / logout -> session, dataset, filters
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.AUTH_TOKEN, "data"),
        Output(IDs.Store.ADVERTS, "data"),
        Output(IDs.Store.UI_STATUS, "data"),
        Output(IDs.Control.USERNAME, "value"),
        Output(IDs.Control.PASSWORD, "value"),
        Output(IDs.Control.BRAND_SELECT, "options"),
        Output(IDs.Control.FUEL_SELECT, "options"),
        Output(IDs.Control.GEARBOX_SELECT, "options"),
        *[Output(cid, "value") for cid in FILTER_CONTROLS.values()],
        Input(IDs.Control.LOGIN_BTN, "n_clicks"),
        Input(IDs.Control.PASSWORD, "n_submit"),
        Input(IDs.Control.REFRESH_BTN, "n_clicks"),
        Input(IDs.Control.CLEAR_BTN, "n_clicks"),
        Input(IDs.Control.LOGOUT_BTN, "n_clicks"),
        Input(IDs.Store.AUTH_TOKEN, "modified_timestamp"),
        State(IDs.Control.USERNAME, "value"),
        State(IDs.Control.PASSWORD, "value"),
        State(IDs.Store.AUTH_TOKEN, "data"),
        State(IDs.Store.ADVERTS, "data"),
        State(IDs.Store.SORT_STATE, "data"),
        State(IDs.Store.UI_STATUS, "data"),
        *[State(cid, "value") for cid in FILTER_CONTROLS.values()],
        running=[
            (Output(IDs.Control.LOGIN_BTN, "disabled"), True, False),
            (Output(IDs.Control.REFRESH_BTN, "disabled"), True, False),
            (Output(IDs.Control.CLEAR_BTN, "disabled"), True, False),
            (Output(IDs.Control.LOGOUT_BTN, "disabled"), True, False),
        ],
    )
    def update_session(
        _login_clicks,
        _password_submit,
        _refresh_clicks,
        _clear_clicks,
        _logout_clicks,
        _token_ts,
        username,
        password,
        token,
        records,
        sort_data,
        status,
        *filter_values,
    ):
        triggered = dash.callback_context.triggered_id

        controller = controller_from_stores(
            ctx,
            token=token,
            records=records,
            sort_data=sort_data,
            filters=filter_state_from_controls(filter_values),
            status=status,
            username=username,
            password=password,
        )

        if triggered in (IDs.Control.LOGIN_BTN, IDs.Control.PASSWORD):
            controller.submit_login(username, password)
        elif triggered == IDs.Control.REFRESH_BTN:
            controller.refresh()
        elif triggered == IDs.Control.CLEAR_BTN:
            controller.clear_filters()
        elif triggered == IDs.Control.LOGOUT_BTN:
            controller.logout()
        elif not records:
            # Page load, or the browser-local slot filling in after it
            controller.start()

        st = controller.state
        new_token = controller.session.store.get()
        if controller.loader.superseded and new_token == token:
            # A newer callback from this tab already wrote fresher data
            raise PreventUpdate
        brand_opts, fuel_opts, gearbox_opts = get_filter_dropdown_options(st.options)

        logger.info(
            "session_callback",
            extra={
                "trigger": str(triggered),
                "authenticated": controller.is_authenticated,
                "records": len(st.records),
            },
        )

        return (
            # Writing an unchanged token would bump modified_timestamp and loop
            new_token if new_token != token else dash.no_update,
            records_to_store(st.records),
            status_to_store(controller),
            st.login.username,
            st.login.password,
            brand_opts,
            fuel_opts,
            gearbox_opts,
            *controls_from_filter_state(st.filters),
        )

    # ---------------------------------------------------------
    # Login view vs data view
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.LOGIN_PANEL, "style"),
        Output(IDs.Control.DATA_PANEL, "style"),
        Output(IDs.Control.LOGIN_ERROR, "children"),
        Input(IDs.Store.AUTH_TOKEN, "data"),
        Input(IDs.Store.UI_STATUS, "data"),
    )
    def toggle_views(token, status):
        login_error = (status or {}).get("login_error", "")
        if token:
            return {"display": "none"}, {}, ""
        return {}, {"display": "none"}, error_text(login_error)

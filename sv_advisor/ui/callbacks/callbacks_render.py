from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output, State
from dash.exceptions import PreventUpdate

from sv_advisor.core.projection import project_view
from sv_advisor.services.dataset_service import coerce_records
from sv_advisor.ui.callbacks.callbacks_utils import error_text, safe_sort_state, status_from_store
from sv_advisor.ui.helpers import COLUMNS, build_table_rows, empty_row, filter_state_from_controls, status_count_text
from sv_advisor.ui.ids import FILTER_CONTROLS, IDs

if TYPE_CHECKING:
    from sv_advisor.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Table: dataset + filters + sort -> rows
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_BODY, "children"),
        Output(IDs.Control.STATUS_COUNT, "children"),
        Output(IDs.Control.STATUS_ERROR, "children"),
        Input(IDs.Store.ADVERTS, "data"),
        Input(IDs.Store.SORT_STATE, "data"),
        Input(IDs.Store.UI_STATUS, "data"),
        *[Input(cid, "value") for cid in FILTER_CONTROLS.values()],
    )
    def update_table(records, sort_data, status, *filter_values):
        dataset = coerce_records(records) if records is not None else []
        view = project_view(dataset, filter_state_from_controls(filter_values), safe_sort_state(sort_data))
        error = status_from_store(status)["error"]

        if view.is_empty and not error:
            rows = [empty_row()]
        else:
            rows = build_table_rows(view.records, ctx.global_config.display_timezone)

        return rows, status_count_text(view.shown, view.total), error_text(error)

    # ---------------------------------------------------------
    # Header clicks -> sort state
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SORT_STATE, "data"),
        Input({"type": IDs.Pattern.SORT_HEADER, "index": ALL}, "n_clicks"),
        State(IDs.Store.SORT_STATE, "data"),
        prevent_initial_call=True,
    )
    def update_sort(n_clicks, sort_data):
        triggered = dash.callback_context.triggered_id
        if not isinstance(triggered, dict) or not any(n_clicks or []):
            raise PreventUpdate

        sort = safe_sort_state(sort_data).request_sort(triggered["index"])
        logger.info("sort_changed", extra={"key": sort.key, "direction": sort.direction})
        return sort.to_dict()

    # ---------------------------------------------------------
    # Sort indicators in the header labels
    # ---------------------------------------------------------
    @app.callback(
        Output({"type": IDs.Pattern.SORT_LABEL, "index": ALL}, "children"),
        Input(IDs.Store.SORT_STATE, "data"),
    )
    def update_sort_labels(sort_data):
        sort = safe_sort_state(sort_data)
        labels = {key: label for key, label, _ in COLUMNS}
        keys = [out["id"]["index"] for out in dash.callback_context.outputs_list]
        return [f"{labels[key]}{sort.indicator(key)}" for key in keys]

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Any, Optional, Sequence

from sv_advisor.controller import AdvisorController
from sv_advisor.core.filter_state import FilterState, SortState
from sv_advisor.core.state import AppState, LoginForm
from sv_advisor.services.dataset_service import coerce_records

if TYPE_CHECKING:
    from sv_advisor.ui.config import AppConfig

logger = logging.getLogger(__name__)


def safe_sort_state(data: object) -> SortState:
    if not isinstance(data, dict):
        return SortState()
    try:
        return SortState.from_dict(data)
    except ValueError:
        logger.exception("Invalid sort-state: %r", data)
        return SortState()


def status_from_store(data: object) -> dict[str, str]:
    if not isinstance(data, dict):
        return {"error": "", "login_error": "", "client_id": ""}
    return {
        "error": str(data.get("error") or ""),
        "login_error": str(data.get("login_error") or ""),
        "client_id": str(data.get("client_id") or ""),
    }


def controller_from_stores(
    ctx: AppConfig,
    *,
    token: Optional[str],
    records: object,
    sort_data: object,
    filters: FilterState,
    status: object,
    username: str = "",
    password: str = "",
) -> AdvisorController:
    """
    Rebuild a controller for one callback invocation from the browser-side
    stores. The durable slot is seeded with the browser-local token.

    The client id identifies one browser tab across callbacks so overlapping
    loads from that tab share a ticket sequence; a tab without one gets a
    fresh id here and keeps it through ``status_to_store``.
    """
    ctx.validate()
    cfg = ctx.global_config
    st = status_from_store(status)

    state = AppState(
        login=LoginForm(username=username or "", password=password or "", error=st["login_error"]),
        records=coerce_records(records) if records is not None else [],
        filters=filters,
        sort=safe_sort_state(sort_data),
        error=st["error"],
    )
    return AdvisorController(
        ctx.client,
        ctx.credential_store(token),
        adverts_path=cfg.adverts_path,
        state=state,
        tickets=ctx.tickets,
        client_id=st["client_id"] or uuid.uuid4().hex,
    )


def status_to_store(controller: AdvisorController) -> dict[str, str]:
    st = controller.state
    return {
        "error": st.error,
        "login_error": st.login.error,
        "client_id": controller.loader.client_id,
    }


def error_text(message: str) -> str:
    return f"Error: {message}" if message else ""


def records_to_store(records: Sequence[Any]) -> list:
    return [dict(r) for r in records]

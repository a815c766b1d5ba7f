from __future__ import annotations

import logging
from typing import Any, List, Optional

from sv_advisor.core.fields import Record
from sv_advisor.core.filter_state import FilterState, SortState
from sv_advisor.core.options import derive_filter_options, reconcile_filter_state
from sv_advisor.core.projection import project_view
from sv_advisor.core.state import AppState
from sv_advisor.services.api_client import DEFAULT_ADVERTS_PATH, AdvertsApiClient
from sv_advisor.services.dataset_service import DatasetLoader, RequestTickets
from sv_advisor.services.session_service import SessionManager
from sv_advisor.services.storage import CredentialStore

logger = logging.getLogger(__name__)


class AdvisorController:
    """
    Owns the application state and is the only thing that mutates it.

    Every public method ends with ``_recompute()``: derived options are
    rebuilt, stale categorical selections cleared and the view re-projected,
    so readers of ``state`` always see a consistent snapshot.
    """

    def __init__(
        self,
        client: AdvertsApiClient,
        store: CredentialStore,
        *,
        adverts_path: str = DEFAULT_ADVERTS_PATH,
        state: Optional[AppState] = None,
        tickets: Optional[RequestTickets] = None,
        client_id: str = "",
    ):
        self.state = state or AppState()
        self.session = SessionManager(client, store, self.state, validate_path=adverts_path)
        self.loader = DatasetLoader(
            self.session,
            self.state,
            path=adverts_path,
            tickets=tickets,
            client_id=client_id,
        )
        self._recompute()

    # ---------------------------------------------------------
    # Derived state
    # ---------------------------------------------------------
    def _recompute(self) -> None:
        st = self.state
        st.options = derive_filter_options(st.records)
        st.filters = reconcile_filter_state(st.filters, st.options)
        st.view = project_view(st.records, st.filters, st.sort)
        logger.debug(
            "View recomputed",
            extra={"shown": st.view.shown, "total": st.view.total},
        )

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    @property
    def view(self) -> List[Record]:
        return self.state.view.records

    # ---------------------------------------------------------
    # Session + loading
    # ---------------------------------------------------------
    def start(self) -> None:
        """Initial load for a credential already held in the durable slot."""
        if self.session.is_authenticated:
            self.loader.load(reset_filters=True)
        self._recompute()

    def submit_login(self, username: str, password: str) -> bool:
        ok = self.session.login(username, password)
        if ok:
            # Entering the authenticated state always triggers a reset-load
            self.loader.load(reset_filters=True)
        self._recompute()
        return ok

    def refresh(self) -> bool:
        applied = self.loader.load(reset_filters=False)
        self._recompute()
        return applied

    def logout(self) -> None:
        self.session.logout()
        self.loader.tickets.forget(self.loader.client_id)
        self.state.error = ""
        self._recompute()

    # ---------------------------------------------------------
    # Filters + sort
    # ---------------------------------------------------------
    def set_filter(self, name: str, value: Any) -> None:
        self.state.filters = self.state.filters.with_value(name, value)
        self._recompute()

    def set_filters(self, filters: FilterState) -> None:
        self.state.filters = filters
        self._recompute()

    def clear_filters(self) -> None:
        self.state.filters = FilterState.reset()
        self._recompute()

    def request_sort(self, key: str) -> SortState:
        self.state.sort = self.state.sort.request_sort(key)
        self._recompute()
        return self.state.sort

    def set_records(self, records: List[Record]) -> None:
        self.state.records = list(records)
        self._recompute()

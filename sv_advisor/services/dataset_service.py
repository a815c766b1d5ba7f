from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from sv_advisor.core.exceptions import AdvisorError, SessionExpiredError
from sv_advisor.core.fields import Record
from sv_advisor.core.filter_state import FilterState
from sv_advisor.core.state import AppState
from sv_advisor.services.api_client import DEFAULT_ADVERTS_PATH
from sv_advisor.services.session_service import SessionManager

logger = logging.getLogger(__name__)


def coerce_records(payload: Any) -> List[Record]:
    """
    Anything that is not a list of records becomes an empty dataset;
    non-mapping entries inside a list are dropped.
    """
    if not isinstance(payload, list):
        logger.warning(
            "Adverts payload is not a list; using empty dataset",
            extra={"payload_type": type(payload).__name__},
        )
        return []

    records = [item for item in payload if isinstance(item, Mapping)]
    if len(records) != len(payload):
        logger.warning(
            "Dropped non-record entries from adverts payload",
            extra={"dropped": len(payload) - len(records)},
        )
    return records


class RequestTickets:
    """
    Load sequence numbers shared by every worker serving the app.

    Tickets come from one global counter; each client id remembers only the
    newest ticket issued to it. Dash rebuilds the loader on every callback,
    so the sequence has to live here rather than on the loader.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counter = itertools.count(1)
        self._latest: Dict[str, int] = {}

    def issue(self, client_id: str) -> int:
        with self._lock:
            ticket = next(self._counter)
            self._latest[client_id] = ticket
            return ticket

    def is_latest(self, client_id: str, ticket: int) -> bool:
        with self._lock:
            return self._latest.get(client_id) == ticket

    def latest(self, client_id: str) -> Optional[int]:
        with self._lock:
            return self._latest.get(client_id)

    def forget(self, client_id: str) -> None:
        """Drop the client's sequence; any load still in flight becomes stale."""
        with self._lock:
            self._latest.pop(client_id, None)


class DatasetLoader:
    """
    Fetches the adverts collection through the session manager and replaces
    the dataset wholesale.

    Every load takes a ticket for its client id; a response is only applied
    if its ticket is still the newest for that client, so a slow stale
    response can never overwrite fresher data. ``superseded`` records that
    the last load lost this race.
    """

    def __init__(
        self,
        session: SessionManager,
        state: AppState,
        path: str = DEFAULT_ADVERTS_PATH,
        *,
        tickets: Optional[RequestTickets] = None,
        client_id: str = "",
    ):
        self.session = session
        self.state = state
        self.path = path
        self.tickets = tickets if tickets is not None else RequestTickets()
        self.client_id = client_id
        self.superseded = False

    def begin(self) -> int:
        self.superseded = False
        return self.tickets.issue(self.client_id)

    def apply(self, ticket: int, payload: Any, reset_filters: bool = False) -> bool:
        if not self.tickets.is_latest(self.client_id, ticket):
            logger.info(
                "Discarding stale adverts response",
                extra={
                    "client_id": self.client_id,
                    "ticket": ticket,
                    "latest": self.tickets.latest(self.client_id),
                },
            )
            self.superseded = True
            return False

        self.state.records = coerce_records(payload)
        if reset_filters:
            self.state.filters = FilterState.reset()

        logger.info(
            "Adverts loaded",
            extra={"records": len(self.state.records), "reset_filters": reset_filters},
        )
        return True

    def load(self, reset_filters: bool = False) -> bool:
        """
        Returns True when a fresh dataset was applied. No-ops while another
        load is in flight or when there is no session.
        """
        if self.state.loading:
            logger.info("Load already in flight; ignoring")
            return False
        if not self.session.is_authenticated:
            return False

        ticket = self.begin()
        self.state.loading = True
        self.state.error = ""
        logger.info("Loading adverts", extra={"path": self.path, "ticket": ticket})

        try:
            payload = self.session.authenticated_fetch(self.path)
        except SessionExpiredError:
            # Already surfaced on the login form
            return False
        except AdvisorError as e:
            if not self.tickets.is_latest(self.client_id, ticket):
                # A newer load owns the status line now
                self.superseded = True
                return False
            self.state.error = str(e)
            logger.warning("Adverts load failed", extra={"error": str(e)})
            return False
        finally:
            self.state.loading = False

        return self.apply(ticket, payload, reset_filters)

from __future__ import annotations

import pytest

from sv_advisor.core.exceptions import AuthorizationError, HttpStatusError, SessionExpiredError, TransportError
from sv_advisor.core.state import AppState
from sv_advisor.services.session_service import (
    INVALID_CREDENTIALS_MESSAGE,
    SESSION_EXPIRED_MESSAGE,
    SessionManager,
)
from sv_advisor.services.storage import InMemoryCredentialStore

TOKEN = "YWRtaW46c2VjcmV0"  # admin:secret


def _manager(client, token=None, state=None):
    store = InMemoryCredentialStore(token)
    return SessionManager(client, store, state or AppState()), store


def test_login_success_persists_token_and_clears_form(fake_client):
    fake_client.queue(None)
    session, store = _manager(fake_client)

    assert session.login("admin", "secret") is True

    assert session.token == TOKEN
    assert store.get() == TOKEN
    assert session.is_authenticated
    form = session.login_form
    assert (form.username, form.password, form.error, form.loading) == ("", "", "", False)
    assert fake_client.calls == [("check", "/api/sent-adverts", TOKEN)]


def test_login_401_reports_invalid_credentials(fake_client):
    fake_client.queue(AuthorizationError())
    session, store = _manager(fake_client)

    assert session.login("admin", "wrong") is False

    assert session.login_form.error == INVALID_CREDENTIALS_MESSAGE
    assert store.get() is None
    assert not session.is_authenticated


def test_login_http_500_reports_status_and_persists_nothing(fake_client):
    fake_client.queue(HttpStatusError(500))
    session, store = _manager(fake_client)

    assert session.login("a", "b") is False

    assert session.login_form.error == "Login failed (HTTP 500)"
    assert session.login_form.loading is False
    assert store.get() is None
    # Typed values stay in the form for another try
    assert session.login_form.username == "a"


def test_login_transport_failure_surfaces_message(fake_client):
    fake_client.queue(TransportError("connection refused"))
    session, _ = _manager(fake_client)

    session.login("a", "b")

    assert session.login_form.error == "connection refused"


def test_login_ignored_while_in_flight_or_blank(fake_client):
    session, _ = _manager(fake_client)

    assert session.login("", "secret") is False
    session.login_form.loading = True
    assert session.login("admin", "secret") is False
    assert fake_client.calls == []


def test_existing_durable_token_is_adopted(fake_client):
    session, _ = _manager(fake_client, token=TOKEN)
    assert session.is_authenticated


def test_authenticated_fetch_without_token_does_not_hit_network(fake_client):
    session, _ = _manager(fake_client)
    assert session.authenticated_fetch("/api/sent-adverts") is None
    assert fake_client.calls == []


def test_authenticated_fetch_attaches_token(fake_client):
    fake_client.queue([{"title": "x"}])
    session, _ = _manager(fake_client, token=TOKEN)

    assert session.authenticated_fetch("/api/sent-adverts") == [{"title": "x"}]
    assert fake_client.calls == [("get", "/api/sent-adverts", TOKEN)]


def test_authenticated_fetch_401_invalidates_session(fake_client):
    fake_client.queue(AuthorizationError())
    session, store = _manager(fake_client, token=TOKEN)

    with pytest.raises(SessionExpiredError):
        session.authenticated_fetch("/api/sent-adverts")

    assert session.token is None
    assert store.get() is None
    assert session.login_form.error == SESSION_EXPIRED_MESSAGE


def test_clearing_durable_slot_ends_session(fake_client):
    session, store = _manager(fake_client, token=TOKEN)
    store.remove()

    assert not session.is_authenticated
    assert session.authenticated_fetch("/api/sent-adverts") is None


def test_logout_clears_token_and_dataset(fake_client, adverts):
    state = AppState(records=list(adverts))
    session, store = _manager(fake_client, token=TOKEN, state=state)

    session.logout()

    assert session.token is None
    assert store.get() is None
    assert state.records == []

from __future__ import annotations

import threading
from unittest.mock import Mock

import pytest
import requests

from sv_advisor.core.exceptions import AuthorizationError, HttpStatusError, TransportError
from sv_advisor.services.api_client import AdvertsApiClient, encode_basic_token


def make_response(status_code=200, payload=None, json_error=False):
    resp = Mock()
    resp.status_code = status_code
    if json_error:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = payload
    return resp


def make_client(response=None, exc=None):
    session = Mock(spec=requests.Session)
    if exc is not None:
        session.get.side_effect = exc
    else:
        session.get.return_value = response
    return AdvertsApiClient(base_url="http://backend:8080/", timeout_s=5, session=session), session


def test_encode_basic_token():
    assert encode_basic_token("a", "b") == "YTpi"
    assert encode_basic_token("user", "pässword") == "dXNlcjpww6Rzc3dvcmQ="


def test_get_sends_basic_header_and_returns_json():
    client, session = make_client(make_response(payload=[{"title": "x"}]))

    assert client.get("/api/sent-adverts", "YTpi") == [{"title": "x"}]

    session.get.assert_called_once_with(
        "http://backend:8080/api/sent-adverts",
        headers={"Accept": "application/json", "Authorization": "Basic YTpi"},
        timeout=5,
    )


def test_get_without_token_sends_no_authorization_header():
    client, session = make_client(make_response(payload={}))
    client.get("api/sent-adverts")
    assert "Authorization" not in session.get.call_args.kwargs["headers"]


def test_401_raises_authorization_error():
    client, _ = make_client(make_response(status_code=401))
    with pytest.raises(AuthorizationError):
        client.get("/api/sent-adverts", "x")


def test_other_non_2xx_raises_http_status_error():
    client, _ = make_client(make_response(status_code=500))
    with pytest.raises(HttpStatusError) as err:
        client.check("/api/sent-adverts", "x")
    assert err.value.status_code == 500
    assert str(err.value) == "HTTP 500"


def test_network_failure_raises_transport_error():
    client, _ = make_client(exc=requests.ConnectionError("connection refused"))
    with pytest.raises(TransportError, match="connection refused"):
        client.get("/api/sent-adverts")


def test_check_does_not_decode_body():
    resp = make_response(json_error=True)
    client, _ = make_client(resp)
    client.check("/api/sent-adverts", "x")
    resp.json.assert_not_called()


def test_invalid_json_raises_transport_error():
    client, _ = make_client(make_response(json_error=True))
    with pytest.raises(TransportError):
        client.get("/api/sent-adverts", "x")


def test_each_thread_gets_its_own_session():
    client = AdvertsApiClient()
    seen = {}

    def grab(name):
        seen[name] = client.session

    workers = [threading.Thread(target=grab, args=(n,)) for n in ("a", "b")]
    for w in workers:
        w.start()
    for w in workers:
        w.join()

    assert isinstance(seen["a"], requests.Session)
    assert seen["a"] is not seen["b"]
    # Stable within one thread
    assert client.session is client.session


def test_injected_session_is_shared():
    client, session = make_client(make_response(payload=[]))
    assert client.session is session

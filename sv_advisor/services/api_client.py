from __future__ import annotations

import base64
import logging
import threading
from typing import Any, Optional

import requests

from sv_advisor.core.exceptions import AuthorizationError, HttpStatusError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_ADVERTS_PATH = "/api/sent-adverts"


def encode_basic_token(username: str, password: str) -> str:
    """Opaque credential for HTTP Basic auth: base64("username:password")."""
    raw = f"{username}:{password}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


class AdvertsApiClient:
    """
    Thin client for the adverts backend.

    Only knows how to GET a path with an optional Basic credential and map
    the response onto the error taxonomy; session handling lives elsewhere.

    The Flask server behind Dash answers callbacks on several threads and a
    ``requests.Session`` is not thread-safe, so each thread gets its own
    pooled session. An injected ``session`` is used as-is on every thread.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        timeout_s: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self._shared_session = session
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        if self._shared_session is not None:
            return self._shared_session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, path: str, auth_token: Optional[str]) -> requests.Response:
        headers = {"Accept": "application/json"}
        if auth_token:
            headers["Authorization"] = f"Basic {auth_token}"

        url = self._url(path)
        try:
            resp = self.session.get(url, headers=headers, timeout=self.timeout_s)
        except requests.RequestException as e:
            logger.warning("Request failed", extra={"url": url, "error": str(e)})
            raise TransportError(str(e)) from e

        if resp.status_code == 401:
            raise AuthorizationError(resp.status_code)
        if not 200 <= resp.status_code < 300:
            logger.warning("Non-2xx response", extra={"url": url, "status": resp.status_code})
            raise HttpStatusError(resp.status_code)
        return resp

    def check(self, path: str, auth_token: Optional[str] = None) -> None:
        """Issue the request only for its status; the body is not decoded."""
        self._request(path, auth_token)

    def get(self, path: str, auth_token: Optional[str] = None) -> Any:
        """Return the decoded JSON body, whatever its shape."""
        resp = self._request(path, auth_token)
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON from {path}: {e}") from e

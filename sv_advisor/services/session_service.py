from __future__ import annotations

import logging
from typing import Any, Optional

from sv_advisor.core.exceptions import (
    AuthorizationError,
    HttpStatusError,
    SessionExpiredError,
    TransportError,
)
from sv_advisor.core.state import AppState, LoginForm
from sv_advisor.services.api_client import DEFAULT_ADVERTS_PATH, AdvertsApiClient, encode_basic_token
from sv_advisor.services.storage import CredentialStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"
SESSION_EXPIRED_MESSAGE = "Session expired or unauthorized. Please log in."


def login_failed_message(status_code: int) -> str:
    return f"Login failed (HTTP {status_code})"


class SessionManager:
    """
    Holds the optional credential and gates every request behind it.

    States: unauthenticated -> authenticating (login in flight) ->
    authenticated (credential in memory and in the durable slot). Any
    authorization-denied response afterwards drops back to unauthenticated
    with a "session expired" message on the login form.
    """

    def __init__(
        self,
        client: AdvertsApiClient,
        store: CredentialStore,
        state: AppState,
        validate_path: str = DEFAULT_ADVERTS_PATH,
    ):
        self.client = client
        self.store = store
        self.state = state
        self.validate_path = validate_path

        # A credential left in the durable slot survives page reloads
        self._token: Optional[str] = store.get()

    # ---------------------------------------------------------
    # Credential
    # ---------------------------------------------------------
    @property
    def login_form(self) -> LoginForm:
        return self.state.login

    @property
    def token(self) -> Optional[str]:
        if self._token and self.store.get() != self._token:
            logger.info("Durable credential slot was cleared; dropping session")
            self._token = None
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def _clear_credential(self) -> None:
        self._token = None
        self.store.remove()

    # ---------------------------------------------------------
    # Operations
    # ---------------------------------------------------------
    def login(self, username: str, password: str) -> bool:
        """
        Validate the credential with one request against the data endpoint.
        Returns True once the session is authenticated.
        """
        form = self.login_form
        if form.loading:
            logger.info("Login already in flight; ignoring submit")
            return False

        form.username = username or ""
        form.password = password or ""
        if not form.username or not form.password:
            return False

        form.loading = True
        form.error = ""
        token = encode_basic_token(form.username, form.password)

        logger.info("Login attempt", extra={"username": form.username})
        try:
            self.client.check(self.validate_path, token)
        except AuthorizationError:
            form.error = INVALID_CREDENTIALS_MESSAGE
        except HttpStatusError as e:
            form.error = login_failed_message(e.status_code)
        except TransportError as e:
            form.error = str(e)
        else:
            self.store.set(token)
            self._token = token
            self.state.login = LoginForm()
            logger.info("Login succeeded", extra={"username": form.username})
            return True
        finally:
            form.loading = False

        logger.info("Login rejected", extra={"username": form.username, "reason": form.error})
        return False

    def authenticated_fetch(self, path: str) -> Optional[Any]:
        """
        GET ``path`` with the held credential.

        Without a credential this is a no-op returning None. A denied
        request invalidates the session and raises SessionExpiredError.
        """
        token = self.token
        if not token:
            return None

        try:
            return self.client.get(path, token)
        except AuthorizationError as e:
            self.invalidate()
            raise SessionExpiredError(e.status_code, SESSION_EXPIRED_MESSAGE) from e

    def invalidate(self) -> None:
        logger.warning("Session invalidated by authorization failure")
        self._clear_credential()
        self.login_form.error = SESSION_EXPIRED_MESSAGE

    def logout(self) -> None:
        self._clear_credential()
        self.state.records = []
        logger.info("Logged out")

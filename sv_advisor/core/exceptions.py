from __future__ import annotations

from typing import Optional


class AdvisorError(Exception):
    """Base exception for all sv_advisor errors"""
    pass


class ConfigError(AdvisorError):
    """Invalid or inconsistent global.json / environment config"""
    pass


class TransportError(AdvisorError):
    """
    The adverts endpoint could not be reached or returned an unusable body.
    Surfaced to the user as an error banner, never retried.
    """
    pass


class HttpStatusError(TransportError):
    """Non-2xx response that is not an authorization failure"""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"HTTP {status_code}")


class AuthorizationError(AdvisorError):
    """The endpoint rejected the credential (HTTP 401)"""

    def __init__(self, status_code: int = 401, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"HTTP {status_code}")


class SessionExpiredError(AuthorizationError):
    """
    Raised by the session manager once a request was denied and the held
    credential has already been cleared.
    """
    pass

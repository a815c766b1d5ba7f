from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class CredentialStore(ABC):
    """
    Durable slot for one opaque credential string (browser localStorage,
    a file on disk, ...). Only the session manager writes to it.
    """

    @abstractmethod
    def get(self) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, value: str) -> None:
        pass

    @abstractmethod
    def remove(self) -> None:
        pass


class InMemoryCredentialStore(CredentialStore):
    """
    Holds the slot value in memory. The Dash callbacks seed it from the
    browser-local store and write its final value back.
    """

    def __init__(self, value: Optional[str] = None):
        self._value = value or None

    def get(self) -> Optional[str]:
        return self._value

    def set(self, value: str) -> None:
        self._value = value or None

    def remove(self) -> None:
        self._value = None


class LocalFileCredentialStore(CredentialStore):
    """
    Keeps the credential in a single file, for running the engine outside a browser.
    """

    def __init__(self, path: Path):
        self.path = Path(path).resolve()

    def get(self) -> Optional[str]:
        if not self.path.is_file():
            return None
        value = self.path.read_text(encoding="utf-8").strip()
        return value or None

    def set(self, value: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(value, encoding="utf-8")
        try:
            self.path.chmod(0o600)
        except OSError:
            logger.warning("Could not restrict permissions on %s", self.path)

    def remove(self) -> None:
        self.path.unlink(missing_ok=True)

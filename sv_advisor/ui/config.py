from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from sv_advisor.config.model import CREDENTIAL_STORE_FILE, GlobalConfig
from sv_advisor.services.api_client import AdvertsApiClient
from sv_advisor.services.dataset_service import RequestTickets
from sv_advisor.services.storage import CredentialStore, InMemoryCredentialStore, LocalFileCredentialStore


@dataclass
class AppConfig:
    """
    Shared context for layout + callback registration: config, the API
    client and the load sequence registry every callback draws tickets from.
    Passed explicitly instead of using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    client: Optional[AdvertsApiClient] = None
    tickets: RequestTickets = field(default_factory=RequestTickets)

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.client is None:
            raise RuntimeError("AppConfig.client must be initialized.")

    def credential_store(self, browser_value: Optional[str]) -> CredentialStore:
        """
        Durable slot for one callback invocation: either the browser-local
        value from the dcc.Store, or the configured file.
        """
        cfg = self.global_config
        if cfg.credential_store == CREDENTIAL_STORE_FILE and cfg.credential_path is not None:
            return LocalFileCredentialStore(cfg.credential_path)
        return InMemoryCredentialStore(browser_value)

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sv_advisor.services.api_client import DEFAULT_ADVERTS_PATH

CREDENTIAL_STORE_BROWSER = "browser"
CREDENTIAL_STORE_FILE = "file"


@dataclass(frozen=True)
class GlobalConfig:
    """
    Parsed global.json plus environment overrides.
    """
    ui_title: str = "StandVirtual Advisor"
    subtitle: str = "Sent adverts explorer"
    api_base_url: str = "http://localhost:8080"
    adverts_path: str = DEFAULT_ADVERTS_PATH
    request_timeout_s: float = 15.0
    display_timezone: str = "Europe/Lisbon"

    # "browser": localStorage via dcc.Store; "file": credential_path on disk
    credential_store: str = CREDENTIAL_STORE_BROWSER
    credential_path: Optional[Path] = None

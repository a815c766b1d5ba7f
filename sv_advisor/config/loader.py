from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from sv_advisor.config.model import CREDENTIAL_STORE_BROWSER, CREDENTIAL_STORE_FILE, GlobalConfig
from sv_advisor.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_API_BASE_URL = "SV_ADVISOR_API_BASE_URL"
ENV_ADVERTS_PATH = "SV_ADVISOR_ADVERTS_PATH"
ENV_TIMEOUT_S = "SV_ADVISOR_TIMEOUT_S"


def _read_global_json(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        logger.warning(f"global.json not found at {path}; using defaults")
        return {}

    try:
        with path.open() as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return raw


def _timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"request_timeout_s must be a number, got {value!r}") from e
    if timeout <= 0:
        raise ConfigError("request_timeout_s must be greater than 0")
    return timeout


def load_global_config(root: Path, env: Optional[Dict[str, str]] = None) -> GlobalConfig:
    """
    Load configuration from ``root/global.json`` and apply env overrides.
    """
    root = Path(root)
    env = os.environ if env is None else env
    logger.info("Loading global config", extra={"config_root": str(root)})

    raw = _read_global_json(root / "global.json")
    defaults = GlobalConfig()

    store_kind = raw.get("credential_store", defaults.credential_store)
    if store_kind not in (CREDENTIAL_STORE_BROWSER, CREDENTIAL_STORE_FILE):
        raise ConfigError(f"Unknown credential_store '{store_kind}'")

    # Resolve credential_path relative to the config root
    cred_raw = raw.get("credential_path")
    credential_path = Path(cred_raw) if cred_raw else None
    if credential_path and not credential_path.is_absolute():
        credential_path = (root / credential_path).resolve()
    if store_kind == CREDENTIAL_STORE_FILE and credential_path is None:
        credential_path = (root / ".credential").resolve()

    return GlobalConfig(
        ui_title=raw.get("ui_title", defaults.ui_title),
        subtitle=raw.get("subtitle", defaults.subtitle),
        api_base_url=env.get(ENV_API_BASE_URL) or raw.get("api_base_url", defaults.api_base_url),
        adverts_path=env.get(ENV_ADVERTS_PATH) or raw.get("adverts_path", defaults.adverts_path),
        request_timeout_s=_timeout(env.get(ENV_TIMEOUT_S) or raw.get("request_timeout_s", defaults.request_timeout_s)),
        display_timezone=raw.get("display_timezone", defaults.display_timezone),
        credential_store=store_kind,
        credential_path=credential_path,
    )

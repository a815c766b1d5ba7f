from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from sv_advisor.config.loader import load_global_config
from sv_advisor.services.api_client import AdvertsApiClient
from sv_advisor.ui.callbacks.callbacks_render import register_render_callbacks
from sv_advisor.ui.callbacks.callbacks_session import register_session_callbacks
from sv_advisor.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Service Layer
    client = AdvertsApiClient(
        base_url=global_config.api_base_url,
        timeout_s=global_config.request_timeout_s,
    )

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        client=client,
    )
    ctx.validate()

    logger.info(
        "Creating dash app",
        extra={
            "api_base_url": global_config.api_base_url,
            "credential_store": global_config.credential_store,
        },
    )

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_session_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    return app

from __future__ import annotations

import json

import pytest

from sv_advisor.config.loader import load_global_config
from sv_advisor.config.model import GlobalConfig
from sv_advisor.core.exceptions import ConfigError


def _write(root, data):
    (root / "global.json").write_text(json.dumps(data))


def test_missing_global_json_uses_defaults(tmp_path):
    cfg = load_global_config(tmp_path, env={})
    assert cfg == GlobalConfig()


def test_values_from_global_json(tmp_path):
    _write(
        tmp_path,
        {
            "ui_title": "Adverts",
            "api_base_url": "http://api:9000",
            "adverts_path": "/v2/adverts",
            "request_timeout_s": 3,
            "credential_store": "file",
            "credential_path": "secrets/token",
        },
    )

    cfg = load_global_config(tmp_path, env={})

    assert cfg.ui_title == "Adverts"
    assert cfg.api_base_url == "http://api:9000"
    assert cfg.adverts_path == "/v2/adverts"
    assert cfg.request_timeout_s == 3.0
    assert cfg.credential_store == "file"
    assert cfg.credential_path == (tmp_path / "secrets" / "token").resolve()


def test_env_overrides_file(tmp_path):
    _write(tmp_path, {"api_base_url": "http://api:9000"})
    env = {"SV_ADVISOR_API_BASE_URL": "http://other:1", "SV_ADVISOR_TIMEOUT_S": "2.5"}

    cfg = load_global_config(tmp_path, env=env)

    assert cfg.api_base_url == "http://other:1"
    assert cfg.request_timeout_s == 2.5


def test_file_store_defaults_path_under_config_root(tmp_path):
    _write(tmp_path, {"credential_store": "file"})
    cfg = load_global_config(tmp_path, env={})
    assert cfg.credential_path == (tmp_path / ".credential").resolve()


@pytest.mark.parametrize(
    "data",
    [
        {"request_timeout_s": 0},
        {"request_timeout_s": "soon"},
        {"credential_store": "cookie"},
        ["not", "an", "object"],
    ],
)
def test_invalid_config_raises(tmp_path, data):
    _write(tmp_path, data)
    with pytest.raises(ConfigError):
        load_global_config(tmp_path, env={})


def test_malformed_json_raises(tmp_path):
    (tmp_path / "global.json").write_text("{not json")
    with pytest.raises(ConfigError):
        load_global_config(tmp_path, env={})

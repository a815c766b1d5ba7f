from __future__ import annotations

import json

from sv_advisor.ui.dash_app import create_dash_app


def test_create_dash_app_registers_layout_and_callbacks(tmp_path):
    (tmp_path / "global.json").write_text(json.dumps({"ui_title": "Test Advisor"}))

    app = create_dash_app(tmp_path)

    assert app.title == "Test Advisor"
    assert app.layout is not None
    outputs = " ".join(app.callback_map.keys())
    assert "auth-token.data" in outputs
    assert "adverts-table-body.children" in outputs
    assert "sort-state.data" in outputs

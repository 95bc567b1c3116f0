from __future__ import annotations

import json

import dash

from csv_plotter.ui.dash_app import create_dash_app


def test_create_dash_app_from_config_dir(tmp_path):
    (tmp_path / "global.json").write_text(json.dumps({"ui_title": "Plot Test"}))

    app = create_dash_app(tmp_path)

    assert isinstance(app, dash.Dash)
    assert app.title == "Plot Test"
    assert callable(app.layout)


def test_each_page_load_gets_its_own_session(tmp_path):
    (tmp_path / "global.json").write_text(json.dumps({}))
    app = create_dash_app(tmp_path)

    first, second = app.layout(), app.layout()

    def _session_id(layout):
        return next(c for c in layout.children if getattr(c, "id", None) == "session-id").data

    assert _session_id(first) != _session_id(second)

from __future__ import annotations

import base64
from dataclasses import replace

import dash
import pytest

from csv_plotter.config.model import AppSettings
from csv_plotter.core.state import ChartKind, TickStrategy
from csv_plotter.ui.callbacks import callbacks_events as events
from csv_plotter.ui.callbacks.callbacks_events import (
    apply_control_event,
    handle_upload,
    sync_checked_columns,
)
from csv_plotter.ui.callbacks.callbacks_render import render_model
from csv_plotter.ui.dash_app import build_context
from csv_plotter.ui.ids import IDs

CSV = b"Year,Sales,Units\n2020,90,3\n2021,120,5\n2022,150,4\n"


def _data_url(payload: bytes) -> str:
    return "data:text/csv;base64," + base64.b64encode(payload).decode("ascii")


def _status_text(span) -> str:
    return span.children[1]


@pytest.fixture()
def ctx(tmp_path):
    return build_context(tmp_path, AppSettings())


@pytest.fixture()
def model(ctx):
    return ctx.sessions.get_or_create("session-1")


def test_upload_loads_dataset(ctx, model):
    status = handle_upload(ctx, model, _data_url(CSV), "sales.csv")

    assert "cp-status-ok" in status.className
    assert _status_text(status) == "Loaded 'sales.csv': 3 rows · 3 columns."
    assert model.dataset.name == "sales"
    assert model.state.selected_columns == ("Sales",)


def test_upload_rejects_non_csv_and_keeps_data(ctx, model):
    handle_upload(ctx, model, _data_url(CSV), "sales.csv")
    dataset = model.dataset

    status = handle_upload(ctx, model, _data_url(CSV), "sales.xlsx")

    assert "cp-status-error" in status.className
    assert model.dataset is dataset


def test_upload_rejects_oversized_file(tmp_path):
    ctx = build_context(tmp_path, replace(AppSettings(), max_upload_bytes=10))
    model = ctx.sessions.get_or_create("s")

    status = handle_upload(ctx, model, _data_url(CSV), "sales.csv")

    assert "exceeds" in _status_text(status)
    assert model.dataset is None


def test_upload_corrupt_payload(ctx, model):
    status = handle_upload(ctx, model, "data:text/csv;base64,%%%", "sales.csv")

    assert "corrupted" in _status_text(status)


def test_upload_header_only_clears_previous_dataset(ctx, model):
    handle_upload(ctx, model, _data_url(CSV), "sales.csv")

    status = handle_upload(ctx, model, _data_url(b"Year,Sales\n"), "empty.csv")

    assert "cp-status-error" in status.className
    assert "no data rows" in _status_text(status)
    assert model.dataset is None


def test_upload_result_superseded_by_newer_upload(ctx, model, monkeypatch):
    # a second upload starts while this one is being parsed
    real_parse = events.parse_csv

    def _slow_parse(data):
        model.begin_upload()
        return real_parse(data)

    monkeypatch.setattr(events, "parse_csv", _slow_parse)

    assert handle_upload(ctx, model, _data_url(CSV), "sales.csv") is dash.no_update
    assert model.dataset is None


def test_sync_checked_columns_toggles_differences(ctx, model):
    handle_upload(ctx, model, _data_url(CSV), "sales.csv")

    sync_checked_columns(model, ["Sales", "Units"])
    assert model.state.selected_columns == ("Sales", "Units")

    sync_checked_columns(model, ["Units"])
    assert model.state.selected_columns == ("Units",)

    sync_checked_columns(model, None)
    assert model.state.selected_columns == ()


def test_apply_control_events(ctx, model):
    handle_upload(ctx, model, _data_url(CSV), "sales.csv")

    apply_control_event(model, IDs.Control.CHART_KIND_SELECT, {"chart_kind": "bar"})
    apply_control_event(model, IDs.Control.TICK_STRATEGY_SELECT, {"tick_strategy": "sparse"})
    apply_control_event(model, IDs.Control.THEME_TOGGLE, {})

    assert model.state.chart_kind is ChartKind.BAR
    assert model.state.tick_strategy is TickStrategy.SPARSE
    assert model.state.dark_mode is True

    apply_control_event(model, IDs.Control.ZOOM_OUT_BTN, {})
    assert model.state.zoom.is_full

    apply_control_event(model, "unknown-id", {})
    assert model.state.chart_kind is ChartKind.BAR


def test_render_model_returns_figure_and_message(ctx, model):
    handle_upload(ctx, model, _data_url(CSV), "sales.csv")

    fig, message = render_model(ctx, model)
    assert len(fig.data) == 1
    assert message == ""

    model.toggle_column("Sales")
    fig, message = render_model(ctx, model)
    assert len(fig.data) == 0
    assert message == "Select at least one column to plot."


def test_render_model_never_raises(ctx, model, monkeypatch):
    handle_upload(ctx, model, _data_url(CSV), "sales.csv")

    def _boom(*args, **kwargs):
        raise RuntimeError("renderer exploded")

    monkeypatch.setattr(ctx.registry, "create", _boom)

    fig, message = render_model(ctx, model)

    assert "Something went wrong" in fig.layout.annotations[0].text
    assert message == ""

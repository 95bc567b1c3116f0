from __future__ import annotations

import pytest

from csv_plotter.core import state as transitions
from csv_plotter.core.dataset import ingest_rows
from csv_plotter.core.state import ChartKind, TickStrategy, ViewState
from csv_plotter.core.zoom import ZoomWindow


def _make_dataset(headers=("Month", "Revenue", "Cost"), n_rows: int = 8):
    rows = [{h: str(i) for h in headers} for i in range(n_rows)]
    return ingest_rows(rows, headers)


def test_loaded_selects_second_header_and_resets_controls():
    ds = _make_dataset()
    previous = ViewState(
        selected_columns=("Other",),
        chart_kind=ChartKind.PIE,
        tick_strategy=TickStrategy.NONE,
        dark_mode=True,
        message="old error",
    )

    st = transitions.loaded(previous, ds)

    assert st.dataset_id == ds.dataset_id
    assert st.headers == ("Month", "Revenue", "Cost")
    assert st.selected_columns == ("Revenue",)
    assert st.chart_kind is ChartKind.LINE
    assert st.tick_strategy is TickStrategy.AUTO
    assert st.zoom == ZoomWindow.full(8)
    assert st.dark_mode is True
    assert st.message is None


def test_loaded_single_column_dataset_selects_nothing():
    ds = _make_dataset(headers=("OnlyX",))

    st = transitions.loaded(ViewState(), ds)

    assert st.selected_columns == ()


def test_toggle_column_appends_and_removes():
    st = ViewState(headers=("x", "a", "b"), selected_columns=("a",))

    st = transitions.toggle_column(st, "b")
    assert st.selected_columns == ("a", "b")

    st = transitions.toggle_column(st, "a")
    assert st.selected_columns == ("b",)

    st = transitions.toggle_column(st, "b")
    assert st.selected_columns == ()


def test_chart_kind_and_tick_strategy_accept_strings():
    st = transitions.set_chart_kind(ViewState(), "pie")
    st = transitions.set_tick_strategy(st, "sampled")

    assert st.chart_kind is ChartKind.PIE
    assert st.tick_strategy is TickStrategy.SAMPLED

    with pytest.raises(ValueError):
        transitions.set_chart_kind(st, "radar")


def test_zoom_transitions_without_dataset_are_no_ops():
    st = ViewState()

    assert transitions.zoom_in(st) is st
    assert transitions.zoom_out(st) is st
    assert transitions.reset_zoom(st) is st


def test_zoom_transitions_update_window():
    st = transitions.loaded(ViewState(), _make_dataset(n_rows=10))

    zoomed = transitions.zoom_in(st)
    assert (zoomed.zoom.start, zoomed.zoom.end) == (3, 6)

    assert transitions.reset_zoom(zoomed).zoom == ZoomWindow.full(10)


def test_cleared_keeps_dark_mode_only():
    st = transitions.loaded(ViewState(dark_mode=True), _make_dataset())

    cleared = transitions.cleared(st, "The file contains no data rows.")

    assert not cleared.has_data
    assert cleared.selected_columns == ()
    assert cleared.dark_mode is True
    assert cleared.message == "The file contains no data rows."


def test_toggle_dark_mode_flips():
    st = transitions.toggle_dark_mode(ViewState())
    assert st.dark_mode is True
    assert transitions.toggle_dark_mode(st).dark_mode is False


def test_view_state_to_from_dict_roundtrip():
    st = ViewState(
        dataset_id="abc",
        headers=("x", "a", "b"),
        selected_columns=("b", "a"),
        chart_kind=ChartKind.BAR,
        tick_strategy=TickStrategy.SPARSE,
        zoom=ZoomWindow.full(20).zoom_in(),
        dark_mode=True,
        message="hello",
    )

    raw = st.to_dict()
    rebuilt = ViewState.from_dict(raw)

    assert rebuilt == st
    assert raw["chart_kind"] == "bar"
    assert raw["selected_columns"] == ["b", "a"]

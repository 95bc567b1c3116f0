from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output, State

from csv_plotter.core.state import ViewState
from csv_plotter.services.environment import theme_for
from csv_plotter.ui.helpers import preview_table, zoom_summary
from csv_plotter.ui.ids import IDs

if TYPE_CHECKING:
    from csv_plotter.ui.config import AppConfig

logger = logging.getLogger(__name__)

PREVIEW_ROWS = 10


def register_display_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Theme (pure reflection of ViewState.dark_mode)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.ROOT, "className"),
        Output(IDs.Control.THEME_TOGGLE, "children"),
        Input(IDs.Store.VIEW_STATE, "data"),
    )
    def update_theme(vs_data: dict[str, Any] | None):
        dark = bool(vs_data and vs_data.get("dark_mode"))
        theme = theme_for(dark)
        return theme.root_class, theme.toggle_label

    # ---------------------------------------------------------
    # Controls visibility + zoom affordances
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.CONTROLS_CONTAINER, "style"),
        Output(IDs.Control.ZOOM_IN_BTN, "disabled"),
        Output(IDs.Control.ZOOM_OUT_BTN, "disabled"),
        Output(IDs.Control.ZOOM_RESET_BTN, "disabled"),
        Output(IDs.Control.ZOOM_SUMMARY, "children"),
        Output(IDs.Control.EXPORT_BTN, "disabled"),
        Output(IDs.Control.EXPORT_FULL_BTN, "disabled"),
        Input(IDs.Store.VIEW_STATE, "data"),
        State(IDs.Store.SESSION_ID, "data"),
    )
    def update_controls(vs_data: dict[str, Any] | None, session_id: str | None):
        model = ctx.sessions.get(session_id) if session_id else None
        if not vs_data or model is None or model.dataset is None:
            return {"display": "none"}, True, True, True, "", True, True

        state = ViewState.from_dict(vs_data)
        no_export = not state.selected_columns
        return (
            {},
            not model.can_zoom_in,
            not model.can_zoom_out,
            not model.can_zoom_out,
            zoom_summary(model),
            no_export,
            no_export,
        )

    # ---------------------------------------------------------
    # Dataset preview
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.PREVIEW_CONTAINER, "children"),
        Output(IDs.Control.PREVIEW_SUMMARY, "children"),
        Input(IDs.Store.VIEW_STATE, "data"),
        State(IDs.Store.SESSION_ID, "data"),
    )
    def update_preview(vs_data: dict[str, Any] | None, session_id: str | None):
        model = ctx.sessions.get(session_id) if session_id else None
        ds = model.dataset if model is not None else None
        if ds is None:
            return None, "No data loaded."

        summary = f"{ds.name}: {len(ds)} rows · {len(ds.headers)} columns (showing first {min(PREVIEW_ROWS, len(ds))})"
        return preview_table(ds, max_rows=PREVIEW_ROWS), summary

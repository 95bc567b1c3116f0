from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from csv_plotter.core.exceptions import ExportError
from csv_plotter.ui.ids import IDs

if TYPE_CHECKING:
    from csv_plotter.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_export_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # PNG export: current view (chart.png) or full data (full_chart.png)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_PNG, "data"),
        Output(IDs.Control.EXPORT_STATUS, "children"),
        Input(IDs.Control.EXPORT_BTN, "n_clicks"),
        Input(IDs.Control.EXPORT_FULL_BTN, "n_clicks"),
        State(IDs.Store.SESSION_ID, "data"),
        prevent_initial_call=True,
    )
    def export_png(_n_current, _n_full, session_id):
        model = ctx.sessions.get(session_id) if session_id else None
        if model is None or model.dataset is None:
            raise dash.exceptions.PreventUpdate

        full_view = dash.ctx.triggered_id == IDs.Control.EXPORT_FULL_BTN
        try:
            payload = ctx.export_service.export(model, full_view=full_view)
        except ExportError as e:
            return dash.no_update, str(e)

        return payload, ""

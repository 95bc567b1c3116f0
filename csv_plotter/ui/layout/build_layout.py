from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from csv_plotter.ui.layout.build_controls_panel import build_controls_panel
from csv_plotter.ui.layout.build_navbar import build_navbar
from csv_plotter.ui.layout.build_plot_panel import build_plot_panel
from csv_plotter.ui.layout.build_preview_panel import build_preview_panel
from csv_plotter.ui.layout.build_upload_panel import build_upload_panel

if TYPE_CHECKING:
    from csv_plotter.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    """
    Called per page load (Dash accepts a layout function), so every browser
    tab gets its own session id and therefore its own view model.
    """
    return html.Div(
        id="app-root",
        className="cp-root",
        children=[
            build_navbar(ctx.settings),

            dcc.Store(id="session-id", storage_type="memory", data=uuid.uuid4().hex),
            dcc.Store(id="view-state", storage_type="memory"),

            dbc.Container(
                fluid=True,
                children=[
                    dbc.Row(
                        [
                            dbc.Col(
                                [
                                    build_upload_panel(),
                                    build_controls_panel(ctx.registry),
                                ],
                                md=3,
                                className="mt-3",
                            ),
                            dbc.Col(
                                [
                                    build_plot_panel(ctx.settings),
                                    build_preview_panel(),
                                ],
                                md=9,
                                className="mt-3",
                            ),
                        ],
                        className="gx-3",
                    ),
                ],
            ),
        ],
    )

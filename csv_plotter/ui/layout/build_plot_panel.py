from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from csv_plotter.config.model import AppSettings


def build_plot_panel(settings: AppSettings) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Plot"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    html.Div(id="chart-message", className="cp-chart-message"),
                    dcc.Loading(
                        id="main-graph-loading",
                        type="default",
                        children=dcc.Graph(
                            id="main-graph",
                            style={"height": f"{settings.chart_height}px"},
                            config={
                                "responsive": True,
                                "toImageButtonOptions": {"format": "png", "filename": "chart"},
                            },
                        ),
                    ),
                    html.Div(
                        [
                            html.Div(id="export-status", className="text-muted small me-auto"),
                            dbc.Button(
                                "Export PNG",
                                id="export-btn",
                                color="secondary",
                                size="sm",
                                className="mt-2 me-2",
                            ),
                            dbc.Button(
                                "Export full chart",
                                id="export-full-btn",
                                color="secondary",
                                outline=True,
                                size="sm",
                                className="mt-2",
                            ),
                            dcc.Download(id="download-png"),
                        ],
                        className="d-flex justify-content-end align-items-center",
                    ),
                ],
                className="cp-main-body",
            ),
        ],
        className="cp-maincard",
    )

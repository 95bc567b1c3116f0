from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from csv_plotter.core.state import ChartKind, TickStrategy
from csv_plotter.views.view_registry import ViewRegistry

TICK_STRATEGY_LABELS = {
    TickStrategy.AUTO: "Automatic spacing",
    TickStrategy.SPARSE: "Sparse labels",
    TickStrategy.SAMPLED: "Sampled",
    TickStrategy.NONE: "No labels",
}


def build_controls_panel(registry: ViewRegistry) -> dbc.Card:
    chart_options = [{"label": cls.label, "value": cls.id} for cls in registry.all_classes()]
    tick_options = [{"label": label, "value": s.value} for s, label in TICK_STRATEGY_LABELS.items()]

    return dbc.Card(
        [
            dbc.CardHeader("Chart", className="fw-semibold"),
            dbc.CardBody(
                [
                    # ------------------------------
                    # 1) Chart kind
                    # ------------------------------
                    html.Div(
                        [
                            html.Label("Chart type", className="form-label"),
                            dcc.Dropdown(
                                id="chart-kind-select",
                                options=chart_options,
                                value=ChartKind.LINE.value,
                                clearable=False,
                            ),
                        ],
                        className="mb-3",
                    ),
                    # ------------------------------
                    # 2) Y columns
                    # ------------------------------
                    html.Div(
                        [
                            html.Label("Select columns to plot", className="form-label"),
                            dcc.Checklist(
                                id="column-checklist",
                                options=[],
                                value=[],
                                inputClassName="me-1",
                                labelClassName="me-3",
                            ),
                        ],
                        className="mb-3",
                    ),
                    # ------------------------------
                    # 3) X-axis labels
                    # ------------------------------
                    html.Div(
                        [
                            html.Label("X-axis labels", className="form-label"),
                            dcc.Dropdown(
                                id="tick-strategy-select",
                                options=tick_options,
                                value=TickStrategy.AUTO.value,
                                clearable=False,
                            ),
                        ],
                        className="mb-3",
                    ),
                    # ------------------------------
                    # 4) Zoom
                    # ------------------------------
                    html.Div(
                        [
                            html.Label("Zoom", className="form-label d-block"),
                            dbc.ButtonGroup(
                                [
                                    dbc.Button("Zoom in", id="zoom-in-btn", n_clicks=0, size="sm", outline=True),
                                    dbc.Button("Zoom out", id="zoom-out-btn", n_clicks=0, size="sm", outline=True),
                                    dbc.Button("Reset", id="zoom-reset-btn", n_clicks=0, size="sm", outline=True),
                                ],
                            ),
                            html.Div(id="zoom-summary", className="text-muted small mt-1"),
                        ],
                    ),
                ]
            ),
        ],
        id="controls-container",
        className="cp-controls-card",
        style={"display": "none"},
    )

from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html


def build_preview_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Data preview", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div(id="preview-summary", className="text-muted small mb-2"),
                    html.Div(id="preview-container"),
                ]
            ),
        ],
        className="cp-preview-card mt-3",
    )

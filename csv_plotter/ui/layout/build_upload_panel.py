from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html


def build_upload_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Data", className="fw-semibold"),
            dbc.CardBody(
                [
                    dcc.Upload(
                        id="csv-upload",
                        accept=".csv",
                        multiple=False,
                        children=html.Div(
                            [
                                "Drag and drop or ",
                                html.A("select a CSV file"),
                            ]
                        ),
                        className="cp-upload",
                    ),
                    html.Small(
                        "The first row must be the header. The first column becomes the X axis.",
                        className="text-muted",
                    ),
                    html.Div(id="upload-status", className="mt-2"),
                ]
            ),
        ],
        className="cp-upload-card mb-3",
    )

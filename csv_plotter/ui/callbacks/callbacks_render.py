from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
import plotly.graph_objs as go
from dash import Input, Output, State

from csv_plotter.core.view_model import DataViewModel
from csv_plotter.ui.ids import IDs

if TYPE_CHECKING:
    from csv_plotter.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this chart.", details)


def render_model(ctx: AppConfig, model: DataViewModel) -> Tuple[go.Figure, str]:
    """
    Current view of the model as (figure, inline message).

    Never raises: unexpected errors are logged and shown as an error figure.
    """
    try:
        view = ctx.registry.create(model.state.chart_kind.value, ctx.settings)
        chart = view.compute_data(model)

        logger.info(
            "render_start",
            extra={
                "chart_kind": chart.kind.value,
                "n_series": len(chart.series),
                "n_slices": len(chart.slices),
                "sampled": chart.sampled,
            },
        )

        return view.render_figure(chart), chart.message or ""
    except Exception:
        logger.exception(
            "Error while rendering chart",
            extra={"view_state": model.state.to_dict()},
        )
        return _error_figure(
            "The app hit an unexpected error. "
            "If this keeps happening, grab the logs and open an issue."
        ), ""


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Main figure: ViewState -> figure
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Output(IDs.Control.CHART_MESSAGE, "children"),
        Input(IDs.Store.VIEW_STATE, "data"),
        State(IDs.Store.SESSION_ID, "data"),
    )
    def update_main_graph_from_state(vs_data: dict[str, Any] | None, session_id: str | None):
        model = ctx.sessions.get(session_id) if session_id else None
        if vs_data is None or model is None or model.dataset is None:
            return _message_figure(
                "No data loaded.",
                "Upload a CSV file to see a chart.",
            ), ""

        return render_model(ctx, model)

from __future__ import annotations

import plotly.graph_objs as go

from csv_plotter.core.chart_spec import SeriesSpec, XAxisSpec
from csv_plotter.views.cartesian_view import CartesianView


class AreaView(CartesianView):
    """
    Filled area per selected column. Each column keeps its own Y axis, so the
    areas are filled to zero rather than stacked.
    """

    id = "area"
    label = "Area Chart"

    def make_trace(self, series: SeriesSpec, x_axis: XAxisSpec) -> go.Scatter:
        return go.Scatter(
            mode="lines",
            fill="tozeroy",
            line=dict(color=series.color),
            fillcolor=series.color,
            opacity=0.6,
            **self.trace_kwargs(series, x_axis),
        )

from __future__ import annotations

import plotly.graph_objs as go

from csv_plotter.core.chart_spec import SeriesSpec, XAxisSpec
from csv_plotter.views.cartesian_view import CartesianView


class LineView(CartesianView):
    """
    One smoothed line per selected column
    """

    id = "line"
    label = "Line Chart"

    def make_trace(self, series: SeriesSpec, x_axis: XAxisSpec) -> go.Scatter:
        return go.Scatter(
            mode="lines",
            line=dict(color=series.color, shape="spline"),
            connectgaps=False,
            **self.trace_kwargs(series, x_axis),
        )

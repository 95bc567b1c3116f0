from __future__ import annotations

import plotly.graph_objs as go

from csv_plotter.core.chart_spec import SeriesSpec, XAxisSpec
from csv_plotter.views.cartesian_view import CartesianView


class ScatterView(CartesianView):
    """
    Markers only; hover picks the nearest point instead of the whole row
    """

    id = "scatter"
    label = "Scatter Chart"
    unified_hover = False

    def make_trace(self, series: SeriesSpec, x_axis: XAxisSpec) -> go.Scatter:
        return go.Scatter(
            mode="markers",
            marker=dict(color=series.color, size=7),
            **self.trace_kwargs(series, x_axis),
        )

from __future__ import annotations

import plotly.graph_objs as go

from csv_plotter.core.chart_spec import ChartDescription, SeriesSpec, XAxisSpec
from csv_plotter.views.cartesian_view import CartesianView


class BarView(CartesianView):
    """
    Grouped bars, one colour per selected column
    """

    id = "bar"
    label = "Bar Chart"

    def make_trace(self, series: SeriesSpec, x_axis: XAxisSpec) -> go.Bar:
        # Bars on overlaid axes share the x slot; offsetgroup keeps them side by side
        return go.Bar(
            marker=dict(color=series.color),
            offsetgroup=str(series.axis_index),
            **self.trace_kwargs(series, x_axis),
        )

    def render_figure(self, chart: ChartDescription) -> go.Figure:
        fig = super().render_figure(chart)
        if chart.series:
            fig.update_layout(barmode="group")
        return fig

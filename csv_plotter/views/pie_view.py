from __future__ import annotations

import plotly.graph_objs as go

from csv_plotter.core.chart_spec import ChartDescription
from csv_plotter.core.formatting import format_value
from csv_plotter.views.base_view import BaseView


class PieView(BaseView):
    """
    Pie of column totals: one slice per selected column with a positive sum.
    Zoom does not apply; the totals always cover every row.
    """

    id = "pie"
    label = "Pie Chart"

    def render_figure(self, chart: ChartDescription) -> go.Figure:
        if chart.message or not chart.slices:
            return self.empty_figure(chart.message or "No data to display.", chart.dark_mode)

        labels = [s.name for s in chart.slices]
        values = [s.value for s in chart.slices]

        fig = go.Figure(
            go.Pie(
                labels=labels,
                values=values,
                marker=dict(colors=[s.color for s in chart.slices]),
                text=[format_value(v) for v in values],
                textinfo="label+percent",
                hovertemplate="%{label}: %{text}<extra></extra>",
                sort=False,
            )
        )
        self.base_layout(fig, chart)
        fig.update_layout(title=chart.title)
        return fig

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Dict

import plotly.graph_objs as go
from plotly.basedatatypes import BaseTraceType

from csv_plotter.core.chart_spec import ChartDescription, SeriesSpec, XAxisSpec
from csv_plotter.views.base_view import BaseView

HOVER_TEMPLATE = "%{customdata}<br>%{fullData.name}: %{text}<extra></extra>"


def yaxis_ref(axis_index: int) -> str:
    """Trace-side axis reference: 'y', 'y2', 'y3', ..."""
    return "y" if axis_index == 0 else f"y{axis_index + 1}"


def yaxis_layout_key(axis_index: int) -> str:
    """Layout-side axis key: 'yaxis', 'yaxis2', ..."""
    return "yaxis" if axis_index == 0 else f"yaxis{axis_index + 1}"


class CartesianView(BaseView):
    """
    Shared rendering for line/bar/area/scatter.

    - X: one point per row, placed at the original row index; labels come
      from the description's tick positions/labels
    - Y: one axis per selected column, alternating left/right, coloured like
      its series, ranged to the column's padded domain
    """

    unified_hover: bool = True

    def render_figure(self, chart: ChartDescription) -> go.Figure:
        if chart.message or not chart.series:
            return self.empty_figure(chart.message or "No data to display.", chart.dark_mode)

        fig = go.Figure()
        for series in chart.series:
            fig.add_trace(self.make_trace(series, chart.x_axis))

        self.base_layout(fig, chart)
        fig.update_layout(
            title=chart.title,
            xaxis=self._x_axis_layout(chart),
            margin=dict(l=60, r=60, t=60, b=chart.x_axis.tick_config.axis_height),
            hovermode="x unified" if self.unified_hover else "closest",
        )
        fig.update_layout({yaxis_layout_key(s.axis_index): self._y_axis_layout(s) for s in chart.series})
        return fig

    @abstractmethod
    def make_trace(self, series: SeriesSpec, x_axis: XAxisSpec) -> BaseTraceType:
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def trace_kwargs(series: SeriesSpec, x_axis: XAxisSpec) -> Dict[str, Any]:
        return dict(
            x=list(series.x_positions),
            y=list(series.values),
            name=series.column,
            yaxis=yaxis_ref(series.axis_index),
            text=list(series.hover_labels),
            customdata=list(x_axis.point_labels),
            hovertemplate=HOVER_TEMPLATE,
        )

    @staticmethod
    def _x_axis_layout(chart: ChartDescription) -> Dict[str, Any]:
        x_axis = chart.x_axis
        layout: Dict[str, Any] = dict(
            title=dict(text=x_axis.label),
            tickmode="array",
            tickvals=list(x_axis.tick_positions),
            ticktext=list(x_axis.tick_labels),
            showticklabels=x_axis.tick_config.show_labels,
            showgrid=True,
        )
        if chart.window is not None:
            layout["range"] = [chart.window.start - 0.5, chart.window.end + 0.5]
        return layout

    @staticmethod
    def _y_axis_layout(series: SeriesSpec) -> Dict[str, Any]:
        layout: Dict[str, Any] = dict(
            title=dict(text=series.column, font=dict(color=series.color)),
            tickfont=dict(color=series.color),
            side=series.side,
            showgrid=series.axis_index == 0,
        )
        lo, hi = series.domain
        if lo < hi:
            layout["range"] = [lo, hi]
        if series.axis_index > 0:
            layout.update(overlaying="y", anchor="free", autoshift=True)
        return layout

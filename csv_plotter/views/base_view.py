from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import plotly.graph_objs as go

from csv_plotter.core.chart_spec import ChartDescription
from csv_plotter.services.environment import theme_for

if TYPE_CHECKING:
    from csv_plotter.config.model import AppSettings
    from csv_plotter.core.view_model import DataViewModel


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - the ChartKind value it renders
    - expose a 'label' - used for UI/human-readable applications
    - 'compute_data' - the backend-agnostic ChartDescription for the current state
    - implement 'render_figure' - turn that description into a Plotly figure
    """

    id: str = None
    label: str = None

    def __init__(self, settings: AppSettings):
        self.settings = settings

    def compute_data(self, model: DataViewModel, full_view: bool = False) -> ChartDescription:
        """
        :param model: the session's view model
        :param full_view: ignore zoom and draw the whole dataset (used by full export)
        :return: the chart description derived from the model's current state
        """
        return model.describe(full_view=full_view)

    @abstractmethod
    def render_figure(self, chart: ChartDescription) -> go.Figure:
        """
        Render the figure for a chart description
        :param chart: the description produced by {@link compute_data()}
        :return: the Plotly figure
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def base_layout(self, fig: go.Figure, chart: ChartDescription) -> go.Figure:
        theme = theme_for(chart.dark_mode)
        fig.update_layout(
            template=theme.plotly_template,
            height=self.settings.chart_height,
            margin=dict(l=40, r=40, t=40, b=40),
            legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0),
        )
        return fig

    def empty_figure(self, message: str, dark_mode: bool = False) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.add_annotation(
            text=message,
            showarrow=False,
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
        )
        fig.update_layout(
            template=theme_for(dark_mode).plotly_template,
            height=self.settings.chart_height,
            xaxis={"visible": False},
            yaxis={"visible": False},
            margin=dict(l=40, r=40, t=40, b=40),
        )
        return fig

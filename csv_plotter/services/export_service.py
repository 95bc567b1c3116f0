from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import plotly.graph_objs as go

from csv_plotter.core.exceptions import ExportError
from csv_plotter.core.view_model import DataViewModel, ExportRequest
from csv_plotter.services.environment import EnvironmentAdapter
from csv_plotter.views.view_registry import ViewRegistry

if TYPE_CHECKING:
    from csv_plotter.config.model import AppSettings

logger = logging.getLogger(__name__)


class ExportService:
    """
    Renders a view-model snapshot to PNG and hands it to the environment.

    'chart.png' is the current (possibly zoomed) view; 'full_chart.png' is the
    un-zoomed view of the whole dataset.
    """

    def __init__(
            self,
            *,
            view_registry: ViewRegistry,
            settings: AppSettings,
            environment: EnvironmentAdapter,
    ) -> None:
        self._view_registry = view_registry
        self._settings = settings
        self._environment = environment

    def render_figure(self, request: ExportRequest) -> go.Figure:
        """Renders a Plotly figure object from an ExportRequest."""
        view = self._view_registry.create(request.chart.kind.value, self._settings)
        return view.render_figure(request.chart)

    def render_png(self, request: ExportRequest) -> bytes:
        """
        :raises ExportError: if the chart has nothing to draw or image conversion fails
        """
        if request.chart.is_empty:
            raise ExportError(request.chart.message or "Nothing to export.")

        figure = self.render_figure(request)
        try:
            # Convert to PNG bytes (requires kaleido)
            return figure.to_image(
                format="png",
                width=self._settings.chart_width,
                height=self._settings.chart_height,
            )
        except Exception as e:
            logger.exception("PNG conversion failed", extra={"export_file": request.filename})
            raise ExportError(f"Could not create {request.filename}: {e}") from e

    def export(self, model: DataViewModel, full_view: bool = False) -> Any:
        """Snapshot the model, render it, and trigger the download."""
        request = model.export_request(full_view=full_view)
        png = self.render_png(request)
        logger.info(
            "Chart exported",
            extra={"export_file": request.filename, "n_bytes": len(png), "full_view": full_view},
        )
        return self._environment.trigger_download(request.filename, png)

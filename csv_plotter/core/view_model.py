from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Sequence, Tuple

from csv_plotter.core import state as transitions
from csv_plotter.core.chart_builder import describe_chart, visible_window
from csv_plotter.core.chart_spec import ChartDescription
from csv_plotter.core.dataset import Dataset, Row, ingest_rows
from csv_plotter.core.exceptions import CsvParseError, IngestionError
from csv_plotter.core.parsing import ParsedCsv
from csv_plotter.core.state import ChartKind, TickStrategy, ViewState

if TYPE_CHECKING:
    from csv_plotter.config.model import AppSettings
    from csv_plotter.services.environment import EnvironmentAdapter

logger = logging.getLogger(__name__)

CURRENT_VIEW_FILENAME = "chart.png"
FULL_VIEW_FILENAME = "full_chart.png"


@dataclass(frozen=True)
class ExportRequest:
    """Snapshot handed to the export collaborator."""
    filename: str
    chart: ChartDescription


class DataViewModel:
    """
    Owns the uploaded Dataset and the current ViewState snapshot.

    Every UI event maps to one method here, which applies the matching pure
    transition from csv_plotter.core.state and publishes the new snapshot.
    Rendering reads `describe()`; nothing in this class knows about plotly
    or Dash. The optional environment adapter receives theme changes.

    Uploads are serialised with tokens: `begin_upload` hands out a token and
    only the completion carrying the newest token is applied, so a slow
    earlier parse cannot overwrite a newer upload.
    """

    def __init__(
        self,
        settings: AppSettings,
        environment: Optional[EnvironmentAdapter] = None,
    ) -> None:
        self.settings = settings
        self.environment = environment
        self.dataset: Optional[Dataset] = None
        self.state = ViewState()
        self._latest_upload = 0

    def __repr__(self) -> str:
        return f"DataViewModel(dataset={self.dataset!r}, chart_kind={self.state.chart_kind.value!r})"

    # -------------------------------------------------------------------------
    # Upload lifecycle
    # -------------------------------------------------------------------------
    def begin_upload(self) -> int:
        self._latest_upload += 1
        return self._latest_upload

    def is_current_upload(self, token: int) -> bool:
        return token == self._latest_upload

    def complete_upload(self, token: int, parsed: ParsedCsv, name: Optional[str] = None) -> bool:
        """
        Publish a finished parse. Returns False when the result is stale.

        :raises IngestionError: if the parse produced no headers or no rows
            (the previous dataset is cleared before raising)
        """
        if not self.is_current_upload(token):
            logger.info(
                "Discarding stale parse result",
                extra={"token": token, "latest_token": self._latest_upload},
            )
            return False
        self.ingest(parsed.rows, parsed.headers, name=name)
        return True

    def fail_upload(self, token: int, error: CsvParseError) -> bool:
        """
        Record a parse failure. The current Dataset (if any) is kept; only
        the inline message changes. Returns False when the failure is stale.
        """
        if not self.is_current_upload(token):
            return False
        logger.warning("Upload failed to parse", extra={"error": str(error)})
        self.state = transitions.with_message(self.state, str(error))
        return True

    def ingest(
        self,
        rows: Iterable[Mapping[str, Any]],
        headers: Sequence[str],
        name: Optional[str] = None,
    ) -> Dataset:
        """
        Replace the Dataset and reset the selection for it.

        :raises IngestionError: if there are no headers or no rows; the prior
            Dataset and selection are cleared, not retained
        """
        try:
            dataset = ingest_rows(rows, headers, name=name)
        except IngestionError as e:
            self.clear(message=" ".join(issue.message for issue in e.issues))
            raise

        self.dataset = dataset
        self.state = transitions.loaded(self.state, dataset)
        return dataset

    def clear(self, message: Optional[str] = None) -> None:
        self.dataset = None
        self.state = transitions.cleared(self.state, message)

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------
    def toggle_column(self, column: str) -> ViewState:
        self.state = transitions.toggle_column(self.state, column)
        return self.state

    def set_chart_kind(self, kind: ChartKind | str) -> ViewState:
        self.state = transitions.set_chart_kind(self.state, kind)
        return self.state

    def set_tick_strategy(self, strategy: TickStrategy | str) -> ViewState:
        self.state = transitions.set_tick_strategy(self.state, strategy)
        return self.state

    # -------------------------------------------------------------------------
    # Zoom
    # -------------------------------------------------------------------------
    def zoom_in(self) -> ViewState:
        self.state = transitions.zoom_in(self.state)
        return self.state

    def zoom_out(self) -> ViewState:
        self.state = transitions.zoom_out(self.state)
        return self.state

    def reset_zoom(self) -> ViewState:
        self.state = transitions.reset_zoom(self.state)
        return self.state

    @property
    def zoom_enabled(self) -> bool:
        return self.dataset is not None and self.state.chart_kind is not ChartKind.PIE

    @property
    def can_zoom_in(self) -> bool:
        return self.zoom_enabled and self.state.zoom is not None and self.state.zoom.can_zoom_in

    @property
    def can_zoom_out(self) -> bool:
        return self.zoom_enabled and self.state.zoom is not None and not self.state.zoom.is_full

    # -------------------------------------------------------------------------
    # Environment
    # -------------------------------------------------------------------------
    def toggle_dark_mode(self) -> Any:
        """Flip dark mode and let the environment apply it; returns the adapter's result."""
        self.state = transitions.toggle_dark_mode(self.state)
        if self.environment is None:
            return None
        return self.environment.apply_theme(self.state.dark_mode)

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------
    def visible_rows(self) -> Tuple[Row, ...]:
        if self.dataset is None:
            return ()
        if self.state.chart_kind is ChartKind.PIE:
            return self.dataset.rows
        window = visible_window(self.dataset, self.state)
        return self.dataset.slice(window.start, window.end)

    def describe(self, full_view: bool = False) -> ChartDescription:
        return describe_chart(
            self.dataset,
            self.state,
            chart_width=self.settings.chart_width,
            max_points=self.settings.max_points,
            color_for=self.settings.color_for,
            full_view=full_view,
        )

    def export_request(self, full_view: bool = False) -> ExportRequest:
        filename = FULL_VIEW_FILENAME if full_view else CURRENT_VIEW_FILENAME
        return ExportRequest(filename=filename, chart=self.describe(full_view=full_view))

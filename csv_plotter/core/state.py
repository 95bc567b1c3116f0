from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from csv_plotter.core.zoom import ZoomWindow

if TYPE_CHECKING:
    from csv_plotter.core.dataset import Dataset


class ChartKind(str, Enum):
    LINE = "line"
    BAR = "bar"
    AREA = "area"
    SCATTER = "scatter"
    PIE = "pie"


class TickStrategy(str, Enum):
    AUTO = "auto"
    SPARSE = "sparse"
    SAMPLED = "sampled"
    NONE = "none"


@dataclass(frozen=True)
class ViewState:
    """
    Immutable snapshot of what the user has chosen for the current dataset.

    Fields:

    - dataset_id: id of the Dataset this state belongs to, None before any upload
    - headers: header row of that Dataset (headers[0] is the X column)
    - selected_columns: Y columns currently plotted, in the order they were toggled on
    - chart_kind: one of ChartKind
    - tick_strategy: X-axis labelling policy, one of TickStrategy
    - zoom: visible row window for non-pie charts
    - dark_mode: environment preference, kept across uploads
    - message: last ingestion/parse message to show inline, if any
    """
    dataset_id: Optional[str] = None
    headers: Tuple[str, ...] = ()
    selected_columns: Tuple[str, ...] = ()
    chart_kind: ChartKind = ChartKind.LINE
    tick_strategy: TickStrategy = TickStrategy.AUTO
    zoom: Optional[ZoomWindow] = None
    dark_mode: bool = False
    message: Optional[str] = None

    @property
    def has_data(self) -> bool:
        return self.dataset_id is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dataset_id": self.dataset_id,
            "headers": list(self.headers),
            "selected_columns": list(self.selected_columns),
            "chart_kind": self.chart_kind.value,
            "tick_strategy": self.tick_strategy.value,
            "zoom": self.zoom.to_dict() if self.zoom is not None else None,
            "dark_mode": self.dark_mode,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ViewState:
        return cls(
            dataset_id=data.get("dataset_id"),
            headers=tuple(data.get("headers", [])),
            selected_columns=tuple(data.get("selected_columns", [])),
            chart_kind=ChartKind(data.get("chart_kind", ChartKind.LINE.value)),
            tick_strategy=TickStrategy(data.get("tick_strategy", TickStrategy.AUTO.value)),
            zoom=ZoomWindow.from_dict(data.get("zoom")),
            dark_mode=bool(data.get("dark_mode", False)),
            message=data.get("message"),
        )


# -----------------------------------------------------------------------------
# Pure update functions: one per UI event, each returns a new snapshot
# -----------------------------------------------------------------------------
def loaded(state: ViewState, dataset: Dataset) -> ViewState:
    """
    Fresh selection for a newly ingested Dataset.

    headers[1] becomes the sole selected column when there are at least two
    columns; chart kind, tick strategy and zoom are reset.
    """
    default_columns = (dataset.headers[1],) if len(dataset.headers) >= 2 else ()
    return ViewState(
        dataset_id=dataset.dataset_id,
        headers=dataset.headers,
        selected_columns=default_columns,
        chart_kind=ChartKind.LINE,
        tick_strategy=TickStrategy.AUTO,
        zoom=ZoomWindow.full(len(dataset)),
        dark_mode=state.dark_mode,
        message=None,
    )


def cleared(state: ViewState, message: Optional[str] = None) -> ViewState:
    """Drop everything tied to a dataset; keep environment preferences."""
    return ViewState(dark_mode=state.dark_mode, message=message)


def with_message(state: ViewState, message: Optional[str]) -> ViewState:
    return replace(state, message=message)


def toggle_column(state: ViewState, column: str) -> ViewState:
    if column in state.selected_columns:
        selected = tuple(c for c in state.selected_columns if c != column)
    else:
        selected = state.selected_columns + (column,)
    return replace(state, selected_columns=selected)


def set_chart_kind(state: ViewState, kind: ChartKind | str) -> ViewState:
    return replace(state, chart_kind=ChartKind(kind))


def set_tick_strategy(state: ViewState, strategy: TickStrategy | str) -> ViewState:
    return replace(state, tick_strategy=TickStrategy(strategy))


def zoom_in(state: ViewState) -> ViewState:
    if state.zoom is None:
        return state
    return replace(state, zoom=state.zoom.zoom_in())


def zoom_out(state: ViewState) -> ViewState:
    if state.zoom is None:
        return state
    return replace(state, zoom=state.zoom.zoom_out())


def reset_zoom(state: ViewState) -> ViewState:
    if state.zoom is None:
        return state
    return replace(state, zoom=state.zoom.reset())


def toggle_dark_mode(state: ViewState) -> ViewState:
    return replace(state, dark_mode=not state.dark_mode)

"""
Core data layer: dataset ingestion, view state and its transitions,
chart description, and the view model that ties them together
"""

from .dataset import Dataset, ingest_rows
from .state import ChartKind, TickStrategy, ViewState
from .zoom import ZoomWindow
from .chart_spec import ChartDescription
from .view_model import DataViewModel

__all__ = [
    "Dataset",
    "ingest_rows",
    "ChartKind",
    "TickStrategy",
    "ViewState",
    "ZoomWindow",
    "ChartDescription",
    "DataViewModel",
]

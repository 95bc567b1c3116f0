from __future__ import annotations

import logging
from typing import Callable, List, Optional

from csv_plotter.core.aggregation import aggregate_pie
from csv_plotter.core.axis import (
    compute_tick_config,
    compute_y_domain,
    tick_positions,
)
from csv_plotter.core.chart_spec import ChartDescription, SeriesSpec, XAxisSpec
from csv_plotter.core.dataset import Dataset
from csv_plotter.core.exceptions import NoPlottableDataError
from csv_plotter.core.formatting import format_tick, format_value
from csv_plotter.core.sampling import sample_indices
from csv_plotter.core.state import ChartKind, TickStrategy, ViewState
from csv_plotter.core.zoom import ZoomWindow

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "Upload a CSV file to get started."
EMPTY_SELECTION_MESSAGE = "Select at least one column to plot."
NO_NUMERIC_MESSAGE = "No plottable numeric data for the selected columns."


def visible_window(dataset: Dataset, state: ViewState, full_view: bool = False) -> ZoomWindow:
    """The zoom window to draw; full_view ignores any zoom."""
    if full_view or state.zoom is None or state.zoom.length != len(dataset):
        return ZoomWindow.full(len(dataset))
    return state.zoom


def _row_indices(window: ZoomWindow, strategy: TickStrategy, max_points: int) -> tuple[List[int], bool]:
    indices = list(range(window.start, window.end + 1))
    if strategy is TickStrategy.SAMPLED and window.is_full and len(indices) > max_points:
        return [indices[i] for i in sample_indices(len(indices), max_points)], True
    return indices, False


def describe_chart(
    dataset: Optional[Dataset],
    state: ViewState,
    *,
    chart_width: int,
    max_points: int,
    color_for: Callable[[int], str],
    full_view: bool = False,
) -> ChartDescription:
    """
    Derive everything a renderer needs from the Dataset and the current selection.

    Pie charts aggregate over all rows; other kinds draw the zoom window
    (or the whole dataset when full_view is set), downsampled when the tick
    strategy is 'sampled' and the window covers more than max_points rows.
    """
    kind = state.chart_kind

    if dataset is None or not state.has_data:
        return ChartDescription(kind=kind, message=NO_DATA_MESSAGE, dark_mode=state.dark_mode)

    columns = [c for c in state.selected_columns if c in dataset.headers]
    if not columns:
        return ChartDescription(
            kind=kind,
            title=dataset.name,
            message=EMPTY_SELECTION_MESSAGE,
            full_view=full_view,
            dark_mode=state.dark_mode,
        )

    if kind is ChartKind.PIE:
        return _describe_pie(dataset, state, columns, color_for, full_view)

    window = visible_window(dataset, state, full_view)
    indices, sampled = _row_indices(window, state.tick_strategy, max_points)

    x_col = dataset.x_column
    inference = dataset.x_axis
    x_dates = dataset.dates(x_col)

    # labels are built only for the rows actually drawn
    x_raw = [dataset.rows[i][x_col] for i in indices]
    tick_config = compute_tick_config(state.tick_strategy, len(indices), chart_width)
    shown = tick_positions(len(indices), tick_config)

    x_axis = XAxisSpec(
        column=x_col,
        label=inference.label,
        kind=inference.kind,
        tick_config=tick_config,
        tick_positions=tuple(indices[k] for k in shown),
        tick_labels=tuple(format_tick(x_raw[k], date=x_dates[indices[k]]) for k in shown),
        point_labels=tuple(format_value(v, date=x_dates[i]) for v, i in zip(x_raw, indices)),
    )

    series = []
    for i, col in enumerate(columns):
        numbers = dataset.numbers(col)
        col_dates = dataset.dates(col)
        raw = [dataset.rows[j][col] for j in indices]
        series.append(
            SeriesSpec(
                column=col,
                x_positions=tuple(indices),
                values=tuple(numbers[j] for j in indices),
                hover_labels=tuple(format_value(v, date=col_dates[j]) for v, j in zip(raw, indices)),
                color=color_for(i),
                axis_index=i,
                side="left" if i % 2 == 0 else "right",
                domain=compute_y_domain(numbers[window.start:window.end + 1]),
            )
        )

    logger.debug(
        "Chart described",
        extra={
            "chart_kind": kind.value,
            "n_series": len(series),
            "n_points": len(indices),
            "sampled": sampled,
            "window": [window.start, window.end],
        },
    )

    return ChartDescription(
        kind=kind,
        title=dataset.name,
        x_axis=x_axis,
        series=tuple(series),
        window=window,
        sampled=sampled,
        full_view=full_view,
        dark_mode=state.dark_mode,
    )


def _describe_pie(
    dataset: Dataset,
    state: ViewState,
    columns: List[str],
    color_for: Callable[[int], str],
    full_view: bool,
) -> ChartDescription:
    try:
        slices = aggregate_pie(dataset.rows, columns, color_for)
    except NoPlottableDataError as e:
        logger.info("Pie chart has nothing to plot", extra={"reason": str(e)})
        return ChartDescription(
            kind=ChartKind.PIE,
            title=dataset.name,
            message=NO_NUMERIC_MESSAGE,
            full_view=full_view,
            dark_mode=state.dark_mode,
        )

    return ChartDescription(
        kind=ChartKind.PIE,
        title=dataset.name,
        slices=tuple(slices),
        full_view=full_view,
        dark_mode=state.dark_mode,
    )

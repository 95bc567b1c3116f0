from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple

from csv_plotter.core.coercion import is_missing, parse_dates, to_number
from csv_plotter.core.state import TickStrategy

DATE_THRESHOLD = 0.8
NUMERIC_THRESHOLD = 0.8
CATEGORY_RATIO = 0.5
DEFAULT_DOMAIN: Tuple[float, float] = (0.0, 100.0)
DOMAIN_PADDING = 0.1

PIXELS_PER_TICK = 100
SPARSE_INTERVAL = 9
AXIS_HEIGHT = 60
REDUCED_AXIS_HEIGHT = 20


class AxisKind(str, Enum):
    DATE = "date"
    CONSTANT = "constant"
    DECIMAL_RANGE = "decimal_range"
    SEQUENCE = "sequence"
    NUMERIC_RANGE = "numeric_range"
    CATEGORICAL = "categorical"
    TEXT = "text"
    EMPTY = "empty"


@dataclass(frozen=True)
class AxisInference:
    column: str
    kind: AxisKind
    label: str
    step: Optional[float] = None
    n_categories: Optional[int] = None


def _fmt_number(n: float) -> str:
    if float(n).is_integer():
        return str(int(n))
    return f"{n:g}"


# -----------------------------------------------------------------------------
# X-axis inference
# -----------------------------------------------------------------------------
def infer_x_axis(
    column: str,
    values: Sequence[Any],
    dates: Optional[Sequence[Any]] = None,
) -> AxisInference:
    """
    Classify the X column and build a descriptive axis label.

    Checked in order: dates (>= 80% of non-null values), numbers (>= 80%),
    categories (fewer unique values than half the rows, and more than one),
    then plain text. The label never changes the data.

    `dates` is the column already run through parse_dates, if available.
    """
    present = [v for v in values if not is_missing(v)]
    if not present:
        return AxisInference(column, AxisKind.EMPTY, column)

    if dates is None:
        dates = parse_dates(values)
    n_dates = sum(1 for v, d in zip(values, dates) if d is not None and not is_missing(v))
    if n_dates >= DATE_THRESHOLD * len(present):
        return AxisInference(column, AxisKind.DATE, f"{column} (Timeline)")

    numbers = [n for n in (to_number(v) for v in present) if n is not None]
    if len(numbers) >= NUMERIC_THRESHOLD * len(present):
        return _infer_numeric(column, numbers)

    n_unique = len({str(v) for v in present})
    if 1 < n_unique < CATEGORY_RATIO * len(values):
        return AxisInference(
            column,
            AxisKind.CATEGORICAL,
            f"{column} ({n_unique} Categories)",
            n_categories=n_unique,
        )

    return AxisInference(column, AxisKind.TEXT, f"{column} (Text)")


def _infer_numeric(column: str, numbers: List[float]) -> AxisInference:
    lo, hi = min(numbers), max(numbers)

    if lo == hi:
        return AxisInference(column, AxisKind.CONSTANT, f"{column} (Constant: {_fmt_number(lo)})")

    if any(not n.is_integer() for n in numbers):
        return AxisInference(
            column,
            AxisKind.DECIMAL_RANGE,
            f"{column} (Decimal Range: {_fmt_number(lo)} - {_fmt_number(hi)})",
        )

    deltas = {b - a for a, b in zip(numbers, numbers[1:])}
    if len(deltas) == 1:
        step = deltas.pop()
        if step != 0:
            sign = "+" if step > 0 else "-"
            return AxisInference(
                column,
                AxisKind.SEQUENCE,
                f"{column} (Sequence: {sign}{_fmt_number(abs(step))})",
                step=step,
            )

    return AxisInference(
        column,
        AxisKind.NUMERIC_RANGE,
        f"{column} (Numeric Range: {_fmt_number(lo)} - {_fmt_number(hi)})",
    )


# -----------------------------------------------------------------------------
# Y domain
# -----------------------------------------------------------------------------
def compute_y_domain(values: Sequence[Any]) -> Tuple[float, float]:
    """
    [min - p, max + p] over the numeric values, p = 10% of (max - min).

    A column with no numeric values gets (0, 100).
    """
    numbers = [n for n in (to_number(v) for v in values) if n is not None]
    if not numbers:
        return DEFAULT_DOMAIN
    lo, hi = min(numbers), max(numbers)
    padding = DOMAIN_PADDING * (hi - lo)
    return lo - padding, hi + padding


# -----------------------------------------------------------------------------
# Tick interval
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TickConfig:
    """
    interval: number of points skipped between two labelled ticks
    show_labels: False suppresses tick labels entirely
    axis_height: pixels reserved for the X axis
    """
    strategy: TickStrategy
    interval: int
    show_labels: bool = True
    axis_height: int = AXIS_HEIGHT


def compute_tick_config(strategy: TickStrategy, n_points: int, chart_width: int) -> TickConfig:
    strategy = TickStrategy(strategy)

    if strategy is TickStrategy.NONE:
        return TickConfig(strategy, interval=0, show_labels=False, axis_height=REDUCED_AXIS_HEIGHT)

    if strategy is TickStrategy.SPARSE:
        return TickConfig(strategy, interval=SPARSE_INTERVAL)

    if strategy is TickStrategy.SAMPLED:
        return TickConfig(strategy, interval=0)

    max_ticks = max(1, chart_width // PIXELS_PER_TICK)
    interval = max(0, math.ceil(n_points / max_ticks) - 1)
    return TickConfig(strategy, interval=interval)


def tick_positions(n_points: int, config: TickConfig) -> List[int]:
    """Indices (into the rendered points) that get a label."""
    if not config.show_labels or n_points <= 0:
        return []
    return list(range(0, n_points, config.interval + 1))

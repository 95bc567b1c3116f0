from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Sequence

from csv_plotter.core.coercion import to_number
from csv_plotter.core.exceptions import NoPlottableDataError


@dataclass(frozen=True)
class PieSlice:
    name: str
    value: float
    color: str


def column_total(rows: Sequence[Mapping[str, Any]], column: str) -> float:
    """Sum of the numeric cells of one column; non-numeric cells count as 0."""
    return sum((to_number(row.get(column)) or 0.0) for row in rows)


def aggregate_pie(
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[str],
    color_for: Callable[[int], str],
) -> List[PieSlice]:
    """
    One slice per selected column holding the column total.

    Columns whose total is 0 or below are dropped. A slice keeps the colour of
    its column's position in the selection.

    :raises NoPlottableDataError: if no column has a positive total
    """
    slices: List[PieSlice] = []
    for i, column in enumerate(columns):
        total = column_total(rows, column)
        if total > 0:
            slices.append(PieSlice(name=column, value=total, color=color_for(i)))

    if not slices:
        raise NoPlottableDataError(
            f"No positive numeric totals for columns: {', '.join(columns) or '(none)'}"
        )
    return slices

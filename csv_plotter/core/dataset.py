from __future__ import annotations

import logging
import math
import uuid
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from csv_plotter.core.axis import AxisInference, infer_x_axis
from csv_plotter.core.coercion import parse_dates, to_number
from csv_plotter.core.exceptions import IngestionError
from csv_plotter.validation.dataset_validation import validate_parsed_rows

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class Dataset:
    """
    Parsed, cleaned tabular data held in memory.

    Invariants:
    - headers is non-empty and rows is non-empty
    - every row has exactly the header keys, in header order
    - row order is file order

    headers[0] is the X-axis column; headers[1:] are the candidate Y series.

    Since the rows never change, per-column parses (dates, numbers) and the
    X-axis inference are computed once and cached.
    """

    def __init__(
        self,
        headers: Sequence[str],
        rows: Sequence[Row],
        name: Optional[str] = None,
        dataset_id: Optional[str] = None,
    ) -> None:
        self.headers: Tuple[str, ...] = tuple(headers)
        self.rows: Tuple[Row, ...] = tuple(rows)
        self.name = name or "dataset"
        self.dataset_id = dataset_id or uuid.uuid4().hex

        self._frame: Optional[pd.DataFrame] = None
        self._dates: Dict[str, Tuple[Optional[pd.Timestamp], ...]] = {}
        self._numbers: Dict[str, Tuple[Optional[float], ...]] = {}
        self._x_axis: Optional[AxisInference] = None

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, rows={len(self.rows)}, headers={list(self.headers)!r})"

    # -------------------------------------------------------------------------
    # Column access
    # -------------------------------------------------------------------------
    @property
    def x_column(self) -> str:
        return self.headers[0]

    @property
    def y_candidates(self) -> Tuple[str, ...]:
        return self.headers[1:]

    def column_values(self, name: str, start: int = 0, end: Optional[int] = None) -> List[Any]:
        """
        Values of one column over rows[start:end] (end exclusive, like slicing).

        :raises KeyError: if the column is not in the header
        """
        if name not in self.headers:
            raise KeyError(f"Column '{name}' not found. Available: {list(self.headers)}")
        return [row[name] for row in self.rows[start:end]]

    def dates(self, name: str) -> Tuple[Optional[pd.Timestamp], ...]:
        """Every cell of a column parsed as a date (None where it is not one), cached."""
        if name not in self._dates:
            self._dates[name] = tuple(parse_dates(self.column_values(name)))
        return self._dates[name]

    def numbers(self, name: str) -> Tuple[Optional[float], ...]:
        """Every cell of a column coerced to a number (None where it is not one), cached."""
        if name not in self._numbers:
            self._numbers[name] = tuple(to_number(v) for v in self.column_values(name))
        return self._numbers[name]

    @property
    def x_axis(self) -> AxisInference:
        if self._x_axis is None:
            x_col = self.x_column
            self._x_axis = infer_x_axis(x_col, self.column_values(x_col), dates=self.dates(x_col))
        return self._x_axis

    def slice(self, start: int, end: int) -> Tuple[Row, ...]:
        """Rows with index in the inclusive range [start, end]."""
        return self.rows[start:end + 1]

    def to_frame(self) -> pd.DataFrame:
        """DataFrame view of the rows (cached), used for previews."""
        if self._frame is None:
            self._frame = pd.DataFrame.from_records(list(self.rows), columns=list(self.headers))
        return self._frame


# -----------------------------------------------------------------------------
# Ingestion
# -----------------------------------------------------------------------------
def clean_value(value: Any) -> Any:
    """Strip strings; normalise float NaN (pandas' missing marker) to None."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def _clean_row(raw: Mapping[str, Any], headers: Sequence[str]) -> Row:
    return {h: clean_value(raw.get(h)) for h in headers}


def ingest_rows(
    rows: Iterable[Mapping[str, Any]],
    headers: Sequence[str],
    name: Optional[str] = None,
) -> Dataset:
    """
    Turn raw parser rows into a Dataset.

    Every string value is whitespace-trimmed; other values pass through.
    Rows are re-keyed to exactly the header list: missing keys become None,
    extra keys are dropped.

    :raises IngestionError: if there are no headers or no rows
    """
    raw_rows = list(rows)
    header_list = [str(h) for h in headers]

    issues = validate_parsed_rows(raw_rows, header_list)
    blocking = [i for i in issues if i.blocking]
    if blocking:
        logger.warning(
            "Rejected upload during ingestion",
            extra={"dataset": name, "issues": [i.code for i in blocking]},
        )
        raise IngestionError(blocking)

    for issue in issues:
        logger.warning(
            "Ingestion warning: %s",
            issue.message,
            extra={"dataset": name, "code": issue.code},
        )

    cleaned = [_clean_row(raw, header_list) for raw in raw_rows]
    ds = Dataset(headers=header_list, rows=cleaned, name=name)

    logger.info(
        "Dataset ingested",
        extra={"dataset": ds.name, "n_rows": len(ds), "n_columns": len(ds.headers)},
    )
    return ds

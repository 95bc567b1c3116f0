from __future__ import annotations

import datetime as dt
import math
import re
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

_TIME = r"(?:[T ]\s*\d{1,2}:\d{2}(?::\d{2}(?:\.\d+)?)?\s*(?:[AaPp][Mm]|Z|[+-]\d{2}:?\d{2})?)?"
_MONTH = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?"
# 2024-01-05, 01/05/2024, 5.1.24 (three parts), optionally with a time
_NUMERIC_DATE_RE = re.compile(rf"^\d{{1,4}}[-/.]\d{{1,2}}[-/.]\d{{1,4}}{_TIME}$")
# January 5, 2024 / 5 Jan 2024 / Jan 2024
_NAMED_DATE_RE = re.compile(
    rf"^(?:\d{{1,2}}(?:st|nd|rd|th)?\s+)?{_MONTH}\s+(?:\d{{1,2}}(?:st|nd|rd|th)?,?\s+)?\d{{4}}{_TIME}$",
    re.IGNORECASE,
)


def is_missing(value: Any) -> bool:
    """None, NaN/NaT and blank strings all count as missing cells."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if value is pd.NaT:
        return True
    if isinstance(value, (float, np.floating)):
        return math.isnan(value)
    return False


def to_number(value: Any) -> Optional[float]:
    """
    Coerce a cell to a finite float, or None.

    Booleans are not numbers here, and neither are strings like "1,000" or "inf".
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        number = float(value)
        return number if math.isfinite(number) else None
    if isinstance(value, str):
        text = value.strip()
        if not _NUMBER_RE.match(text):
            return None
        number = float(text)
        return number if math.isfinite(number) else None
    return None


def looks_like_date(text: str) -> bool:
    """
    True for strings shaped like a calendar date: three separated numeric
    parts, or a month name with a year. "1st", "10a" or "3-4" are not.
    """
    return bool(_NUMERIC_DATE_RE.match(text) or _NAMED_DATE_RE.match(text))


def _from_datetime_like(value: Any) -> Optional[pd.Timestamp]:
    if isinstance(value, pd.Timestamp):
        return None if value is pd.NaT else value
    if isinstance(value, (dt.datetime, dt.date, np.datetime64)):
        ts = pd.Timestamp(value)
        return None if ts is pd.NaT else ts
    return None


def _as_timestamp(value: Any) -> Optional[pd.Timestamp]:
    if value is None or pd.isna(value):
        return None
    return pd.Timestamp(value)


def parse_date(value: Any) -> Optional[pd.Timestamp]:
    """
    Parse a date-like cell into a Timestamp, or None.

    Plain numbers ("2020", 17.5) are never dates; strings must look like a
    date (see looks_like_date) before they are handed to pandas.
    """
    if not isinstance(value, str):
        return _from_datetime_like(value)

    text = value.strip()
    if not looks_like_date(text):
        return None

    try:
        return _as_timestamp(pd.to_datetime(text, errors="coerce"))
    except (ValueError, TypeError, OverflowError):
        return None


def parse_dates(values: Sequence[Any]) -> List[Optional[pd.Timestamp]]:
    """
    parse_date over a whole column, with one vectorised pandas call for all
    date-shaped strings.
    """
    parsed: List[Optional[pd.Timestamp]] = [None] * len(values)
    candidates: Dict[int, str] = {}

    for i, value in enumerate(values):
        if isinstance(value, str):
            text = value.strip()
            if looks_like_date(text):
                candidates[i] = text
        else:
            parsed[i] = _from_datetime_like(value)

    if not candidates:
        return parsed

    texts = list(candidates.values())
    try:
        converted = pd.to_datetime(pd.Series(texts, dtype=object), errors="coerce", format="mixed")
        timestamps = [_as_timestamp(ts) for ts in converted]
    except (ValueError, TypeError, OverflowError):
        # mixed UTC offsets cannot share one dtype; parse them one by one
        timestamps = [parse_date(t) for t in texts]

    for i, ts in zip(candidates, timestamps):
        parsed[i] = ts
    return parsed


def is_midnight(ts: pd.Timestamp) -> bool:
    return ts.hour == 0 and ts.minute == 0 and ts.second == 0 and ts.microsecond == 0

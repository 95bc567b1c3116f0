from __future__ import annotations

import logging
from typing import Any

from csv_plotter.core.coercion import is_midnight, is_missing, parse_date, to_number

logger = logging.getLogger(__name__)

PLACEHOLDER = "—"
ELLIPSIS = "…"
MAX_TICK_CHARS = 8
TRUNCATED_TICK_CHARS = 6

# marks "date not parsed yet" so that None can mean "parsed, not a date"
_UNPARSED: Any = object()


def _stringify(value: Any) -> str:
    # 90.0 -> "90", matching how the cell was most likely written in the file
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return PLACEHOLDER


def format_tick(value: Any, date: Any = _UNPARSED) -> str:
    """
    Short label for an X-axis tick.

    - missing -> "—"
    - date at midnight -> "1/5/24"; date with time -> "1/5/24 14:30"
    - strings over 8 characters -> first 6 characters + "…"
    - anything else -> its string form

    `date` is the already-parsed form of `value` (None if it is not a date);
    when omitted the value is parsed here.
    """
    try:
        if is_missing(value):
            return PLACEHOLDER

        ts = parse_date(value) if date is _UNPARSED else date
        if ts is not None:
            date_part = f"{ts.month}/{ts.day}/{ts:%y}"
            if is_midnight(ts):
                return date_part
            return f"{date_part} {ts:%H:%M}"

        if isinstance(value, str) and len(value) > MAX_TICK_CHARS:
            return value[:TRUNCATED_TICK_CHARS] + ELLIPSIS

        return _stringify(value)
    except Exception:
        logger.debug("Tick formatting fell back to str()", exc_info=True)
        return _safe_str(value)


def format_value(value: Any, date: Any = _UNPARSED) -> str:
    """
    Full-precision label for tooltips and numeric axis ticks.

    - missing -> "—"
    - date -> "January 5, 2024" (with " 14:30" when not midnight)
    - numbers and numeric strings -> two decimals
    - anything else -> its string form
    """
    try:
        if is_missing(value):
            return PLACEHOLDER

        ts = parse_date(value) if date is _UNPARSED else date
        if ts is not None:
            date_part = f"{ts:%B} {ts.day}, {ts.year}"
            if is_midnight(ts):
                return date_part
            return f"{date_part} {ts:%H:%M}"

        number = to_number(value)
        if number is not None:
            return f"{number:.2f}"

        return str(value)
    except Exception:
        logger.debug("Value formatting fell back to str()", exc_info=True)
        return _safe_str(value)

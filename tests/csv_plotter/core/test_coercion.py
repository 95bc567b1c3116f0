from __future__ import annotations

import datetime as dt
import math

import numpy as np
import pandas as pd
import pytest

from csv_plotter.core.coercion import (
    is_midnight,
    is_missing,
    looks_like_date,
    parse_date,
    parse_dates,
    to_number,
)


@pytest.mark.parametrize("value", [None, "", "  ", math.nan, np.nan, pd.NaT])
def test_is_missing(value):
    assert is_missing(value)


@pytest.mark.parametrize("value", [0, "0", "x", False])
def test_is_not_missing(value):
    assert not is_missing(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("42", 42.0),
        (" -3.5 ", -3.5),
        ("1e3", 1000.0),
        (".5", 0.5),
        (7, 7.0),
        (np.int64(4), 4.0),
    ],
)
def test_to_number_accepts_plain_numbers(value, expected):
    assert to_number(value) == expected


@pytest.mark.parametrize("value", ["1,000", "inf", "nan", "abc", "", None, True, math.inf, "12px"])
def test_to_number_rejects_everything_else(value):
    assert to_number(value) is None


def test_parse_date_accepts_date_like_values():
    assert parse_date("2024-03-01") == pd.Timestamp(2024, 3, 1)
    assert parse_date(dt.date(2024, 3, 1)) == pd.Timestamp(2024, 3, 1)
    assert parse_date(pd.Timestamp(2024, 3, 1, 9)) == pd.Timestamp(2024, 3, 1, 9)


@pytest.mark.parametrize("value", ["2020", "17.5", 2020, "hello", "", None, "99/99/9999"])
def test_parse_date_rejects_numbers_and_text(value):
    assert parse_date(value) is None


def test_is_midnight():
    assert is_midnight(pd.Timestamp(2024, 1, 1))
    assert not is_midnight(pd.Timestamp(2024, 1, 1, 0, 0, 1))


@pytest.mark.parametrize("value", ["1st", "10a", "3-4", "2nd floor", "A1-3", "v2.1", "Q3"])
def test_parse_date_rejects_ordinals_and_ids(value):
    assert parse_date(value) is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024/01/05", pd.Timestamp(2024, 1, 5)),
        ("2024-01-05T14:30", pd.Timestamp(2024, 1, 5, 14, 30)),
        ("Jan 5, 2024", pd.Timestamp(2024, 1, 5)),
        ("5 January 2024", pd.Timestamp(2024, 1, 5)),
    ],
)
def test_parse_date_accepts_common_date_shapes(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize("text", ["2024-01-05", "01/05/2024", "2024-01-05 14:30", "March 3, 2021"])
def test_looks_like_date(text):
    assert looks_like_date(text)


def test_parse_dates_matches_parse_date_cell_by_cell():
    values = ["2024-01-05", "1st", None, "", "2020", dt.date(2023, 2, 1), "2024-02-30", "Jan 5, 2024", 7.5]

    parsed = parse_dates(values)

    assert parsed == [parse_date(v) for v in values]
    assert parsed[0] == pd.Timestamp(2024, 1, 5)
    assert parsed[5] == pd.Timestamp(2023, 2, 1)
    # impossible calendar date
    assert parsed[6] is None


def test_parse_dates_without_date_shaped_strings_skips_pandas(monkeypatch):
    def _fail(*args, **kwargs):
        raise AssertionError("pandas date parsing should not run")

    monkeypatch.setattr(pd, "to_datetime", _fail)

    assert parse_dates(["1st", "2020", "abc", None]) == [None, None, None, None]

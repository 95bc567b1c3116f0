from __future__ import annotations

import datetime as dt
import math

import pandas as pd
import pytest

from csv_plotter.core.formatting import ELLIPSIS, PLACEHOLDER, format_tick, format_value


class _Unprintable:
    def __str__(self):
        raise RuntimeError("no string form")


@pytest.mark.parametrize("value", [None, "", "   ", math.nan])
def test_missing_values_use_placeholder(value):
    assert format_tick(value) == PLACEHOLDER
    assert format_value(value) == PLACEHOLDER


def test_tick_dates_are_short():
    assert format_tick("2024-01-05") == "1/5/24"
    assert format_tick("2024-01-05 14:30") == "1/5/24 14:30"
    assert format_tick(dt.datetime(2023, 12, 31, 8, 5)) == "12/31/23 08:05"


def test_tick_truncates_long_strings():
    assert format_tick("Hello World") == "Hello " + ELLIPSIS
    assert format_tick("abcdefgh") == "abcdefgh"
    assert format_tick("short") == "short"


def test_tick_numbers():
    assert format_tick(90.0) == "90"
    assert format_tick(2.5) == "2.5"
    assert format_tick(3) == "3"
    assert format_tick("2020") == "2020"


def test_value_dates_are_long():
    assert format_value("2024-01-05") == "January 5, 2024"
    assert format_value("2024-01-05 14:30") == "January 5, 2024 14:30"


def test_value_numbers_have_two_decimals():
    assert format_value(3) == "3.00"
    assert format_value("12.5") == "12.50"
    assert format_value(-0.25) == "-0.25"


def test_value_text_passes_through():
    assert format_value("north") == "north"


@pytest.mark.parametrize("value", [_Unprintable(), object(), [1, 2], {"a": 1}, b"bytes", True])
def test_formatters_never_raise(value):
    assert isinstance(format_tick(value), str)
    assert isinstance(format_value(value), str)


def test_unprintable_value_falls_back_to_placeholder():
    assert format_tick(_Unprintable()) == PLACEHOLDER
    assert format_value(_Unprintable()) == PLACEHOLDER


def test_ordinal_tick_stays_as_written():
    assert format_tick("1st") == "1st"
    assert format_value("3-4") == "3-4"


def test_pre_parsed_date_skips_reparsing():
    assert format_tick("anything", date=None) == "anything"
    assert format_tick("2024-01-05", date=pd.Timestamp(2024, 1, 5)) == "1/5/24"

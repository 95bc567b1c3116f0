from __future__ import annotations

import base64

import pytest

from csv_plotter.core.exceptions import CsvParseError
from csv_plotter.core.parsing import decode_upload_contents, parse_csv


def _data_url(payload: bytes) -> str:
    return "data:text/csv;base64," + base64.b64encode(payload).decode("ascii")


def test_parse_keeps_cells_as_strings_and_skips_blank_lines():
    parsed = parse_csv(b"a,b\n1,2\n\n3,04\n")

    assert parsed.headers == ("a", "b")
    assert parsed.rows == (
        {"a": "1", "b": "2"},
        {"a": "3", "b": "04"},
    )


def test_parse_empty_cells_stay_empty_strings():
    parsed = parse_csv("a,b\n1,\n")

    assert parsed.rows == ({"a": "1", "b": ""},)


def test_parse_dynamic_typing_infers_numbers():
    parsed = parse_csv("a,b\n1,\n2,\n", dynamic_typing=True)

    assert parsed.rows[0]["a"] == 1
    assert parsed.rows[0]["b"] is None


def test_parse_header_only_file_has_no_rows():
    parsed = parse_csv("a,b\n")

    assert parsed.headers == ("a", "b")
    assert parsed.rows == ()


def test_parse_empty_file_has_no_headers():
    parsed = parse_csv(b"")

    assert parsed.headers == ()
    assert parsed.rows == ()


def test_parse_strips_utf8_bom():
    parsed = parse_csv(b"\xef\xbb\xbfname,value\nx,1\n")

    assert parsed.headers == ("name", "value")


def test_parse_falls_back_to_latin1():
    parsed = parse_csv(b"name,value\ncaf\xe9,1\n")

    assert parsed.rows[0]["name"] == "café"


def test_parse_malformed_rows_raise():
    with pytest.raises(CsvParseError):
        parse_csv("a,b\n1,2\n3,4,5,6\n")


def test_decode_upload_contents():
    assert decode_upload_contents(_data_url(b"a,b\n1,2\n")) == b"a,b\n1,2\n"


@pytest.mark.parametrize("contents", ["data:text/csv;base64,%%%not-base64", "no comma at all"])
def test_decode_upload_contents_rejects_corrupt_payload(contents):
    with pytest.raises(CsvParseError, match="corrupted"):
        decode_upload_contents(contents)

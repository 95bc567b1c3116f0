from __future__ import annotations

from csv_plotter.validation.dataset_validation import validate_parsed_rows


def test_clean_rows_have_no_issues():
    assert validate_parsed_rows([{"a": "1", "b": "2"}], ["a", "b"]) == []


def test_missing_headers_and_rows_are_blocking():
    issues = validate_parsed_rows([], [])

    assert {i.code for i in issues} == {"NO_HEADERS", "NO_ROWS"}
    assert all(i.blocking for i in issues)


def test_ragged_rows_are_reported_but_not_blocking():
    rows = [{"a": "1", "b": "2"}, {"a": "3"}, {"b": "4"}]

    (issue,) = validate_parsed_rows(rows, ["a", "b"])

    assert issue.code == "RAGGED_ROWS"
    assert not issue.blocking
    assert issue.message.startswith("2 row(s)")

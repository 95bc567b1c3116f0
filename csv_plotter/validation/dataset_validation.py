from __future__ import annotations

from typing import Any, Mapping, Sequence

from csv_plotter.validation.errors import ValidationIssue


def validate_parsed_rows(
    rows: Sequence[Mapping[str, Any]],
    headers: Sequence[str],
) -> list[ValidationIssue]:
    """
    Check raw parser output before it becomes a Dataset.

    Blocking issues (NO_HEADERS, NO_ROWS) reject the upload. RAGGED_ROWS is
    informational: ingestion pads missing keys with None.
    """
    issues: list[ValidationIssue] = []

    if not headers:
        issues.append(ValidationIssue("NO_HEADERS", "The file has no header row."))

    if not rows:
        issues.append(ValidationIssue("NO_ROWS", "The file contains no data rows."))

    if headers and rows:
        header_set = set(headers)
        ragged = sum(1 for row in rows if not header_set.issubset(row.keys()))
        if ragged:
            issues.append(
                ValidationIssue(
                    "RAGGED_ROWS",
                    f"{ragged} row(s) are missing one or more columns; blanks were filled in.",
                    blocking=False,
                )
            )

    return issues

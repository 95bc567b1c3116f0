from __future__ import annotations

import base64
import binascii
import csv
import io
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import pandas as pd

from csv_plotter.core.exceptions import CsvParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedCsv:
    """Raw parser output: rows keyed by header, in file order."""
    headers: Tuple[str, ...]
    rows: Tuple[Dict[str, Any], ...]


def decode_upload_contents(contents: str) -> bytes:
    """
    Decode a dcc.Upload 'contents' string ("data:<mime>;base64,<payload>").

    :raises CsvParseError: if the string is not a base64 data URL
    """
    try:
        _content_type, content_string = contents.split(",", 1)
        return base64.b64decode(content_string, validate=True)
    except (ValueError, binascii.Error) as e:
        raise CsvParseError("The uploaded file appears to be corrupted.") from e


def _decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.info("Upload is not UTF-8; falling back to latin-1")
        return data.decode("latin-1")


def parse_csv(data: bytes | str, dynamic_typing: bool = False) -> ParsedCsv:
    """
    Parse delimited text whose first row is the header.

    Blank lines are skipped. With dynamic_typing=False every cell stays a
    string (empty cells become ""); with dynamic_typing=True pandas infers
    numbers/booleans and empty cells become None.

    :raises CsvParseError: if the text cannot be parsed as CSV
    """
    text = _decode_text(data) if isinstance(data, bytes) else data

    read_kwargs: Dict[str, Any] = {"skip_blank_lines": True}
    if not dynamic_typing:
        read_kwargs.update(dtype=str, keep_default_na=False)

    try:
        df = pd.read_csv(io.StringIO(text), **read_kwargs)
    except pd.errors.EmptyDataError:
        # No header at all; ingestion reports this as an empty upload
        return ParsedCsv(headers=(), rows=())
    except (pd.errors.ParserError, csv.Error, ValueError) as e:
        logger.warning("CSV parse failed", extra={"error": str(e)})
        raise CsvParseError(f"Could not parse the file as CSV: {e}") from e

    headers = tuple(str(c) for c in df.columns)
    if dynamic_typing:
        df = df.astype(object).where(pd.notna(df), None)

    rows: List[Dict[str, Any]] = df.to_dict(orient="records")
    logger.info(
        "CSV parsed",
        extra={"n_rows": len(rows), "n_columns": len(headers), "dynamic_typing": dynamic_typing},
    )
    return ParsedCsv(headers=headers, rows=tuple(rows))

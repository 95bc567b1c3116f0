from __future__ import annotations

from csv_plotter.validation.errors import ValidationError, ValidationIssue


class CsvPlotterError(Exception):
    """Base exception for all csv_plotter errors"""
    pass


class ConfigError(CsvPlotterError):
    """Invalid or inconsistent global.json"""
    pass


class CsvParseError(CsvPlotterError):
    """
    The uploaded file could not be read as delimited text
    (bad encoding, unbalanced quotes, no header row, ...)
    """
    pass


class IngestionError(CsvPlotterError, ValidationError):
    """
    Parsed rows are not usable as a Dataset: no header, or no data rows.
    Carries the blocking ValidationIssues that caused the rejection.
    """

    def __init__(self, issues: list[ValidationIssue]):
        ValidationError.__init__(self, issues)


class NoPlottableDataError(CsvPlotterError):
    """Pie aggregation found no selected column with a positive total"""
    pass


class ExportError(CsvPlotterError):
    """The rendered chart could not be converted to PNG"""
    pass

"""Exceptions raised by data frame operations."""

from __future__ import annotations


class DataFrameError(Exception):
    """Base class for every error raised by tabframe."""

    _template = "{}"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return self._template.format(self.detail)


class ColumnNotFoundError(DataFrameError, KeyError):
    """A requested column label does not exist."""

    _template = "Column '{}' not found"


class TypeMismatchError(DataFrameError, TypeError):
    """A value or column has a type the operation cannot accept."""

    _template = "Type mismatch: {}"


class DimensionMismatchError(DataFrameError, ValueError):
    """Row or column counts disagree."""

    _template = "Dimension mismatch: {}"


class InvalidOperationError(DataFrameError, ValueError):
    """The operation is not allowed on the given data."""

    _template = "Invalid operation: {}"


class CsvError(DataFrameError, ValueError):
    """A CSV file could not be parsed."""

    _template = "CSV error: {}"
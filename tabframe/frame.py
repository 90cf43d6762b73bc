"""A column-oriented data frame whose columns each hold one type of value."""

from __future__ import annotations

import re
from os import PathLike
from typing import Callable, Mapping, Sequence, TypeVar, Union

from .errors import (
    ColumnNotFoundError,
    DimensionMismatchError,
    InvalidOperationError,
    TypeMismatchError,
)
from .values import Column, Value, ValueType, _debug_value, format_value, value_type_of

T = TypeVar("T")
PathType = Union[str, "PathLike[str]"]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _parse_i64(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError("invalid digit found in string")
    number = int(text)
    if number > _I64_MAX:
        raise ValueError("number too large to fit in target type")
    if number < _I64_MIN:
        raise ValueError("number too small to fit in target type")
    return number


def _parse_f64(text: str) -> float:
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _FLOAT_PATTERN.fullmatch(text):
        raise ValueError("invalid float literal")
    return float(text)


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError("provided string was not `true` or `false`")


_PARSERS: dict[ValueType, tuple[str, Callable[[str], Value]]] = {
    ValueType.F64: ("f64", _parse_f64),
    ValueType.I64: ("i64", _parse_i64),
    ValueType.BOOL: ("bool", _parse_bool),
}


def _parse_cell(text: str, label: str, kind: ValueType) -> Value:
    if kind is ValueType.STRING:
        return text
    name, parser = _PARSERS[kind]
    try:
        return parser(text)
    except ValueError as exc:
        raise TypeMismatchError(
            f"Cannot parse '{text}' as {name} for column '{label}': {exc}"
        ) from None


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _column_from(label: str, values: Sequence[Value], where: str) -> Column:
    first = value_type_of(values[0])
    column = Column(data_type=first)
    for value in values:
        kind = value_type_of(value)
        if kind is not first:
            raise TypeMismatchError(
                f"Inconsistent types in {where} '{label}'. "
                f"Expected {first.value}, found {kind.value}"
            )
        column.add(value)
    return column


def _copy_column(column: Column) -> Column:
    return Column(data_type=column.data_type, data=list(column.data))


def _debug_type(kind: ValueType | None) -> str:
    return "None" if kind is None else f"Some({kind.value})"


def _display_width(text: str) -> int:
    return len(text.encode("utf-8"))


class DataFrame:
    """Tabular data stored column by column, with labels kept in order."""

    def __init__(self) -> None:
        self._columns: dict[str, Column] = {}
        self._labels: list[str] = []

    @classmethod
    def _assemble(cls, labels: Sequence[str], columns: Mapping[str, Column]) -> DataFrame:
        frame = cls()
        frame._labels = list(labels)
        frame._columns = dict(columns)
        return frame

    def __repr__(self) -> str:
        return f"DataFrame(labels={self._labels!r}, rows={self.num_rows()})"

    def num_rows(self) -> int:
        """Number of rows, taken from the first column."""
        if not self._labels:
            return 0
        column = self._columns.get(self._labels[0])
        return len(column) if column is not None else 0

    def num_cols(self) -> int:
        """Number of columns."""
        return len(self._labels)

    def labels(self) -> list[str]:
        """Column labels in order."""
        return list(self._labels)

    def column(self, label: str) -> Column:
        """Return a copy of the column with the given label."""
        try:
            return _copy_column(self._columns[label])
        except KeyError:
            raise ColumnNotFoundError(label) from None

    def add_column(self, label: str, data: Sequence[Value]) -> DataFrame:
        """Return a new frame with an extra column appended."""
        if label in self._columns:
            raise InvalidOperationError(f"Column '{label}' already exists")
        rows = self.num_rows()
        if rows != len(data) and self._columns:
            raise DimensionMismatchError(
                f"DataFrame has {rows} rows, but new column '{label}' has {len(data)} rows"
            )
        if not data:
            raise InvalidOperationError(f"Cannot add empty column '{label}'")
        new_column = _column_from(label, data, "new column")
        columns = {name: _copy_column(col) for name, col in self._columns.items()}
        columns[label] = new_column
        return DataFrame._assemble([*self._labels, label], columns)

    def merge_frame(self, other: DataFrame) -> DataFrame:
        """Return a new frame with the rows of other appended below these rows."""
        if len(self._labels) != len(other._labels):
            raise DimensionMismatchError("DataFrames have different number of columns")
        for mine, theirs in zip(self._labels, other._labels):
            if mine != theirs:
                raise DimensionMismatchError(
                    f"Column labels do not match: '{mine}' vs '{theirs}'"
                )
            my_type = self._columns[mine].data_type
            their_type = other._columns[theirs].data_type
            if my_type is not their_type:
                raise TypeMismatchError(
                    f"Column '{mine}' has different types: "
                    f"{_debug_type(my_type)} vs {_debug_type(their_type)}"
                )
        columns = {name: _copy_column(col) for name, col in self._columns.items()}
        for label in self._labels:
            columns[label].data.extend(other._columns[label].data)
        return DataFrame._assemble(self._labels, columns)

    def restrict_columns(self, keep_labels: Sequence[str]) -> DataFrame:
        """Return a new frame holding only the named columns, in the order given."""
        columns: dict[str, Column] = {}
        labels: list[str] = []
        for label in keep_labels:
            if label not in self._columns:
                raise ColumnNotFoundError(label)
            columns[label] = _copy_column(self._columns[label])
            labels.append(label)
        if not labels:
            return DataFrame()
        return DataFrame._assemble(labels, columns)

    def filter(self, column_label: str, predicate: Callable[[Value], bool]) -> DataFrame:
        """Return a new frame with the rows whose value in column_label satisfies predicate."""
        target = self._columns.get(column_label)
        if target is None:
            raise ColumnNotFoundError(column_label)
        keep = [row for row, value in enumerate(target.data) if predicate(value)]
        data = {
            label: [self._columns[label].data[row] for row in keep]
            for label in self._labels
        }
        return new_dataframe(self._labels, data)

    def column_op(
        self, column_labels: Sequence[str], operation: Callable[[list[Column]], T]
    ) -> T:
        """Call operation with copies of the named columns and return its result."""
        return operation([self.column(label) for label in column_labels])

    def median(self, column_label: str) -> float:
        """Median of a numeric column, always as a float."""

        def compute(columns: list[Column]) -> float:
            column = columns[0]
            kind = column.data_type
            if kind is None:
                raise InvalidOperationError(
                    "Cannot compute median of column with unknown type"
                )
            if not kind.is_numeric:
                raise TypeMismatchError(
                    f"Median requires a numeric column (F64 or I64), found {kind.value}"
                )
            numbers = sorted(float(value) for value in column)
            if not numbers:
                raise InvalidOperationError("Cannot compute median of empty column")
            mid = len(numbers) // 2
            if len(numbers) % 2 == 0:
                return (numbers[mid - 1] + numbers[mid]) / 2.0
            return numbers[mid]

        return self.column_op([column_label], compute)

    def sub_columns(self, label1: str, label2: str) -> list[Value]:
        """Row-wise difference label1 - label2 of two numeric columns."""

        def compute(columns: list[Column]) -> list[Value]:
            minuend, subtrahend = columns
            if len(minuend) != len(subtrahend):
                raise DimensionMismatchError(
                    "Columns for subtraction have different lengths"
                )
            result: list[Value] = []
            for left, right in zip(minuend, subtrahend):
                left_type, right_type = value_type_of(left), value_type_of(right)
                if not (left_type.is_numeric and right_type.is_numeric):
                    raise TypeMismatchError(
                        "Subtraction requires numeric columns (F64 or I64). "
                        f"Found types {_debug_value(left)} and {_debug_value(right)} "
                        "at corresponding rows."
                    )
                if left_type is ValueType.I64 and right_type is ValueType.I64:
                    result.append(left - right)  # type: ignore[operator]
                else:
                    result.append(float(left) - float(right))
            return result

        return self.column_op([label1, label2], compute)

    def __str__(self) -> str:
        if not self._labels:
            return "Empty DataFrame\n"
        widths = {
            label: max(
                [_display_width(label)]
                + [_display_width(format_value(v)) for v in self._columns[label]]
            )
            for label in self._labels
        }
        lines = [
            "  ".join(f"{label:<{widths[label]}}" for label in self._labels),
            "--".join("-" * widths[label] for label in self._labels),
        ]
        for row in zip(*(self._columns[label].data for label in self._labels)):
            cells = []
            for label, value in zip(self._labels, row):
                text = format_value(value)
                width = widths[label]
                if value_type_of(value).is_numeric:
                    cells.append(f"{text:>{width}}")
                else:
                    cells.append(f"{text:<{width}}")
            lines.append("  ".join(cells))
        return "\n".join(lines) + "\n"


def new_dataframe(labels: Sequence[str], data: Mapping[str, Sequence[Value]]) -> DataFrame:
    """Build a frame from ordered labels and a mapping of label to column values."""
    if not labels or not data or len(labels) != len(data):
        raise DimensionMismatchError("Labels and data must correspond and not be empty")
    rows: int | None = None
    columns: dict[str, Column] = {}
    for label in labels:
        if label not in data:
            raise ColumnNotFoundError(f"Data for label '{label}' not provided")
        values = data[label]
        if rows is None:
            rows = len(values)
        elif len(values) != rows:
            raise DimensionMismatchError(
                f"Column '{label}' has {len(values)} rows, expected {rows}"
            )
        if not values:
            raise InvalidOperationError(
                f"Column '{label}' is empty, cannot determine type"
            )
        columns[label] = _column_from(label, values, "column")
    return DataFrame._assemble(labels, columns)


def read_csv(path: PathType, col_types: Mapping[str, ValueType]) -> DataFrame:
    """Read a comma-separated file whose first line holds the column labels."""
    with open(path, encoding="utf-8", newline="") as handle:
        lines = _split_lines(handle.read())
    if not lines:
        raise InvalidOperationError("CSV file is empty")
    labels = [cell.strip() for cell in lines[0].split(",")]
    if len(labels) != len(col_types):
        raise DimensionMismatchError(
            f"CSV header has {len(labels)} columns, but {len(col_types)} types were provided"
        )
    for label in labels:
        if label not in col_types:
            raise ColumnNotFoundError(
                f"Type for column '{label}' from CSV header not provided"
            )
    data: dict[str, list[Value]] = {label: [] for label in labels}
    for line in lines[1:]:
        cells = [cell.strip() for cell in line.split(",")]
        if len(cells) != len(labels):
            raise DimensionMismatchError(
                f"CSV row has {len(cells)} columns, expected {len(labels)} columns based on header"
            )
        for label, cell in zip(labels, cells):
            data[label].append(_parse_cell(cell, label, col_types[label]))
    return new_dataframe(labels, data)
"""A minimal list-of-columns data frame loaded from CSV with numeric type codes."""

from __future__ import annotations

import argparse
import csv
import math
import sys
from dataclasses import dataclass, field
from os import PathLike
from typing import Callable, Sequence, TypeVar, Union

from .errors import DataFrameError
from .frame import _parse_bool, _parse_f64, _parse_i64
from .values import Value, ValueType, format_value, value_type_of

T = TypeVar("T")
PathType = Union[str, "PathLike[str]"]

# Type codes accepted by BasicFrame.read_csv.
STRING_CODE = 1
BOOL_CODE = 2
FLOAT_CODE = 3
INT_CODE = 4

_PARSERS: dict[int, Callable[[str], Value]] = {
    STRING_CODE: str,
    BOOL_CODE: _parse_bool,
    FLOAT_CODE: _parse_f64,
    INT_CODE: _parse_i64,
}

PLAYER_TYPES = [STRING_CODE, INT_CODE, FLOAT_CODE, INT_CODE, INT_CODE, BOOL_CODE]
HALL_OF_FAME = [True, True, False, True, True]


class FrameError(DataFrameError):
    """An operation on a BasicFrame failed."""

    _template = "There is an error: {}"


@dataclass
class BasicFrame:
    """Labels and columns kept side by side, one list of values per column."""

    labels: list[str] = field(default_factory=list)
    columns: list[list[Value]] = field(default_factory=list)

    def _copy(self) -> BasicFrame:
        return BasicFrame(list(self.labels), [list(column) for column in self.columns])

    def read_csv(self, path: PathType, types: Sequence[int]) -> None:
        """Load a headerless-parsed CSV: first row gives labels, types gives codes 1-4."""
        with open(path, encoding="utf-8", newline="") as handle:
            records = [row for row in csv.reader(handle) if row]
        data: list[list[Value]] = [[] for _ in types]
        first_row = True
        for record in records:
            if first_row:
                self.labels.extend(record)
                first_row = False
                continue
            for index, cell in enumerate(record):
                if index >= len(types):
                    raise IndexError(
                        f"row has more fields than the {len(types)} given types"
                    )
                parser = _PARSERS.get(types[index])
                if parser is None:
                    raise FrameError("Unknown type")
                data[index].append(parser(cell))
        self.columns = data

    def render(self) -> str:
        """Labels on one line, then each row, every item followed by a space."""
        lines = ["".join(f"{label} " for label in self.labels)]
        if self.columns:
            for row in range(len(self.columns[0])):
                lines.append(
                    "".join(f"{format_value(column[row])} " for column in self.columns)
                )
        return "\n".join(lines) + "\n"

    def add_column(self, label: str, data: Sequence[Value]) -> BasicFrame:
        """Return a new frame with an extra column appended."""
        if self.columns and len(self.columns[0]) != len(data):
            raise FrameError("Column length does not match DataFrame row count")
        frame = self._copy()
        frame.labels.append(label)
        frame.columns.append(list(data))
        return frame

    def merge_frame(self, other: BasicFrame) -> BasicFrame:
        """Return a new frame with the rows of other appended below these rows."""
        if self.labels != other.labels:
            raise FrameError("Column labels do not match")
        pairs = list(zip(self.columns, other.columns, strict=True))
        for mine, theirs in pairs:
            if mine and theirs and value_type_of(mine[0]) is not value_type_of(theirs[0]):
                raise FrameError("Column types do not match")
        return BasicFrame(list(self.labels), [[*mine, *theirs] for mine, theirs in pairs])

    def find_columns(self, labels: Sequence[str]) -> list[int]:
        """Positions of the given labels, in the order requested."""
        indices = []
        for label in labels:
            try:
                indices.append(self.labels.index(label))
            except ValueError:
                raise FrameError(f"Column '{label}' not found") from None
        return indices

    def restrict_columns(self, labels: Sequence[str]) -> BasicFrame:
        """Return a new frame holding only the named columns, in the order given."""
        indices = self.find_columns(labels)
        return BasicFrame(
            [self.labels[i] for i in indices], [list(self.columns[i]) for i in indices]
        )

    def filter(self, label: str, operation: Callable[[Value], bool]) -> BasicFrame:
        """Return a new frame with the rows whose value in label satisfies operation."""
        try:
            target = self.labels.index(label)
        except ValueError:
            raise FrameError(f"Column '{label}' not found") from None
        keep = [row for row, value in enumerate(self.columns[target]) if operation(value)]
        return BasicFrame(
            list(self.labels),
            [[column[row] for row in keep] for column in self.columns],
        )

    def column_op(
        self, labels: Sequence[str], op: Callable[[list[list[Value]]], T]
    ) -> T:
        """Call op with copies of the named columns and return its result."""
        return op([list(self.columns[i]) for i in self.find_columns(labels)])

    def median(self, column_label: str) -> float:
        """Median of the float values in a column; other values are ignored."""

        def compute(columns: list[list[Value]]) -> float:
            values = [
                value
                for value in columns[0]
                if value_type_of(value) is ValueType.F64
            ]
            if not values:
                raise ValueError("cannot compute the median of a column without floats")
            if any(math.isnan(value) for value in values):  # type: ignore[arg-type]
                raise ValueError("cannot order NaN values")
            values.sort()  # type: ignore[call-overload]
            mid = len(values) // 2
            if len(values) % 2 == 0:
                return (values[mid - 1] + values[mid]) / 2.0  # type: ignore[operator]
            return values[mid]  # type: ignore[return-value]

        return self.column_op([column_label], compute)

    def sub_columns(self, col1: str, col2: str) -> list[Value]:
        """Row-wise col1 - col2; rows where either value is not a number are skipped."""

        def compute(columns: list[list[Value]]) -> list[Value]:
            first, second = columns
            if len(second) < len(first):
                raise IndexError("second column is shorter than the first")
            result: list[Value] = []
            for left, right in zip(first, second):
                left_type, right_type = value_type_of(left), value_type_of(right)
                if not (left_type.is_numeric and right_type.is_numeric):
                    continue
                if left_type is ValueType.I64 and right_type is ValueType.I64:
                    result.append(left - right)  # type: ignore[operator]
                else:
                    result.append(float(left) - float(right))
            return result

        return self.column_op([col1, col2], compute)


_LOAD_ERRORS = (DataFrameError, OSError, ValueError, IndexError, csv.Error)


def _ppg_above_25(value: Value) -> bool:
    return value_type_of(value) is ValueType.F64 and value > 25.0  # type: ignore[operator]


def main(argv: Sequence[str] | None = None) -> int:
    """Walk through the frame operations on two player CSV files."""
    parser = argparse.ArgumentParser(
        prog="tabframe-basic", description="Demonstrate basic frame operations."
    )
    parser.add_argument("first", nargs="?", default="basketball.csv")
    parser.add_argument("second", nargs="?", default="more_players.csv")
    args = parser.parse_args(argv)

    frame = BasicFrame()
    try:
        frame.read_csv(args.first, PLAYER_TYPES)
    except _LOAD_ERRORS as exc:
        print(f"Error reading CSV: {exc}", file=sys.stderr)
        return 1
    print("CSV file loaded successfully")
    print("Original DataFrame:")
    print(frame.render(), end="")

    try:
        with_hof = frame.add_column("HallOfFame", HALL_OF_FAME)
    except FrameError as exc:
        print(f"Error adding column: {exc}", file=sys.stderr)
        return 1
    print("\nDataFrame with Hall of Fame column:")
    print(with_hof.render(), end="")

    second = BasicFrame()
    try:
        second.read_csv(args.second, PLAYER_TYPES)
    except _LOAD_ERRORS as exc:
        print(f"Error reading second CSV: {exc}", file=sys.stderr)
        return 1
    print("\nSecond CSV file loaded successfully")

    try:
        merged = frame.merge_frame(second)
    except (FrameError, ValueError) as exc:
        print(f"Error merging DataFrames: {exc}", file=sys.stderr)
        return 1
    print("\nMerged DataFrame:")
    print(merged.render(), end="")

    try:
        restricted = merged.restrict_columns(["Name", "TotalPoints"])
    except FrameError as exc:
        print(f"Error restricting columns: {exc}", file=sys.stderr)
        return 1
    print("\nDataFrame with only Name and TotalPoints:")
    print(restricted.render(), end="")

    try:
        filtered = merged.filter("PPG", _ppg_above_25)
    except FrameError as exc:
        print(f"Error filtering DataFrame: {exc}", file=sys.stderr)
        return 1
    print("\nPlayers with PPG > 25.0:")
    print(filtered.render(), end="")

    try:
        print(f"\nMedian PPG: {format_value(merged.median('PPG'))}")
    except (FrameError, ValueError) as exc:
        print(f"Error calculating median: {exc}", file=sys.stderr)

    try:
        differences = merged.sub_columns("TotalPoints", "YearBorn")
    except (FrameError, IndexError) as exc:
        print(f"Error subtracting columns: {exc}", file=sys.stderr)
    else:
        print("\nTotalPoints - YearBorn:")
        print("".join(f"{format_value(value)} " for value in differences))
    return 0


if __name__ == "__main__":
    sys.exit(main())
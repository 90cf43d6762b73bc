"""Command that walks through the data frame operations on two CSV files."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .errors import DataFrameError, TypeMismatchError
from .frame import DataFrame, read_csv
from .values import Column, Value, ValueType, format_value, value_type_of

COLUMN_TYPES = {
    "Name": ValueType.STRING,
    "Number": ValueType.I64,
    "PPG": ValueType.F64,
    "YearBorn": ValueType.I64,
    "TotalPoints": ValueType.I64,
    "LikesPizza": ValueType.BOOL,
}

HALL_OF_FAME_FIRST = [True] * 10
HALL_OF_FAME_SECOND = [True] * 6


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabframe", description="Demonstrate data frame operations on player data."
    )
    parser.add_argument("first", nargs="?", default="data.csv", help="first CSV file")
    parser.add_argument("second", nargs="?", default="data2.csv", help="second CSV file")
    return parser


def _high_scorer(value: Value) -> bool:
    return value_type_of(value) is ValueType.F64 and value > 25.0  # type: ignore[operator]


def _sum_points(columns: list[Column]) -> int:
    total = 0
    for value in columns[0]:
        if value_type_of(value) is not ValueType.I64:
            raise TypeMismatchError("Expected I64 for TotalPoints sum")
        total += value  # type: ignore[operator]
    return total


def _run(first: str, second: str) -> None:
    print(f"--- Reading {first} ---")
    df1: DataFrame = read_csv(first, COLUMN_TYPES)
    print("Initial DataFrame (df1):")
    print(df1)

    print("\n--- Adding 'hall_of_fame' column ---")
    df1 = df1.add_column("hall_of_fame", HALL_OF_FAME_FIRST)
    print("DataFrame after adding column:")
    print(df1)

    print(f"\n--- Reading {second} and merging ---")
    df2 = read_csv(second, COLUMN_TYPES)
    print("Second DataFrame (df2):")
    print(df2)

    df2 = df2.add_column("hall_of_fame", HALL_OF_FAME_SECOND)
    merged = df1.merge_frame(df2)
    print("Merged DataFrame:")
    print(merged)

    print("\n--- Restricting columns to 'Name' and 'TotalPoints' ---")
    restricted = merged.restrict_columns(["Name", "TotalPoints"])
    print("Restricted DataFrame:")
    print(restricted)

    print("\n--- Filtering for players with PPG > 25.0 ---")
    filtered = merged.filter("PPG", _high_scorer)
    print("Filtered DataFrame (PPG > 25.0):")
    print(filtered)

    print("\n--- Calculating Median PPG ---")
    print(f"Median PPG: {format_value(merged.median('PPG'))}")

    print("\n--- Subtracting YearBorn from TotalPoints ---")
    differences = merged.sub_columns("TotalPoints", "YearBorn")
    print("Result of TotalPoints - YearBorn:")
    print(f"[ {', '.join(format_value(value) for value in differences)} ]")

    print("\n--- Using column_op to calculate sum of TotalPoints ---")
    total = merged.column_op(["TotalPoints"], _sum_points)
    print(f"Sum of TotalPoints (calculated via column_op): {total}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the walkthrough; return 0 on success and 1 on error."""
    args = _parser().parse_args(argv)
    try:
        _run(args.first, args.second)
    except (DataFrameError, OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
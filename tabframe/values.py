"""Cell values, their types and typed columns."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Iterator, Union

from .errors import TypeMismatchError

Value = Union[str, float, int, bool]


class ValueType(Enum):
    """The type of the values held in a column."""

    STRING = "String"
    F64 = "F64"
    I64 = "I64"
    BOOL = "Bool"

    def __repr__(self) -> str:
        return self.value

    @property
    def is_numeric(self) -> bool:
        return self in (ValueType.F64, ValueType.I64)


def value_type_of(value: Value) -> ValueType:
    """Return the ValueType of a cell value."""
    # bool is a subclass of int, so it has to be checked first.
    if isinstance(value, bool):
        return ValueType.BOOL
    if isinstance(value, int):
        return ValueType.I64
    if isinstance(value, float):
        return ValueType.F64
    if isinstance(value, str):
        return ValueType.STRING
    raise TypeError(f"unsupported cell value: {value!r}")


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_value(value: Value) -> str:
    """Render a cell value as text, without exponents or trailing '.0'."""
    kind = value_type_of(value)
    if kind is ValueType.BOOL:
        return "true" if value else "false"
    if kind is ValueType.F64:
        return _format_float(value)  # type: ignore[arg-type]
    return str(value)


def _debug_value(value: Value) -> str:
    kind = value_type_of(value)
    if kind is ValueType.STRING:
        return f'{kind.value}("{value}")'
    return f"{kind.value}({format_value(value)})"


@dataclass
class Column:
    """A sequence of values that all share one ValueType."""

    data_type: ValueType | None = None
    data: list[Value] = field(default_factory=list)

    def add(self, value: Value) -> None:
        """Append a value; the first value fixes the type of an untyped column."""
        kind = value_type_of(value)
        if self.data_type is None:
            self.data_type = kind
        elif kind is not self.data_type:
            raise TypeMismatchError(
                f"Attempted to add value {_debug_value(value)} "
                f"to column of type {self.data_type.value}"
            )
        self.data.append(value)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.data)
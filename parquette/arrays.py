"""In-memory representation of decoded column values."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

__all__ = ["ArrayKind", "Array", "Value"]


class ArrayKind(enum.Enum):
    """The kind of values an :class:`Array` or :class:`Value` holds."""

    UINT32 = "uint32"
    INT32 = "int32"
    INT64 = "int64"
    INT96 = "int96"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOLEAN = "boolean"
    BINARY = "binary"
    LIST = "list"
    STRUCT = "struct"


@dataclass
class Array:
    """A column of optional values of one kind.

    For ``LIST`` arrays each item is an :class:`Array` or ``None``. For
    ``STRUCT`` arrays ``values`` holds the child arrays and ``validity``
    holds one flag per row.
    """

    kind: ArrayKind
    values: list[Any]
    validity: list[bool] | None = None

    def __post_init__(self) -> None:
        self.values = list(self.values)
        if self.kind is ArrayKind.STRUCT:
            if self.validity is None:
                raise ValueError("a struct array needs a validity list")
            self.validity = [bool(flag) for flag in self.validity]
            if not all(isinstance(child, Array) for child in self.values):
                raise TypeError("the children of a struct array must be arrays")
        elif self.validity is not None:
            raise ValueError(f"a {self.kind.value} array takes no validity list")
        elif self.kind is ArrayKind.LIST and not all(
            item is None or isinstance(item, Array) for item in self.values
        ):
            raise TypeError("the items of a list array must be arrays or None")

    def __len__(self) -> int:
        if self.kind is ArrayKind.STRUCT:
            if not self.values:
                raise ValueError("a struct array without children has no length")
            return len(self.values[0])
        return len(self.values)

    def is_empty(self) -> bool:
        """Whether the array has no rows."""
        return len(self) == 0


@dataclass
class Value:
    """A single optional value of one kind."""

    kind: ArrayKind
    value: Any = None

    def __post_init__(self) -> None:
        if self.kind is ArrayKind.STRUCT:
            raise ValueError("a single value cannot be of kind struct")
        if self.kind is ArrayKind.LIST and not (
            self.value is None or isinstance(self.value, Array)
        ):
            raise TypeError("a list value must be an array or None")
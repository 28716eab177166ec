"""Decoding of plain-encoded values and of definition and repetition levels."""

from __future__ import annotations

import enum
import struct
from typing import Any, Iterable, Iterator, TypeVar

from parquette.arrays import Array, ArrayKind

__all__ = [
    "NativeType",
    "values_def",
    "is_set",
    "get_bit",
    "decode_booleans",
    "decode_plain",
    "compose_list",
]

T = TypeVar("T")

_BIT_MASK = (1, 2, 4, 8, 16, 32, 64, 128)


class NativeType(enum.Enum):
    """Physical value types stored little-endian with a fixed width."""

    INT32 = "<i"
    INT64 = "<q"
    INT96 = "<3I"
    FLOAT32 = "<f"
    FLOAT64 = "<d"

    @property
    def size(self) -> int:
        """Width of one value in bytes."""
        return struct.calcsize(self.value)


def values_def(
    values: Iterable[T], def_levels: Iterable[int], max_def_level: int
) -> Iterator[T | None]:
    """Yield one item per definition level.

    A level equal to ``max_def_level`` takes the next value (``None`` once the
    values run out); any other level yields ``None``.
    """
    values = iter(values)
    for level in def_levels:
        if level == max_def_level:
            yield next(values, None)
        else:
            yield None


def is_set(byte: int, i: int) -> bool:
    """Whether bit ``i`` (0 is the least significant) of ``byte`` is set."""
    if not 0 <= i < 8:
        raise IndexError(f"bit index {i} is out of range 0..7")
    return (byte & _BIT_MASK[i]) != 0


def get_bit(data: bytes, i: int) -> bool:
    """Whether bit ``i`` of ``data`` is set.

    The most significant byte is the last one, and within a byte the most
    significant bit is the last one.
    """
    if i < 0:
        raise IndexError(f"bit index {i} is negative")
    byte_index = len(data) - 1 - i // 8
    if byte_index < 0:
        raise IndexError(f"bit index {i} is beyond {len(data)} bytes")
    return is_set(data[byte_index], i % 8)


def decode_booleans(data: bytes, length: int) -> list[bool]:
    """Decode ``length`` plain-encoded booleans from ``data``."""
    return [get_bit(data, i) for i in range(length)]


def decode_plain(data: bytes, native_type: NativeType) -> list[Any]:
    """Decode plain-encoded values of ``native_type``.

    INT96 values come back as tuples of three unsigned 32-bit integers.
    """
    data = bytes(data)
    if len(data) % native_type.size:
        raise ValueError(
            f"{len(data)} bytes is not a multiple of the {native_type.name} "
            f"width of {native_type.size}"
        )
    if native_type is NativeType.INT96:
        return list(struct.iter_unpack(native_type.value, data))
    return [item for (item,) in struct.iter_unpack(native_type.value, data)]


def compose_list(
    rep_levels: Iterable[int],
    def_levels: Iterable[int],
    max_rep: int,
    max_def: int,
    values: Iterable[int],
) -> Array:
    """Build an optional list of optional 64-bit integers from its levels.

    Only one level of nesting is supported: ``max_rep`` must be 1 and
    ``max_def`` must be 3.
    """
    if max_rep != 1:
        raise ValueError(f"only a maximum repetition level of 1 is supported, got {max_rep}")
    if max_def != 3:
        raise ValueError(f"only a maximum definition level of 3 is supported, got {max_def}")

    values = iter(values)
    outer: list[Array | None] = []
    inner: list[int | None] = []
    prev_def = 0
    for rep, level in zip(rep_levels, def_levels):
        if rep == 0:
            if prev_def > 1:
                outer.append(Array(ArrayKind.INT64, inner))
                inner = []
        elif rep != 1:
            raise ValueError(f"invalid repetition level {rep}")

        if level == 3:
            try:
                inner.append(next(values))
            except StopIteration:
                raise ValueError("fewer values than defined slots") from None
        elif level == 2:
            inner.append(None)
        elif level == 1:
            outer.append(Array(ArrayKind.INT64, []))
        elif level == 0:
            outer.append(None)
        else:
            raise ValueError(f"invalid definition level {level}")
        prev_def = level

    outer.append(Array(ArrayKind.INT64, inner))
    return Array(ArrayKind.LIST, outer)
"""A seekable reader over a remote blob fetched in ranges."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Awaitable, Callable

__all__ = ["SeekOutput", "RangedStreamer", "range_includes"]


@dataclass
class SeekOutput:
    """A chunk of the blob starting at ``start``."""

    start: int
    data: bytes


RangeGet = Callable[[int, int], Awaitable[SeekOutput]]


def range_includes(a: tuple[int, int], test_interval: tuple[int, int]) -> bool:
    """Whether ``test_interval`` (start, length) lies inside ``a`` (start, length)."""
    if test_interval[0] < a[0]:
        return False
    return test_interval[0] + test_interval[1] <= a[0] + a[1]


class RangedStreamer:
    """Reads a blob of known length through an async ranged-get callable.

    Each fetch asks for at least ``min_request_size`` bytes; reads served by the
    chunk already held do not fetch again.
    """

    def __init__(self, length: int, min_request_size: int, range_get: RangeGet) -> None:
        self._pos = 0
        self._length = length
        self._min_request_size = min_request_size
        self._range_get = range_get
        self._chunk = SeekOutput(start=0, data=b"")

    def _covers(self, size: int) -> bool:
        chunk = self._chunk
        return range_includes((chunk.start, len(chunk.data)), (self._pos, size))

    async def read(self, size: int) -> bytes:
        """Read exactly ``size`` bytes from the current position."""
        if not self._covers(size):
            length = max(self._min_request_size, size)
            self._chunk = await self._range_get(self._pos, length)
            if not self._covers(size):
                raise OSError(
                    f"range request at {self._pos} did not return {size} bytes"
                )
        offset = self._pos - self._chunk.start
        data = bytes(self._chunk.data[offset : offset + size])
        self._pos += size
        return data

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """Move the position and return it."""
        if whence == os.SEEK_SET:
            new = offset
        elif whence == os.SEEK_END:
            new = self._length + offset
        elif whence == os.SEEK_CUR:
            new = self._pos + offset
        else:
            raise ValueError(f"invalid whence: {whence}")
        if new < 0:
            raise ValueError(f"negative seek position {new}")
        self._pos = new
        return new

    def tell(self) -> int:
        """Return the current position."""
        return self._pos
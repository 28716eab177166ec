"""Block compression and decompression for the codecs a column chunk may use."""

from __future__ import annotations

import enum
import gzip
import zlib

import brotli
import lz4.frame
import zstandard

__all__ = ["Compression", "CompressionError", "compress", "decompress"]

_BROTLI_QUALITY = 1
_BROTLI_LG_WINDOW = 22
_GZIP_LEVEL = 6
_ZSTD_LEVEL = 1


class Compression(enum.Enum):
    """Compression codecs of a column chunk."""

    UNCOMPRESSED = "uncompressed"
    SNAPPY = "snappy"
    GZIP = "gzip"
    LZO = "lzo"
    BROTLI = "brotli"
    LZ4 = "lz4"
    ZSTD = "zstd"


class CompressionError(Exception):
    """Raised when data cannot be compressed or decompressed."""


def compress(compression: Compression, data: bytes) -> bytes:
    """Compress ``data`` with ``compression`` and return the compressed bytes."""
    data = bytes(data)
    if compression is Compression.UNCOMPRESSED:
        raise CompressionError("Compressing without compression is not valid")
    try:
        if compression is Compression.BROTLI:
            return brotli.compress(data, quality=_BROTLI_QUALITY, lgwin=_BROTLI_LG_WINDOW)
        if compression is Compression.GZIP:
            return gzip.compress(data, compresslevel=_GZIP_LEVEL, mtime=0)
        if compression is Compression.SNAPPY:
            return _snappy_compress(data)
        if compression is Compression.LZ4:
            return lz4.frame.compress(data)
        if compression is Compression.ZSTD:
            return zstandard.ZstdCompressor(level=_ZSTD_LEVEL).compress(data)
    except CompressionError:
        raise
    except Exception as exc:  # codec libraries raise their own error types
        raise CompressionError(str(exc)) from exc
    raise CompressionError(f"Compression {compression.name} is not supported")


def decompress(compression: Compression, data: bytes, size: int) -> bytes:
    """Decompress ``data`` into exactly ``size`` bytes."""
    data = bytes(data)
    if compression is Compression.UNCOMPRESSED:
        raise CompressionError("Compressing without compression is not valid")
    try:
        if compression is Compression.BROTLI:
            return _exact(brotli.decompress(data), size)
        if compression is Compression.GZIP:
            return _exact(gzip.decompress(data), size)
        if compression is Compression.SNAPPY:
            expected = _snappy_decompressed_len(data)
            if expected > size:
                raise CompressionError(
                    f"snappy data decompresses to {expected} bytes, more than {size}"
                )
            out = _snappy_decompress(data)
            return out + bytes(size - len(out))
        if compression is Compression.LZ4:
            return _exact(lz4.frame.decompress(data), size)
        if compression is Compression.ZSTD:
            out = zstandard.ZstdDecompressor().decompressobj().decompress(data)
            return _exact(out, size)
    except CompressionError:
        raise
    except (zlib.error, OSError, EOFError, RuntimeError, ValueError) as exc:
        raise CompressionError(str(exc)) from exc
    except Exception as exc:  # brotli, lz4 and zstandard have their own error types
        raise CompressionError(str(exc)) from exc
    raise CompressionError(f"Compression {compression.name} is not yet supported")


def _exact(out: bytes, size: int) -> bytes:
    if len(out) < size:
        raise CompressionError("failed to fill whole buffer")
    return out[:size]


# --- raw snappy ---------------------------------------------------------------


def _write_uvarint(out: bytearray, value: int) -> None:
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)


def _read_uvarint(data: bytes, pos: int) -> tuple[int, int]:
    result = 0
    shift = 0
    while True:
        if pos >= len(data) or shift > 63:
            raise CompressionError("snappy: invalid length header")
        byte = data[pos]
        pos += 1
        result |= (byte & 0x7F) << shift
        if byte < 0x80:
            return result, pos
        shift += 7


def _emit_literal(out: bytearray, chunk: bytes) -> None:
    if not chunk:
        return
    marker = len(chunk) - 1
    if marker < 60:
        out.append(marker << 2)
    else:
        width = (marker.bit_length() + 7) // 8
        out.append((59 + width) << 2)
        out += marker.to_bytes(width, "little")
    out += chunk


def _emit_copy(out: bytearray, offset: int, length: int) -> None:
    while length > 0:
        step = min(length, 64)
        if offset <= 0xFFFF:
            out.append(((step - 1) << 2) | 2)
            out += offset.to_bytes(2, "little")
        else:
            out.append(((step - 1) << 2) | 3)
            out += offset.to_bytes(4, "little")
        length -= step


def _snappy_compress(data: bytes) -> bytes:
    out = bytearray()
    total = len(data)
    _write_uvarint(out, total)
    table: dict[bytes, int] = {}
    pos = 0
    literal_start = 0
    while pos + 4 <= total:
        key = data[pos : pos + 4]
        candidate = table.get(key)
        table[key] = pos
        if candidate is None:
            pos += 1
            continue
        limit = total - pos
        length = 4
        while (
            length + 64 <= limit
            and data[candidate + length : candidate + length + 64]
            == data[pos + length : pos + length + 64]
        ):
            length += 64
        while length < limit and data[candidate + length] == data[pos + length]:
            length += 1
        _emit_literal(out, data[literal_start:pos])
        _emit_copy(out, pos - candidate, length)
        pos += length
        literal_start = pos
    _emit_literal(out, data[literal_start:])
    return bytes(out)


def _snappy_decompressed_len(data: bytes) -> int:
    return _read_uvarint(data, 0)[0]


def _snappy_decompress(data: bytes) -> bytes:
    expected, pos = _read_uvarint(data, 0)
    out = bytearray()
    end = len(data)
    while pos < end:
        tag = data[pos]
        pos += 1
        kind = tag & 3
        if kind == 0:
            size = tag >> 2
            if size >= 60:
                width = size - 59
                if pos + width > end:
                    raise CompressionError("snappy: truncated literal header")
                size = int.from_bytes(data[pos : pos + width], "little")
                pos += width
            size += 1
            if pos + size > end:
                raise CompressionError("snappy: truncated literal")
            out += data[pos : pos + size]
            pos += size
            continue
        if kind == 1:
            if pos >= end:
                raise CompressionError("snappy: truncated copy")
            size = ((tag >> 2) & 7) + 4
            offset = ((tag >> 5) << 8) | data[pos]
            pos += 1
        else:
            width = 2 if kind == 2 else 4
            if pos + width > end:
                raise CompressionError("snappy: truncated copy")
            size = (tag >> 2) + 1
            offset = int.from_bytes(data[pos : pos + width], "little")
            pos += width
        if offset == 0 or offset > len(out):
            raise CompressionError("snappy: invalid copy offset")
        start = len(out) - offset
        if offset >= size:
            out += out[start : start + size]
        else:
            pattern = bytes(out[start:])
            out += (pattern * (size // offset + 1))[:size]
        if len(out) > expected:
            raise CompressionError("snappy: output exceeds declared length")
    if len(out) != expected:
        raise CompressionError("snappy: output shorter than declared length")
    return bytes(out)
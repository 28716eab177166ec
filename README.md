# parquette

Small building blocks for working with Parquet data in Python.

## Modules

### `parquette.compression`

Compresses and decompresses page buffers. Pick the codec with the `Compression` enum.

- `compress(compression, data)` returns the compressed bytes.
- `decompress(compression, data, size)` returns exactly `size` bytes.

Supported codecs:

- `GZIP` uses the standard library.
- `BROTLI` uses quality 1 and a 22-bit window.
- `LZ4` uses the LZ4 frame format.
- `ZSTD` uses level 1.
- `SNAPPY` is raw Snappy, implemented in pure Python.

A few cases raise `CompressionError`:

- passing `Compression.UNCOMPRESSED` to either function;
- passing `Compression.LZO`, which is not supported;
- decompressing data that is corrupt;
- decompressing data that yields fewer than `size` bytes.

For Snappy, the output may be shorter than `size`. In that case it is padded with zero bytes. If the length in the Snappy header is larger than `size`, `CompressionError` is raised.

### `parquette.ranged`

`RangedStreamer(length, min_request_size, range_get)` reads a blob of known length through an async callable. The callable is `range_get(start, length)` and must return a `SeekOutput(start, data)`.

- `await streamer.read(size)` returns exactly `size` bytes from the current position.
  - If the last fetched chunk covers the request, no new fetch is made.
  - Otherwise it fetches at least `min_request_size` bytes.
  - If the returned chunk still does not cover the request, it raises `OSError`.
- `seek(offset, whence)` accepts `os.SEEK_SET`, `os.SEEK_CUR` and `os.SEEK_END`.
- `tell()` returns the current position.

`range_includes(a, test_interval)` tells whether one `(start, length)` interval lies inside another.

### `parquette.arrays`

- `Array(kind, values, validity=None)` holds a column of optional values tagged with an `ArrayKind`:
  - numeric, boolean and binary kinds;
  - `LIST`, whose items are `Array` or `None`;
  - `STRUCT`, whose `values` are child arrays and which needs a `validity` list.
- `len(array)` gives the number of rows, and `is_empty()` tells whether there are none. For a struct, the row count is the length of its first child.
- `Value(kind, value)` holds a single optional value.

### `parquette.decode`

- `values_def(values, def_levels, max_def_level)` yields one optional value per definition level. A level equal to `max_def_level` takes the next value; any other level gives `None`.
- `decode_booleans(data, length)` reads bit-packed PLAIN booleans, and so do `get_bit` and `is_set`. The last byte is the most significant one.
- `decode_plain(data, native_type)` reads little-endian fixed-width values of a `NativeType`:
  - `INT32`, `INT64`, `FLOAT32` and `FLOAT64` give one number per value;
  - `INT96` gives tuples of three unsigned 32-bit integers.
- `compose_list(rep_levels, def_levels, max_rep, max_def, values)` rebuilds an optional list of optional 64-bit integers from its levels. Only `max_rep == 1` and `max_def == 3` are supported.

## Example

```python
from parquette.compression import Compression, compress, decompress
from parquette.decode import NativeType, decode_plain, values_def

data = bytes(x % 255 for x in range(10_000))
packed = compress(Compression.SNAPPY, data)
assert decompress(Compression.SNAPPY, packed, len(data)) == data

raw = (1).to_bytes(4, "little") + (2).to_bytes(4, "little")
values = decode_plain(raw, NativeType.INT32)
print(list(values_def(values, [1, 0, 1], 1)))   # [1, None, 2]
```

## What it does not do

The package cannot open a Parquet file on its own. It does not:

- read the file footer, metadata or schema;
- iterate over pages;
- decode hybrid RLE/bit-packed level streams or dictionary pages;
- write files.

There is no command-line tool. The caller supplies raw page buffers and already decoded level sequences.

## Running the tests

```
pip install -e ".[test]"
pytest
```
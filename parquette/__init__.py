"""Parquet building blocks: compression codecs, plain and level decoding, in-memory arrays and a ranged reader."""

__version__ = "0.1.0"
__all__ = ["arrays", "compression", "decode", "ranged"]
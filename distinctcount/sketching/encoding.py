"""Conversion of domain values to the bytes fed to an estimator.

The estimator only sees raw bytes, so two values are "the same element" iff
their encodings are equal. Integers use fixed-width little-endian layouts:
the 32-bit form matches the in-memory bytes of an unsigned 32-bit counter.
"""

from __future__ import annotations

import struct
from typing import Any

_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_F64 = struct.Struct("<d")

U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1


def encode_u32(value: int) -> bytes:
    """Encode an unsigned 32-bit integer as 4 little-endian bytes."""
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"value must be in [0, {U32_MAX}], got {value}")
    return _U32.pack(value)


def encode_u64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as 8 little-endian bytes."""
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"value must be in [0, {U64_MAX}], got {value}")
    return _U64.pack(value)


def encode_value(value: Any) -> bytes:
    """Encode a supported value to bytes.

    - bytes, bytearray, memoryview: passed through
    - str: UTF-8
    - int: u32 if it fits, else u64
    - float: IEEE 754 double

    Raises:
        TypeError: For unsupported types (including bool).
        ValueError: For negative ints or ints wider than 64 bits.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, bool):
        raise TypeError("cannot encode bool, convert it to int explicitly")
    if isinstance(value, int):
        if 0 <= value <= U32_MAX:
            return _U32.pack(value)
        return encode_u64(value)
    if isinstance(value, float):
        return _F64.pack(value)
    raise TypeError(f"cannot encode value of type {type(value).__name__}")

"""Cardinality sketches.

Quick Reference:
    HyperLogLog: Distinct count estimation in 2^precision bytes
    HyperLogLogConfig: Validated precision settings
    hash128 / split_hash / rho: Hash-to-register mapping
    encode_value / encode_u32 / encode_u64: Value-to-bytes conversion

Example:
    from distinctcount.sketching import HyperLogLog, encode_u32

    hll = HyperLogLog(precision=14)
    for i in range(100_000):
        hll.insert(encode_u32(i))
    print(f"~{hll.estimate():.0f} distinct values")
"""

# Base protocols
from distinctcount.sketching.base import CardinalitySketch, Sketch

# Configuration
from distinctcount.sketching.config import (
    DEFAULT_PRECISION,
    MAX_PRECISION,
    MIN_PRECISION,
    HyperLogLogConfig,
)

# Value encoding
from distinctcount.sketching.encoding import encode_u32, encode_u64, encode_value

# Hash mapping
from distinctcount.sketching.hashing import HASH_KEY, hash128, rho, split_hash

# Cardinality estimation
from distinctcount.sketching.hyperloglog import HyperLogLog

__all__ = [
    "CardinalitySketch",
    "DEFAULT_PRECISION",
    "HASH_KEY",
    "HyperLogLog",
    "HyperLogLogConfig",
    "MAX_PRECISION",
    "MIN_PRECISION",
    "Sketch",
    "encode_u32",
    "encode_u64",
    "encode_value",
    "hash128",
    "rho",
    "split_hash",
]

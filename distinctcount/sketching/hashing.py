"""Hash mapping and rank computation for HyperLogLog.

An inserted byte string is hashed to a uniformly distributed 128-bit
integer. The low `precision` bits pick a register; the remaining
128 - precision bits feed the rank function rho, the 1-based position of
the leftmost set bit within that window.

    hash_value (128 bits)
    +---------------------------------------------+-----------+
    |           remaining (128 - p bits)          | index (p) |
    +---------------------------------------------+-----------+
"""

from __future__ import annotations

import hashlib

HASH_DIGEST_SIZE = 16

# Fixed all-zero key. The key never changes at runtime, so identical input
# sequences produce identical registers across runs and processes.
HASH_KEY = bytes(16)


def hash128(data: bytes) -> int:
    """Hash bytes to an integer in [0, 2^128).

    Uses keyed BLAKE2b with a 16-byte digest, read as little-endian.
    """
    digest = hashlib.blake2b(data, digest_size=HASH_DIGEST_SIZE, key=HASH_KEY).digest()
    return int.from_bytes(digest, "little")


def split_hash(hash_value: int, precision: int) -> tuple[int, int]:
    """Split a hash into (register index, remaining bits).

    Args:
        hash_value: 128-bit hash from hash128().
        precision: Number of low bits used for the index.

    Returns:
        The low `precision` bits as the index and the hash shifted right
        by `precision` as the remainder.
    """
    index = hash_value & ((1 << precision) - 1)
    remaining = hash_value >> precision
    return index, remaining


def rho(remaining: int, max_bits: int) -> int:
    """Position of the leftmost 1-bit of `remaining` in a max_bits-bit window.

    Leading zeros are counted within the window only, so the result is in
    [1, max_bits + 1]. An all-zero window returns max_bits + 1.

    Example:
        rho(0b1000, 4) == 1
        rho(0b0001, 4) == 4
        rho(0, 4) == 5
    """
    remaining &= (1 << max_bits) - 1
    return max_bits - remaining.bit_length() + 1

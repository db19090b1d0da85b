"""HyperLogLog for cardinality (distinct count) estimation.

HyperLogLog estimates the number of distinct elements in a data stream
using a small, fixed amount of memory regardless of the stream size.

Each element is hashed to 128 bits. The low `precision` bits choose one of
m = 2^precision registers, and the register keeps the largest rank (position
of the leftmost 1-bit in the rest of the hash) seen so far. A rank of k
suggests about 2^k distinct elements landed in that register.

Key properties:
- Space: m one-byte registers (16 B to 64 KB)
- Update: O(1)
- Query: O(m)
- Error: ~1.04/sqrt(m) standard error

Only the small-range correction (linear counting) is applied. Estimates for
cardinalities far above m keep the raw harmonic-mean formula.

Reference:
    Flajolet, Fusy, Gandouet, Meunier. "HyperLogLog: the analysis of a
    near-optimal cardinality estimation algorithm" (2007)
"""

from __future__ import annotations

import logging
import math
import sys
from typing import Any

from distinctcount.errors import RegisterAllocationError
from distinctcount.sketching.base import CardinalitySketch
from distinctcount.sketching.config import (
    DEFAULT_PRECISION,
    HASH_BITS,
    HyperLogLogConfig,
    validate_precision,
)
from distinctcount.sketching.encoding import encode_value
from distinctcount.sketching.hashing import hash128, rho, split_hash

logger = logging.getLogger(__name__)


class HyperLogLog(CardinalitySketch):
    """HyperLogLog for streaming cardinality estimation.

    Args:
        precision: Number of bits for register index (4-16).
            - precision=4: 16 registers, ~26% error
            - precision=10: 1024 registers, ~3.2% error
            - precision=14: 16384 registers, ~0.8% error
            Default is 14.

    Raises:
        PrecisionOutOfRangeError: If precision not in [4, 16].
        RegisterAllocationError: If the registers cannot be allocated.

    Example:
        hll = HyperLogLog(precision=14)

        for visitor_id in visitor_stream:
            hll.add(visitor_id)

        print(f"~{hll.estimate():.0f} unique visitors")
    """

    # Bias correction constants from the paper, keyed by register count
    _ALPHA = {
        16: 0.673,
        32: 0.697,
        64: 0.709,
    }

    def __init__(self, precision: int = DEFAULT_PRECISION):
        validate_precision(precision)
        num_registers = 1 << precision
        try:
            registers = bytearray(num_registers)
        except MemoryError as exc:
            logger.warning("Register allocation failed for precision=%d", precision)
            raise RegisterAllocationError(num_registers) from exc

        self._precision = precision
        self._num_registers = num_registers
        self._max_bits = HASH_BITS - precision
        self._registers = registers
        self._total_count = 0
        logger.debug(
            "Created HyperLogLog precision=%d registers=%d", precision, num_registers
        )

    @classmethod
    def from_config(cls, config: HyperLogLogConfig) -> HyperLogLog:
        """Create an estimator from a validated config."""
        return cls(precision=config.precision)

    @property
    def precision(self) -> int:
        """Number of bits used for register indexing."""
        return self._precision

    @property
    def num_registers(self) -> int:
        """Number of registers (2^precision)."""
        return self._num_registers

    @property
    def max_rank(self) -> int:
        """Largest value any register can reach."""
        return self._max_bits + 1

    @property
    def registers(self) -> bytes:
        """Snapshot of the register array."""
        return bytes(self._registers)

    @property
    def zero_count(self) -> int:
        """Number of registers that were never updated."""
        return self._registers.count(0)

    def insert(self, data: bytes) -> None:
        """Insert the raw bytes of one stream element.

        Re-inserting bytes already seen leaves the registers unchanged.
        """
        index, remaining = split_hash(hash128(data), self._precision)
        rank = rho(remaining, self._max_bits)
        if rank > self._registers[index]:
            self._registers[index] = rank
        self._total_count += 1

    def add(self, item: Any, count: int = 1) -> None:
        """Encode an item and insert it.

        Only the presence of the item matters for the estimate; count just
        feeds item_count.

        Args:
            item: bytes, str, int or float (see encoding.encode_value).
            count: Number of occurrences. 0 is a no-op.

        Raises:
            ValueError: If count is negative.
            TypeError: If the item type cannot be encoded.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return
        self.insert(encode_value(item))
        self._total_count += count - 1

    def _alpha(self) -> float:
        """Get bias correction factor alpha_m."""
        m = self._num_registers
        if m in self._ALPHA:
            return self._ALPHA[m]
        return 0.7213 / (1.0 + 1.079 / m)

    def raw_estimate(self) -> float:
        """Harmonic-mean estimate before the small-range correction."""
        m = float(self._num_registers)
        indicator = math.fsum(2.0 ** -r for r in self._registers)
        return self._alpha() * m * m / indicator

    def estimate(self) -> float:
        """Estimate the number of distinct elements inserted.

        Falls back to linear counting, m * ln(m / zeros), when the raw
        estimate is at most 2.5 * m and some register is still zero.
        Does not modify the sketch.
        """
        m = float(self._num_registers)
        estimate = self.raw_estimate()
        zeros = self.zero_count
        if estimate <= 2.5 * m and zeros > 0:
            estimate = m * math.log(m / zeros)
        return estimate

    def cardinality(self) -> int:
        """Estimate rounded to the nearest integer."""
        return round(self.estimate())

    def standard_error(self) -> float:
        """Theoretical standard error of the estimate.

        Returns:
            Expected relative error (e.g., 0.01 for 1% error).
        """
        return 1.04 / math.sqrt(self._num_registers)

    @property
    def memory_bytes(self) -> int:
        """Estimated memory usage in bytes."""
        return sys.getsizeof(self._registers) + sys.getsizeof(self)

    @property
    def item_count(self) -> int:
        """Total count of items added (not distinct count)."""
        return self._total_count

    def __repr__(self) -> str:
        return (
            f"HyperLogLog(precision={self._precision}, "
            f"registers={self._num_registers}, "
            f"cardinality≈{self.cardinality()})"
        )

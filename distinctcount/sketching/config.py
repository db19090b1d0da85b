"""Configuration for HyperLogLog estimators.

Precision trades memory for accuracy: the estimator keeps 2^precision
one-byte registers and its standard error is about 1.04/sqrt(2^precision).

    precision=4:  16 registers,     ~26% error
    precision=10: 1024 registers,   ~3.2% error
    precision=14: 16384 registers,  ~0.8% error
    precision=16: 65536 registers,  ~0.4% error

Environment variables:
    DC_PRECISION: Precision used by HyperLogLogConfig.from_env()
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from distinctcount.errors import ConfigError, PrecisionOutOfRangeError

MIN_PRECISION = 4
MAX_PRECISION = 16
DEFAULT_PRECISION = 14

# Width of the hash produced by distinctcount.sketching.hashing.hash128
HASH_BITS = 128

PRECISION_ENV_VAR = "DC_PRECISION"


def validate_precision(precision: int) -> int:
    """Check that precision is an integer in [MIN_PRECISION, MAX_PRECISION].

    Returns:
        The precision, unchanged.

    Raises:
        PrecisionOutOfRangeError: If precision is out of range.
        ConfigError: If precision is not an integer.
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise ConfigError(f"precision must be an int, got {type(precision).__name__}")
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise PrecisionOutOfRangeError(precision, MIN_PRECISION, MAX_PRECISION)
    return precision


@dataclass(frozen=True, slots=True)
class HyperLogLogConfig:
    """Validated estimator settings.

    Attributes:
        precision: Number of hash bits used for the register index (4-16).
    """

    precision: int = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        validate_precision(self.precision)

    @property
    def num_registers(self) -> int:
        """Number of registers (2^precision)."""
        return 1 << self.precision

    @property
    def max_bits(self) -> int:
        """Bits of the hash left for rank computation after the index."""
        return HASH_BITS - self.precision

    @property
    def max_rank(self) -> int:
        """Largest value a register can hold."""
        return self.max_bits + 1

    @property
    def standard_error(self) -> float:
        """Theoretical relative standard error, 1.04/sqrt(m)."""
        return 1.04 / math.sqrt(self.num_registers)

    @classmethod
    def from_env(cls) -> HyperLogLogConfig:
        """Build a config from the DC_PRECISION environment variable.

        Falls back to DEFAULT_PRECISION when the variable is unset or empty.

        Raises:
            ConfigError: If the variable is not an integer or out of range.
        """
        raw = os.environ.get(PRECISION_ENV_VAR, "").strip()
        if not raw:
            return cls()
        try:
            precision = int(raw)
        except ValueError:
            raise ConfigError(
                f"{PRECISION_ENV_VAR} must be an integer, got {raw!r}"
            ) from None
        return cls(precision=precision)

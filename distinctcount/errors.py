"""Exceptions raised by distinctcount.

All construction failures derive from ConfigError, which is a ValueError so
callers that already guard against bad arguments keep working.
"""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when an estimator cannot be constructed."""


class PrecisionOutOfRangeError(ConfigError):
    """Raised when precision falls outside the supported range.

    Attributes:
        precision: The rejected value.
        min_precision: Smallest accepted precision.
        max_precision: Largest accepted precision.
    """

    def __init__(self, precision: int, min_precision: int, max_precision: int):
        self.precision = precision
        self.min_precision = min_precision
        self.max_precision = max_precision
        super().__init__(
            f"precision must be in [{min_precision}, {max_precision}], got {precision}"
        )


class RegisterAllocationError(ConfigError):
    """Raised when the register array cannot be allocated."""

    def __init__(self, num_registers: int):
        self.num_registers = num_registers
        super().__init__(f"could not allocate {num_registers} registers")

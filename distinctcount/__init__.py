"""distinctcount: approximate distinct counting with HyperLogLog.

Example:
    import distinctcount
    from distinctcount import HyperLogLog, encode_u32

    hll = HyperLogLog(precision=14)
    for i in range(100_000):
        hll.insert(encode_u32(i))
    print(hll.estimate())
"""

import logging

from distinctcount.errors import (
    ConfigError,
    PrecisionOutOfRangeError,
    RegisterAllocationError,
)
from distinctcount.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from distinctcount.sketching import (
    HyperLogLog,
    HyperLogLogConfig,
    encode_u32,
    encode_u64,
    encode_value,
)
from distinctcount.stream import DistinctCounter, count_distinct

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DistinctCounter",
    "HyperLogLog",
    "HyperLogLogConfig",
    "PrecisionOutOfRangeError",
    "RegisterAllocationError",
    "configure_from_env",
    "count_distinct",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "encode_u32",
    "encode_u64",
    "encode_value",
    "set_level",
    "set_module_level",
]

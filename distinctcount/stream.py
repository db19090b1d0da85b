"""Feeding streams of values into a HyperLogLog.

count_distinct() is the one-shot form: hand it an iterable, get back an
estimate. DistinctCounter keeps the estimator around and pulls the counted
key out of each record with a value_extractor.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from distinctcount.sketching.config import DEFAULT_PRECISION
from distinctcount.sketching.encoding import encode_value
from distinctcount.sketching.hyperloglog import HyperLogLog

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 1_000_000


def count_distinct(
    values: Iterable[Any],
    precision: int = DEFAULT_PRECISION,
    encoder: Callable[[Any], bytes] = encode_value,
) -> float:
    """Estimate the number of distinct values in an iterable.

    Args:
        values: Stream of values. Consumed once.
        precision: Estimator precision (4-16).
        encoder: Converts each value to the bytes that get hashed.

    Returns:
        The estimate after the whole stream has been inserted.

    Raises:
        PrecisionOutOfRangeError: If precision not in [4, 16].
    """
    hll = HyperLogLog(precision=precision)
    inserted = 0
    for value in values:
        hll.insert(encoder(value))
        inserted += 1
        if inserted % PROGRESS_INTERVAL == 0:
            logger.debug("Inserted %d values", inserted)

    estimate = hll.estimate()
    logger.info("Estimated %.1f distinct values from %d inserted", estimate, inserted)
    return estimate


class DistinctCounter:
    """Counts distinct keys across a stream of records.

    Args:
        value_extractor: Returns the key to count for a record, or None to
            skip the record.
        precision: Estimator precision (4-16).
        encoder: Converts each extracted key to bytes.

    Example:
        counter = DistinctCounter(lambda r: r.get("visitor_id"))
        for request in requests:
            counter.observe(request)
        print(counter.estimate())
    """

    def __init__(
        self,
        value_extractor: Callable[[Any], Any],
        precision: int = DEFAULT_PRECISION,
        encoder: Callable[[Any], bytes] = encode_value,
    ):
        self._value_extractor = value_extractor
        self._encoder = encoder
        self._sketch = HyperLogLog(precision=precision)
        self._records_seen = 0
        self._records_skipped = 0

    @property
    def sketch(self) -> HyperLogLog:
        """The underlying estimator."""
        return self._sketch

    @property
    def records_seen(self) -> int:
        return self._records_seen

    @property
    def records_skipped(self) -> int:
        return self._records_skipped

    def observe(self, record: Any) -> None:
        """Extract the key from a record and insert it."""
        self._records_seen += 1
        value = self._value_extractor(record)
        if value is None:
            self._records_skipped += 1
            return
        self._sketch.insert(self._encoder(value))

    def observe_all(self, records: Iterable[Any]) -> None:
        for record in records:
            self.observe(record)

    def estimate(self) -> float:
        """Current distinct count estimate."""
        return self._sketch.estimate()

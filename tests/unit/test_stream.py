"""Tests for stream helpers."""

import logging

import pytest

from distinctcount import DistinctCounter, PrecisionOutOfRangeError, count_distinct
from distinctcount.sketching import HyperLogLog, encode_u64


class TestCountDistinct:
    """Tests for count_distinct."""

    def test_counts_distinct_values(self):
        estimate = count_distinct(range(1000), precision=12)

        assert abs(estimate - 1000) / 1000 < 0.05

    def test_ignores_duplicates(self):
        values = [i % 100 for i in range(5000)]

        assert count_distinct(values, precision=12) == pytest.approx(100, rel=0.05)

    def test_empty_stream(self):
        assert count_distinct([], precision=8) == 0.0

    def test_custom_encoder(self):
        """The encoder decides which bytes get hashed."""
        expected = HyperLogLog(precision=10)
        for i in range(300):
            expected.insert(encode_u64(i))

        assert count_distinct(range(300), precision=10, encoder=encode_u64) == expected.estimate()

    def test_rejects_bad_precision(self):
        with pytest.raises(PrecisionOutOfRangeError):
            count_distinct(range(10), precision=2)

    def test_logs_final_estimate(self, caplog):
        caplog.set_level(logging.INFO, logger="distinctcount")

        count_distinct(["a", "b", "a"], precision=8)

        assert "from 3 inserted" in caplog.text


class TestDistinctCounter:
    """Tests for DistinctCounter."""

    def test_extracts_keys_from_records(self):
        counter = DistinctCounter(lambda r: r["visitor"], precision=10)
        records = [{"visitor": f"v{i % 40}", "page": i} for i in range(400)]

        counter.observe_all(records)

        assert counter.records_seen == 400
        assert counter.estimate() == pytest.approx(40, rel=0.1)

    def test_skips_records_without_key(self):
        counter = DistinctCounter(lambda r: r.get("visitor"), precision=8)

        counter.observe({"visitor": "a"})
        counter.observe({"page": "/home"})

        assert counter.records_seen == 2
        assert counter.records_skipped == 1
        assert counter.sketch.item_count == 1

    def test_exposes_underlying_sketch(self):
        counter = DistinctCounter(lambda r: r, precision=9)

        assert counter.sketch.num_registers == 512

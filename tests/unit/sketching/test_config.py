"""Tests for HyperLogLogConfig."""

import dataclasses

import pytest

from distinctcount import ConfigError, PrecisionOutOfRangeError
from distinctcount.sketching import HyperLogLogConfig


class TestHyperLogLogConfig:
    """Tests for validation and derived values."""

    def test_defaults(self):
        config = HyperLogLogConfig()

        assert config.precision == 14
        assert config.num_registers == 16384

    def test_derived_values(self):
        config = HyperLogLogConfig(precision=10)

        assert config.num_registers == 1024
        assert config.max_bits == 118
        assert config.max_rank == 119
        assert config.standard_error == pytest.approx(1.04 / 32)

    @pytest.mark.parametrize("precision", [3, 17, -1])
    def test_rejects_out_of_range(self, precision):
        with pytest.raises(PrecisionOutOfRangeError, match=r"\[4, 16\]"):
            HyperLogLogConfig(precision=precision)

    def test_rejects_bool(self):
        with pytest.raises(ConfigError, match="must be an int"):
            HyperLogLogConfig(precision=True)  # type: ignore[arg-type]

    def test_is_immutable(self):
        config = HyperLogLogConfig(precision=8)

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.precision = 9  # type: ignore[misc]


class TestFromEnv:
    """Tests for HyperLogLogConfig.from_env."""

    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("DC_PRECISION", raising=False)

        assert HyperLogLogConfig.from_env().precision == 14

    def test_reads_precision(self, monkeypatch):
        monkeypatch.setenv("DC_PRECISION", "11")

        assert HyperLogLogConfig.from_env().precision == 11

    def test_rejects_non_integer(self, monkeypatch):
        monkeypatch.setenv("DC_PRECISION", "high")

        with pytest.raises(ConfigError, match="DC_PRECISION must be an integer"):
            HyperLogLogConfig.from_env()

    def test_rejects_out_of_range(self, monkeypatch):
        monkeypatch.setenv("DC_PRECISION", "20")

        with pytest.raises(PrecisionOutOfRangeError):
            HyperLogLogConfig.from_env()

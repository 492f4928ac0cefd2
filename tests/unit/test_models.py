"""Tests for domain models.

These tests verify the PingConfig, PingResult and Connection types and the
statistics computed from attempt samples.
"""

from __future__ import annotations

import statistics
from dataclasses import FrozenInstanceError

import pytest

from tls_ping.config import DEFAULT_COUNT, DEFAULT_TIMEOUT
from tls_ping.engine import Connection, PingConfig, PingResult, format_duration
from tls_ping.errors import ConfigurationError


class TestPingConfig:
    """Test cases for the PingConfig dataclass."""

    def test_defaults(self) -> None:
        """PingConfig should default to a verified TLS run."""
        config = PingConfig()
        assert config.count == DEFAULT_COUNT
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.avoid_tls_handshake is False
        assert config.insecure_skip_verify is False
        assert config.root_cas is None

    def test_is_frozen(self) -> None:
        """PingConfig should be immutable (frozen=True)."""
        config = PingConfig(count=2)
        with pytest.raises(FrozenInstanceError):
            config.count = 3  # type: ignore[misc]

    def test_has_slots(self) -> None:
        """PingConfig should use __slots__."""
        assert hasattr(PingConfig, "__slots__")

    @pytest.mark.parametrize("count", [0, -1])
    def test_rejects_non_positive_count(self, count: int) -> None:
        """PingConfig should reject a count below 1."""
        with pytest.raises(ConfigurationError, match="count"):
            PingConfig(count=count)

    @pytest.mark.parametrize("timeout", [0.0, -0.5, float("nan"), float("inf"), float("-inf")])
    def test_rejects_invalid_timeout(self, timeout: float) -> None:
        """PingConfig should reject a timeout that is not a finite positive number."""
        with pytest.raises(ConfigurationError, match="timeout"):
            PingConfig(timeout=timeout)

    def test_configuration_error_is_value_error(self) -> None:
        """Invalid values should also be catchable as ValueError."""
        with pytest.raises(ValueError):
            PingConfig(count=0)

    def test_connection_kind(self) -> None:
        """connection should follow avoid_tls_handshake."""
        assert PingConfig(avoid_tls_handshake=True).connection is Connection.TCP
        assert PingConfig(avoid_tls_handshake=False).connection is Connection.TLS


class TestPingResult:
    """Test cases for PingResult.from_samples()."""

    def test_from_samples_computes_statistics(self) -> None:
        """Statistics should be min, max, mean and sample standard deviation."""
        samples = [0.010, 0.020, 0.030, 0.040]
        result = PingResult.from_samples("example.com", "example.com:443", "192.0.2.1", samples)

        assert result.count == 4
        assert result.min == 0.010
        assert result.max == 0.040
        assert result.avg == pytest.approx(0.025)
        assert result.std == pytest.approx(statistics.stdev(samples))
        # sample (n-1) deviation, not population
        assert result.std != pytest.approx(statistics.pstdev(samples))

    def test_keeps_input_strings(self) -> None:
        """Host, address and IP should be stored unmodified."""
        result = PingResult.from_samples("example.com", "example.com:8443", "192.0.2.1", [0.1])
        assert result.host == "example.com"
        assert result.address == "example.com:8443"
        assert result.ip_addr == "192.0.2.1"

    def test_single_sample_has_zero_std(self) -> None:
        """With one sample, min, avg and max are equal and std is 0."""
        result = PingResult.from_samples("h", "h:1", "127.0.0.1", [0.123])
        assert result.count == 1
        assert result.std == 0.0
        assert result.min == result.avg == result.max == 0.123

    @pytest.mark.parametrize(
        "samples",
        [
            [0.1, 0.1, 0.1],
            [0.3, 0.1, 0.2],
            [1e-6, 2.5, 0.75, 0.75],
            [0.1] * 7,
        ],
    )
    def test_avg_between_min_and_max(self, samples: list[float]) -> None:
        """min <= avg <= max should hold for any sample set."""
        result = PingResult.from_samples("h", "h:1", "127.0.0.1", samples)
        assert result.min <= result.avg <= result.max
        assert result.std >= 0

    def test_empty_samples_rejected(self) -> None:
        """A result cannot be built without samples."""
        with pytest.raises(ValueError):
            PingResult.from_samples("h", "h:1", "127.0.0.1", [])

    def test_is_frozen(self) -> None:
        """PingResult should be immutable."""
        result = PingResult.from_samples("h", "h:1", "127.0.0.1", [0.1])
        with pytest.raises(FrozenInstanceError):
            result.count = 2  # type: ignore[misc]

    def test_string_renderings(self) -> None:
        """The *_str properties should use format_duration."""
        result = PingResult.from_samples("h", "h:1", "127.0.0.1", [0.010, 0.030])
        assert result.min_str == "10.000ms"
        assert result.max_str == "30.000ms"
        assert result.avg_str == format_duration(result.avg)
        assert result.std_str == format_duration(result.std)


class TestFormatDuration:
    """Test cases for format_duration()."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0.0, "0s"),
            (0.0000421, "42.100µs"),
            (0.0123456, "12.346ms"),
            (0.5, "500.000ms"),
            (1.5, "1.500s"),
            (12.0, "12.000s"),
        ],
    )
    def test_units(self, seconds: float, expected: str) -> None:
        assert format_duration(seconds) == expected


class TestConnection:
    """Test cases for the Connection enum."""

    def test_values_are_strings(self) -> None:
        assert Connection.TCP == "TCP"
        assert Connection.TLS == "TLS"

"""Domain models for the tls-ping measurement engines.

This module defines the core data structures shared by the sync and async engines.
"""

from __future__ import annotations

import statistics
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from tls_ping.config import default_count, default_timeout, is_valid_timeout
from tls_ping.errors import ConfigurationError
from tls_ping.trust import TrustPool


class Connection(str, Enum):
    """Kind of connection being measured.

    Attributes:
        TCP: TCP connect only.
        TLS: TCP connect followed by a TLS handshake.
    """

    TCP = "TCP"
    TLS = "TLS"


@dataclass(frozen=True, slots=True)
class PingConfig:
    """Configuration of a single ping run.

    This dataclass is immutable (frozen=True) and validated on construction.

    Attributes:
        count: Number of connection attempts to perform (default: 4).
        avoid_tls_handshake: Measure the TCP connect only when True.
        insecure_skip_verify: Skip certificate and hostname validation.
        root_cas: Custom trust pool; None uses the system trust store.
        timeout: Maximum duration of a single attempt in seconds (default: 10.0).

    Raises:
        ConfigurationError: If count is below 1 or timeout is not a finite
            positive number, or if a default read from the environment is invalid.
    """

    count: int = field(default_factory=default_count)
    avoid_tls_handshake: bool = False
    insecure_skip_verify: bool = False
    root_cas: TrustPool | None = None
    timeout: float = field(default_factory=default_timeout)

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ConfigurationError("count must be at least 1")
        if not is_valid_timeout(self.timeout):
            raise ConfigurationError("timeout must be a finite positive number")

    @property
    def connection(self) -> Connection:
        """Connection kind implied by avoid_tls_handshake."""
        return Connection.TCP if self.avoid_tls_handshake else Connection.TLS


@dataclass(frozen=True, slots=True)
class PingResult:
    """Aggregate result of a ping run.

    Durations are in seconds and cover successful attempts only.

    Attributes:
        host: Host portion of the target address as supplied.
        address: Target address as supplied.
        ip_addr: Resolved IP address the attempts connected to.
        count: Number of successful attempts.
        min: Fastest attempt.
        max: Slowest attempt.
        avg: Mean of all successful attempts.
        std: Sample standard deviation (0.0 for a single attempt).
    """

    host: str
    address: str
    ip_addr: str
    count: int
    min: float
    max: float
    avg: float
    std: float

    @classmethod
    def from_samples(
        cls,
        host: str,
        address: str,
        ip_addr: str,
        samples: Sequence[float],
    ) -> PingResult:
        """Build a result from the elapsed times of successful attempts.

        Raises:
            ValueError: If samples is empty.
        """
        if not samples:
            raise ValueError("at least one sample is required")

        lo = min(samples)
        hi = max(samples)
        # fmean can land one ulp outside [lo, hi] on identical samples
        avg = min(max(statistics.fmean(samples), lo), hi)
        std = statistics.stdev(samples) if len(samples) > 1 else 0.0

        return cls(
            host=host,
            address=address,
            ip_addr=ip_addr,
            count=len(samples),
            min=lo,
            max=hi,
            avg=avg,
            std=std,
        )

    @property
    def min_str(self) -> str:
        """Minimum duration formatted for humans."""
        return format_duration(self.min)

    @property
    def max_str(self) -> str:
        """Maximum duration formatted for humans."""
        return format_duration(self.max)

    @property
    def avg_str(self) -> str:
        """Average duration formatted for humans."""
        return format_duration(self.avg)

    @property
    def std_str(self) -> str:
        """Standard deviation formatted for humans."""
        return format_duration(self.std)


def format_duration(seconds: float) -> str:
    """Render a duration with a unit that keeps the number readable.

    Examples:
        >>> format_duration(0.0123456)
        '12.346ms'
        >>> format_duration(0.0000421)
        '42.100µs'
        >>> format_duration(1.5)
        '1.500s'
    """
    if seconds == 0:
        return "0s"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}µs"
    if seconds < 1.0:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"

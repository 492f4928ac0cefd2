"""Exception hierarchy for tls-ping."""

from __future__ import annotations


class PingError(Exception):
    """Base class for every error raised by tls-ping."""

    pass


class ConfigurationError(PingError, ValueError):
    """Raised for invalid configuration values or malformed target addresses."""

    pass


class ResolutionError(PingError):
    """Raised when the target host cannot be resolved to an IP address.

    Attributes:
        host: The host name that failed to resolve.
    """

    def __init__(self, host: str, reason: str) -> None:
        super().__init__(f"cannot resolve '{host}': {reason}")
        self.host = host
        self.reason = reason


class PingConnectionError(PingError):
    """Raised when every connection attempt to the target failed.

    The last attempt's exception is available as ``__cause__``.

    Attributes:
        address: Target address as supplied by the caller.
        host: Host portion of the address.
        ip_addr: Resolved IP address the attempts were made against.
        attempts: Number of attempts that were made.
        reason: Text of the last attempt error.
    """

    def __init__(
        self,
        address: str,
        host: str,
        ip_addr: str,
        attempts: int,
        reason: str,
    ) -> None:
        super().__init__(reason)
        self.address = address
        self.host = host
        self.ip_addr = ip_addr
        self.attempts = attempts
        self.reason = reason


class TrustPoolError(PingError):
    """Raised when a CA bundle cannot be read or holds no usable certificate."""

    pass

"""Default settings for tls-ping.

Defaults can be overridden through environment variables so that wrappers
(cron jobs, monitoring agents) do not have to repeat the same flags. The
variables are read when a default is needed, not at import time.
"""

from __future__ import annotations

import math
import os

from tls_ping.errors import ConfigurationError

DEFAULT_PORT = 443
MAX_COUNT = 100

DEFAULT_COUNT = 4
DEFAULT_TIMEOUT = 10.0

COUNT_ENV = "TLS_PING_COUNT"
TIMEOUT_ENV = "TLS_PING_TIMEOUT"
CA_ENV = "TLS_PING_CA"


def default_count() -> int:
    """Number of attempts from TLS_PING_COUNT, or DEFAULT_COUNT.

    Raises:
        ConfigurationError: If the variable is not an integer in [1, MAX_COUNT].
    """
    raw = os.getenv(COUNT_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_COUNT
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{COUNT_ENV} must be an integer, got {raw!r}") from None
    if not 1 <= value <= MAX_COUNT:
        raise ConfigurationError(f"{COUNT_ENV} must be between 1 and {MAX_COUNT}, got {value}")
    return value


def default_timeout() -> float:
    """Per-attempt timeout from TLS_PING_TIMEOUT, or DEFAULT_TIMEOUT.

    Raises:
        ConfigurationError: If the variable is not a finite positive number.
    """
    raw = os.getenv(TIMEOUT_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{TIMEOUT_ENV} must be a number, got {raw!r}") from None
    if not is_valid_timeout(value):
        raise ConfigurationError(f"{TIMEOUT_ENV} must be a positive number, got {raw!r}")
    return value


def default_ca_file() -> str:
    """CA bundle path from TLS_PING_CA; empty means the system trust store."""
    return os.getenv(CA_ENV, "")


def is_valid_timeout(value: float) -> bool:
    return math.isfinite(value) and value > 0

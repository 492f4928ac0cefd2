"""Aggregation of attempt samples into a PingResult."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from tls_ping.engine.models import PingConfig, PingResult
from tls_ping.engine.resolver import Target
from tls_ping.errors import PingConnectionError

logger = logging.getLogger(__name__)


def summarize(
    engine: str,
    target: Target,
    ip_addr: str,
    config: PingConfig,
    samples: list[float],
    last_error: BaseException | None,
) -> PingResult:
    """Turn the samples of a finished run into a result.

    Args:
        engine: Name of the engine that produced the samples.
        target: The parsed target.
        ip_addr: Address the attempts connected to.
        config: Configuration of the run.
        samples: Elapsed seconds of each successful attempt.
        last_error: Exception of the most recent failed attempt, if any.

    Returns:
        The aggregated PingResult.

    Raises:
        PingConnectionError: If no attempt succeeded.
    """
    if logger.isEnabledFor(logging.DEBUG):
        log_entry = {
            "event": "ping_run_finished",
            "engine": engine,
            "address": target.address,
            "ip": ip_addr,
            "connection": config.connection.value,
            "attempts": config.count,
            "successes": len(samples),
            "last_error": describe_error(last_error) if last_error is not None else None,
            "timestamp": datetime.now(UTC).isoformat(),
        }
        logger.debug(json.dumps(log_entry))

    if not samples:
        reason = describe_error(last_error)
        raise PingConnectionError(
            address=target.address,
            host=target.host,
            ip_addr=ip_addr,
            attempts=config.count,
            reason=reason,
        ) from last_error

    return PingResult.from_samples(
        host=target.host,
        address=target.address,
        ip_addr=ip_addr,
        samples=samples,
    )


def describe_error(error: BaseException | None) -> str:
    """Return a readable message for an attempt error, even when str() is empty."""
    if error is None:
        return "no successful connection"
    return str(error) or type(error).__name__

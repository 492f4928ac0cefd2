"""Flat report record shared by all output formats."""

from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass
from typing import Any

from tls_ping.engine.models import Connection, PingResult
from tls_ping.engine.resolver import parse_target
from tls_ping.errors import ConfigurationError, PingConnectionError, ResolutionError

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

CSV_FIELDS: tuple[str, ...] = (
    "datetime",
    "host",
    "ip",
    "address",
    "connection",
    "count",
    "min",
    "max",
    "average",
    "stddev",
    "error",
    "ping",
)


@dataclass(frozen=True, slots=True)
class PingReport:
    """One line of output describing a ping run.

    Field order matches CSV_FIELDS. Durations are in seconds.

    Attributes:
        datetime: Local time the report was produced, ``YYYY-MM-DD HH:MM:SS``.
        host: Host portion of the target.
        ip: Resolved IP address ("" if resolution failed).
        address: Target address as supplied.
        connection: "TCP" or "TLS".
        count: Number of successful attempts.
        min: Fastest attempt, or the timeout when the run failed.
        max: Slowest attempt, or the timeout when the run failed.
        average: Mean attempt, or the timeout when the run failed.
        stddev: Sample standard deviation, 0 when the run failed.
        error: Error message, "" on success.
        ping: 1 on success, 0 on failure.
    """

    datetime: str
    host: str
    ip: str
    address: str
    connection: str
    count: int
    min: float
    max: float
    average: float
    stddev: float
    error: str
    ping: int

    @classmethod
    def from_result(
        cls,
        result: PingResult,
        connection: Connection,
        now: float | None = None,
    ) -> PingReport:
        """Build the report of a successful run."""
        return cls(
            datetime=_timestamp(now),
            host=result.host,
            ip=result.ip_addr,
            address=result.address,
            connection=connection.value,
            count=result.count,
            min=result.min,
            max=result.max,
            average=result.avg,
            stddev=result.std,
            error="",
            ping=1,
        )

    @classmethod
    def from_error(
        cls,
        address: str,
        connection: Connection,
        timeout: float,
        error: BaseException,
        now: float | None = None,
    ) -> PingReport:
        """Build the report of a failed run.

        The statistics are replaced by sentinel values: the timeout for
        min/max/average and 0 for the standard deviation.
        """
        if isinstance(error, PingConnectionError):
            host, ip = error.host, error.ip_addr
        elif isinstance(error, ResolutionError):
            host, ip = error.host, ""
        else:
            try:
                host = parse_target(address).host
            except ConfigurationError:
                host = address
            ip = ""

        return cls(
            datetime=_timestamp(now),
            host=host,
            ip=ip,
            address=address,
            connection=connection.value,
            count=0,
            min=timeout,
            max=timeout,
            average=timeout,
            stddev=0.0,
            error=str(error),
            ping=0,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PingReport:
        """Rebuild a report from the mapping produced by to_dict()."""
        return cls(
            datetime=str(data["datetime"]),
            host=str(data["host"]),
            ip=str(data["ip"]),
            address=str(data["address"]),
            connection=str(data["connection"]),
            count=int(data["count"]),
            min=float(data["min"]),
            max=float(data["max"]),
            average=float(data["average"]),
            stddev=float(data["stddev"]),
            error=str(data["error"]),
            ping=int(data["ping"]),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the report as a plain dict in CSV_FIELDS order."""
        return dataclasses.asdict(self)

    def csv_row(self) -> list[str]:
        """Return the report as CSV cells, numbers with three decimals."""
        return [
            self.datetime,
            self.host,
            self.ip,
            self.address,
            self.connection,
            str(self.count),
            f"{self.min:.3f}",
            f"{self.max:.3f}",
            f"{self.average:.3f}",
            f"{self.stddev:.3f}",
            self.error,
            str(self.ping),
        ]


def _timestamp(now: float | None) -> str:
    return time.strftime(DATETIME_FORMAT, time.localtime(now))

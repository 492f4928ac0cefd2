"""Base protocol for report writers."""

from typing import Protocol

from tls_ping.output.report import PingReport


class ReportWriter(Protocol):
    """Protocol for output formats."""

    def write(self, report: PingReport) -> None:
        """Render a single report to the writer's sink."""
        ...

"""Text, JSON and CSV writers.

Every writer renders to the text stream it was given rather than to a global
logger, so callers decide where output goes (stdout, a file, a buffer in tests).
"""

from __future__ import annotations

import csv
import json
from typing import TextIO

from tls_ping.engine.models import format_duration
from tls_ping.output.base import ReportWriter
from tls_ping.output.report import CSV_FIELDS, PingReport


class TextWriter(ReportWriter):
    """Human-readable two-line summary, in the spirit of ping(8).

    Example output::

        TLS connection to example.com:443 (93.184.216.34) (4 connections)
        min/avg/max/stddev = 95.1ms/97.3ms/101.0ms/2.6ms
    """

    def __init__(self, sink: TextIO, attempts: int | None = None) -> None:
        """Initialize the writer.

        Args:
            sink: Stream to write to.
            attempts: Number of attempts requested; printed instead of the
                success count when given.
        """
        self._sink = sink
        self._attempts = attempts

    def write(self, report: PingReport) -> None:
        connections = self._attempts if self._attempts is not None else report.count
        self._sink.write(
            f"{report.connection} connection to {report.address} ({report.ip}) "
            f"({connections} connections)\n"
        )
        self._sink.write(
            "min/avg/max/stddev = "
            f"{format_duration(report.min)}/{format_duration(report.average)}/"
            f"{format_duration(report.max)}/{format_duration(report.stddev)}\n"
        )


class JsonWriter(ReportWriter):
    """Single JSON object per report."""

    def __init__(self, sink: TextIO) -> None:
        self._sink = sink

    def write(self, report: PingReport) -> None:
        self._sink.write(json.dumps(report.to_dict(), ensure_ascii=False))
        self._sink.write("\n")


class CsvWriter(ReportWriter):
    """CSV rows in CSV_FIELDS order, optionally preceded by a header row."""

    def __init__(self, sink: TextIO, header: bool = True) -> None:
        self._sink = sink
        self._header = header
        self._writer = csv.writer(sink, lineterminator="\n")

    def write(self, report: PingReport) -> None:
        if self._header:
            self._writer.writerow(CSV_FIELDS)
            self._header = False
        self._writer.writerow(report.csv_row())

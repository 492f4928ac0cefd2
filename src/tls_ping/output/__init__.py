"""Rendering of ping results as text, JSON and CSV."""

from tls_ping.output.base import ReportWriter
from tls_ping.output.report import CSV_FIELDS, PingReport
from tls_ping.output.writers import CsvWriter, JsonWriter, TextWriter

__all__ = [
    "CSV_FIELDS",
    "CsvWriter",
    "JsonWriter",
    "PingReport",
    "ReportWriter",
    "TextWriter",
]

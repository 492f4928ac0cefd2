"""Command line interface for tls-ping.

Usage:
    tls-ping [options] <host[:port]>

Options:
    -c, --count N       Number of connections to establish (default: 4, max: 100)
    -t, --timeout SEC   Per-connection timeout in seconds (default: 10)
    --tcponly           Measure the TCP connect only, skip the TLS handshake
    --insecure          Do not verify the server certificate
    --ca FILE           PEM bundle of CA certificates to trust instead of the system store
    --json              Print the result as a JSON object
    --csv               Print the result as CSV with a header row
    --csv-no-header     Print the result as a CSV row without header
    --async             Use the asyncio engine
    -v, --verbose       Log every failed attempt to stderr
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import NoReturn

from tls_ping import __version__
from tls_ping.config import (
    CA_ENV,
    DEFAULT_COUNT,
    DEFAULT_TIMEOUT,
    MAX_COUNT,
    default_ca_file,
    default_count,
    default_timeout,
    is_valid_timeout,
)
from tls_ping.engine import AsyncEngineImpl, PingConfig, PingResult, SyncEngine
from tls_ping.errors import ConfigurationError, PingError, TrustPoolError
from tls_ping.output import CsvWriter, JsonWriter, PingReport, ReportWriter, TextWriter
from tls_ping.trust import load_trust_pool

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "Measure the time needed to establish TCP connections and TLS handshakes "
    "with a server."
)

EPILOG = """\
examples:
  tls-ping example.com:443
  tls-ping -c 10 --tcponly example.com:22
  tls-ping --ca ./my-ca.pem --json internal.example:8443

In JSON and CSV mode a failed run is reported as data (error set, ping=0) and
the exit status is 0."""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the tls-ping command."""
    parser = _ArgumentParser(
        prog="tls-ping",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("address", help="server address as host or host:port (default port 443)")
    parser.add_argument(
        "-c",
        "--count",
        type=int,
        help=f"number of connections to establish (default: {DEFAULT_COUNT}, max: {MAX_COUNT})",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        help=f"per-connection timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument(
        "--tcponly",
        action="store_true",
        help="only establish the TCP connection, skip the TLS handshake",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="do not verify the server certificate and host name",
    )
    parser.add_argument(
        "--ca",
        metavar="FILE",
        help=f"PEM file with CA certificates to trust instead of the system store "
        f"(default: ${CA_ENV})",
    )
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    parser.add_argument("--csv", action="store_true", help="print the result as CSV with header")
    parser.add_argument(
        "--csv-no-header",
        action="store_true",
        help="print the result as CSV without header",
    )
    parser.add_argument(
        "--async",
        dest="use_async",
        action="store_true",
        help="run the measurement on the asyncio engine",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log failed attempts to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_engine(address: str, config: PingConfig, use_async: bool = False) -> PingResult:
    """Run one measurement with the selected engine.

    The asyncio engine runs on uvloop where it is available (not on Windows).
    """
    if not use_async:
        return SyncEngine().run(address, config)

    coro = AsyncEngineImpl().run(address, config)
    if sys.platform != "win32":
        import uvloop

        return uvloop.run(coro)
    return asyncio.run(coro)


def _apply_environment_defaults(args: argparse.Namespace) -> None:
    """Fill unset options from the environment; an unusable timeout counts as unset."""
    if args.count is None:
        args.count = default_count()
    if args.timeout is None or not is_valid_timeout(args.timeout):
        args.timeout = default_timeout()
    if args.ca is None:
        args.ca = default_ca_file()


def _select_writer(args: argparse.Namespace) -> ReportWriter:
    if args.json:
        return JsonWriter(sys.stdout)
    if args.csv or args.csv_no_header:
        return CsvWriter(sys.stdout, header=args.csv)
    return TextWriter(sys.stdout, attempts=args.count)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the tls-ping command.

    Args:
        argv: Command line arguments without the program name; defaults to sys.argv[1:].

    Returns:
        Exit code (0 for success or a structured failure report, 1 for error).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        _apply_environment_defaults(args)
    except ConfigurationError as e:
        parser.error(str(e))

    if args.count <= 0:
        args.count = 1
    if args.count > MAX_COUNT:
        parser.error(f"number of allowed connections cannot exceed {MAX_COUNT}")
    if args.json and (args.csv or args.csv_no_header):
        parser.error("choose only one output format")

    try:
        root_cas = load_trust_pool(args.ca)
    except TrustPoolError as e:
        parser.error(str(e))

    config = PingConfig(
        count=args.count,
        avoid_tls_handshake=args.tcponly,
        insecure_skip_verify=args.insecure,
        root_cas=root_cas,
        timeout=args.timeout,
    )
    structured = args.json or args.csv or args.csv_no_header
    writer = _select_writer(args)

    try:
        result = run_engine(args.address, config, use_async=args.use_async)
    except PingError as e:
        print(f"error connecting to '{args.address}': {e}", file=sys.stderr)
        if not structured:
            return 1
        report = PingReport.from_error(args.address, config.connection, config.timeout, e)
    else:
        report = PingReport.from_result(result, config.connection)

    writer.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())

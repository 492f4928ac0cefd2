"""Synchronous ping engine using blocking sockets.

This module provides the engine used by the command line tool: each attempt
opens a TCP connection with `socket.create_connection` and, unless TCP-only
mode was requested, wraps it in TLS with the standard `ssl` module.
"""

from __future__ import annotations

import logging
import socket
import ssl
import time
from contextlib import suppress

from tls_ping.engine.base import Engine
from tls_ping.engine.models import PingConfig, PingResult
from tls_ping.engine.resolver import Target, parse_target, resolve
from tls_ping.engine.summary import describe_error, summarize
from tls_ping.engine.tls import build_ssl_context

logger = logging.getLogger(__name__)


class SyncEngine(Engine):
    """Blocking ping engine.

    Attempts run strictly one after another; each one owns its socket and
    closes it before the next one starts.

    Attributes:
        name: Always returns "sync".

    Example:
        >>> engine = SyncEngine()
        >>> result = engine.run("example.com:443", PingConfig(count=3))
        >>> print(f"{result.count} connections, avg {result.avg_str}")
    """

    def __init__(self) -> None:
        """Initialize the SyncEngine."""
        self._name = "sync"

    @property
    def name(self) -> str:
        """Name of the engine.

        Returns:
            Always returns "sync".
        """
        return self._name

    def run(self, address: str, config: PingConfig | None = None) -> PingResult:
        """Resolve the target and time `config.count` sequential attempts.

        Args:
            address: Target as ``host`` or ``host:port``.
            config: Run configuration; defaults to PingConfig().

        Returns:
            A PingResult over the successful attempts.

        Raises:
            ConfigurationError: If the address is malformed.
            ResolutionError: If the host cannot be resolved.
            PingConnectionError: If every attempt failed.
        """
        config = config or PingConfig()
        target = parse_target(address)
        ip_addr = resolve(target)
        context = None if config.avoid_tls_handshake else build_ssl_context(config)

        samples: list[float] = []
        last_error: OSError | None = None

        for attempt in range(1, config.count + 1):
            try:
                samples.append(self._attempt(target, ip_addr, config.timeout, context))
            except OSError as e:
                last_error = e
                logger.debug(
                    "attempt %d/%d to %s (%s) failed: %s",
                    attempt,
                    config.count,
                    target.address,
                    ip_addr,
                    describe_error(e),
                )

        return summarize(self._name, target, ip_addr, config, samples, last_error)

    def _attempt(
        self,
        target: Target,
        ip_addr: str,
        timeout: float,
        context: ssl.SSLContext | None,
    ) -> float:
        """Perform one timed connection attempt.

        Args:
            target: The parsed target; its host is used for SNI and hostname checks.
            ip_addr: Resolved address to connect to.
            timeout: Budget in seconds for connect plus handshake.
            context: SSL context, or None for a TCP-only attempt.

        Returns:
            Elapsed seconds from the start of the connect to the end of the handshake.

        Raises:
            OSError: On connection, timeout or handshake failure.
        """
        start_time = time.perf_counter()
        deadline = start_time + timeout

        sock = socket.create_connection((ip_addr, target.port), timeout=timeout)
        try:
            if context is not None:
                remaining = deadline - time.perf_counter()
                if remaining <= 0:
                    raise TimeoutError("timed out before TLS handshake")
                sock.settimeout(remaining)
                sock = context.wrap_socket(sock, server_hostname=target.host)
            elapsed = time.perf_counter() - start_time
        finally:
            with suppress(OSError):
                sock.close()

        return elapsed

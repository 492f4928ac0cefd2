"""Async ping engine built on asyncio streams.

This module implements the AsyncEngine protocol using:
- loop.getaddrinfo for resolution without blocking the event loop
- asyncio.open_connection for the TCP connect and the optional TLS handshake
- asyncio.timeout() as the per-attempt deadline (Python 3.11+)

Attempts are awaited one after another so that each sample reflects an
uncontended connection, exactly like SyncEngine.
"""

from __future__ import annotations

import asyncio
import logging
import ssl
import time

from tls_ping.engine.models import PingConfig, PingResult
from tls_ping.engine.resolver import Target, parse_target, resolve_async
from tls_ping.engine.summary import describe_error, summarize
from tls_ping.engine.tls import build_ssl_context

logger = logging.getLogger(__name__)


class AsyncEngineImpl:
    """Async ping engine for use inside a running event loop.

    Example:
        ```python
        import asyncio
        from tls_ping.engine import AsyncEngineImpl, PingConfig

        async def main():
            engine = AsyncEngineImpl()
            result = await engine.run("example.com:443", PingConfig(count=5))
            print(f"avg: {result.avg_str}")

        asyncio.run(main())
        ```
    """

    def __init__(self) -> None:
        self._name = "async"

    @property
    def name(self) -> str:
        """Name of the engine.

        Returns:
            Always returns "async".
        """
        return self._name

    async def run(self, address: str, config: PingConfig | None = None) -> PingResult:
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
        ip_addr = await resolve_async(target)
        context = None if config.avoid_tls_handshake else build_ssl_context(config)

        samples: list[float] = []
        last_error: OSError | None = None

        for attempt in range(1, config.count + 1):
            try:
                samples.append(await self._attempt(target, ip_addr, config.timeout, context))
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

    async def _attempt(
        self,
        target: Target,
        ip_addr: str,
        timeout: float,
        context: ssl.SSLContext | None,
    ) -> float:
        """Perform one timed connection attempt.

        The timeout covers the TCP connect and the TLS handshake together.

        Raises:
            OSError: On connection, timeout or handshake failure.
        """
        start_time = time.perf_counter()

        async with asyncio.timeout(timeout):
            if context is None:
                _, writer = await asyncio.open_connection(ip_addr, target.port)
            else:
                _, writer = await asyncio.open_connection(
                    ip_addr,
                    target.port,
                    ssl=context,
                    server_hostname=target.host,
                    ssl_handshake_timeout=timeout,
                )

        elapsed = time.perf_counter() - start_time
        # abort() drops the connection without a TLS close_notify exchange
        writer.transport.abort()
        return elapsed

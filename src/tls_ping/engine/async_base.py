"""AsyncEngine Protocol for asyncio ping engines.

Unlike the base Engine protocol, AsyncEngine uses an async run() method so the
measurement can be awaited from inside a running event loop.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tls_ping.engine.models import PingConfig, PingResult


@runtime_checkable
class AsyncEngine(Protocol):
    """Protocol defining the interface for async ping engines.

    Attributes:
        name: A string identifier for the engine type (e.g., "async").

    Example:
        >>> from tls_ping.engine.async_base import AsyncEngine
        >>> from tls_ping.engine import AsyncEngineImpl
        >>> isinstance(AsyncEngineImpl(), AsyncEngine)
        True
    """

    @property
    def name(self) -> str:
        """Name of the async engine implementation."""
        ...

    async def run(self, address: str, config: PingConfig | None = None) -> PingResult:
        """Measure connection latency to the given address.

        Attempts are awaited one after another, never concurrently.

        Args:
            address: Target as ``host`` or ``host:port``.
            config: Run configuration; defaults to PingConfig().

        Returns:
            A PingResult aggregating the successful attempts.
        """
        ...

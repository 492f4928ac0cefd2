"""Base Protocol for ping engines.

This module defines the Engine protocol that blocking engine implementations must follow.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tls_ping.engine.models import PingConfig, PingResult


@runtime_checkable
class Engine(Protocol):
    """Protocol defining the interface for blocking ping engines.

    The @runtime_checkable decorator enables isinstance() checks for protocol conformance.

    Attributes:
        name: A string identifier for the engine type (e.g., "sync").

    Example:
        >>> from tls_ping.engine.base import Engine
        >>> from tls_ping.engine import SyncEngine
        >>> isinstance(SyncEngine(), Engine)
        True
    """

    @property
    def name(self) -> str:
        """Name of the engine implementation."""
        ...

    def run(self, address: str, config: PingConfig | None = None) -> PingResult:
        """Measure connection latency to the given address.

        Args:
            address: Target as ``host`` or ``host:port``.
            config: Run configuration; defaults to PingConfig().

        Returns:
            A PingResult aggregating the successful attempts.

        Raises:
            ResolutionError: If the host cannot be resolved.
            PingConnectionError: If every attempt failed.
        """
        ...

"""Measurement engines for TCP and TLS connection latency."""

from tls_ping.engine.async_base import AsyncEngine
from tls_ping.engine.async_engine import AsyncEngineImpl
from tls_ping.engine.base import Engine
from tls_ping.engine.models import Connection, PingConfig, PingResult, format_duration
from tls_ping.engine.resolver import Target, parse_target
from tls_ping.engine.sync_engine import SyncEngine

__all__ = [
    "AsyncEngine",
    "AsyncEngineImpl",
    "Connection",
    "Engine",
    "PingConfig",
    "PingResult",
    "SyncEngine",
    "Target",
    "format_duration",
    "parse_target",
]

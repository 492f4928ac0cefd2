"""tls-ping.

Measure TCP connect and TLS handshake latency to a server, the way ping(8)
measures ICMP round trips.
"""

__version__ = "0.1.0"

from tls_ping.engine import (  # noqa: E402
    AsyncEngine,
    AsyncEngineImpl,
    Connection,
    Engine,
    PingConfig,
    PingResult,
    SyncEngine,
)
from tls_ping.errors import (  # noqa: E402
    ConfigurationError,
    PingConnectionError,
    PingError,
    ResolutionError,
    TrustPoolError,
)
from tls_ping.trust import TrustPool, load_trust_pool  # noqa: E402

__all__ = [
    "AsyncEngine",
    "AsyncEngineImpl",
    "ConfigurationError",
    "Connection",
    "Engine",
    "PingConfig",
    "PingConnectionError",
    "PingError",
    "PingResult",
    "ResolutionError",
    "SyncEngine",
    "TrustPool",
    "TrustPoolError",
    "load_trust_pool",
]

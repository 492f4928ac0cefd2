"""Client-side SSL context construction."""

from __future__ import annotations

import ssl

from tls_ping.engine.models import PingConfig


def build_ssl_context(config: PingConfig) -> ssl.SSLContext:
    """Create the SSL context used for the handshake of every attempt.

    Without a custom trust pool the platform's default store is used. A custom
    pool replaces the default store entirely.

    Args:
        config: Ping configuration carrying the verification settings.

    Returns:
        A client SSLContext.
    """
    if config.root_cas is None:
        context = ssl.create_default_context(ssl.Purpose.SERVER_AUTH)
    else:
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        config.root_cas.apply(context)

    if config.insecure_skip_verify:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE

    return context

"""Loading of custom CA bundles used to validate TLS peers."""

from __future__ import annotations

import os
import re
import ssl
from dataclasses import dataclass
from pathlib import Path

from tls_ping.errors import TrustPoolError

_PEM_CERT_RE = re.compile(
    r"-----BEGIN CERTIFICATE-----\s+.*?-----END CERTIFICATE-----",
    re.DOTALL,
)


@dataclass(frozen=True, slots=True)
class TrustPool:
    """A set of CA certificates that replaces the system trust store.

    Attributes:
        path: File the certificates were read from.
        cadata: PEM-encoded certificates, one block after another.
        count: Number of certificates in the pool.
    """

    path: Path
    cadata: str
    count: int

    def apply(self, context: ssl.SSLContext) -> None:
        """Load the pool's certificates into an SSL context as trust anchors."""
        context.load_verify_locations(cadata=self.cadata)


def load_trust_pool(path: str | os.PathLike[str] | None) -> TrustPool | None:
    """Read a PEM bundle and build a trust pool from it.

    Args:
        path: Path to a PEM file. An empty value means "use the system store".

    Returns:
        The loaded TrustPool, or None when no path was given.

    Raises:
        TrustPoolError: If the file cannot be read or contains no valid certificate.
    """
    if not path:
        return None

    bundle_path = Path(path)
    try:
        text = bundle_path.read_text(encoding="ascii", errors="replace")
    except OSError as e:
        raise TrustPoolError(
            f"error loading CA certificates from '{bundle_path}': {e}"
        ) from e

    blocks = _PEM_CERT_RE.findall(text)
    if not blocks:
        raise TrustPoolError(
            f"error creating pool of CA certificates from '{bundle_path}': "
            "no PEM certificate found"
        )

    cadata = "\n".join(blocks) + "\n"
    probe = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    try:
        probe.load_verify_locations(cadata=cadata)
    except ssl.SSLError as e:
        raise TrustPoolError(
            f"error creating pool of CA certificates from '{bundle_path}': {e}"
        ) from e

    return TrustPool(path=bundle_path, cadata=cadata, count=len(blocks))

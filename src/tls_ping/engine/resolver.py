"""Target address parsing and host resolution."""

from __future__ import annotations

import asyncio
import socket
from dataclasses import dataclass

from tls_ping.config import DEFAULT_PORT
from tls_ping.errors import ConfigurationError, ResolutionError


@dataclass(frozen=True, slots=True)
class Target:
    """A parsed ``host[:port]`` reference.

    Attributes:
        address: The address string exactly as supplied.
        host: Host name or literal IP, without IPv6 brackets.
        port: TCP port (DEFAULT_PORT when the address had none).
    """

    address: str
    host: str
    port: int


def parse_target(address: str, default_port: int = DEFAULT_PORT) -> Target:
    """Split a target address into host and port.

    Accepts ``host``, ``host:port``, ``[v6addr]:port``, ``[v6addr]`` and bare
    IPv6 literals such as ``::1``.

    Raises:
        ConfigurationError: If the host is empty or the port is not a valid
            TCP port number.
    """
    text = address.strip()
    port_text: str | None = None

    if text.startswith("["):
        end = text.find("]")
        if end == -1:
            raise ConfigurationError(f"invalid address '{address}': missing ']'")
        host = text[1:end]
        rest = text[end + 1 :]
        if rest:
            if not rest.startswith(":"):
                raise ConfigurationError(f"invalid address '{address}'")
            port_text = rest[1:]
    elif text.count(":") == 1:
        host, port_text = text.split(":")
    else:
        # no colon, or an unbracketed IPv6 literal
        host = text

    if not host:
        raise ConfigurationError(f"invalid address '{address}': missing host")

    port = default_port
    if port_text is not None:
        if not port_text.isdigit():
            raise ConfigurationError(f"invalid address '{address}': bad port '{port_text}'")
        port = int(port_text)
        if not 0 < port < 65536:
            raise ConfigurationError(f"invalid address '{address}': port out of range")

    return Target(address=address, host=host, port=port)


def resolve(target: Target) -> str:
    """Resolve the target host to one IP address using the system resolver.

    The first address returned by getaddrinfo is used.

    Raises:
        ResolutionError: If the host cannot be resolved.
    """
    try:
        infos = socket.getaddrinfo(target.host, target.port, type=socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as e:
        raise ResolutionError(target.host, str(e)) from e
    return _first_ip(target, infos)


async def resolve_async(target: Target) -> str:
    """Awaitable variant of resolve() using the running loop's resolver."""
    loop = asyncio.get_running_loop()
    try:
        infos = await loop.getaddrinfo(target.host, target.port, type=socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as e:
        raise ResolutionError(target.host, str(e)) from e
    return _first_ip(target, infos)


def _first_ip(target: Target, infos: list) -> str:
    if not infos:
        raise ResolutionError(target.host, "no address found")
    sockaddr = infos[0][4]
    return str(sockaddr[0])

"""Pytest configuration and fixtures for tls-ping tests."""

from __future__ import annotations

import socket
import ssl
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path

import pytest
import pytest_asyncio
from aiohttp import web

from tls_ping.config import CA_ENV, COUNT_ENV, TIMEOUT_ENV

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@dataclass(frozen=True, slots=True)
class TargetServer:
    """Address of a local server that tests can ping.

    Attributes:
        host: Loopback address the server listens on.
        port: Port chosen by the OS.
    """

    host: str
    port: int

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


async def _health(request: web.Request) -> web.Response:
    return web.json_response({"status": "healthy"})


@asynccontextmanager
async def _serve(ssl_context: ssl.SSLContext | None) -> AsyncIterator[TargetServer]:
    app = web.Application()
    app.router.add_get("/health", _health)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0, ssl_context=ssl_context)
    await site.start()
    try:
        port = runner.addresses[0][1]
        yield TargetServer(host="127.0.0.1", port=port)
    finally:
        await runner.cleanup()


@pytest.fixture()
def ca_file() -> Path:
    """PEM file of the test CA that signed the server certificate."""
    return FIXTURES_DIR / "ca.pem"


@pytest.fixture()
def not_a_cert_file() -> Path:
    """A file that holds no PEM certificate."""
    return FIXTURES_DIR / "not_a_cert.pem"


@pytest.fixture()
def server_ssl_context() -> ssl.SSLContext:
    """Server-side context with a certificate for localhost and 127.0.0.1."""
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    context.load_cert_chain(FIXTURES_DIR / "server.pem", FIXTURES_DIR / "server.key")
    return context


@pytest_asyncio.fixture()
async def tcp_server() -> AsyncIterator[TargetServer]:
    """Plain TCP (HTTP) server on the loopback interface."""
    async with _serve(None) as server:
        yield server


@pytest_asyncio.fixture()
async def tls_server(server_ssl_context: ssl.SSLContext) -> AsyncIterator[TargetServer]:
    """TLS server whose certificate is signed by the test CA."""
    async with _serve(server_ssl_context) as server:
        yield server


@pytest.fixture()
def closed_port() -> int:
    """A loopback port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture()
def silent_server() -> Iterator[TargetServer]:
    """A listener that completes TCP connects but never sends a byte.

    Connections sit in the accept backlog, so a TLS client waits for a
    ServerHello that never arrives.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        sock.listen(16)
        yield TargetServer(host="127.0.0.1", port=sock.getsockname()[1])


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TLS_PING_* variables of the calling shell out of the tests."""
    for name in (COUNT_ENV, TIMEOUT_ENV, CA_ENV):
        monkeypatch.delenv(name, raising=False)

import contextlib
from typing import TYPE_CHECKING

import pytest
from aiohttp import web
from yarl import URL

from hatemp.api import HubClient
from hatemp.config import ExtractionConfig

from .test_server import SimpleTestServer

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

TEST_TOKEN = "test-token"


@contextlib.asynccontextmanager
async def run_mock_hub(port: int, host: str = "127.0.0.1") -> "AsyncIterator[tuple[SimpleTestServer, URL]]":
    """Serve a SimpleTestServer on `host:port` until the context exits."""
    mock_server = SimpleTestServer()
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", mock_server.handle_request)

    runner = web.AppRunner(app, shutdown_timeout=1)
    await runner.setup()
    try:
        site = web.TCPSite(runner, host, port)
        await site.start()
        yield mock_server, URL.build(scheme="http", host=host, port=port)
    finally:
        await runner.cleanup()


@pytest.fixture
async def mock_hub(unused_tcp_port: int) -> "AsyncIterator[tuple[SimpleTestServer, URL]]":
    """A running mock hub and its base URL."""
    async with run_mock_hub(unused_tcp_port) as (server, base_url):
        yield server, base_url


@pytest.fixture
async def hub_client_with_mock(
    mock_hub: tuple[SimpleTestServer, URL],
) -> "AsyncIterator[tuple[HubClient, SimpleTestServer]]":
    """A HubClient pointed at the mock hub, closed after the test."""
    server, base_url = mock_hub
    async with HubClient(str(base_url), TEST_TOKEN) as client:
        yield client, server


@pytest.fixture
def unused_port_url(unused_tcp_port_factory) -> str:
    """A base URL nothing listens on."""
    return str(URL.build(scheme="http", host="127.0.0.1", port=unused_tcp_port_factory()))


@pytest.fixture
def make_config(mock_hub: tuple[SimpleTestServer, URL]) -> "Callable[..., ExtractionConfig]":
    """Build an ExtractionConfig pointed at the mock hub."""
    _, base_url = mock_hub

    def _factory(entity_id: str, temperature_field: str | None = None, **kwargs) -> ExtractionConfig:
        kwargs.setdefault("base_url", str(base_url))
        kwargs.setdefault("token", TEST_TOKEN)
        return ExtractionConfig(entity_id=entity_id, temperature_field=temperature_field, **kwargs)

    return _factory

"""Test configuration and fixtures."""

import socket

import aiohttp
import pytest
import pytest_asyncio

from quay_api_client import QuayClient
from tests.helpers import FakeQuay, start_fake_quay

TEST_TOKEN = "test-token-123"


@pytest.fixture
def fake_quay():
    """Scriptable fake Quay API."""
    return FakeQuay()


@pytest_asyncio.fixture
async def quay_url(fake_quay):
    """Start the fake Quay API and return its base URL."""
    server, url = await start_fake_quay(fake_quay)
    yield url
    await server.close()


@pytest_asyncio.fixture
async def http_session():
    """Shared session owned by the test, as a caller would own it."""
    session = aiohttp.ClientSession()
    yield session
    await session.close()


@pytest_asyncio.fixture
async def client(quay_url, http_session):
    """Quay client bound to the fake API through an injected session."""
    return QuayClient(quay_url, TEST_TOKEN, session=http_session)


@pytest.fixture
def unused_url():
    """URL of a local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/api/v1"

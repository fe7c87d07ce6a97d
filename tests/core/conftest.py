"""Shared fixtures for core tests.

HTTP-facing code is exercised against ``httpx.MockTransport`` so no test in
this tree touches the network.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Iterator, List

import httpx
import pytest

from lyricast_cli.config import get_default_config


@pytest.fixture
def mock_client() -> Iterator[Callable[..., httpx.AsyncClient]]:
    """Build an AsyncClient whose requests are answered by ``handler``.

    Clients created by the factory are closed on teardown.
    """
    clients: List[httpx.AsyncClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        asyncio.run(client.aclose())


@pytest.fixture
def recorded() -> List[httpx.Request]:
    """Requests seen by a handler, in order."""
    return []


@pytest.fixture
def config() -> dict:
    return get_default_config()

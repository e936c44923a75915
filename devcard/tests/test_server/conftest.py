"""Test fixtures for server tests.

Builds the app around the card fixtures and gives each test an async client.
"""

import copy
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from devcard.config.loader import DEFAULT_CONFIG
from devcard.server.app import create_app

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def config():
    """Default config, copied so tests can change it."""
    return copy.deepcopy(DEFAULT_CONFIG)


async def _client_for(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def client(config):
    """Client for an app serving the full card fixture from disk."""
    app = create_app(config=config, card_path=FIXTURES / "full-card.yaml")
    async for ac in _client_for(app):
        yield ac


@pytest_asyncio.fixture
async def plain_client(config):
    """Client for an app serving an in-memory card with no Claude section."""
    app = create_app(config=config, record={"name": "No Claude", "title": "Analog Developer"})
    async for ac in _client_for(app):
        yield ac


@pytest_asyncio.fixture
async def missing_client(config, tmp_path):
    """Client for an app whose card file does not exist."""
    app = create_app(config=config, card_path=tmp_path / "gone.yaml")
    async for ac in _client_for(app):
        yield ac


@pytest_asyncio.fixture
async def huge_client(config):
    """Client for a card whose hour counts do not fit in a float."""
    record = {"name": "Big", "claude": {"hour_distribution": [10 ** 400] + [5] * 23}}
    app = create_app(config=config, record=record)
    async for ac in _client_for(app):
        yield ac

"""API test fixtures — isolated apps per test, one per store backend.

Invariants:
    - Every test gets a fresh store injected into create_app (no lifespan needed)
    - `client` is parametrized: API tests run against both backends
    - json-backed apps write under tmp_path

Design Decisions:
    - httpx AsyncClient over ASGITransport: same transport the app sees in production,
      no network
"""

import pytest
from httpx import ASGITransport, AsyncClient

from ogiri.config import Settings
from ogiri.infrastructure.json_store import JSONStore
from ogiri.infrastructure.memory_store import InMemoryStore
from ogiri.main import create_app


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        _env_file=None,
        data_file=str(tmp_path / "ogiri.json"),
        static_dir=str(tmp_path / "no-static"),
        log_format="text",
    )


@pytest.fixture
def memory_app(test_settings):
    return create_app(test_settings, store=InMemoryStore())


@pytest.fixture
def json_app(test_settings):
    return create_app(test_settings, store=JSONStore(test_settings.data_file))


async def _client_for(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def memory_client(memory_app):
    async for c in _client_for(memory_app):
        yield c


@pytest.fixture
async def json_client(json_app):
    async for c in _client_for(json_app):
        yield c


@pytest.fixture(params=["memory", "json"])
async def client(request):
    """Client over either backend."""
    app = request.getfixturevalue(f"{request.param}_app")
    async for c in _client_for(app):
        yield c


@pytest.fixture
def create_theme(client):
    """POST a theme and return the JSON body."""
    async def _create(title: str = "お題A", **fields) -> dict:
        res = await client.post("/api/themes", json={"title": title, **fields})
        assert res.status_code == 201
        return res.json()
    return _create

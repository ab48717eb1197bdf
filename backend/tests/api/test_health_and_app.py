"""Health probes, lifespan store construction, static mount, api prefix."""

from httpx import ASGITransport, AsyncClient

from ogiri.config import Settings
from ogiri.infrastructure.json_store import JSONStore
from ogiri.infrastructure.memory_store import InMemoryStore
from ogiri.main import create_app


async def test_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_reports_backend(memory_client):
    await memory_client.post("/api/themes", json={"title": "A"})

    res = await memory_client.get("/api/health/ready")

    assert res.status_code == 200
    assert res.json()["checks"] == {"store": "memory"}
    assert res.json()["themes"] == 1


async def test_readiness_without_store_is_503(test_settings):
    app = create_app(test_settings)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/api/health/ready")
    assert res.status_code == 503


async def test_lifespan_builds_configured_store(tmp_path):
    settings = Settings(
        _env_file=None,
        store_backend="json",
        data_file=str(tmp_path / "ogiri.json"),
        static_dir=str(tmp_path / "no-static"),
        log_format="text",
    )
    app = create_app(settings)

    async with app.router.lifespan_context(app):
        assert isinstance(app.state.store, JSONStore)


async def test_lifespan_keeps_injected_store(test_settings):
    store = InMemoryStore()
    app = create_app(test_settings, store=store)

    async with app.router.lifespan_context(app):
        assert app.state.store is store


async def test_static_files_served_after_api(tmp_path):
    static = tmp_path / "static"
    static.mkdir()
    (static / "index.html").write_text("<h1>tester</h1>", encoding="utf-8")
    settings = Settings(_env_file=None, static_dir=str(static), log_format="text")
    app = create_app(settings, store=InMemoryStore())

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        page = await c.get("/")
        api = await c.get("/api/themes")

    assert page.status_code == 200
    assert "tester" in page.text
    assert api.json() == []


async def test_custom_api_prefix(tmp_path):
    settings = Settings(
        _env_file=None, api_prefix="v2",
        static_dir=str(tmp_path / "no-static"), log_format="text",
    )
    app = create_app(settings, store=InMemoryStore())

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.post("/v2/themes", json={"title": "A"})

    assert res.status_code == 201

"""Theme Endpoints — /api/themes CRUD over both backends.

Tests cover:
    - POST creates an active theme with an assigned id (201)
    - empty or missing title → 400 {"error": ...}, nothing persisted
    - GET list / item, unknown id → 404 with error body
    - PUT merges: empty fields keep values, active toggles only when sent
    - DELETE → 204 empty body, then 404
"""

from ogiri.schemas.theme import Theme


async def test_create_theme_returns_201_with_id(client):
    res = await client.post(
        "/api/themes",
        json={"title": "お題A", "description": "説明", "created_by": "ketya"},
    )

    assert res.status_code == 201
    body = res.json()
    assert body["id"]
    assert body["title"] == "お題A"
    assert body["description"] == "説明"
    assert body["created_by"] == "ketya"
    assert body["active"] is True
    assert body["created_at"]
    assert body["updated_at"]


async def test_create_theme_ignores_client_id(client):
    res = await client.post("/api/themes", json={"title": "x", "id": "mine"})
    assert res.status_code == 201
    assert res.json()["id"] != "mine"


async def test_create_theme_with_empty_title_is_400(client):
    res = await client.post("/api/themes", json={"title": ""})

    assert res.status_code == 400
    assert res.json() == {"error": "title is required"}
    assert (await client.get("/api/themes")).json() == []


async def test_create_theme_without_title_is_400(client):
    res = await client.post("/api/themes", json={"description": "no title"})
    assert res.status_code == 400
    assert (await client.get("/api/themes")).json() == []


async def test_get_theme_returns_created_record(client, create_theme):
    created = await create_theme()

    res = await client.get(f"/api/themes/{created['id']}")

    assert res.status_code == 200
    assert res.json() == created


async def test_get_unknown_theme_is_404(client):
    res = await client.get("/api/themes/never-inserted")

    assert res.status_code == 404
    assert "error" in res.json()


async def test_list_themes(client, create_theme):
    a = await create_theme("A")
    b = await create_theme("B")

    res = await client.get("/api/themes")

    assert res.status_code == 200
    assert {t["id"] for t in res.json()} == {a["id"], b["id"]}


async def test_update_with_empty_title_keeps_title(client, create_theme):
    created = await create_theme(description="説明")

    res = await client.put(
        f"/api/themes/{created['id']}", json={"title": "", "description": ""},
    )

    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "お題A"
    assert body["description"] == "説明"
    assert body["created_at"] == created["created_at"]
    assert (
        Theme.model_validate(body).updated_at
        > Theme.model_validate(created).updated_at
    )


async def test_update_overrides_sent_fields(client, create_theme):
    created = await create_theme()

    res = await client.put(
        f"/api/themes/{created['id']}", json={"title": "新お題"},
    )

    assert res.json()["title"] == "新お題"
    assert (await client.get(f"/api/themes/{created['id']}")).json()["title"] == "新お題"


async def test_update_active_only_when_sent(client, create_theme):
    created = await create_theme()
    url = f"/api/themes/{created['id']}"

    closed = await client.put(url, json={"active": False})
    untouched = await client.put(url, json={"title": "still closed"})

    assert closed.json()["active"] is False
    assert untouched.json()["active"] is False


async def test_update_unknown_theme_is_404(client):
    res = await client.put("/api/themes/missing", json={"title": "x"})
    assert res.status_code == 404
    assert "error" in res.json()


async def test_delete_theme_returns_204_then_404(client, create_theme):
    created = await create_theme()

    res = await client.delete(f"/api/themes/{created['id']}")

    assert res.status_code == 204
    assert res.content == b""
    assert (await client.get(f"/api/themes/{created['id']}")).status_code == 404


async def test_delete_unknown_theme_is_404(client):
    res = await client.delete("/api/themes/missing")
    assert res.status_code == 404
    assert "error" in res.json()

"""Category endpoints: public cached reads and admin mutations."""

from httpx import AsyncClient

from app.application.caching import category_key, category_list_key, dashboard_key
from app.domain.exceptions import CacheStoreException

MISSING_ID = "00000000-0000-4000-8000-000000000003"


async def _create(client: AsyncClient, name: str) -> dict:
    response = await client.post("/api/v1/admin/categories", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_and_list(client: AsyncClient) -> None:
    created = await _create(client, "Productivity")
    assert created["name"] == "Productivity"
    assert created["tip_count"] == 0

    response = await client.get("/api/v1/categories")
    assert response.status_code == 200
    assert [c["name"] for c in response.json()["items"]] == ["Productivity"]


async def test_get_category_by_id(client: AsyncClient) -> None:
    created = await _create(client, "Productivity")
    response = await client.get(f"/api/v1/categories/{created['id']}")
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]


async def test_unknown_category_is_404(client: AsyncClient) -> None:
    response = await client.get(f"/api/v1/categories/{MISSING_ID}")
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_malformed_id_is_400(client: AsyncClient) -> None:
    response = await client.get("/api/v1/categories/not-a-uuid")
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "id"}


async def test_short_name_is_400(client: AsyncClient) -> None:
    response = await client.post("/api/v1/admin/categories", json={"name": "x"})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["details"] == {"field": "name"}


async def test_missing_body_field_is_422(client: AsyncClient) -> None:
    response = await client.post("/api/v1/admin/categories", json={})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_duplicate_name_is_409(client: AsyncClient) -> None:
    await _create(client, "Productivity")
    response = await client.post("/api/v1/admin/categories", json={"name": "productivity"})
    assert response.status_code == 409
    assert response.json()["error"] == "CONFLICT"


async def test_rename_evicts_cached_views(client: AsyncClient, app_cache) -> None:
    created = await _create(client, "Productivity")
    await client.get("/api/v1/categories")
    await client.get(f"/api/v1/categories/{created['id']}")
    assert await app_cache.get(category_key(created["id"])) is not None

    response = await client.put(
        f"/api/v1/admin/categories/{created['id']}", json={"name": "Focus"}
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Focus"
    assert await app_cache.get(category_key(created["id"])) is None
    assert await app_cache.get(category_list_key()) is None
    detail = await client.get(f"/api/v1/categories/{created['id']}")
    assert detail.json()["name"] == "Focus"


async def test_delete_is_204_then_404(client: AsyncClient) -> None:
    created = await _create(client, "Productivity")

    response = await client.delete(f"/api/v1/admin/categories/{created['id']}")
    assert response.status_code == 204
    assert response.content == b""

    assert (await client.get(f"/api/v1/categories/{created['id']}")).status_code == 404
    again = await client.delete(f"/api/v1/admin/categories/{created['id']}")
    assert again.status_code == 404


async def test_failed_invalidation_is_reported_as_500(
    client: AsyncClient, app_cache, monkeypatch
) -> None:
    """The category is saved but the response must not look like success."""
    await client.get("/api/v1/admin/dashboard")

    async def failing_delete(key: str) -> None:
        raise CacheStoreException("delete", key, "store unreachable")

    monkeypatch.setattr(app_cache, "delete", failing_delete)
    response = await client.post("/api/v1/admin/categories", json={"name": "Productivity"})

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "CACHE_INVALIDATION_FAILED"
    assert body["details"]["mutation_persisted"] is True
    assert dashboard_key() in body["details"]["keys"]

    monkeypatch.undo()
    listing = await client.get("/api/v1/categories")
    assert [c["name"] for c in listing.json()["items"]] == ["Productivity"]

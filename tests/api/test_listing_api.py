"""Paged listings and lookups: tips by category, tip search, admin users."""

import pytest
from httpx import AsyncClient

from app.application.caching import category_key

MISSING_ID = "00000000-0000-4000-8000-000000000006"


def _tip_body(category_id: str, title: str, tags: list[str]) -> dict:
    return {
        "title": title,
        "description": "A small habit that saves time every week.",
        "category_id": category_id,
        "steps": [{"step_number": 1, "description": "Start with the smallest step."}],
        "tags": tags,
    }


@pytest.fixture
async def home_id(client: AsyncClient) -> str:
    response = await client.post("/api/v1/admin/categories", json={"name": "Home"})
    category_id = response.json()["id"]
    for title, tags in (
        ("Batch your errands", ["errands"]),
        ("Clean as you cook", ["kitchen"]),
        ("Label the freezer", ["kitchen", "storage"]),
    ):
        await client.post("/api/v1/admin/tips", json=_tip_body(category_id, title, tags))
    return category_id


class TestCategoryTips:
    async def test_first_page(self, client: AsyncClient, home_id: str) -> None:
        response = await client.get(
            f"/api/v1/categories/{home_id}/tips",
            params={"page_size": 2, "order_by": "title", "sort_direction": "asc"},
        )

        assert response.status_code == 200
        body = response.json()
        assert [t["title"] for t in body["items"]] == ["Batch your errands", "Clean as you cook"]
        assert body["items"][0]["category_name"] == "Home"
        assert "steps" not in body["items"][0]
        assert body["pagination"] == {
            "total_items": 3,
            "page_number": 1,
            "page_size": 2,
            "total_pages": 2,
        }

    async def test_listing_does_not_populate_cache(
        self, client: AsyncClient, home_id: str, app_cache
    ) -> None:
        await client.get(f"/api/v1/categories/{home_id}/tips")
        assert await app_cache.get(category_key(home_id)) is None

    async def test_unknown_category_is_404(self, client: AsyncClient) -> None:
        response = await client.get(f"/api/v1/categories/{MISSING_ID}/tips")
        assert response.status_code == 404

    async def test_page_size_over_limit_is_400(self, client: AsyncClient, home_id: str) -> None:
        response = await client.get(
            f"/api/v1/categories/{home_id}/tips", params={"page_size": 101}
        )
        assert response.status_code == 400
        assert response.json()["details"] == {"field": "page_size"}

    async def test_unknown_sort_field_is_422(self, client: AsyncClient, home_id: str) -> None:
        response = await client.get(
            f"/api/v1/categories/{home_id}/tips", params={"order_by": "popularity"}
        )
        assert response.status_code == 422


class TestTipSearch:
    async def test_search_by_tags(self, client: AsyncClient, home_id: str) -> None:
        response = await client.get(
            "/api/v1/tips", params=[("tags", "kitchen"), ("tags", "storage")]
        )
        assert response.status_code == 200
        assert [t["title"] for t in response.json()["items"]] == ["Label the freezer"]

    async def test_search_by_term(self, client: AsyncClient, home_id: str) -> None:
        response = await client.get("/api/v1/tips", params={"q": "COOK"})
        items = response.json()["items"]
        assert [t["title"] for t in items] == ["Clean as you cook"]

    async def test_deleted_tip_drops_out(self, client: AsyncClient, home_id: str) -> None:
        found = (await client.get("/api/v1/tips", params={"q": "errands"})).json()["items"]
        await client.delete(f"/api/v1/admin/tips/{found[0]['id']}")

        response = await client.get("/api/v1/tips", params={"q": "errands"})
        assert response.json()["pagination"]["total_items"] == 0


class TestAdminUserReads:
    @pytest.fixture
    async def user_id(self, client: AsyncClient) -> str:
        for email, name, auth in (
            ("ada@example.com", "Ada", "auth0|1"),
            ("grace@example.com", "Grace", "auth0|2"),
        ):
            response = await client.post(
                "/api/v1/admin/users",
                json={"email": email, "name": name, "external_auth_id": auth},
            )
        return response.json()["id"]

    async def test_list_and_search(self, client: AsyncClient, user_id: str) -> None:
        listing = (await client.get("/api/v1/admin/users")).json()
        assert listing["pagination"]["total_items"] == 2

        found = (await client.get("/api/v1/admin/users", params={"search": "grace"})).json()
        assert [u["id"] for u in found["items"]] == [user_id]
        assert "external_auth_id" not in found["items"][0]

    async def test_deleted_filter(self, client: AsyncClient, user_id: str) -> None:
        await client.delete(f"/api/v1/admin/users/{user_id}")

        deleted = (
            await client.get("/api/v1/admin/users", params={"is_deleted": "true"})
        ).json()
        assert [u["id"] for u in deleted["items"]] == [user_id]
        assert deleted["items"][0]["is_deleted"] is True

    async def test_get_by_id_and_email(self, client: AsyncClient, user_id: str) -> None:
        by_id = await client.get(f"/api/v1/admin/users/{user_id}")
        by_email = await client.get("/api/v1/admin/users/email/GRACE@example.com")

        assert by_id.status_code == 200
        assert by_email.status_code == 200
        assert by_id.json() == by_email.json()

    async def test_unknown_lookups_are_404(self, client: AsyncClient) -> None:
        assert (await client.get(f"/api/v1/admin/users/{MISSING_ID}")).status_code == 404
        missing = await client.get("/api/v1/admin/users/email/nobody@example.com")
        assert missing.status_code == 404

    async def test_malformed_email_is_400(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/admin/users/email/not-an-email")
        assert response.status_code == 400
        assert response.json()["details"] == {"field": "email"}

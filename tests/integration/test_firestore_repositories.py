"""Firestore repositories against a fake Firestore REST endpoint (httpx.MockTransport)."""

import json
from datetime import timedelta
from types import SimpleNamespace

import httpx
import pytest

from app.application.dtos.query import TipQueryCriteria, UserQueryCriteria
from app.domain.entities import Category, Tip, User
from app.domain.exceptions import PersistenceException
from app.domain.value_objects.core import (
    CategoryId,
    Email,
    ExternalAuthId,
    Tag,
    TipDescription,
    TipStep,
    TipTitle,
    UserId,
    UserName,
    VideoUrl,
)
from app.infrastructure.firebase import FirestoreRESTClient
from app.infrastructure.firebase._rest_encoding import decode_document
from app.infrastructure.firebase.repositories import (
    FirestoreCategoryRepository,
    FirestoreTipRepository,
    FirestoreUserRepository,
)


class FakeFirestore:
    """Minimal in-memory Firestore REST v1 server (documents, list, runQuery)."""

    def __init__(self, page_size: int = 2) -> None:
        self.collections: dict[str, dict[str, dict]] = {}
        self.page_size = page_size
        self.requests: list[httpx.Request] = []

    def _doc(self, collection: str, doc_id: str) -> dict:
        return {
            "name": f"projects/demo/databases/(default)/documents/{collection}/{doc_id}",
            "fields": self.collections[collection][doc_id],
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        _, _, rest = request.url.path.partition("/documents")
        if rest == ":runQuery":
            return self._run_query(json.loads(request.content))
        parts = [p for p in rest.split("/") if p]
        collection = self.collections.setdefault(parts[0], {})
        if len(parts) == 1:
            if request.method == "POST":
                doc_id = request.url.params["documentId"]
                if doc_id in collection:
                    return httpx.Response(409, json={"error": {"status": "ALREADY_EXISTS"}})
                collection[doc_id] = json.loads(request.content)["fields"]
                return httpx.Response(200, json=self._doc(parts[0], doc_id))
            return self._list(parts[0], request.url.params.get("pageToken"))
        doc_id = parts[1]
        if request.method == "PATCH":
            collection[doc_id] = json.loads(request.content)["fields"]
            return httpx.Response(200, json=self._doc(parts[0], doc_id))
        if request.method == "DELETE":
            collection.pop(doc_id, None)
            return httpx.Response(200, json={})
        if doc_id not in collection:
            return httpx.Response(404, json={"error": {"status": "NOT_FOUND"}})
        return httpx.Response(200, json=self._doc(parts[0], doc_id))

    def _list(self, collection: str, page_token: str | None) -> httpx.Response:
        ids = list(self.collections[collection])
        start = int(page_token or 0)
        page = ids[start : start + self.page_size]
        body: dict = {"documents": [self._doc(collection, i) for i in page]}
        if start + self.page_size < len(ids):
            body["nextPageToken"] = str(start + self.page_size)
        return httpx.Response(200, json=body)

    def _run_query(self, body: dict) -> httpx.Response:
        query = body["structuredQuery"]
        collection = query["from"][0]["collectionId"]
        where = query.get("where")
        if where is None:
            filters = []
        elif "compositeFilter" in where:
            filters = [f["fieldFilter"] for f in where["compositeFilter"]["filters"]]
        else:
            filters = [where["fieldFilter"]]

        results = []
        for doc_id, fields in self.collections.get(collection, {}).items():
            data = decode_document(fields)
            if all(
                f["op"] == "EQUAL"
                and data.get(f["field"]["fieldPath"]) == decode_document({"v": f["value"]})["v"]
                for f in filters
            ):
                results.append({"document": self._doc(collection, doc_id)})
        if "limit" in query:
            results = results[: query["limit"]]
        return httpx.Response(200, json=results or [{"readTime": "2026-01-01T00:00:00Z"}])


@pytest.fixture
def fake() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture
async def client(fake: FakeFirestore) -> FirestoreRESTClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake.handler))
    credentials = SimpleNamespace(valid=True, token="test-token")
    yield FirestoreRESTClient("demo", credentials, http_client=http)
    await http.aclose()


def _tip(category_id: CategoryId) -> Tip:
    return Tip.create(
        title=TipTitle("Batch your errands"),
        description=TipDescription("Group errands by location."),
        steps=[TipStep(1, "List every errand for the week.")],
        category_id=category_id,
        video_url=VideoUrl("https://example.com/v/1"),
    )


class TestFirestoreCategoryRepository:
    async def test_add_and_get_round_trip(self, client) -> None:
        repo = FirestoreCategoryRepository(client)
        category = Category.create("Productivity")
        await repo.add(category)

        loaded = await repo.get_by_id(category.id)

        assert loaded.id == category.id
        assert loaded.name == "Productivity"
        assert loaded.created_at == category.created_at

    async def test_get_by_name_is_case_insensitive(self, client) -> None:
        repo = FirestoreCategoryRepository(client)
        category = Category.create("Productivity")
        await repo.add(category)

        assert (await repo.get_by_name(" PRODUCTIVITY ")).id == category.id
        assert await repo.get_by_name("Health") is None

    async def test_deleted_category_hidden_but_name_reserved(self, client) -> None:
        repo = FirestoreCategoryRepository(client)
        category = Category.create("Productivity")
        await repo.add(category)
        category.mark_deleted()
        await repo.update(category)

        assert await repo.get_by_id(category.id) is None
        assert await repo.get_all() == []
        assert await repo.get_by_name("productivity") is None
        assert await repo.get_by_name("productivity", include_deleted=True) is not None

    async def test_get_all_sorted_by_creation(self, client) -> None:
        repo = FirestoreCategoryRepository(client)
        first = Category.create("First")
        second = Category.create("Second")
        second.created_at = first.created_at + timedelta(seconds=1)
        await repo.add(second)
        await repo.add(first)
        assert [c.name for c in await repo.get_all()] == ["First", "Second"]

    async def test_duplicate_id_is_persistence_error(self, client) -> None:
        repo = FirestoreCategoryRepository(client)
        category = Category.create("Productivity")
        await repo.add(category)
        with pytest.raises(PersistenceException):
            await repo.add(category)


class TestFirestoreTipRepository:
    async def test_get_by_category_excludes_deleted_and_other_categories(self, client) -> None:
        repo = FirestoreTipRepository(client)
        a, b = CategoryId.new(), CategoryId.new()
        kept, deleted, other = _tip(a), _tip(a), _tip(b)
        for tip in (kept, deleted, other):
            await repo.add(tip)
        deleted.mark_deleted()
        await repo.update(deleted)

        assert [t.id for t in await repo.get_by_category(a)] == [kept.id]
        assert await repo.count_by_category(a) == 1
        assert len(await repo.get_all()) == 2

    async def test_round_trip_keeps_steps_and_video(self, client) -> None:
        repo = FirestoreTipRepository(client)
        tip = _tip(CategoryId.new())
        await repo.add(tip)

        loaded = await repo.get_by_id(tip.id)

        assert loaded.steps == tip.steps
        assert loaded.video_url == tip.video_url
        assert loaded.category_id == tip.category_id


    async def test_search_filters_by_category_and_tag_then_pages(self, client) -> None:
        repo = FirestoreTipRepository(client)
        a, b = CategoryId.new(), CategoryId.new()
        tagged = [_tip(a) for _ in range(3)]
        for tip in tagged:
            tip.tags = [Tag("errands")]
            await repo.add(tip)
        await repo.add(_tip(a))
        await repo.add(_tip(b))

        page, total = await repo.search(
            TipQueryCriteria(category_id=str(a), tags=("ERRANDS",), page_size=2)
        )

        assert total == 3
        assert len(page) == 2
        assert {t.id for t in page} <= {t.id for t in tagged}


class TestFirestoreUserRepository:
    async def test_lookup_and_soft_delete(self, client) -> None:
        repo = FirestoreUserRepository(client)
        user = User.create(
            email=Email("ada@example.com"),
            name=UserName("Ada"),
            external_auth_id=ExternalAuthId("auth0|1"),
        )
        await repo.add(user)

        assert (await repo.get_by_email(Email("ADA@example.com"))).id == user.id
        assert (await repo.get_by_external_auth_id(ExternalAuthId("auth0|1"))).id == user.id

        await repo.delete(user.id)

        assert await repo.get_by_id(user.id) is None
        assert await repo.get_by_email(Email("ada@example.com")) is None
        assert await repo.get_all_active() == []

    async def test_delete_unknown_is_noop(self, client) -> None:
        await FirestoreUserRepository(client).delete(UserId.new())


    async def test_get_paged_includes_deleted_unless_filtered(self, client) -> None:
        repo = FirestoreUserRepository(client)
        ada = User.create(Email("ada@example.com"), UserName("Ada"), ExternalAuthId("a1"))
        bob = User.create(Email("bob@example.com"), UserName("Bob"), ExternalAuthId("b1"))
        for user in (ada, bob):
            await repo.add(user)
        await repo.delete(bob.id)

        _, total = await repo.get_paged(UserQueryCriteria())
        active, active_total = await repo.get_paged(UserQueryCriteria(is_deleted=False))

        assert total == 2
        assert active_total == 1
        assert [u.id for u in active] == [ada.id]


class TestFirestoreRESTClient:
    async def test_requests_carry_bearer_token(self, client, fake: FakeFirestore) -> None:
        await client.collection("categories").document("x").get()
        assert fake.requests[-1].headers["Authorization"] == "Bearer test-token"

    async def test_collection_stream_follows_page_tokens(self, client, fake: FakeFirestore) -> None:
        coll = client.collection("things")
        for i in range(5):
            await coll.create(f"doc{i}", {"n": i})

        ids = [s.id async for s in coll.stream()]

        assert ids == [f"doc{i}" for i in range(5)]
        tokens = [r.url.params.get("pageToken") for r in fake.requests if r.method == "GET"]
        assert tokens == [None, "2", "4"]

    async def test_chained_where_builds_composite_filter(self, client, fake: FakeFirestore) -> None:
        query = client.collection("tips").where("category_id", "==", "a").where(
            "is_deleted", "==", False
        )
        assert [s async for s in query.stream()] == []
        body = json.loads(fake.requests[-1].content)
        composite = body["structuredQuery"]["where"]["compositeFilter"]
        assert composite["op"] == "AND"
        assert len(composite["filters"]) == 2

    async def test_server_error_is_persistence_error(self) -> None:
        http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(500)))
        client = FirestoreRESTClient("demo", SimpleNamespace(valid=True, token="t"), http_client=http)
        with pytest.raises(PersistenceException) as exc_info:
            await client.collection("tips").document("x").get()
        assert exc_info.value.details["reason"] == "HTTP 500"
        await http.aclose()

    async def test_transport_error_is_persistence_error(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(refuse))
        client = FirestoreRESTClient("demo", SimpleNamespace(valid=True, token="t"), http_client=http)
        with pytest.raises(PersistenceException):
            await client.collection("tips").document("x").set({"a": 1})
        await http.aclose()

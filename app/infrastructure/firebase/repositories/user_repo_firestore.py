"""Firestore-backed user repository (implements IUserRepository)."""

from __future__ import annotations

from app.application.dtos.query import UserQueryCriteria
from app.domain.entities import User
from app.domain.value_objects.core import Email, ExternalAuthId, UserId, UserName
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.collections import COLLECTION_USERS
from app.shared.utils.datetime import ensure_utc


def _to_entity(doc_id: str, data: dict) -> User:
    return User(
        id=UserId.parse(doc_id),
        email=Email(data.get("email", "")),
        name=UserName(data.get("name", "")),
        external_auth_id=ExternalAuthId(data.get("external_auth_id", "")),
        is_admin=data.get("is_admin", False),
        created_at=ensure_utc(data.get("created_at")),
        updated_at=ensure_utc(data.get("updated_at")),
        is_deleted=data.get("is_deleted", False),
        deleted_at=ensure_utc(data.get("deleted_at")),
    )


def _to_document(user: User) -> dict:
    return {
        "email": user.email.value,
        "name": user.name.value,
        "external_auth_id": user.external_auth_id.value,
        "is_admin": user.is_admin,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
        "is_deleted": user.is_deleted,
        "deleted_at": user.deleted_at,
    }


class FirestoreUserRepository:
    """User repository using Firestore. Same contract as InMemoryUserRepository."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_USERS)

    async def _first_active(self, field: str, value: str) -> User | None:
        query = self._coll.where(field, "==", value).where("is_deleted", "==", False)
        async for snapshot in query.limit(1).stream():
            return _to_entity(snapshot.id, snapshot.to_dict())
        return None

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Return user by ID; None when missing or soft-deleted."""
        doc = await self._coll.document(str(user_id)).get()
        if not doc:
            return None
        user = _to_entity(doc.id, doc.to_dict())
        return None if user.is_deleted else user

    async def get_by_email(self, email: Email) -> User | None:
        return await self._first_active("email", email.value)

    async def get_by_external_auth_id(
        self, external_auth_id: ExternalAuthId
    ) -> User | None:
        return await self._first_active("external_auth_id", external_auth_id.value)

    async def get_all_active(self) -> list[User]:
        query = self._coll.where("is_deleted", "==", False)
        return [_to_entity(s.id, s.to_dict()) async for s in query.stream()]

    async def get_paged(self, criteria: UserQueryCriteria) -> tuple[list[User], int]:
        if criteria.is_deleted is None:
            snapshots = self._coll.stream()
        else:
            snapshots = self._coll.where("is_deleted", "==", criteria.is_deleted).stream()
        users = [_to_entity(s.id, s.to_dict()) async for s in snapshots]
        return criteria.apply(users)

    async def add(self, user: User) -> None:
        await self._coll.create(str(user.id), _to_document(user))

    async def update(self, user: User) -> None:
        await self._coll.document(str(user.id)).set(_to_document(user))

    async def delete(self, user_id: UserId) -> None:
        """Soft-delete: keep the document, flag it is_deleted."""
        doc = await self._coll.document(str(user_id)).get()
        if not doc:
            return
        user = _to_entity(doc.id, doc.to_dict())
        if user.is_deleted:
            return
        user.mark_deleted()
        await self.update(user)

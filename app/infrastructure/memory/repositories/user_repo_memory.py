"""In-memory user repository (implements IUserRepository)."""

from __future__ import annotations

from app.application.dtos.query import UserQueryCriteria
from app.domain.entities import User
from app.domain.value_objects.core import Email, ExternalAuthId, UserId
from app.infrastructure.memory.store import InMemoryDataStore, clone, insert, replace


class InMemoryUserRepository:
    """User repository over a shared InMemoryDataStore."""

    def __init__(self, store: InMemoryDataStore) -> None:
        self._store = store

    def _active(self) -> list[User]:
        return [u for u in self._store.users.values() if not u.is_deleted]

    async def get_by_id(self, user_id: UserId) -> User | None:
        async with self._store.lock:
            user = self._store.users.get(str(user_id))
            if user is None or user.is_deleted:
                return None
            return clone(user)

    async def get_by_email(self, email: Email) -> User | None:
        async with self._store.lock:
            for user in self._active():
                if user.email == email:
                    return clone(user)
        return None

    async def get_by_external_auth_id(
        self, external_auth_id: ExternalAuthId
    ) -> User | None:
        async with self._store.lock:
            for user in self._active():
                if user.external_auth_id == external_auth_id:
                    return clone(user)
        return None

    async def get_all_active(self) -> list[User]:
        async with self._store.lock:
            return [clone(u) for u in self._active()]

    async def get_paged(self, criteria: UserQueryCriteria) -> tuple[list[User], int]:
        async with self._store.lock:
            page, total = criteria.apply(list(self._store.users.values()))
            return [clone(u) for u in page], total

    async def add(self, user: User) -> None:
        async with self._store.lock:
            insert(self._store.users, str(user.id), user, "users.add")

    async def update(self, user: User) -> None:
        async with self._store.lock:
            replace(self._store.users, str(user.id), user, "users.update")

    async def delete(self, user_id: UserId) -> None:
        """Soft-delete; unknown or already deleted ids are a no-op."""
        async with self._store.lock:
            user = self._store.users.get(str(user_id))
            if user is not None:
                user.mark_deleted()

"""Category read views, cached under the shared key registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.caching.keys import CacheResource, key_for
from app.application.caching.read_through import read_through
from app.application.dtos.category import CategoryListResult, CategoryResult
from app.application.use_cases._values import parse_value
from app.domain.exceptions import ResourceNotFoundException
from app.domain.value_objects.core import CategoryId

if TYPE_CHECKING:
    from app.application.interfaces.repositories import (
        ICategoryRepository,
        ITipRepository,
    )
    from app.application.interfaces.services import ICacheStore


class GetCategoriesUseCase:
    """List non-deleted categories with their tip counts (cached as CategoryList)."""

    def __init__(
        self,
        category_repo: "ICategoryRepository",
        tip_repo: "ITipRepository",
        cache: "ICacheStore",
        ttl_seconds: int,
    ) -> None:
        self.category_repo = category_repo
        self.tip_repo = tip_repo
        self.cache = cache
        self.ttl_seconds = ttl_seconds

    async def execute(self) -> CategoryListResult:
        return await read_through(
            self.cache,
            key_for(CacheResource.category_list()),
            self.ttl_seconds,
            self._load,
            CategoryListResult.to_cache,
            CategoryListResult.from_cache,
        )

    async def _load(self) -> CategoryListResult:
        categories = await self.category_repo.get_all()
        items = [
            CategoryResult.from_entity(c, await self.tip_repo.count_by_category(c.id))
            for c in categories
        ]
        return CategoryListResult(items=items)


class GetCategoryByIdUseCase:
    """Return one category with its tip count (cached as Category_{id})."""

    def __init__(
        self,
        category_repo: "ICategoryRepository",
        tip_repo: "ITipRepository",
        cache: "ICacheStore",
        ttl_seconds: int,
    ) -> None:
        self.category_repo = category_repo
        self.tip_repo = tip_repo
        self.cache = cache
        self.ttl_seconds = ttl_seconds

    async def execute(self, category_id: str) -> CategoryResult:
        """Return the category detail view.

        Raises:
            ValidationException: If the id is invalid.
            ResourceNotFoundException: If the category is missing or deleted.
        """
        cid = parse_value(CategoryId.parse, category_id, field="id")

        async def load() -> CategoryResult:
            category = await self.category_repo.get_by_id(cid)
            if category is None:
                raise ResourceNotFoundException("category", str(cid))
            tip_count = await self.tip_repo.count_by_category(cid)
            return CategoryResult.from_entity(category, tip_count)

        return await read_through(
            self.cache,
            key_for(CacheResource.category(cid)),
            self.ttl_seconds,
            load,
            CategoryResult.to_cache,
            CategoryResult.from_cache,
        )

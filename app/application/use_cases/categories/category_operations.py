"""Category operations: create, rename, soft delete.

Each use case persists first and reports the mutation to the invalidation
dispatcher only once the repository call has returned. Validation, conflict
and not-found failures happen before any write and leave the cache untouched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.category import CategoryResult
from app.application.use_cases._values import parse_value
from app.domain.entities import Category
from app.domain.enums import EntityKind, MutationKind
from app.domain.exceptions import ConflictException, ResourceNotFoundException
from app.domain.value_objects.core import CategoryId

if TYPE_CHECKING:
    from app.application.caching.invalidation import CacheInvalidationDispatcher
    from app.application.interfaces.repositories import (
        ICategoryRepository,
        ITipRepository,
    )

logger = logging.getLogger(__name__)


async def _load_category(
    category_repo: "ICategoryRepository", category_id: CategoryId
) -> Category:
    category = await category_repo.get_by_id(category_id)
    if category is None:
        raise ResourceNotFoundException("category", str(category_id))
    return category


class CreateCategoryUseCase:
    """Create a category with a unique name."""

    def __init__(
        self,
        category_repo: "ICategoryRepository",
        dispatcher: "CacheInvalidationDispatcher",
    ) -> None:
        self.category_repo = category_repo
        self.dispatcher = dispatcher

    async def execute(self, name: str) -> CategoryResult:
        """Create the category and evict the dashboard and category list.

        Names are unique case-insensitively, soft-deleted categories included.

        Raises:
            ValidationException: If name is empty or out of range.
            ConflictException: If the name is taken.
        """
        category = Category.create(name)
        existing = await self.category_repo.get_by_name(category.name, include_deleted=True)
        if existing is not None:
            raise ConflictException(
                f"Category with name '{category.name}' already exists", field="name"
            )

        await self.category_repo.add(category)
        logger.info("Created category %s", category.id)
        await self.dispatcher.dispatch(EntityKind.CATEGORY, MutationKind.CREATED)
        return CategoryResult.from_entity(category, tip_count=0)


class UpdateCategoryUseCase:
    """Rename a category."""

    def __init__(
        self,
        category_repo: "ICategoryRepository",
        tip_repo: "ITipRepository",
        dispatcher: "CacheInvalidationDispatcher",
    ) -> None:
        self.category_repo = category_repo
        self.tip_repo = tip_repo
        self.dispatcher = dispatcher

    async def execute(self, category_id: str, name: str) -> CategoryResult:
        """Rename the category; evict the dashboard, the list and its detail view.

        Raises:
            ValidationException: If the id or name is invalid.
            ResourceNotFoundException: If the category is missing or deleted.
            ConflictException: If another category has the name.
        """
        cid = parse_value(CategoryId.parse, category_id, field="id")
        category = await _load_category(self.category_repo, cid)
        category.rename(name)

        existing = await self.category_repo.get_by_name(category.name, include_deleted=True)
        if existing is not None and existing.id != category.id:
            raise ConflictException(
                f"Category with name '{category.name}' already exists", field="name"
            )

        tip_count = await self.tip_repo.count_by_category(cid)
        await self.category_repo.update(category)
        await self.dispatcher.dispatch(EntityKind.CATEGORY, MutationKind.UPDATED, [cid])
        return CategoryResult.from_entity(category, tip_count=tip_count)


class DeleteCategoryUseCase:
    """Soft-delete a category together with its tips."""

    def __init__(
        self,
        category_repo: "ICategoryRepository",
        tip_repo: "ITipRepository",
        dispatcher: "CacheInvalidationDispatcher",
    ) -> None:
        self.category_repo = category_repo
        self.tip_repo = tip_repo
        self.dispatcher = dispatcher

    async def execute(self, category_id: str) -> None:
        """Soft-delete the category and its tips, then evict every category view.

        The cascade is several writes. If one fails after an earlier write
        landed, the views are still evicted before the error propagates.

        Raises:
            ValidationException: If the id is invalid.
            ResourceNotFoundException: If the category is missing or already deleted.
            PersistenceException: If a write fails.
        """
        cid = parse_value(CategoryId.parse, category_id, field="id")
        category = await _load_category(self.category_repo, cid)

        tips = await self.tip_repo.get_by_category(cid)
        written = 0
        try:
            for tip in tips:
                tip.mark_deleted()
                await self.tip_repo.update(tip)
                written += 1
            category.mark_deleted()
            await self.category_repo.update(category)
        except Exception:
            if written:
                logger.warning(
                    "Category %s delete failed after %d tip writes; evicting views",
                    cid,
                    written,
                )
                await self.dispatcher.dispatch(
                    EntityKind.CATEGORY, MutationKind.DELETED, [cid]
                )
            raise
        logger.info("Deleted category %s (%d tips)", cid, len(tips))

        await self.dispatcher.dispatch(EntityKind.CATEGORY, MutationKind.DELETED, [cid])

"""Tip operations: create, full update, soft delete.

A tip counts toward its category's detail view and the category list, so
every tip mutation reports the affected category ids. An update that moves a
tip reports both the previous and the new category.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.application.dtos.tip import TipCommand, TipResult
from app.application.use_cases._values import parse_value
from app.domain.entities import Category, Tip
from app.domain.enums import EntityKind, MutationKind
from app.domain.exceptions import ResourceNotFoundException
from app.domain.value_objects.core import (
    CategoryId,
    Tag,
    TipDescription,
    TipId,
    TipStep,
    TipTitle,
    VideoUrl,
)

if TYPE_CHECKING:
    from app.application.caching.invalidation import CacheInvalidationDispatcher
    from app.application.interfaces.repositories import (
        ICategoryRepository,
        ITipRepository,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _TipValues:
    title: TipTitle
    description: TipDescription
    steps: list[TipStep]
    category_id: CategoryId
    tags: list[Tag]
    video_url: VideoUrl | None


def _parse_command(command: TipCommand) -> _TipValues:
    """Validate every field of the command into domain values."""
    return _TipValues(
        title=parse_value(TipTitle, command.title, field="title"),
        description=parse_value(TipDescription, command.description, field="description"),
        steps=[
            parse_value(TipStep, s.step_number, s.description, field="steps")
            for s in command.steps
        ],
        category_id=parse_value(CategoryId.parse, command.category_id, field="category_id"),
        tags=[parse_value(Tag, t, field="tags") for t in command.tags],
        video_url=(
            parse_value(VideoUrl, command.video_url, field="video_url")
            if command.video_url
            else None
        ),
    )


async def _load_category(
    category_repo: "ICategoryRepository", category_id: CategoryId
) -> Category:
    category = await category_repo.get_by_id(category_id)
    if category is None:
        raise ResourceNotFoundException("category", str(category_id))
    return category


async def _load_tip(tip_repo: "ITipRepository", tip_id: TipId) -> Tip:
    tip = await tip_repo.get_by_id(tip_id)
    if tip is None:
        raise ResourceNotFoundException("tip", str(tip_id))
    return tip


class CreateTipUseCase:
    """Create a tip in an existing category."""

    def __init__(
        self,
        tip_repo: "ITipRepository",
        category_repo: "ICategoryRepository",
        dispatcher: "CacheInvalidationDispatcher",
    ) -> None:
        self.tip_repo = tip_repo
        self.category_repo = category_repo
        self.dispatcher = dispatcher

    async def execute(self, command: TipCommand) -> TipResult:
        """Create the tip and evict the dashboard, the list and its category.

        Raises:
            ValidationException: If any field is invalid.
            ResourceNotFoundException: If the category is missing or deleted.
        """
        values = _parse_command(command)
        category = await _load_category(self.category_repo, values.category_id)
        tip = Tip.create(
            title=values.title,
            description=values.description,
            steps=values.steps,
            category_id=values.category_id,
            tags=values.tags,
            video_url=values.video_url,
        )

        await self.tip_repo.add(tip)
        logger.info("Created tip %s in category %s", tip.id, tip.category_id)
        await self.dispatcher.dispatch(
            EntityKind.TIP, MutationKind.CREATED, [tip.category_id]
        )
        return TipResult.from_entity(tip, category.name)


class UpdateTipUseCase:
    """Replace a tip's content; may move it to another category."""

    def __init__(
        self,
        tip_repo: "ITipRepository",
        category_repo: "ICategoryRepository",
        dispatcher: "CacheInvalidationDispatcher",
    ) -> None:
        self.tip_repo = tip_repo
        self.category_repo = category_repo
        self.dispatcher = dispatcher

    async def execute(self, tip_id: str, command: TipCommand) -> TipResult:
        """Update the tip; evict the dashboard, the list and both categories.

        Raises:
            ValidationException: If the id or any field is invalid.
            ResourceNotFoundException: If the tip or target category is missing.
        """
        tid = parse_value(TipId.parse, tip_id, field="id")
        values = _parse_command(command)
        tip = await _load_tip(self.tip_repo, tid)
        category = await _load_category(self.category_repo, values.category_id)
        previous_category_id = tip.category_id

        tip.update(
            title=values.title,
            description=values.description,
            steps=values.steps,
            category_id=values.category_id,
            tags=values.tags,
            video_url=values.video_url,
        )
        await self.tip_repo.update(tip)
        if previous_category_id != tip.category_id:
            logger.info(
                "Moved tip %s from category %s to %s",
                tip.id,
                previous_category_id,
                tip.category_id,
            )
        await self.dispatcher.dispatch(
            EntityKind.TIP,
            MutationKind.UPDATED,
            [previous_category_id, tip.category_id],
        )
        return TipResult.from_entity(tip, category.name)


class DeleteTipUseCase:
    """Soft-delete a tip."""

    def __init__(
        self,
        tip_repo: "ITipRepository",
        dispatcher: "CacheInvalidationDispatcher",
    ) -> None:
        self.tip_repo = tip_repo
        self.dispatcher = dispatcher

    async def execute(self, tip_id: str) -> None:
        """Soft-delete the tip and evict the views its category appears in.

        Raises:
            ValidationException: If the id is invalid.
            ResourceNotFoundException: If the tip is missing or already deleted.
        """
        tid = parse_value(TipId.parse, tip_id, field="id")
        tip = await _load_tip(self.tip_repo, tid)
        tip.mark_deleted()
        await self.tip_repo.update(tip)
        await self.dispatcher.dispatch(
            EntityKind.TIP, MutationKind.DELETED, [tip.category_id]
        )

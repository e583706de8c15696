"""Cache invalidation matrix and dispatcher.

INVALIDATION_MATRIX is the single table that says which cached read views a
persisted mutation makes stale. Mutation use cases do not pick invalidation
calls themselves: they report (entity, mutation, affected category ids) to
CacheInvalidationDispatcher, which consults the table and drives the
ICacheInvalidationService.

Call dispatch() only after the repository write has returned. A failure while
evicting is raised as CacheInvalidationException: the write is durable but the
cache may be stale, and that must not look like success.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from app.application.caching.keys import CacheResource, CacheResourceKind, key_for
from app.application.interfaces.services import ICacheInvalidationService
from app.domain.enums import EntityKind, MutationKind
from app.domain.exceptions import CacheInvalidationException
from app.domain.value_objects.core import CategoryId

logger = logging.getLogger(__name__)

_ALL_CATEGORY_VIEWS = frozenset(
    {
        CacheResourceKind.DASHBOARD,
        CacheResourceKind.CATEGORY_LIST,
        CacheResourceKind.CATEGORY,
    }
)

# Users are counted on the dashboard only. User updates invalidate it too
# (conservative: no per-field tracking of dashboard relevance).
INVALIDATION_MATRIX: Mapping[tuple[EntityKind, MutationKind], frozenset[CacheResourceKind]] = (
    MappingProxyType(
        {
            # A new category has no detail entry yet.
            (EntityKind.CATEGORY, MutationKind.CREATED): frozenset(
                {CacheResourceKind.DASHBOARD, CacheResourceKind.CATEGORY_LIST}
            ),
            (EntityKind.CATEGORY, MutationKind.UPDATED): _ALL_CATEGORY_VIEWS,
            (EntityKind.CATEGORY, MutationKind.DELETED): _ALL_CATEGORY_VIEWS,
            (EntityKind.TIP, MutationKind.CREATED): _ALL_CATEGORY_VIEWS,
            (EntityKind.TIP, MutationKind.UPDATED): _ALL_CATEGORY_VIEWS,
            (EntityKind.TIP, MutationKind.DELETED): _ALL_CATEGORY_VIEWS,
            (EntityKind.USER, MutationKind.CREATED): frozenset({CacheResourceKind.DASHBOARD}),
            (EntityKind.USER, MutationKind.UPDATED): frozenset({CacheResourceKind.DASHBOARD}),
            (EntityKind.USER, MutationKind.DELETED): frozenset({CacheResourceKind.DASHBOARD}),
        }
    )
)


def resources_for(
    entity: EntityKind,
    mutation: MutationKind,
    category_ids: Iterable[CategoryId] = (),
) -> list[CacheResource]:
    """Return the concrete cached views a mutation makes stale.

    Args:
        entity: Kind of entity that was mutated.
        mutation: Kind of mutation.
        category_ids: Categories the mutation touched (for a tip moved from
            A to B, both A and B). Duplicates are ignored.

    Returns:
        Resources in eviction order: dashboard, list, then categories.

    Raises:
        ValueError: If (entity, mutation) has no matrix row, or the row
            includes category views and no category id was given.
    """
    try:
        entity = EntityKind(entity)
        mutation = MutationKind(mutation)
        kinds = INVALIDATION_MATRIX[(entity, mutation)]
    except (KeyError, ValueError) as e:
        raise ValueError(f"No invalidation rule for {entity!s} {mutation!s}") from e

    ids = list(dict.fromkeys(CategoryId.parse(cid) for cid in category_ids))
    resources: list[CacheResource] = []
    if CacheResourceKind.DASHBOARD in kinds:
        resources.append(CacheResource.dashboard())
    if CacheResourceKind.CATEGORY_LIST in kinds:
        resources.append(CacheResource.category_list())
    if CacheResourceKind.CATEGORY in kinds:
        if not ids:
            raise ValueError(
                f"{entity.value} {mutation.value} requires the affected category id(s)"
            )
        resources.extend(CacheResource.category(cid) for cid in ids)
    return resources


class CacheInvalidationDispatcher:
    """Apply the invalidation matrix to one persisted mutation at a time."""

    def __init__(self, invalidation_service: ICacheInvalidationService) -> None:
        self.invalidation_service = invalidation_service

    async def dispatch(
        self,
        entity: EntityKind,
        mutation: MutationKind,
        category_ids: Iterable[CategoryId] = (),
    ) -> list[str]:
        """Evict every cached view the mutation made stale.

        Returns:
            The evicted cache keys (for logging and tests).

        Raises:
            ValueError: On a matrix lookup error (programming error; raised
                before any eviction).
            CacheInvalidationException: If the invalidation service fails.
        """
        resources = resources_for(entity, mutation, category_ids)
        entity, mutation = EntityKind(entity), MutationKind(mutation)
        keys = [key_for(r) for r in resources]
        try:
            await self._evict(resources)
        except Exception as e:
            logger.error(
                "Cache invalidation failed after %s %s; stale keys possible: %s",
                entity.value,
                mutation.value,
                keys,
                exc_info=True,
            )
            raise CacheInvalidationException(entity.value, mutation.value, keys) from e
        logger.info("Cache invalidated after %s %s: %s", entity.value, mutation.value, keys)
        return keys

    async def _evict(self, resources: list[CacheResource]) -> None:
        svc = self.invalidation_service
        kinds = {r.kind for r in resources}
        category_ids = [r.category_id for r in resources if r.category_id is not None]

        if CacheResourceKind.DASHBOARD in kinds:
            await svc.invalidate_dashboard()
        if CacheResourceKind.CATEGORY_LIST in kinds and category_ids:
            first, *rest = category_ids
            await svc.invalidate_category_and_list(first)
            for category_id in rest:
                await svc.invalidate_category(category_id)
        elif CacheResourceKind.CATEGORY_LIST in kinds:
            await svc.invalidate_category_list()
        else:
            for category_id in category_ids:
                await svc.invalidate_category(category_id)

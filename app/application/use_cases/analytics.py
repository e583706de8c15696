"""Analytics use case: admin dashboard statistics (cached as AdminDashboard)."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TYPE_CHECKING

from app.application.caching.keys import CacheResource, key_for
from app.application.caching.read_through import read_through
from app.application.dtos.dashboard import DashboardResult, EntityStatistics
from app.shared.utils.datetime import (
    current_month_range,
    ensure_utc,
    previous_month_range,
    utc_now,
)

if TYPE_CHECKING:
    from app.application.interfaces.repositories import (
        ICategoryRepository,
        ITipRepository,
        IUserRepository,
    )
    from app.application.interfaces.services import ICacheStore


def _statistics(created: Iterable[datetime], now: datetime) -> EntityStatistics:
    """Count creation timestamps overall, this month, and last month (UTC)."""
    this_start, this_end = current_month_range(now)
    last_start, last_end = previous_month_range(now)
    stamps = [ensure_utc(c) for c in created]
    return EntityStatistics(
        total=len(stamps),
        this_month=sum(1 for c in stamps if this_start <= c <= this_end),
        last_month=sum(1 for c in stamps if last_start <= c <= last_end),
    )


class GetDashboardUseCase:
    """Aggregate user, category, and tip counts for the admin dashboard."""

    def __init__(
        self,
        user_repo: "IUserRepository",
        category_repo: "ICategoryRepository",
        tip_repo: "ITipRepository",
        cache: "ICacheStore",
        ttl_seconds: int,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.user_repo = user_repo
        self.category_repo = category_repo
        self.tip_repo = tip_repo
        self.cache = cache
        self.ttl_seconds = ttl_seconds
        self.clock = clock

    async def execute(self) -> DashboardResult:
        return await read_through(
            self.cache,
            key_for(CacheResource.dashboard()),
            self.ttl_seconds,
            self._load,
            DashboardResult.to_cache,
            DashboardResult.from_cache,
        )

    async def _load(self) -> DashboardResult:
        now = self.clock()
        users = await self.user_repo.get_all_active()
        categories = await self.category_repo.get_all()
        tips = await self.tip_repo.get_all()
        return DashboardResult(
            users=_statistics((u.created_at for u in users), now),
            categories=_statistics((c.created_at for c in categories), now),
            tips=_statistics((t.created_at for t in tips), now),
        )

"""In-memory repository implementations (default backend)."""

from app.infrastructure.memory.repositories.category_repo_memory import (
    InMemoryCategoryRepository,
)
from app.infrastructure.memory.repositories.tip_repo_memory import (
    InMemoryTipRepository,
)
from app.infrastructure.memory.repositories.user_repo_memory import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryCategoryRepository",
    "InMemoryTipRepository",
    "InMemoryUserRepository",
]

"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    ICategoryRepository,
    ITipRepository,
    IUserRepository,
)
from app.application.interfaces.services import (
    ICacheInvalidationService,
    ICacheStore,
)

__all__ = [
    "ICacheInvalidationService",
    "ICacheStore",
    "ICategoryRepository",
    "ITipRepository",
    "IUserRepository",
]

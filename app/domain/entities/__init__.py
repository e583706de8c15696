"""Domain entities and aggregates.

Pure domain models; no persistence concerns.
"""

from app.domain.entities.category import Category
from app.domain.entities.tip import Tip
from app.domain.entities.user import User

__all__ = [
    "Category",
    "Tip",
    "User",
]

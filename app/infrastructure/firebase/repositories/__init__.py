"""Firestore-backed repository implementations (swappable with in-memory)."""

from app.infrastructure.firebase.repositories.category_repo_firestore import (
    FirestoreCategoryRepository,
)
from app.infrastructure.firebase.repositories.tip_repo_firestore import (
    FirestoreTipRepository,
)
from app.infrastructure.firebase.repositories.user_repo_firestore import (
    FirestoreUserRepository,
)

__all__ = [
    "FirestoreCategoryRepository",
    "FirestoreTipRepository",
    "FirestoreUserRepository",
]

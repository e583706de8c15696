"""Category domain entity.

Represents a category of tips, independent of persistence.
"""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.exceptions import ValidationException
from app.domain.value_objects.core import CategoryId
from app.shared.utils.datetime import utc_now

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100


def _validated_name(name: str | None) -> str:
    if name is None or not name.strip():
        raise ValidationException("Category name cannot be empty", field="name")
    trimmed = name.strip()
    if len(trimmed) < MIN_NAME_LENGTH:
        raise ValidationException(
            f"Category name must be at least {MIN_NAME_LENGTH} characters", field="name"
        )
    if len(trimmed) > MAX_NAME_LENGTH:
        raise ValidationException(
            f"Category name cannot exceed {MAX_NAME_LENGTH} characters", field="name"
        )
    return trimmed


@dataclass
class Category:
    """Domain entity for a tip category.

    Categories are soft-deleted: a deleted category keeps its row (so its
    name stays reserved) but is hidden from reads.
    """

    id: CategoryId
    name: str
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None
    is_deleted: bool = False
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        self.name = _validated_name(self.name)

    @classmethod
    def create(cls, name: str) -> "Category":
        """Return a new category with a fresh id.

        Raises:
            ValidationException: If name is empty or out of range.
        """
        return cls(id=CategoryId.new(), name=name)

    def rename(self, name: str) -> None:
        """Change the category name.

        Raises:
            ValidationException: If name is empty or out of range.
        """
        self.name = _validated_name(name)
        self.updated_at = utc_now()

    def mark_deleted(self) -> None:
        """Soft-delete the category. Idempotent."""
        if self.is_deleted:
            return
        self.is_deleted = True
        self.deleted_at = utc_now()

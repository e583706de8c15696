"""Domain value objects for the Lifehacking application.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value. Invalid input raises
ValueError; use cases translate it into ValidationException with the
offending field.
"""

import re
import uuid
from dataclasses import dataclass
from typing import ClassVar, Self

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_URL_RE = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)


def _validate_text(
    value: str | None,
    min_len: int,
    max_len: int,
    field_name: str,
) -> str:
    """Return the trimmed value; raise ValueError if empty or out of range."""
    if value is None or not value.strip():
        raise ValueError(f"{field_name} cannot be empty")
    trimmed = value.strip()
    if len(trimmed) < min_len:
        raise ValueError(f"{field_name} must be at least {min_len} characters")
    if len(trimmed) > max_len:
        raise ValueError(f"{field_name} cannot exceed {max_len} characters")
    return trimmed


@dataclass(frozen=True)
class _UuidId:
    """Base for UUID-backed identifiers.

    str() yields the canonical form (lowercase, hyphenated). That form is
    what persistence document ids and cache keys are built from.
    """

    value: uuid.UUID

    label: ClassVar[str] = "ID"

    def __post_init__(self) -> None:
        if not isinstance(self.value, uuid.UUID):
            raise ValueError(f"{self.label} must be a UUID")
        if self.value.int == 0:
            raise ValueError(f"{self.label} cannot be empty")

    @classmethod
    def new(cls) -> Self:
        """Return a fresh random identifier."""
        return cls(uuid.uuid4())

    @classmethod
    def parse(cls, raw: "str | uuid.UUID | _UuidId") -> Self:
        """Build from a UUID or its string form (any case, with or without braces).

        Raises:
            ValueError: If raw is not a valid, non-empty UUID.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, _UuidId):
            return cls(raw.value)
        if isinstance(raw, uuid.UUID):
            return cls(raw)
        try:
            return cls(uuid.UUID(str(raw).strip()))
        except (TypeError, ValueError) as e:
            raise ValueError(f"{cls.label} is not a valid identifier: {raw!r}") from e

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CategoryId(_UuidId):
    """Identifier of a category."""

    label: ClassVar[str] = "Category ID"


@dataclass(frozen=True)
class TipId(_UuidId):
    """Identifier of a tip."""

    label: ClassVar[str] = "Tip ID"


@dataclass(frozen=True)
class UserId(_UuidId):
    """Identifier of a user."""

    label: ClassVar[str] = "User ID"


@dataclass(frozen=True)
class TipTitle:
    """Tip title: 5-200 characters after trimming."""

    value: str

    MIN_LENGTH: ClassVar[int] = 5
    MAX_LENGTH: ClassVar[int] = 200

    def __post_init__(self) -> None:
        trimmed = _validate_text(self.value, self.MIN_LENGTH, self.MAX_LENGTH, "Tip title")
        object.__setattr__(self, "value", trimmed)


@dataclass(frozen=True)
class TipDescription:
    """Tip description: 10-2000 characters after trimming."""

    value: str

    MIN_LENGTH: ClassVar[int] = 10
    MAX_LENGTH: ClassVar[int] = 2000

    def __post_init__(self) -> None:
        trimmed = _validate_text(
            self.value, self.MIN_LENGTH, self.MAX_LENGTH, "Tip description"
        )
        object.__setattr__(self, "value", trimmed)


@dataclass(frozen=True)
class TipStep:
    """One numbered step of a tip (step_number >= 1, description 10-500 chars)."""

    step_number: int
    description: str

    MIN_DESCRIPTION_LENGTH: ClassVar[int] = 10
    MAX_DESCRIPTION_LENGTH: ClassVar[int] = 500

    def __post_init__(self) -> None:
        if self.step_number < 1:
            raise ValueError("Step number must be at least 1")
        trimmed = _validate_text(
            self.description,
            self.MIN_DESCRIPTION_LENGTH,
            self.MAX_DESCRIPTION_LENGTH,
            "Step description",
        )
        object.__setattr__(self, "description", trimmed)


@dataclass(frozen=True)
class Tag:
    """Free-form tag, 1-50 characters after trimming."""

    value: str

    MAX_LENGTH: ClassVar[int] = 50

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _validate_text(self.value, 1, self.MAX_LENGTH, "Tag"))


@dataclass(frozen=True)
class VideoUrl:
    """Absolute http(s) URL of a video that illustrates a tip."""

    value: str

    MAX_LENGTH: ClassVar[int] = 2048

    def __post_init__(self) -> None:
        trimmed = _validate_text(self.value, 1, self.MAX_LENGTH, "Video URL")
        if not _URL_RE.match(trimmed):
            raise ValueError("Video URL must be an absolute http(s) URL")
        object.__setattr__(self, "value", trimmed)


@dataclass(frozen=True)
class Email:
    """Email address, normalized to lowercase."""

    value: str

    MAX_LENGTH: ClassVar[int] = 254

    def __post_init__(self) -> None:
        if self.value is None or not self.value.strip():
            raise ValueError("Email cannot be empty")
        normalized = self.value.strip().lower()
        if len(normalized) > self.MAX_LENGTH:
            raise ValueError(f"Email cannot exceed {self.MAX_LENGTH} characters")
        if not _EMAIL_RE.match(normalized):
            raise ValueError("Email format is invalid")
        object.__setattr__(self, "value", normalized)


@dataclass(frozen=True)
class UserName:
    """Display name of a user, 2-100 characters."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _validate_text(self.value, 2, 100, "User name"))


@dataclass(frozen=True)
class ExternalAuthId:
    """Identifier issued by the external identity provider (no whitespace)."""

    value: str

    def __post_init__(self) -> None:
        trimmed = _validate_text(self.value, 1, 128, "External auth ID")
        if any(ch.isspace() for ch in trimmed):
            raise ValueError("External auth ID cannot contain whitespace")
        object.__setattr__(self, "value", trimmed)

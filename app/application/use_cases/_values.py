"""Helpers shared by use cases to turn raw input into domain values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from app.domain.exceptions import ValidationException

T = TypeVar("T")


def parse_value(factory: Callable[..., T], *args: object, field: str) -> T:
    """Build a value object; its ValueError becomes a ValidationException on field."""
    try:
        return factory(*args)
    except ValueError as e:
        raise ValidationException(str(e), field=field) from e

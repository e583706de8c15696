"""Domain value objects and shared value types."""

from app.domain.value_objects.core import (
    CategoryId,
    Email,
    ExternalAuthId,
    Tag,
    TipDescription,
    TipId,
    TipStep,
    TipTitle,
    UserId,
    UserName,
    VideoUrl,
)

__all__ = [
    "CategoryId",
    "TipId",
    "UserId",
    "TipTitle",
    "TipDescription",
    "TipStep",
    "Tag",
    "VideoUrl",
    "Email",
    "UserName",
    "ExternalAuthId",
]

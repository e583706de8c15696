"""Shared utilities: UTC datetime helpers."""

from app.shared.utils.datetime import (
    current_month_range,
    ensure_utc,
    previous_month_range,
    utc_now,
)

__all__ = [
    "utc_now",
    "ensure_utc",
    "current_month_range",
    "previous_month_range",
]

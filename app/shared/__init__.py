"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import (
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

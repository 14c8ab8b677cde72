"""Utility helpers shared across layers."""

from .datetime import (
    app_timezone,
    day_bounds,
    local_now,
    local_now_naive,
    localize,
    to_storage,
)

__all__ = [
    "app_timezone",
    "day_bounds",
    "local_now",
    "local_now_naive",
    "localize",
    "to_storage",
]

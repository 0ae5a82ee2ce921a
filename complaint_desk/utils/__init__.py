"""Utility helpers for reusable functionality."""

from .identifiers import new_id
from .timestamps import (
    app_timezone,
    from_storage,
    local_now,
    parse_timezone,
    storage_now,
    to_storage,
)

__all__ = [
    "app_timezone",
    "from_storage",
    "local_now",
    "new_id",
    "parse_timezone",
    "storage_now",
    "to_storage",
]

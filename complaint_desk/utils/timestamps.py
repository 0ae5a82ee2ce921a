"""Timestamp conventions shared by the domain and the database layer.

Columns hold naive UTC values. Everything handed to the domain is timezone
aware and expressed in the organization-wide display timezone configured by
``APP_TIMEZONE``.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from complaint_desk.config import get_settings


@lru_cache(maxsize=1)
def app_timezone() -> tzinfo:
    """Return the display timezone.

    Accepts IANA names (``America/Bogota``) and fixed offsets written as
    ``UTC-05:00`` or ``GMT+0530``. Anything else resolves to UTC.
    """

    return parse_timezone(get_settings().app_timezone or "")


def parse_timezone(name: str) -> tzinfo:
    name = name.strip()
    if not name or name.upper() in {"UTC", "GMT", "Z"}:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        pass

    offset = name[3:] if name[:3].upper() in {"UTC", "GMT"} else name
    if len(offset) in (2, 3) and offset[1:].isdigit():
        offset = f"{offset[0]}{int(offset[1:]):02d}00"
    try:
        parsed = datetime.strptime(offset, "%z").tzinfo
    except ValueError:
        return timezone.utc
    return parsed or timezone.utc


def local_now() -> datetime:
    """Current time in the display timezone."""

    return datetime.now(tz=app_timezone())


def storage_now() -> datetime:
    """Current time as stored in ``DateTime`` columns."""

    return datetime.now(tz=timezone.utc).replace(tzinfo=None)


def to_storage(value: datetime | None) -> datetime | None:
    """Convert an aware timestamp into its naive UTC column value.

    Naive values are taken to be UTC already.
    """

    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def from_storage(value: datetime | None) -> datetime | None:
    """Attach UTC to a column value and express it in the display timezone."""

    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(app_timezone())


__all__ = [
    "app_timezone",
    "from_storage",
    "local_now",
    "parse_timezone",
    "storage_now",
    "to_storage",
]

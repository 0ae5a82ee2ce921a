"""Tests for the timestamp storage conventions."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from complaint_desk.utils import from_storage, parse_timezone, storage_now, to_storage


@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("", timedelta(0)),
        ("UTC", timedelta(0)),
        ("UTC-05:00", timedelta(hours=-5)),
        ("GMT+0530", timedelta(hours=5, minutes=30)),
        ("UTC+3", timedelta(hours=3)),
        ("Not/AZone", timedelta(0)),
    ],
)
def test_parse_timezone_offsets(name: str, offset: timedelta) -> None:
    moment = datetime(2024, 1, 15, 12, 0)

    assert parse_timezone(name).utcoffset(moment) == offset


def test_parse_timezone_accepts_iana_names() -> None:
    bogota = parse_timezone("America/Bogota")

    assert bogota.utcoffset(datetime(2024, 1, 15, 12, 0)) == timedelta(hours=-5)


def test_aware_values_are_stored_as_naive_utc() -> None:
    local = datetime(2024, 3, 1, 9, 30, tzinfo=timezone(timedelta(hours=-5)))

    stored = to_storage(local)

    assert stored == datetime(2024, 3, 1, 14, 30)
    assert stored.tzinfo is None
    assert to_storage(None) is None


def test_column_values_come_back_aware() -> None:
    restored = from_storage(datetime(2024, 3, 1, 14, 30))

    assert restored is not None
    assert restored.tzinfo is not None
    assert restored == datetime(2024, 3, 1, 14, 30, tzinfo=timezone.utc)
    assert from_storage(None) is None


def test_storage_now_is_naive() -> None:
    assert storage_now().tzinfo is None

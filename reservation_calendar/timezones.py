from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_HOME_ZONE = "Asia/Seoul"


def get_zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown time zone: {name}") from None


def zoned(year: int, month: int, day: int, hour: int = 0, minute: int = 0, zone: str = DEFAULT_HOME_ZONE) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=get_zone(zone))


def convert_zone(value: datetime, zone: str) -> datetime:
    """Express the same instant in ``zone``. Naive values are rejected."""
    if value.tzinfo is None:
        raise ValueError("value must be timezone-aware")
    return value.astimezone(get_zone(zone))


def now_in_zone(zone: str, clock: Callable[[], datetime] | None = None) -> datetime:
    instant = clock() if clock else datetime.now(timezone.utc)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(get_zone(zone))


def hour_difference(first_zone: str, second_zone: str, at: datetime | None = None) -> int:
    """Return how many whole hours ``first_zone`` is ahead of ``second_zone`` at ``at``."""
    instant = at or datetime.now(timezone.utc)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    first_offset = instant.astimezone(get_zone(first_zone)).utcoffset()
    second_offset = instant.astimezone(get_zone(second_zone)).utcoffset()
    return int((first_offset - second_offset) / timedelta(hours=1))


def format_iso_zoned(value: datetime) -> str:
    text = value.isoformat()
    key = getattr(value.tzinfo, "key", None)
    return f"{text}[{key}]" if key else text

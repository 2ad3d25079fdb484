from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Sequence

from .date_formats import DATETIME_LAYOUT, parse_datetime
from .date_math import week_bounds

logger = logging.getLogger(__name__)

FILTER_DAY = "d"
FILTER_WEEK = "w"
FILTER_MONTH = "m"
FILTER_YEAR = "y"
FILTER_CODES = (FILTER_DAY, FILTER_WEEK, FILTER_MONTH, FILTER_YEAR)


@dataclass(frozen=True)
class BusinessHours:
    start: time = time(9, 0)
    end: time = time(17, 0)

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError("Business hours start must be earlier than end.")

    def contains(self, start: datetime, end: datetime) -> bool:
        return start.time() >= self.start and end.time() <= self.end

    def label(self) -> str:
        return f"{self.start:%H:%M}-{self.end:%H:%M}"


DEFAULT_BUSINESS_HOURS = BusinessHours()


@dataclass(frozen=True)
class ReservationSpan:
    """A reservation as received from an API: two ``yyyyMMdd HHmmss`` strings."""

    start: str
    end: str

    def parse(self) -> tuple[datetime, datetime]:
        return parse_datetime(self.start, DATETIME_LAYOUT), parse_datetime(self.end, DATETIME_LAYOUT)

    def to_dict(self) -> dict[str, str]:
        return {"start": self.start, "end": self.end}

    @staticmethod
    def from_dict(data: dict[str, object]) -> "ReservationSpan":
        return ReservationSpan(start=str(data["start"]), end=str(data["end"]))


def validate_time_order(start: datetime, end: datetime) -> None:
    if start > end:
        raise ValueError("Start time must not be after end time")


def is_within_business_hours(start: datetime, end: datetime, business_hours: BusinessHours | None = None) -> bool:
    return (business_hours or DEFAULT_BUSINESS_HOURS).contains(start, end)


def is_within_range(start: datetime, end: datetime, range_start: datetime, range_end: datetime) -> bool:
    return start >= range_start and end <= range_end


def is_same_day(start: datetime, end: datetime) -> bool:
    return start.date() == end.date()


def normalize_filter_code(filter_code: str | None) -> str:
    code = (filter_code or "").lower()
    return code if code in FILTER_CODES else FILTER_MONTH


def _dates_intersect(start_date: date, end_date: date, window_start: date, window_end: date) -> bool:
    return start_date <= window_end and end_date >= window_start


def filter_reservations(
    reservations: Sequence[ReservationSpan],
    year: int | str,
    month: int | str,
    day: int | str,
    filter_code: str | None = FILTER_MONTH,
    business_hours: BusinessHours | None = None,
) -> Sequence[ReservationSpan]:
    """Keep the reservations that fall in the day, week or year of the target date.

    Month filtering (and any unrecognized code) returns ``reservations``
    untouched. Every other granularity also requires the reservation to start
    and end inside business hours.
    """
    code = normalize_filter_code(filter_code)
    if code == FILTER_MONTH:
        return reservations

    target_date = date(int(year), int(month), int(day))
    hours = business_hours or DEFAULT_BUSINESS_HOURS
    week_start, week_end = week_bounds(target_date)

    kept: list[ReservationSpan] = []
    for reservation in reservations:
        start, end = reservation.parse()
        if not hours.contains(start, end):
            continue

        start_date, end_date = start.date(), end.date()
        if code == FILTER_DAY:
            matched = _dates_intersect(start_date, end_date, target_date, target_date)
        elif code == FILTER_WEEK:
            matched = _dates_intersect(start_date, end_date, week_start, week_end)
        else:
            matched = start_date.year == target_date.year and end_date.year == target_date.year

        if matched:
            kept.append(reservation)

    logger.debug("filter %s on %s kept %d of %d reservations", code, target_date, len(kept), len(reservations))
    return kept

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from .date_math import DEFAULT_HOLIDAY_COUNTRY, SATURDAY, SUNDAY, holiday_name, last_day_of_month, next_or_same, previous_or_same

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarCell:
    day: date
    weekday: int
    in_month: bool
    is_weekend: bool
    holiday: str | None = None

    @property
    def is_holiday(self) -> bool:
        return self.holiday is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "date": self.day.isoformat(),
            "weekday": self.weekday,
            "in_month": self.in_month,
            "is_weekend": self.is_weekend,
            "is_holiday": self.is_holiday,
            "holiday": self.holiday,
        }


def weekday_number(value: date) -> int:
    """Return 1 for Sunday through 7 for Saturday."""
    return value.isoweekday() % 7 + 1


def get_calendar_days(year: int, month: int) -> list[date]:
    """Return every date shown on a Sunday-first month view.

    The range starts at the Sunday on or before the 1st and ends at the
    Saturday on or after the last day of the month, so its length is always a
    multiple of 7.
    """
    if month < 1 or month > 12:
        raise ValueError("Month must be between 1 and 12")

    first_day = date(year, month, 1)
    try:
        start_date = previous_or_same(first_day, SUNDAY)
        end_date = next_or_same(last_day_of_month(first_day), SATURDAY)
    except OverflowError:
        raise ValueError(f"Calendar for {year}-{month:02d} is outside the supported date range") from None

    days: list[date] = []
    current = start_date
    while current <= end_date:
        days.append(current)
        current += timedelta(days=1)

    logger.debug("calendar %04d-%02d: %s..%s (%d days)", year, month, start_date, end_date, len(days))
    return days


def build_calendar_grid(
    year: int,
    month: int,
    holiday_country: str | None = DEFAULT_HOLIDAY_COUNTRY,
) -> list[list[CalendarCell]]:
    """Group the month view into week rows with weekend and holiday markers.

    Pass ``holiday_country=None`` to skip the holiday lookup.
    """
    cells = [
        CalendarCell(
            day=day,
            weekday=weekday_number(day),
            in_month=day.month == month,
            is_weekend=day.weekday() >= SATURDAY,
            holiday=holiday_name(day, holiday_country) if holiday_country else None,
        )
        for day in get_calendar_days(year, month)
    ]
    return [cells[index : index + 7] for index in range(0, len(cells), 7)]

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

import holidays as pyholidays
from dateutil.relativedelta import relativedelta

MONDAY = calendar.MONDAY
TUESDAY = calendar.TUESDAY
WEDNESDAY = calendar.WEDNESDAY
THURSDAY = calendar.THURSDAY
FRIDAY = calendar.FRIDAY
SATURDAY = calendar.SATURDAY
SUNDAY = calendar.SUNDAY

DEFAULT_HOLIDAY_COUNTRY = "KR"
_HOLIDAY_CACHE: dict[tuple[str, int], dict[date, str]] = {}


@dataclass(frozen=True)
class CalendarPeriod:
    years: int
    months: int
    days: int

    def to_dict(self) -> dict[str, int]:
        return {"years": self.years, "months": self.months, "days": self.days}


def _check_weekday(weekday: int) -> None:
    if weekday not in range(7):
        raise ValueError("weekday must be between 0 (Monday) and 6 (Sunday)")


def plus_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


def plus_weeks(value: date, weeks: int) -> date:
    return value + timedelta(weeks=weeks)


def plus_months(value: date, months: int) -> date:
    """Shift by calendar months, clamping the day to the target month's length."""
    return value + relativedelta(months=months)


def plus_minutes(value: datetime, minutes: int) -> datetime:
    return value + timedelta(minutes=minutes)


def previous_or_same(value: date, weekday: int) -> date:
    _check_weekday(weekday)
    return value - timedelta(days=(value.weekday() - weekday) % 7)


def next_or_same(value: date, weekday: int) -> date:
    _check_weekday(weekday)
    return value + timedelta(days=(weekday - value.weekday()) % 7)


def next_weekday(value: date, weekday: int) -> date:
    """Return the first ``weekday`` strictly after ``value``."""
    return next_or_same(value + timedelta(days=1), weekday)


def first_in_month(value: date, weekday: int) -> date:
    return next_or_same(value.replace(day=1), weekday)


def last_day_of_month(value: date) -> date:
    _, days_in_month = calendar.monthrange(value.year, value.month)
    return value.replace(day=days_in_month)


def period_between(start: date, end: date) -> CalendarPeriod:
    delta = relativedelta(end, start)
    return CalendarPeriod(years=delta.years, months=delta.months, days=delta.days)


def days_between(start: date, end: date) -> int:
    return (end - start).days


def duration_between(start: datetime, end: datetime) -> timedelta:
    return end - start


def whole_hours(duration: timedelta) -> int:
    return int(duration / timedelta(hours=1))


def whole_minutes(duration: timedelta) -> int:
    return int(duration / timedelta(minutes=1))


def week_bounds(value: date) -> tuple[date, date]:
    """Return the Monday and Sunday of the week containing ``value``."""
    return previous_or_same(value, MONDAY), next_or_same(value, SUNDAY)


def is_same_iso_week(first: date, second: date) -> bool:
    first_year, first_week, _ = first.isocalendar()
    second_year, second_week, _ = second.isocalendar()
    return (first_year, first_week) == (second_year, second_week)


def holiday_name(target_date: date, country: str = DEFAULT_HOLIDAY_COUNTRY) -> str | None:
    key = (country, target_date.year)
    if key not in _HOLIDAY_CACHE:
        try:
            holiday_map = pyholidays.country_holidays(country, years=[target_date.year])
        except NotImplementedError:
            raise ValueError(f"Unsupported holiday country: {country}") from None
        _HOLIDAY_CACHE[key] = dict(holiday_map.items())
    return _HOLIDAY_CACHE[key].get(target_date)


def is_supported_country(country: str) -> bool:
    return country in pyholidays.list_supported_countries()


def is_business_day(target_date: date, country: str = DEFAULT_HOLIDAY_COUNTRY) -> bool:
    return target_date.weekday() < SATURDAY and holiday_name(target_date, country) is None


def next_business_day(base_date: date, country: str = DEFAULT_HOLIDAY_COUNTRY) -> date:
    cursor = base_date + timedelta(days=1)
    while not is_business_day(cursor, country):
        cursor += timedelta(days=1)
    return cursor

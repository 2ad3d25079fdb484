from __future__ import annotations

import argparse
import logging
from datetime import date, datetime
from pathlib import Path
import sys
import traceback

workspace_root = Path(__file__).resolve().parent.parent
if str(workspace_root) not in sys.path:
    sys.path.insert(0, str(workspace_root))

from reservation_calendar import (  # noqa: E402
    DateParseError,
    build_calendar_grid,
    convert_zone,
    filter_reservations,
    format_date,
    format_display,
    format_iso_zoned,
    hour_difference,
    is_same_day,
    is_within_business_hours,
    is_within_range,
    load_reservation_spans,
    load_settings,
    now_in_zone,
    parse_date,
    parse_datetime,
    validate_time_order,
    zoned,
)
from reservation_calendar import date_math  # noqa: E402

logger = logging.getLogger("date_exercises")


def parse_and_format() -> None:
    parsed_date = parse_date("20250425")
    parsed = parse_datetime("20250425 143000")
    print(f"Parsed Date: {format_date(parsed_date, 'yyyy-MM-dd')}")
    print(f"Parsed DateTime: {format_display(parsed)}")
    print(f"Another Date: {parse_date('2025-04-25', 'yyyy-MM-dd')}")
    iso_layout = "yyyy-MM-dd'T'HH:mm:ss"
    print(f"ISO DateTime: {parse_datetime('2025-04-25T14:30:00', iso_layout)}")

    invalid = "2025-04-25 14:30:00"
    try:
        parse_datetime(invalid, iso_layout)
    except DateParseError as error:
        print(f"[WARN] {error}")


def compare_times() -> None:
    start = parse_datetime("20250425 090000")
    end = parse_datetime("20250425 183000")
    range_start = parse_datetime("20250425 090000")
    range_end = parse_datetime("20250425 180000")

    print(f"Is reservation valid? {is_within_range(start, end, range_start, range_end)}")
    print(f"Is same day? {is_same_day(start, end)}")
    validate_time_order(start, end)
    print("Time order is valid")
    print(f"Within 09:00-17:00? {is_within_business_hours(start, end)}")


def shift_dates() -> None:
    today = date(2025, 4, 25)
    print(f"After 7 days: {date_math.plus_days(today, 7)}")
    print(f"Next Monday: {date_math.next_weekday(today, date_math.MONDAY)}")
    print(f"Last day of month: {date_math.last_day_of_month(today)}")
    print(f"Three months ago: {date_math.plus_months(today, -3)}")
    next_month = date_math.plus_months(today, 1)
    print(f"Next month's first Friday: {date_math.first_in_month(next_month, date_math.FRIDAY)}")
    print(f"Two weeks later: {date_math.plus_weeks(today, 2)}")
    print(f"30 minutes later: {date_math.plus_minutes(datetime(2025, 4, 25, 14, 30), 30)}")
    print(f"Next business day: {date_math.next_business_day(today)}")


def measure_periods() -> None:
    start_date, end_date = date(2025, 4, 25), date(2025, 5, 10)
    period = date_math.period_between(start_date, end_date)
    print(f"Months: {period.months}, Days: {period.days}")
    print(f"Total days: {date_math.days_between(start_date, end_date)}")

    duration = date_math.duration_between(datetime(2025, 4, 25, 9, 0), datetime(2025, 4, 25, 17, 30))
    print(f"Hours between: {date_math.whole_hours(duration)}")
    print(f"Minutes: {date_math.whole_minutes(duration)}")
    print(f"Week of {start_date}: {date_math.week_bounds(start_date)}")
    print(f"Is same week? {date_math.is_same_iso_week(start_date, end_date)}")


def filter_sample(reservations_file: Path, filter_code: str) -> None:
    settings = load_settings(workspace_root / "calendar_settings.yaml")
    spans = load_reservation_spans(reservations_file)
    kept = filter_reservations(spans, 2025, 4, 25, filter_code, business_hours=settings.business_hours)
    print(f"Filter {filter_code!r} ({settings.business_hours.label()}): {len(kept)} of {len(spans)}")
    for span in kept:
        print(f"  {span.start} ~ {span.end}")


def convert_zones() -> None:
    seoul = zoned(2025, 4, 25, 14, 30, "Asia/Seoul")
    print(f"Seoul time: {format_iso_zoned(seoul)}")
    print(f"New York time: {format_iso_zoned(convert_zone(seoul, 'America/New_York'))}")
    print(f"UTC time: {format_iso_zoned(convert_zone(seoul, 'UTC'))}")
    print(f"Seoul now: {format_iso_zoned(now_in_zone('Asia/Seoul'))}")
    print(f"Hours difference (Seoul-NY): {hour_difference('Asia/Seoul', 'America/New_York', seoul)}")


def print_calendar(year: int, month: int) -> None:
    settings = load_settings(workspace_root / "calendar_settings.yaml")
    for week in build_calendar_grid(year, month, settings.holiday_country):
        cells = []
        for cell in week:
            marker = "*" if cell.is_holiday else " "
            cells.append(f"{cell.day.day:>2}{marker}" if cell.in_month else " . ")
        print(" ".join(cells))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the date/time exercises.")
    parser.add_argument("--filter", default="w", help="granularity code for the filter exercise (d/w/m/y)")
    parser.add_argument("--reservations", type=Path, default=Path(__file__).parent / "sample_reservations.yaml")
    parser.add_argument("--year", type=int, default=2025)
    parser.add_argument("--month", type=int, default=4)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    exercises = [
        ("parse/format", parse_and_format),
        ("compare", compare_times),
        ("arithmetic", shift_dates),
        ("periods", measure_periods),
        ("filter", lambda: filter_sample(args.reservations, args.filter)),
        ("time zones", convert_zones),
        ("calendar", lambda: print_calendar(args.year, args.month)),
    ]
    for name, exercise in exercises:
        print(f"[INFO] {name}")
        exercise()

    print("[DONE] All exercises completed.")
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except Exception:
        logger.error("exercise run failed")
        traceback.print_exc()
        raise SystemExit(1)

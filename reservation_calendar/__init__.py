from .booking import (
	BusinessHours,
	ReservationSpan,
	filter_reservations,
	is_same_day,
	is_within_business_hours,
	is_within_range,
	validate_time_order,
)
from .calendar_grid import CalendarCell, build_calendar_grid, get_calendar_days, weekday_number
from .date_formats import DateParseError, format_date, format_datetime, format_display, parse_date, parse_datetime
from .settings import CalendarSettings, CalendarSettingsError, load_reservation_spans, load_settings
from .timezones import convert_zone, format_iso_zoned, hour_difference, now_in_zone, zoned

__all__ = [
	"BusinessHours",
	"ReservationSpan",
	"filter_reservations",
	"is_same_day",
	"is_within_business_hours",
	"is_within_range",
	"validate_time_order",
	"CalendarCell",
	"build_calendar_grid",
	"get_calendar_days",
	"weekday_number",
	"DateParseError",
	"format_date",
	"format_datetime",
	"format_display",
	"parse_date",
	"parse_datetime",
	"CalendarSettings",
	"CalendarSettingsError",
	"load_reservation_spans",
	"load_settings",
	"convert_zone",
	"format_iso_zoned",
	"hour_difference",
	"now_in_zone",
	"zoned",
]

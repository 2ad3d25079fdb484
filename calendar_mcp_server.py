from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from reservation_calendar import ReservationSpan, filter_reservations, get_calendar_days, load_settings
from reservation_calendar.booking import FILTER_CODES, normalize_filter_code
from reservation_calendar.timezones import convert_zone, format_iso_zoned, get_zone

mcp = FastMCP(
    "Reservation Calendar MCP Server",
    instructions="Expose calendar grid, reservation filtering and time zone utilities from the reservation_calendar project.",
    json_response=True,
)

SETTINGS = load_settings(Path(__file__).parent / "calendar_settings.yaml")


@mcp.resource("calendar://filters")
async def list_filters() -> list[str]:
    """List the granularity codes accepted by the reservation filter."""
    return list(FILTER_CODES)


@mcp.tool()
def calendar_days(year: int, month: int) -> list[str]:
    """Return the Sunday-to-Saturday dates shown on the month view."""
    return [day.isoformat() for day in get_calendar_days(year, month)]


@mcp.tool()
def filter_reservation_spans(
    reservations: list[dict[str, str]],
    year: int,
    month: int,
    day: int,
    filter_code: str = "m",
) -> list[dict[str, str]]:
    """Filter yyyyMMdd HHmmss reservations by day (d), week (w), month (m) or year (y)."""
    spans = [ReservationSpan.from_dict(row) for row in reservations]
    kept = filter_reservations(
        spans,
        year,
        month,
        day,
        normalize_filter_code(filter_code),
        business_hours=SETTINGS.business_hours,
    )
    return [span.to_dict() for span in kept]


@mcp.tool()
def convert_time_zone(value: str, to_zone: str, from_zone: str | None = None) -> str:
    """Convert an ISO-8601 local time from one zone to another."""
    local = datetime.fromisoformat(value)
    if local.tzinfo is None:
        local = local.replace(tzinfo=get_zone(from_zone or SETTINGS.home_zone))
    return format_iso_zoned(convert_zone(local, to_zone))


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    mcp.run()


if __name__ == "__main__":
    main()

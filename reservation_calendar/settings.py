from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, time
from pathlib import Path
from typing import Any

import yaml

from .booking import DEFAULT_BUSINESS_HOURS, BusinessHours, ReservationSpan, normalize_filter_code
from .date_math import DEFAULT_HOLIDAY_COUNTRY, is_supported_country
from .timezones import DEFAULT_HOME_ZONE, get_zone

logger = logging.getLogger(__name__)


class CalendarSettingsError(RuntimeError):
    pass


@dataclass(frozen=True)
class CalendarSettings:
    business_hours: BusinessHours = DEFAULT_BUSINESS_HOURS
    holiday_country: str = DEFAULT_HOLIDAY_COUNTRY
    home_zone: str = DEFAULT_HOME_ZONE
    default_filter: str = "m"

    def to_dict(self) -> dict[str, str]:
        return {
            "business_start": f"{self.business_hours.start:%H:%M}",
            "business_end": f"{self.business_hours.end:%H:%M}",
            "holiday_country": self.holiday_country,
            "home_zone": self.home_zone,
            "default_filter": self.default_filter,
        }


class _SettingsLoader(yaml.SafeLoader):
    """SafeLoader without YAML 1.1 sexagesimal ints, so 9:30 stays a string."""


_SettingsLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:int"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_SettingsLoader.add_implicit_resolver(
    "tag:yaml.org,2002:int",
    re.compile(r"^(?:[-+]?0b[0-1_]+|[-+]?0[0-7_]+|[-+]?(?:0|[1-9][0-9_]*)|[-+]?0x[0-9a-fA-F_]+)$"),
    list("-+0123456789"),
)


def _read_yaml(path: Path) -> Any:
    try:
        return yaml.load(path.read_text(encoding="utf-8"), Loader=_SettingsLoader)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as error:
        raise CalendarSettingsError(f"Failed to read YAML file: {path}") from error


def _parse_clock(value: Any, key: str) -> time:
    if not isinstance(value, str):
        raise CalendarSettingsError(f"{key} must be formatted as HH:MM, got {value!r}")
    try:
        return datetime.strptime(value, "%H:%M").time()
    except ValueError:
        raise CalendarSettingsError(f"{key} must be formatted as HH:MM, got {value!r}") from None


def load_settings(path: str | Path | None = None) -> CalendarSettings:
    if path is None:
        return CalendarSettings()

    settings_path = Path(path)
    if not settings_path.exists():
        logger.info("settings file %s not found, using defaults", settings_path)
        return CalendarSettings()

    payload = _read_yaml(settings_path)
    if payload is None:
        return CalendarSettings()
    if not isinstance(payload, dict):
        raise CalendarSettingsError(f"Top-level YAML in {settings_path} is not a mapping")

    defaults = CalendarSettings()
    start = _parse_clock(payload["business_start"], "business_start") if "business_start" in payload else defaults.business_hours.start
    end = _parse_clock(payload["business_end"], "business_end") if "business_end" in payload else defaults.business_hours.end
    try:
        business_hours = BusinessHours(start, end)
    except ValueError as error:
        raise CalendarSettingsError(str(error)) from error

    home_zone = str(payload.get("home_zone", defaults.home_zone))
    try:
        get_zone(home_zone)
    except ValueError as error:
        raise CalendarSettingsError(str(error)) from error

    holiday_country = str(payload.get("holiday_country", defaults.holiday_country)).upper()
    if not is_supported_country(holiday_country):
        raise CalendarSettingsError(f"Unsupported holiday country: {holiday_country}")

    return CalendarSettings(
        business_hours=business_hours,
        holiday_country=holiday_country,
        home_zone=home_zone,
        default_filter=normalize_filter_code(str(payload.get("default_filter", defaults.default_filter))),
    )


def load_reservation_spans(path: str | Path) -> list[ReservationSpan]:
    """Read a YAML list of ``{start, end}`` mappings."""
    source = Path(path)
    payload = _read_yaml(source)
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise CalendarSettingsError(f"Top-level YAML in {source} is not a list")

    spans: list[ReservationSpan] = []
    for index, row in enumerate(payload):
        if not isinstance(row, dict) or "start" not in row or "end" not in row:
            logger.warning("skipping row %d in %s: expected a mapping with start and end", index, source.name)
            continue
        spans.append(ReservationSpan.from_dict(row))
    return spans

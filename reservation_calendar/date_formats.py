import re
from dataclasses import dataclass
from datetime import date, datetime

DATE_LAYOUT = "yyyyMMdd"
DATETIME_LAYOUT = "yyyyMMdd HHmmss"
DISPLAY_LAYOUT = "yyyy-MM-dd HH:mm:ss"


@dataclass(frozen=True)
class _Layout:
    strptime_format: str
    pattern: re.Pattern[str]
    has_time: bool


_LAYOUTS: dict[str, _Layout] = {
    "yyyyMMdd": _Layout("%Y%m%d", re.compile(r"\d{8}"), False),
    "yyyy-MM-dd": _Layout("%Y-%m-%d", re.compile(r"\d{4}-\d{2}-\d{2}"), False),
    "yyyyMMdd HHmmss": _Layout("%Y%m%d %H%M%S", re.compile(r"\d{8} \d{6}"), True),
    "yyyy-MM-dd HH:mm:ss": _Layout("%Y-%m-%d %H:%M:%S", re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"), True),
    "yyyy-MM-dd'T'HH:mm:ss": _Layout("%Y-%m-%dT%H:%M:%S", re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}"), True),
}


class DateParseError(ValueError):
    """Raised when text does not match the expected date/time layout."""

    def __init__(self, text: str, layout: str) -> None:
        super().__init__(f"Invalid date format: {text!r} (expected {layout})")
        self.text = text
        self.layout = layout


def supported_layouts() -> list[str]:
    return list(_LAYOUTS)


def _resolve_layout(layout: str) -> _Layout:
    try:
        return _LAYOUTS[layout]
    except KeyError:
        raise ValueError(f"Unsupported date layout: {layout}") from None


def parse_datetime(text: str, layout: str = DATETIME_LAYOUT) -> datetime:
    """Parse ``text`` strictly against ``layout``.

    Date-only layouts yield midnight of that day. Partial matches, extra
    whitespace and out-of-range fields all raise :class:`DateParseError`.
    """
    spec = _resolve_layout(layout)
    if not isinstance(text, str) or not spec.pattern.fullmatch(text):
        raise DateParseError(str(text), layout)
    try:
        return datetime.strptime(text, spec.strptime_format)
    except ValueError as error:
        raise DateParseError(text, layout) from error


def parse_date(text: str, layout: str = DATE_LAYOUT) -> date:
    return parse_datetime(text, layout).date()


def _strftime(value: date, strptime_format: str) -> str:
    # glibc leaves years below 1000 unpadded
    return value.strftime(strptime_format.replace("%Y", f"{value.year:04d}"))


def format_datetime(value: datetime, layout: str = DATETIME_LAYOUT) -> str:
    return _strftime(value, _resolve_layout(layout).strptime_format)


def format_date(value: date, layout: str = DATE_LAYOUT) -> str:
    spec = _resolve_layout(layout)
    if spec.has_time:
        raise ValueError(f"Layout {layout} needs a time component")
    return _strftime(value, spec.strptime_format)


def format_display(value: datetime) -> str:
    return format_datetime(value, DISPLAY_LAYOUT)

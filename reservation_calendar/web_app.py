from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from flask import Flask, jsonify, request

from .booking import ReservationSpan, filter_reservations, normalize_filter_code
from .calendar_grid import build_calendar_grid, get_calendar_days
from .settings import CalendarSettings, load_settings
from .timezones import convert_zone, format_iso_zoned, get_zone

logger = logging.getLogger(__name__)


def create_app(
    settings_path: str | Path | None = None,
    settings: CalendarSettings | None = None,
    now_provider: Callable[[], datetime] | None = None,
) -> Flask:
    app = Flask(__name__)
    config = settings or load_settings(settings_path)
    clock: Callable[[], datetime] = now_provider or datetime.now

    def _bad_request(message: str) -> Any:
        return jsonify({"ok": False, "message": message}), 400

    def _year_month() -> tuple[int, int]:
        today = clock().date()
        try:
            year = int(request.args.get("year", today.year))
            month = int(request.args.get("month", today.month))
        except ValueError:
            raise ValueError("year and month must be integers") from None
        return year, month

    @app.after_request
    def add_cors_headers(response: Any) -> Any:
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response

    @app.get("/api/settings")
    def get_settings() -> Any:
        return jsonify({"ok": True, "settings": config.to_dict()})

    @app.get("/api/calendar")
    def get_calendar() -> Any:
        try:
            year, month = _year_month()
            weeks = build_calendar_grid(year, month, config.holiday_country)
        except ValueError as error:
            return _bad_request(str(error))

        return jsonify(
            {
                "ok": True,
                "year": year,
                "month": month,
                "weeks": [[cell.to_dict() for cell in week] for week in weeks],
            }
        )

    @app.get("/api/calendar/days")
    def get_days() -> Any:
        try:
            year, month = _year_month()
            days = get_calendar_days(year, month)
        except ValueError as error:
            return _bad_request(str(error))
        return jsonify({"ok": True, "year": year, "month": month, "days": [day.isoformat() for day in days]})

    @app.post("/api/reservations/filter")
    def post_filter() -> Any:
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return _bad_request("Request body must be a JSON object.")
        rows = payload.get("reservations")
        if not isinstance(rows, list):
            return _bad_request("reservations must be a list of {start, end} objects.")

        try:
            spans = [ReservationSpan.from_dict(row) for row in rows]
        except (KeyError, TypeError):
            return _bad_request("Each reservation needs start and end.")

        filter_code = normalize_filter_code(str(payload.get("filter", config.default_filter)))
        try:
            kept = filter_reservations(
                spans,
                payload.get("year", ""),
                payload.get("month", ""),
                payload.get("day", ""),
                filter_code,
                business_hours=config.business_hours,
            )
        except ValueError as error:
            return _bad_request(str(error))

        logger.info("filtered %d reservations with %s -> %d", len(spans), filter_code, len(kept))
        return jsonify({"ok": True, "filter": filter_code, "reservations": [span.to_dict() for span in kept]})

    @app.get("/api/timezones/convert")
    def get_converted_time() -> Any:
        value = str(request.args.get("value", "")).strip()
        source_zone = str(request.args.get("from", config.home_zone))
        target_zone = str(request.args.get("to", "UTC"))
        if not value:
            return _bad_request("value is required (ISO-8601 local time).")

        try:
            local = datetime.fromisoformat(value)
            if local.tzinfo is None:
                local = local.replace(tzinfo=get_zone(source_zone))
            converted = convert_zone(local, target_zone)
        except ValueError as error:
            return _bad_request(str(error))

        return jsonify(
            {
                "ok": True,
                "source": format_iso_zoned(local),
                "converted": format_iso_zoned(converted),
            }
        )

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app = create_app("calendar_settings.yaml")
    app.run(host="127.0.0.1", port=5000, debug=False)

from __future__ import annotations

import json
from pathlib import Path
import sys
from urllib.parse import urlencode


def _read_payload() -> dict:
    raw = sys.stdin.read().strip()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
        if isinstance(data, dict):
            return data
        return {}
    except json.JSONDecodeError:
        return {}


def _emit(status_code: int, payload: dict) -> None:
    print(json.dumps({"status": status_code, "json": payload}, ensure_ascii=False))


def main() -> int:
    if len(sys.argv) < 2:
        print("missing action", file=sys.stderr)
        return 2

    action = sys.argv[1]
    payload = _read_payload()

    workspace_root = Path(__file__).resolve().parent.parent
    if str(workspace_root) not in sys.path:
        sys.path.insert(0, str(workspace_root))

    from reservation_calendar.web_app import create_app

    app = create_app(workspace_root / "calendar_settings.yaml")
    client = app.test_client()

    if action == "calendar":
        query = {key: payload[key] for key in ("year", "month") if key in payload}
        response = client.get(f"/api/calendar?{urlencode(query)}")
        _emit(response.status_code, response.get_json() or {})
        return 0

    if action == "filter":
        response = client.post("/api/reservations/filter", json=payload)
        _emit(response.status_code, response.get_json() or {})
        return 0

    if action == "convert":
        query = {key: payload[key] for key in ("value", "from", "to") if key in payload}
        response = client.get(f"/api/timezones/convert?{urlencode(query)}")
        _emit(response.status_code, response.get_json() or {})
        return 0

    print(f"unsupported action: {action}", file=sys.stderr)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())

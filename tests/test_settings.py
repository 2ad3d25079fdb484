import tempfile
import unittest
from datetime import time
from pathlib import Path

from reservation_calendar import CalendarSettingsError, ReservationSpan, load_reservation_spans, load_settings


class TestLoadSettings(unittest.TestCase):
    def setUp(self) -> None:
        self._temp_dir = tempfile.TemporaryDirectory()
        self.base_dir = Path(self._temp_dir.name)

    def tearDown(self) -> None:
        self._temp_dir.cleanup()

    def _write(self, name: str, text: str) -> Path:
        path = self.base_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_defaults_when_file_missing(self) -> None:
        settings = load_settings(self.base_dir / "missing.yaml")

        self.assertEqual(settings.business_hours.start, time(9, 0))
        self.assertEqual(settings.business_hours.end, time(17, 0))
        self.assertEqual(settings.holiday_country, "KR")
        self.assertEqual(settings.home_zone, "Asia/Seoul")
        self.assertEqual(settings.default_filter, "m")

    def test_reads_quoted_and_unquoted_times(self) -> None:
        path = self._write(
            "settings.yaml",
            'business_start: 8:30\nbusiness_end: "18:00"\nholiday_country: us\nhome_zone: America/New_York\ndefault_filter: W\n',
        )
        settings = load_settings(path)

        self.assertEqual(settings.business_hours.start, time(8, 30))
        self.assertEqual(settings.business_hours.end, time(18, 0))
        self.assertEqual(settings.holiday_country, "US")
        self.assertEqual(settings.home_zone, "America/New_York")
        self.assertEqual(settings.default_filter, "w")

    def test_unknown_filter_defaults_to_month(self) -> None:
        path = self._write("settings.yaml", "default_filter: x\n")
        self.assertEqual(load_settings(path).default_filter, "m")

    def test_rejects_reversed_business_hours(self) -> None:
        path = self._write("settings.yaml", 'business_start: "18:00"\nbusiness_end: "09:00"\n')
        with self.assertRaises(CalendarSettingsError):
            load_settings(path)

    def test_rejects_malformed_time(self) -> None:
        path = self._write("settings.yaml", 'business_start: "nine"\n')
        with self.assertRaises(CalendarSettingsError):
            load_settings(path)

    def test_rejects_non_mapping_and_broken_yaml(self) -> None:
        for text in ("- a\n- b\n", "business_start: [\n"):
            with self.subTest(text=text):
                path = self._write("settings.yaml", text)
                with self.assertRaises(CalendarSettingsError):
                    load_settings(path)

    def test_rejects_bare_integer_times(self) -> None:
        for text in ("business_start: 9\n", "business_end: 1020\n", "business_start: true\n"):
            with self.subTest(text=text):
                path = self._write("settings.yaml", text)
                with self.assertRaises(CalendarSettingsError):
                    load_settings(path)

    def test_rejects_unsupported_holiday_country(self) -> None:
        path = self._write("settings.yaml", "holiday_country: ZZ\n")
        with self.assertRaises(CalendarSettingsError):
            load_settings(path)

    def test_rejects_unknown_zone(self) -> None:
        path = self._write("settings.yaml", "home_zone: Nowhere/Special\n")
        with self.assertRaises(CalendarSettingsError):
            load_settings(path)


class TestLoadReservationSpans(unittest.TestCase):
    def test_reads_rows_and_skips_invalid_ones(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "reservations.yaml"
            path.write_text(
                '- start: "20250425 090000"\n  end: "20250425 100000"\n- just text\n- start: "20250426 090000"\n',
                encoding="utf-8",
            )
            with self.assertLogs("reservation_calendar.settings", level="WARNING") as logs:
                spans = load_reservation_spans(path)

        self.assertEqual(spans, [ReservationSpan("20250425 090000", "20250425 100000")])
        self.assertEqual(len(logs.records), 2)

    def test_empty_file_yields_no_spans(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "reservations.yaml"
            path.write_text("", encoding="utf-8")
            self.assertEqual(load_reservation_spans(path), [])


if __name__ == "__main__":
    unittest.main()

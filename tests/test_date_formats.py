import unittest
from datetime import date, datetime

from reservation_calendar import DateParseError, format_date, format_datetime, format_display, parse_date, parse_datetime
from reservation_calendar.date_formats import supported_layouts


class TestParsing(unittest.TestCase):
    def test_parses_compact_layouts(self) -> None:
        self.assertEqual(parse_date("20250425"), date(2025, 4, 25))
        self.assertEqual(parse_datetime("20250425 143000"), datetime(2025, 4, 25, 14, 30))

    def test_parses_iso_like_layouts(self) -> None:
        self.assertEqual(parse_date("2025-04-25", "yyyy-MM-dd"), date(2025, 4, 25))
        self.assertEqual(parse_datetime("2025-04-25T14:30:00", "yyyy-MM-dd'T'HH:mm:ss"), datetime(2025, 4, 25, 14, 30))

    def test_rejects_text_in_another_layout(self) -> None:
        with self.assertRaises(DateParseError) as caught:
            parse_datetime("2025-04-25 14:30:00", "yyyy-MM-dd'T'HH:mm:ss")

        self.assertIsInstance(caught.exception, ValueError)
        self.assertEqual(caught.exception.text, "2025-04-25 14:30:00")
        self.assertEqual(caught.exception.layout, "yyyy-MM-dd'T'HH:mm:ss")

    def test_rejects_loose_or_impossible_values(self) -> None:
        for text in ("2025425 090000", " 20250425 090000", "20250231 090000", "20250425 250000", ""):
            with self.subTest(text=text):
                with self.assertRaises(DateParseError):
                    parse_datetime(text)

    def test_unknown_layout_is_invalid_argument(self) -> None:
        with self.assertRaises(ValueError) as caught:
            parse_datetime("20250425", "dd/MM/yyyy")
        self.assertNotIsInstance(caught.exception, DateParseError)


class TestFormatting(unittest.TestCase):
    def test_formats_with_layouts(self) -> None:
        value = datetime(2025, 4, 25, 14, 30)

        self.assertEqual(format_display(value), "2025-04-25 14:30:00")
        self.assertEqual(format_datetime(value), "20250425 143000")
        self.assertEqual(format_date(value.date(), "yyyy-MM-dd"), "2025-04-25")

    def test_early_years_are_zero_padded(self) -> None:
        early = date(999, 1, 1)

        self.assertEqual(format_date(early), "09990101")
        self.assertEqual(parse_date(format_date(early)), early)
        self.assertEqual(format_datetime(datetime(45, 3, 15, 12, 0)), "00450315 120000")
        self.assertEqual(format_date(early, "yyyy-MM-dd"), "0999-01-01")

    def test_date_format_rejects_time_layout(self) -> None:
        with self.assertRaises(ValueError):
            format_date(date(2025, 4, 25), "yyyyMMdd HHmmss")

    def test_supported_layouts_include_reservation_layout(self) -> None:
        self.assertIn("yyyyMMdd HHmmss", supported_layouts())


if __name__ == "__main__":
    unittest.main()

from __future__ import annotations

import unittest
import unittest.mock
from datetime import date, datetime, timezone

from curryclub.config import SiteSettings, load_settings
from curryclub.utils import format_date_label, parse_datetime, text_value


class UtilsTests(unittest.TestCase):
    def test_parse_datetime_handles_iso_dates(self) -> None:
        self.assertEqual(
            parse_datetime("2024-01-01"),
            datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        self.assertEqual(
            parse_datetime("2024-06-01T10:00:00Z"),
            datetime(2024, 6, 1, 10, tzinfo=timezone.utc),
        )

    def test_parse_datetime_handles_rfc2822(self) -> None:
        self.assertEqual(
            parse_datetime("Mon, 01 Jan 2024 09:30:00 +0000"),
            datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc),
        )

    def test_parse_datetime_handles_editorial_formats(self) -> None:
        expected = datetime(2024, 3, 12, tzinfo=timezone.utc)
        for text in ("2024/03/12", "March 12, 2024", "Mar 12, 2024", "12 March 2024"):
            with self.subTest(text=text):
                self.assertEqual(parse_datetime(text), expected)

    def test_parse_datetime_rejects_garbage(self) -> None:
        self.assertIsNone(parse_datetime("next week"))
        self.assertIsNone(parse_datetime(""))
        self.assertIsNone(parse_datetime(None))
        self.assertIsNone(parse_datetime(20240101))

    def test_parse_datetime_accepts_date_objects(self) -> None:
        self.assertEqual(
            parse_datetime(date(2024, 2, 29)),
            datetime(2024, 2, 29, tzinfo=timezone.utc),
        )

    def test_format_date_label(self) -> None:
        self.assertEqual(format_date_label("2024-03-12"), "Mar 12, 2024")
        self.assertEqual(format_date_label("tbc"), "")

    def test_text_value_coerces_scalars(self) -> None:
        self.assertEqual(text_value(None), "")
        self.assertEqual(text_value(42), "42")
        self.assertEqual(text_value(["a"]), "")


class SettingsTests(unittest.TestCase):
    def test_abs_url_joins_paths(self) -> None:
        settings = SiteSettings(base_url="https://thecurry.club/")
        self.assertEqual(settings.abs_url("/news"), "https://thecurry.club/news")
        self.assertEqual(settings.abs_url("faqs"), "https://thecurry.club/faqs")

    def test_load_settings_ignores_blank_environment(self) -> None:
        with unittest.mock.patch.dict(
            "os.environ", {"SITE_BASE_URL": "  ", "SITE_NAME": "Curry Club Leeds"}
        ):
            settings = load_settings()
        self.assertEqual(settings.base_url, "https://thecurry.club")
        self.assertEqual(settings.site_name, "Curry Club Leeds")


if __name__ == "__main__":
    unittest.main()

from datetime import date, datetime, timezone as dt_timezone
from decimal import Decimal

from django.test import SimpleTestCase

from frontdesk.coercion import (
    join_list,
    split_list,
    to_boundary,
    to_date,
    to_datetime,
    to_decimal,
    to_int,
    to_text,
)


class CoercionTest(SimpleTestCase):
    def test_to_text(self):
        self.assertEqual(to_text(None), "")
        self.assertEqual(to_text("  Maria  "), "Maria")

    def test_to_int(self):
        self.assertIsNone(to_int(""))
        self.assertEqual(to_int("3"), 3)
        with self.assertRaises(ValueError):
            to_int("three")
        with self.assertRaises(ValueError):
            to_int(True)

    def test_to_decimal_rounds_to_cents(self):
        self.assertEqual(to_decimal("129"), Decimal("129.00"))
        self.assertEqual(to_decimal(89.5), Decimal("89.50"))
        with self.assertRaises(ValueError):
            to_decimal("free")

    def test_to_datetime_is_aware(self):
        parsed = to_datetime("2025-06-12T10:00:00")

        self.assertIsNotNone(parsed.tzinfo)
        self.assertEqual(to_datetime("2025-06-12").hour, 0)
        with self.assertRaises(ValueError):
            to_datetime("not a date")

    def test_to_date(self):
        self.assertEqual(to_date("2025-06-12"), date(2025, 6, 12))
        self.assertEqual(
            to_date(datetime(2025, 6, 12, 8, 30, tzinfo=dt_timezone.utc)), date(2025, 6, 12)
        )
        self.assertIsNone(to_date(None))

    def test_amenity_lists(self):
        self.assertEqual(split_list("WiFi, AC,,TV "), ["WiFi", "AC", "TV"])
        self.assertEqual(split_list(None), [])
        self.assertEqual(join_list(["WiFi", " Mini Bar "]), "WiFi,Mini Bar")

    def test_to_boundary(self):
        self.assertEqual(to_boundary(date(2025, 6, 12)), "2025-06-12")
        self.assertEqual(to_boundary(Decimal("10.50")), "10.50")
        self.assertEqual(to_boundary(3), 3)

from datetime import date
from unittest import TestCase

from reservation.filters import (
    CURRENT,
    TODAY,
    UPCOMING,
    filter_by_window,
    search_reservations,
    sort_reservations,
)

TODAY_DATE = date(2025, 6, 12)

RESERVATIONS = [
    {
        "id": 1,
        "guest_name": "Maria Garcia",
        "guest_email": "maria.garcia@example.com",
        "room_id": 2,
        "check_in": date(2025, 6, 10),
        "check_out": date(2025, 6, 14),
        "status": "checked-in",
    },
    {
        "id": 2,
        "guest_name": "John Smith",
        "guest_email": "john.smith@example.com",
        "room_id": 7,
        "check_in": date(2025, 6, 12),
        "check_out": date(2025, 6, 15),
        "status": "confirmed",
    },
    {
        "id": 3,
        "guest_name": "Aiko Tanaka",
        "guest_email": "aiko@example.com",
        "room_id": 5,
        "check_in": date(2025, 6, 20),
        "check_out": date(2025, 6, 23),
        "status": "confirmed",
    },
    {
        "id": 4,
        "guest_name": "Omar Haddad",
        "guest_email": "omar.haddad@example.com",
        "room_id": 3,
        "check_in": date(2025, 6, 8),
        "check_out": date(2025, 6, 12),
        "status": "checked-in",
    },
]


def ids(items):
    return [item["id"] for item in items]


class SearchTest(TestCase):
    def test_search_is_idempotent(self):
        once = search_reservations(RESERVATIONS, "example.com")

        self.assertEqual(search_reservations(once, "example.com"), once)

    def test_search_is_case_insensitive_on_name(self):
        self.assertEqual(ids(search_reservations(RESERVATIONS, "garcia")), [1])

    def test_search_matches_email_and_room(self):
        self.assertEqual(ids(search_reservations(RESERVATIONS, "SMITH@")), [2])
        self.assertEqual(ids(search_reservations(RESERVATIONS, "5")), [3])

    def test_empty_search_keeps_everything(self):
        self.assertEqual(ids(search_reservations(RESERVATIONS, "")), [1, 2, 3, 4])


class WindowTest(TestCase):
    def test_window_is_idempotent(self):
        for window in (TODAY, UPCOMING, CURRENT):
            once = filter_by_window(RESERVATIONS, window, TODAY_DATE)

            self.assertEqual(filter_by_window(once, window, TODAY_DATE), once)

    def test_today(self):
        self.assertEqual(ids(filter_by_window(RESERVATIONS, TODAY, TODAY_DATE)), [2, 4])

    def test_upcoming(self):
        self.assertEqual(ids(filter_by_window(RESERVATIONS, UPCOMING, TODAY_DATE)), [3])

    def test_current_is_checked_in_and_in_house(self):
        self.assertEqual(ids(filter_by_window(RESERVATIONS, CURRENT, TODAY_DATE)), [1, 4])

    def test_unknown_window(self):
        with self.assertRaises(ValueError):
            filter_by_window(RESERVATIONS, "yesterday", TODAY_DATE)


class SortTest(TestCase):
    def test_most_recent_check_in_first(self):
        self.assertEqual(ids(sort_reservations(RESERVATIONS)), [3, 2, 1, 4])

from datetime import date
from typing import Iterable, Optional

from django.utils import timezone

from frontdesk.derivation import ALL
from reservation.models import Reservation

TODAY = "today"
UPCOMING = "upcoming"
CURRENT = "current"
WINDOWS = (ALL, TODAY, CURRENT, UPCOMING)


def search_reservations(items: Iterable[dict], query: Optional[str]) -> list:
    """Case-insensitive substring match on guest name, guest email and room id."""
    if not query:
        return list(items)

    needle = query.lower()
    return [
        reservation
        for reservation in items
        if needle in (reservation.get("guest_name") or "").lower()
        or needle in (reservation.get("guest_email") or "").lower()
        or needle in str(reservation.get("room_id", "")).lower()
    ]


def filter_by_window(items: Iterable[dict], window: Optional[str], today: Optional[date] = None) -> list:
    """
    - today: check-in or check-out falls on the current date
    - upcoming: check-in after today
    - current: guests in house, checked in and today within the stay
    """
    if window is None or window == ALL:
        return list(items)
    if window not in WINDOWS:
        raise ValueError(f"Unknown date window: {window}")

    today = today or timezone.localdate()

    if window == TODAY:
        return [r for r in items if r["check_in"] == today or r["check_out"] == today]
    if window == UPCOMING:
        return [r for r in items if r["check_in"] > today]
    return [
        r
        for r in items
        if r["check_in"] <= today <= r["check_out"]
        and r["status"] == Reservation.ReservationStatus.CHECKED_IN
    ]


def sort_reservations(items: Iterable[dict]) -> list:
    """Most recent check-in first."""
    return sorted(items, key=lambda reservation: reservation["check_in"], reverse=True)

from datetime import timedelta
from unittest.mock import patch

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from reservation.models import Reservation
from reservation.tests.helpers import create_reservation, create_room
from room.models import Room
from store.exceptions import PersistenceError
from store.local import LocalStore


def reservations_url():
    return reverse("reservation:reservation-list")


def reservation_action_url(name: str, reservation_id: int) -> str:
    return reverse(f"reservation:reservation-{name}", args=[reservation_id])


class ReservationApiTests(APITestCase):
    def setUp(self):
        self.today = timezone.localdate()
        self.room = create_room(number="101")
        self.occupied = create_room(number="102", status=Room.RoomStatus.OCCUPIED)
        self.arriving = create_reservation(
            self.room, guest_name="Maria Garcia", check_in=self.today
        )
        self.staying = create_reservation(
            self.occupied,
            guest_name="John Smith",
            guest_email="john.smith@example.com",
            check_in=self.today - timedelta(days=2),
            check_out=self.today + timedelta(days=1),
            status=Reservation.ReservationStatus.CHECKED_IN,
        )

    def test_list_sorted_by_check_in_desc(self):
        res = self.client.get(reservations_url())

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([r["guest_name"] for r in res.data], ["Maria Garcia", "John Smith"])
        self.assertEqual(res.data[1]["total_nights"], 3)

    def test_search(self):
        res = self.client.get(reservations_url(), {"search": "garcia"})

        self.assertEqual([r["id"] for r in res.data], [self.arriving.id])

    def test_window_and_status_filters(self):
        res = self.client.get(reservations_url(), {"window": "current"})
        self.assertEqual([r["id"] for r in res.data], [self.staying.id])

        res = self.client.get(reservations_url(), {"status": "confirmed"})
        self.assertEqual([r["id"] for r in res.data], [self.arriving.id])

    def test_unknown_window_is_ignored(self):
        res = self.client.get(reservations_url(), {"window": "someday"})

        self.assertEqual(len(res.data), 2)

    def test_arrivals_and_departures(self):
        res = self.client.get(reverse("reservation:reservation-arrivals"))
        self.assertEqual([r["id"] for r in res.data], [self.arriving.id])

        res = self.client.get(reverse("reservation:reservation-departures"))
        self.assertEqual(res.data, [])

    def test_stats(self):
        res = self.client.get(reverse("reservation:reservation-stats"))

        self.assertEqual(
            res.data,
            {"all": 2, "confirmed": 1, "checked-in": 1, "checked-out": 0, "cancelled": 0},
        )

    def test_create_reservation_calculates_total(self):
        payload = {
            "guest_name": "Aiko Tanaka",
            "guest_email": "aiko.tanaka@example.com",
            "guest_phone": "+1 (555) 873-0090",
            "room_id": self.room.id,
            "check_in": str(self.today + timedelta(days=5)),
            "check_out": str(self.today + timedelta(days=8)),
        }

        res = self.client.post(reservations_url(), payload, format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["status"], "confirmed")
        self.assertEqual(res.data["total_amount"], "300.00")

    def test_create_in_occupied_room_rejected(self):
        payload = {
            "guest_name": "Aiko Tanaka",
            "guest_email": "aiko.tanaka@example.com",
            "guest_phone": "+1 (555) 873-0090",
            "room_id": self.occupied.id,
            "check_in": str(self.today + timedelta(days=5)),
            "check_out": str(self.today + timedelta(days=8)),
        }

        res = self.client.post(reservations_url(), payload, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["room_id"][0], "Selected room is not available")

    def test_create_when_rooms_cannot_be_loaded_is_503(self):
        payload = {
            "guest_name": "Aiko Tanaka",
            "guest_email": "aiko.tanaka@example.com",
            "guest_phone": "+1 (555) 873-0090",
            "room_id": self.room.id,
            "check_in": str(self.today + timedelta(days=5)),
            "check_out": str(self.today + timedelta(days=8)),
        }

        with patch.object(LocalStore, "fetch_all", side_effect=PersistenceError("offline")):
            res = self.client.post(reservations_url(), payload, format="json")

        self.assertEqual(res.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(res.data["detail"], "Failed to load room list")
        self.assertEqual(Reservation.objects.count(), 2)

    def test_quote(self):
        res = self.client.post(
            reverse("reservation:reservation-quote"),
            {
                "room_id": self.room.id,
                "check_in": str(self.today),
                "check_out": str(self.today + timedelta(days=3)),
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, {"room_id": self.room.id, "nights": 3, "total_amount": "300.00"})

    def test_check_in(self):
        res = self.client.post(reservation_action_url("check-in", self.arriving.id))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "checked-in")

    def test_illegal_transition_is_400(self):
        res = self.client.post(reservation_action_url("cancel", self.staying.id))

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["detail"], "Only confirmed reservations can be cancelled.")
        self.staying.refresh_from_db()
        self.assertEqual(self.staying.status, Reservation.ReservationStatus.CHECKED_IN)

    def test_patch_status_goes_through_transitions(self):
        res = self.client.patch(
            reverse("reservation:reservation-detail", args=[self.staying.id]),
            {"status": "confirmed"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_missing_reservation_action_is_404(self):
        res = self.client.post(reservation_action_url("check-out", 9999))

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["detail"], "Reservation not found")

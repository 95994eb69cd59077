from django.utils import timezone

from frontdesk.coercion import to_date, to_decimal, to_int, to_text
from frontdesk.services import EntityService
from reservation.models import Reservation
from reservation.services.pricing import calculate_total
from reservation.status import RESERVATION_TRANSITIONS
from room.services.room_service import RoomService

ReservationStatus = Reservation.ReservationStatus


class ReservationService(EntityService):
    collection = "reservation"
    label = "Reservation"

    readers = {
        "guest_name": to_text,
        "guest_email": to_text,
        "guest_phone": to_text,
        "room_id": to_int,
        "check_in": to_date,
        "check_out": to_date,
        "status": to_text,
        "total_amount": to_decimal,
        "notes": to_text,
    }
    writers = {
        "guest_name": to_text,
        "guest_email": to_text,
        "guest_phone": to_text,
        "room_id": to_int,
        "check_in": to_date,
        "check_out": to_date,
        "status": to_text,
        "total_amount": to_decimal,
        "notes": to_text,
    }

    def defaults(self) -> dict:
        return {"status": ReservationStatus.CONFIRMED.value, "notes": ""}

    def prepare_update(self, current: dict, fields: dict) -> dict:
        target = fields.get("status")
        if target is not None and target != current["status"]:
            RESERVATION_TRANSITIONS.check(current["status"], target)
        return fields

    def get_today_arrivals(self) -> list:
        today = timezone.localdate()
        return self.query(lambda reservation: reservation["check_in"] == today)

    def get_today_departures(self) -> list:
        today = timezone.localdate()
        return self.query(lambda reservation: reservation["check_out"] == today)

    def quote(self, room_id, check_in, check_out):
        """Total for a stay in the given room at its current rate."""
        room = RoomService(self.store, self.notifier).get_by_id(to_int(room_id))
        if room is None:
            return None
        return calculate_total(room["rate"], to_date(check_in), to_date(check_out))

    def transition(self, reservation_id: int, target: str, success):
        return self.apply(
            reservation_id,
            lambda reservation: {
                "status": RESERVATION_TRANSITIONS.check(reservation["status"], target)
            },
            success=success,
        )

    def check_in(self, reservation_id: int):
        return self.transition(
            reservation_id,
            ReservationStatus.CHECKED_IN.value,
            lambda r: f"{r['guest_name']} checked in successfully",
        )

    def check_out(self, reservation_id: int):
        return self.transition(
            reservation_id,
            ReservationStatus.CHECKED_OUT.value,
            lambda r: f"{r['guest_name']} checked out successfully",
        )

    def cancel(self, reservation_id: int):
        return self.transition(
            reservation_id,
            ReservationStatus.CANCELLED.value,
            lambda r: f"Reservation for {r['guest_name']} cancelled",
        )

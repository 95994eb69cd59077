from datetime import timedelta
from decimal import Decimal

from django.utils import timezone

from reservation.models import Reservation
from room.models import Room


def create_room(**params):
    defaults = {
        "number": "101",
        "type": Room.RoomType.DOUBLE,
        "floor": 1,
        "amenities": "WiFi",
        "rate": Decimal("100.00"),
    }
    defaults.update(params)
    return Room.objects.create(**defaults)


def create_reservation(room, **params):
    today = timezone.localdate()
    defaults = {
        "guest_name": "Maria Garcia",
        "guest_email": "maria.garcia@example.com",
        "guest_phone": "+1 (555) 201-3344",
        "check_in": today + timedelta(days=1),
        "check_out": today + timedelta(days=4),
        "total_amount": Decimal("300.00"),
    }
    defaults.update(params)
    return Reservation.objects.create(room=room, **defaults)

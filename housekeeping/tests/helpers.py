from datetime import timedelta
from decimal import Decimal

from django.utils import timezone

from housekeeping.models import HousekeepingTask
from room.models import Room


def create_room(**params):
    defaults = {
        "number": "101",
        "type": Room.RoomType.SINGLE,
        "floor": 1,
        "rate": Decimal("89.00"),
    }
    defaults.update(params)
    return Room.objects.create(**defaults)


def create_task(room, **params):
    defaults = {
        "type": HousekeepingTask.TaskType.CLEANING,
        "assigned_to": "Sarah Wilson",
        "scheduled_time": timezone.now() + timedelta(hours=2),
    }
    defaults.update(params)
    return HousekeepingTask.objects.create(room=room, **defaults)

"""
Dashboard figures computed from snapshots of the three collections.
"""
from datetime import date, datetime, time
from decimal import Decimal
from typing import Iterable

from django.utils import timezone

from frontdesk.derivation import filter_by
from housekeeping.filters import urgent_tasks
from housekeeping.models import HousekeepingTask
from reservation.models import Reservation
from room.models import Room

FEED_LIMIT = 8
FEED_TASKS = 3

MAINTENANCE_TYPES = (
    HousekeepingTask.TaskType.MAINTENANCE,
    HousekeepingTask.TaskType.REPAIR,
)
EARNING_STATUSES = (
    Reservation.ReservationStatus.CHECKED_IN,
    Reservation.ReservationStatus.CHECKED_OUT,
)


def room_counts(rooms: list) -> dict:
    RoomStatus = Room.RoomStatus
    return {
        "total": len(rooms),
        "occupied": len(filter_by(rooms, "status", RoomStatus.OCCUPIED)),
        "available": len(filter_by(rooms, "status", RoomStatus.AVAILABLE)),
        "maintenance": len(filter_by(rooms, "status", RoomStatus.MAINTENANCE)),
    }


def occupancy_rate(rooms: list) -> int:
    """Occupied rooms as a rounded percentage; 0 when there are no rooms."""
    if not rooms:
        return 0
    occupied = len(filter_by(rooms, "status", Room.RoomStatus.OCCUPIED))
    return round(occupied * 100 / len(rooms))


def revenue(reservations: Iterable[dict]) -> Decimal:
    return sum(
        (
            reservation["total_amount"] or Decimal("0")
            for reservation in reservations
            if reservation["status"] in EARNING_STATUSES
        ),
        Decimal("0.00"),
    )


def as_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return timezone.make_aware(datetime.combine(value, time.min))
    raise TypeError(f"Cannot place {value!r} on the activity feed")


def activity_feed(arrivals: list, departures: list, tasks: list) -> list:
    """
    Today's arrivals, departures and the first few of today's tasks as a
    single list ordered by time, capped at FEED_LIMIT items.
    """
    activities = []
    for reservation in arrivals:
        activities.append(
            {
                "id": f"arrival-{reservation['id']}",
                "type": "check-in",
                "title": f"{reservation['guest_name']} arrival",
                "description": f"Room {reservation['room_id']}",
                "timestamp": as_timestamp(reservation["check_in"]),
            }
        )
    for reservation in departures:
        activities.append(
            {
                "id": f"departure-{reservation['id']}",
                "type": "check-out",
                "title": f"{reservation['guest_name']} departure",
                "description": f"Room {reservation['room_id']}",
                "timestamp": as_timestamp(reservation["check_out"]),
            }
        )
    for task in tasks[:FEED_TASKS]:
        activities.append(
            {
                "id": f"task-{task['id']}",
                "type": "maintenance" if task["type"] in MAINTENANCE_TYPES else "cleaning",
                "title": f"{task['type']} - Room {task['room_id']}",
                "description": f"Assigned to {task['assigned_to']} - {task['status']}",
                "timestamp": as_timestamp(task["scheduled_time"]),
            }
        )

    activities.sort(key=lambda activity: activity["timestamp"])
    return activities[:FEED_LIMIT]


def summarize(rooms, reservations, arrivals, departures, tasks) -> dict:
    return {
        "rooms": room_counts(rooms),
        "occupancy_rate": occupancy_rate(rooms),
        "revenue": revenue(reservations),
        "arrivals": arrivals,
        "departures": departures,
        "tasks": tasks,
        "urgent_tasks": urgent_tasks(tasks),
        "activity": activity_feed(arrivals, departures, tasks),
    }

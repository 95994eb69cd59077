from room.models import Room

RoomStatus = Room.RoomStatus

# Status board cycle. Every status has exactly one successor and the
# cycle visits all five before returning to the start.
ROOM_STATUS_CYCLE = {
    RoomStatus.AVAILABLE: RoomStatus.OCCUPIED,
    RoomStatus.OCCUPIED: RoomStatus.MAINTENANCE,
    RoomStatus.MAINTENANCE: RoomStatus.CHECKOUT,
    RoomStatus.CHECKOUT: RoomStatus.RESERVED,
    RoomStatus.RESERVED: RoomStatus.AVAILABLE,
}


def next_room_status(status: str) -> str:
    try:
        return ROOM_STATUS_CYCLE[RoomStatus(status)].value
    except ValueError:
        raise ValueError(f"Unknown room status: {status}")

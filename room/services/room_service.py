from frontdesk.coercion import join_list, split_list, to_decimal, to_int, to_text
from frontdesk.services import EntityService
from room.models import Room
from room.status import next_room_status


class RoomService(EntityService):
    collection = "room"
    label = "Room"

    readers = {
        "number": to_text,
        "type": to_text,
        "status": to_text,
        "cleaning_status": to_text,
        "floor": to_int,
        "amenities": split_list,
        "rate": to_decimal,
    }
    writers = {
        "number": to_text,
        "type": to_text,
        "status": to_text,
        "cleaning_status": to_text,
        "floor": to_int,
        "amenities": join_list,
        "rate": to_decimal,
    }

    def defaults(self) -> dict:
        return {
            "status": Room.RoomStatus.AVAILABLE.value,
            "cleaning_status": Room.CleaningStatus.CLEAN.value,
            "amenities": "",
        }

    def get_available_rooms(self) -> list:
        return self.query(lambda room: room["status"] == Room.RoomStatus.AVAILABLE)

    def get_by_floor(self, floor) -> list:
        floor = to_int(floor)
        return self.query(lambda room: room["floor"] == floor)

    def advance_status(self, room_id: int):
        """Move the room to the next status of the board cycle."""
        return self.apply(
            room_id,
            lambda room: {"status": next_room_status(room["status"])},
            success=lambda room: f"Room {room['number']} status updated to {room['status']}",
        )

from typing import Optional

ASC = "asc"
DESC = "desc"

# Writable fields per collection. Identity and audit fields are managed by the store.
COLLECTIONS = {
    "room": (
        "number",
        "type",
        "status",
        "cleaning_status",
        "floor",
        "amenities",
        "rate",
    ),
    "reservation": (
        "guest_name",
        "guest_email",
        "guest_phone",
        "room_id",
        "check_in",
        "check_out",
        "status",
        "total_amount",
        "notes",
    ),
    "housekeeping": (
        "room_id",
        "type",
        "priority",
        "assigned_to",
        "status",
        "scheduled_time",
        "completed_time",
    ),
}


class Query:
    """Field-equality filters plus an optional (field, direction) sort."""

    def __init__(self, filters: Optional[dict] = None, order_by: Optional[tuple] = None):
        self.filters = dict(filters or {})
        if order_by is not None and order_by[1] not in (ASC, DESC):
            raise ValueError(f"Unknown sort direction: {order_by[1]}")
        self.order_by = order_by

    def __repr__(self):
        return f"Query(filters={self.filters!r}, order_by={self.order_by!r})"


def writable_fields(collection: str) -> tuple:
    try:
        return COLLECTIONS[collection]
    except KeyError:
        raise ValueError(f"Unknown collection: {collection}")


def clean_fields(collection: str, fields: dict) -> dict:
    allowed = writable_fields(collection)
    return {key: value for key, value in fields.items() if key in allowed}


class Store:
    """
    Persistence contract shared by the local and remote backends.

    Records are plain dicts with snake_case keys. Dates travel as
    ISO-8601 strings.
    """

    def fetch_all(self, collection: str, query: Optional[Query] = None) -> list:
        raise NotImplementedError

    def fetch_by_id(self, collection: str, record_id: int) -> Optional[dict]:
        raise NotImplementedError

    def create_one(self, collection: str, fields: dict) -> dict:
        raise NotImplementedError

    def update_one(self, collection: str, record_id: int, fields: dict) -> dict:
        raise NotImplementedError

    def delete_one(self, collection: str, record_id: int) -> bool:
        raise NotImplementedError

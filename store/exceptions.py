from typing import Optional


class NotFoundError(Exception):
    """Thrown when a record id is absent from its collection"""

    def __init__(
            self,
            collection: str,
            record_id: Optional[int] = None,
            message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"{collection.capitalize()} {record_id} not found" if record_id is not None else f"{collection.capitalize()} not found"
        super().__init__(message)
        self.collection = collection
        self.record_id = record_id


class PersistenceError(Exception):
    """Thrown when the storage backend or the network fails"""

    def __init__(
            self,
            message: str,
            cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(message)
        self.cause = cause

import logging
from typing import Callable, Optional

from frontdesk.coercion import to_boundary, to_int
from notifications.notifier import Notifier
from store.base import Store
from store.exceptions import NotFoundError, PersistenceError

logger = logging.getLogger(__name__)


class EntityService:
    """
    CRUD over one store collection.

    Store failures never escape: they are logged, reported to the notifier
    and replaced by a fallback value ([] for lists, None for single
    entities and writes, False for deletes).
    """

    collection = None
    label = None
    # field -> coercion from a stored record to the entity value
    readers = {}
    # field -> coercion from caller input to the value handed to the store
    writers = {}

    def __init__(self, store: Store, notifier: Optional[Notifier] = None):
        self.store = store
        self.notifier = notifier if notifier is not None else Notifier()

    def to_entity(self, record: dict) -> dict:
        entity = {"id": to_int(record.get("id"))}
        for field, read in self.readers.items():
            entity[field] = read(record.get(field))
        return entity

    def to_fields(self, data: dict) -> dict:
        """
        Coerce the keys present in ``data``. Absent keys stay absent and a
        key present with None is kept as None, which clears the field.
        """
        fields = {}
        for field, write in self.writers.items():
            if field in data:
                value = data[field]
                fields[field] = None if value is None else write(value)
        return fields

    def defaults(self) -> dict:
        return {}

    def prepare_create(self, fields: dict) -> dict:
        return fields

    def prepare_update(self, current: dict, fields: dict) -> dict:
        return fields

    def to_record(self, fields: dict) -> dict:
        return {key: to_boundary(value) for key, value in fields.items()}

    def fail(self, message: str, error: Exception, fallback):
        if isinstance(error, NotFoundError):
            logger.warning(f"{message}: {error}")
            self.notifier.error(f"{self.label} not found", error=error)
        else:
            logger.error(f"{message}: {error}", exc_info=error)
            self.notifier.error(message, error=error)
        return fallback

    def query(self, predicate: Callable[[dict], bool]) -> list:
        return [entity for entity in self.get_all() if predicate(entity)]

    def get_all(self) -> list:
        try:
            records = self.store.fetch_all(self.collection)
        except PersistenceError as e:
            return self.fail(f"Failed to load {self.collection} list", e, [])
        return [self.to_entity(record) for record in records]

    def get_by_id(self, record_id: int) -> Optional[dict]:
        try:
            record = self.store.fetch_by_id(self.collection, record_id)
        except PersistenceError as e:
            return self.fail(f"Failed to load {self.collection} {record_id}", e, None)
        return self.to_entity(record) if record is not None else None

    def create(self, data: dict) -> Optional[dict]:
        fields = self.to_fields(data)
        for key, value in self.defaults().items():
            if fields.get(key) is None:
                fields[key] = value
        fields = self.prepare_create(fields)

        try:
            record = self.store.create_one(self.collection, self.to_record(fields))
        except PersistenceError as e:
            return self.fail(f"Failed to create {self.collection}", e, None)

        entity = self.to_entity(record)
        logger.info(f"{self.label} {entity['id']} created")
        self.notifier.success(f"{self.label} created successfully")
        return entity

    def apply(
            self,
            record_id: int,
            change: Callable[[dict], dict],
            success: Optional[Callable[[dict], str]] = None,
    ) -> Optional[dict]:
        """
        Load the entity, compute the fields to write with ``change`` and
        persist them. ``change`` may raise InvalidTransition, which is left
        to the caller since nothing has been written yet.
        """
        try:
            record = self.store.fetch_by_id(self.collection, record_id)
            if record is None:
                raise NotFoundError(self.collection, record_id)

            fields = change(self.to_entity(record))
            updated = self.store.update_one(self.collection, record_id, self.to_record(fields))
        except (NotFoundError, PersistenceError) as e:
            return self.fail(f"Failed to update {self.collection} {record_id}", e, None)

        entity = self.to_entity(updated)
        logger.info(f"{self.label} {record_id} updated: {sorted(fields)}")
        self.notifier.success(success(entity) if success else f"{self.label} updated successfully")
        return entity

    def update(self, record_id: int, patch: dict) -> Optional[dict]:
        fields = self.to_fields(patch)
        return self.apply(record_id, lambda current: self.prepare_update(current, fields))

    def delete(self, record_id: int) -> bool:
        try:
            self.store.delete_one(self.collection, record_id)
        except (NotFoundError, PersistenceError) as e:
            return self.fail(f"Failed to delete {self.collection} {record_id}", e, False)

        logger.info(f"{self.label} {record_id} deleted")
        self.notifier.success(f"{self.label} deleted")
        return True

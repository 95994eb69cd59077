import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from django.apps import apps
from django.core.exceptions import FieldError
from django.db import DatabaseError, transaction

from store.base import DESC, Query, Store, clean_fields, writable_fields
from store.exceptions import NotFoundError, PersistenceError

logger = logging.getLogger(__name__)

MODELS = {
    "room": "room.Room",
    "reservation": "reservation.Reservation",
    "housekeeping": "housekeeping.HousekeepingTask",
}


def to_record(instance) -> dict:
    """Flatten a model instance into the JSON-shaped record the services expect."""
    record = {}
    for field in instance._meta.concrete_fields:
        value = getattr(instance, field.attname)
        if isinstance(value, date):
            value = value.isoformat()
        elif isinstance(value, Decimal):
            value = str(value)
        record[field.attname] = value
    return record


class LocalStore(Store):
    """Store backed by the project's own database through the Django ORM."""

    def get_model(self, collection: str):
        writable_fields(collection)
        return apps.get_model(MODELS[collection])

    def fetch_all(self, collection: str, query: Optional[Query] = None) -> list:
        model = self.get_model(collection)
        queryset = model.objects.all()

        if query is not None:
            allowed = ("id",) + writable_fields(collection)
            for field in query.filters:
                if field not in allowed:
                    raise ValueError(f"Cannot filter {collection} by {field}")
            queryset = queryset.filter(**query.filters)
            if query.order_by:
                field, direction = query.order_by
                queryset = queryset.order_by(f"-{field}" if direction == DESC else field)
            else:
                queryset = queryset.order_by("id")
        else:
            queryset = queryset.order_by("id")

        try:
            return [to_record(instance) for instance in queryset]
        except (DatabaseError, FieldError) as e:
            raise PersistenceError(f"Failed to load {collection}", cause=e) from e

    def fetch_by_id(self, collection: str, record_id: int) -> Optional[dict]:
        model = self.get_model(collection)
        try:
            instance = model.objects.filter(pk=record_id).first()
        except DatabaseError as e:
            raise PersistenceError(f"Failed to load {collection} {record_id}", cause=e) from e
        return to_record(instance) if instance is not None else None

    def create_one(self, collection: str, fields: dict) -> dict:
        model = self.get_model(collection)
        try:
            with transaction.atomic():
                instance = model.objects.create(**clean_fields(collection, fields))
        except DatabaseError as e:
            raise PersistenceError(f"Failed to create {collection}", cause=e) from e

        logger.info(f"Created {collection} {instance.pk}")
        return self.fetch_by_id(collection, instance.pk)

    def update_one(self, collection: str, record_id: int, fields: dict) -> dict:
        model = self.get_model(collection)
        try:
            with transaction.atomic():
                instance = model.objects.select_for_update().filter(pk=record_id).first()
                if instance is None:
                    raise NotFoundError(collection, record_id)
                for key, value in clean_fields(collection, fields).items():
                    setattr(instance, key, value)
                instance.save()
        except DatabaseError as e:
            raise PersistenceError(f"Failed to update {collection} {record_id}", cause=e) from e

        logger.info(f"Updated {collection} {record_id}")
        return self.fetch_by_id(collection, record_id)

    def delete_one(self, collection: str, record_id: int) -> bool:
        model = self.get_model(collection)
        try:
            deleted, _ = model.objects.filter(pk=record_id).delete()
        except DatabaseError as e:
            raise PersistenceError(f"Failed to delete {collection} {record_id}", cause=e) from e

        if not deleted:
            raise NotFoundError(collection, record_id)
        logger.info(f"Deleted {collection} {record_id}")
        return True

from django.conf import settings

from store.base import Query, Store
from store.exceptions import NotFoundError, PersistenceError


def get_store() -> Store:
    """Build the store selected by FRONTDESK_STORE_BACKEND."""
    backend = settings.FRONTDESK_STORE_BACKEND

    if backend == "local":
        from store.local import LocalStore

        return LocalStore()

    if backend == "remote":
        from store.remote import RemoteStore

        return RemoteStore(
            base_url=settings.FRONTDESK_REMOTE_URL,
            token=settings.FRONTDESK_REMOTE_TOKEN,
            timeout=settings.FRONTDESK_REMOTE_TIMEOUT,
        )

    raise ValueError(f"Unknown FRONTDESK_STORE_BACKEND: {backend}")


__all__ = ["NotFoundError", "PersistenceError", "Query", "Store", "get_store"]

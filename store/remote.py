import logging
from typing import Optional

import requests

from store.base import DESC, Query, Store, clean_fields, writable_fields
from store.exceptions import NotFoundError, PersistenceError

logger = logging.getLogger(__name__)


class RemoteStore(Store):
    """
    Store backed by a remote record API.

    Collections map to REST resources under ``base_url``:
    ``GET/POST {base_url}/{collection}/`` and
    ``GET/PATCH/DELETE {base_url}/{collection}/{id}/``.
    """

    def __init__(
            self,
            base_url: str,
            token: Optional[str] = None,
            timeout: float = 10,
            session: Optional[requests.Session] = None,
    ) -> None:
        if not base_url:
            raise ValueError("FRONTDESK_REMOTE_URL is missing")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})

    def collection_url(self, collection: str) -> str:
        writable_fields(collection)
        return f"{self.base_url}/{collection}/"

    def record_url(self, collection: str, record_id: int) -> str:
        return f"{self.collection_url(collection)}{record_id}/"

    def request(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise PersistenceError(f"{method} {url} failed: {e}", cause=e) from e
        return response

    def check(self, response: requests.Response, method: str, url: str) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise PersistenceError(
                f"{method} {url} returned {response.status_code}", cause=e
            ) from e

    def fetch_all(self, collection: str, query: Optional[Query] = None) -> list:
        url = self.collection_url(collection)
        params = {}
        if query is not None:
            params.update(query.filters)
            if query.order_by:
                field, direction = query.order_by
                params["ordering"] = f"-{field}" if direction == DESC else field

        response = self.request("GET", url, params=params)
        self.check(response, "GET", url)
        data = response.json()
        if not isinstance(data, dict):
            return list(data)

        # paginated: follow "next" links, which already carry the query
        records = list(data.get("results", []))
        while data.get("next"):
            url = data["next"]
            response = self.request("GET", url)
            self.check(response, "GET", url)
            data = response.json()
            records.extend(data.get("results", []))
        return records

    def fetch_by_id(self, collection: str, record_id: int) -> Optional[dict]:
        url = self.record_url(collection, record_id)
        response = self.request("GET", url)
        if response.status_code == 404:
            return None
        self.check(response, "GET", url)
        return response.json()

    def create_one(self, collection: str, fields: dict) -> dict:
        url = self.collection_url(collection)
        response = self.request("POST", url, json=clean_fields(collection, fields))
        self.check(response, "POST", url)
        record = response.json()
        logger.info(f"Created remote {collection} {record.get('id')}")
        return record

    def update_one(self, collection: str, record_id: int, fields: dict) -> dict:
        url = self.record_url(collection, record_id)
        response = self.request("PATCH", url, json=clean_fields(collection, fields))
        if response.status_code == 404:
            raise NotFoundError(collection, record_id)
        self.check(response, "PATCH", url)
        logger.info(f"Updated remote {collection} {record_id}")
        return response.json()

    def delete_one(self, collection: str, record_id: int) -> bool:
        url = self.record_url(collection, record_id)
        response = self.request("DELETE", url)
        if response.status_code == 404:
            raise NotFoundError(collection, record_id)
        self.check(response, "DELETE", url)
        logger.info(f"Deleted remote {collection} {record_id}")
        return True

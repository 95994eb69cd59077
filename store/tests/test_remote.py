from unittest import TestCase
from unittest.mock import MagicMock

import requests

from store.base import DESC, Query
from store.exceptions import NotFoundError, PersistenceError
from store.remote import RemoteStore


def make_response(status_code=200, payload=None):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


class RemoteStoreTest(TestCase):
    def setUp(self):
        self.session = MagicMock(spec=requests.Session)
        self.session.headers = {}
        self.store = RemoteStore(
            "https://records.example.com/api/", token="secret", timeout=5, session=self.session
        )

    def test_requires_base_url(self):
        with self.assertRaises(ValueError):
            RemoteStore("")

    def test_sets_auth_header(self):
        self.assertEqual(self.session.headers["Authorization"], "Bearer secret")

    def test_fetch_all_sends_filters_and_ordering(self):
        self.session.request.return_value = make_response(payload=[{"id": 1}])

        records = self.store.fetch_all(
            "room", Query(filters={"status": "available"}, order_by=("number", DESC))
        )

        self.assertEqual(records, [{"id": 1}])
        self.session.request.assert_called_once_with(
            "GET",
            "https://records.example.com/api/room/",
            timeout=5,
            params={"status": "available", "ordering": "-number"},
        )

    def test_fetch_all_unwraps_paginated_results(self):
        self.session.request.return_value = make_response(
            payload={"count": 1, "results": [{"id": 3}]}
        )

        self.assertEqual(self.store.fetch_all("reservation"), [{"id": 3}])

    def test_fetch_all_follows_next_links(self):
        next_url = "https://records.example.com/api/room/?page=2"
        self.session.request.side_effect = [
            make_response(payload={"next": next_url, "results": [{"id": 1}]}),
            make_response(payload={"next": None, "results": [{"id": 2}]}),
        ]

        records = self.store.fetch_all("room")

        self.assertEqual([r["id"] for r in records], [1, 2])
        self.session.request.assert_called_with("GET", next_url, timeout=5)

    def test_failed_later_page_becomes_persistence_error(self):
        self.session.request.side_effect = [
            make_response(
                payload={"next": "https://records.example.com/api/room/?page=2", "results": [{"id": 1}]}
            ),
            make_response(status_code=502),
        ]

        with self.assertRaises(PersistenceError):
            self.store.fetch_all("room")

    def test_fetch_by_id_missing_returns_none(self):
        self.session.request.return_value = make_response(status_code=404)

        self.assertIsNone(self.store.fetch_by_id("room", 12))

    def test_create_one_posts_writable_fields_only(self):
        self.session.request.return_value = make_response(
            status_code=201, payload={"id": 9, "number": "901"}
        )

        record = self.store.create_one("room", {"number": "901", "id": 5, "extra": 1})

        self.assertEqual(record["id"], 9)
        self.session.request.assert_called_once_with(
            "POST",
            "https://records.example.com/api/room/",
            timeout=5,
            json={"number": "901"},
        )

    def test_update_one_patches_record(self):
        self.session.request.return_value = make_response(
            payload={"id": 4, "status": "completed"}
        )

        record = self.store.update_one("housekeeping", 4, {"status": "completed"})

        self.assertEqual(record["status"], "completed")
        args, kwargs = self.session.request.call_args
        self.assertEqual(args, ("PATCH", "https://records.example.com/api/housekeeping/4/"))

    def test_update_and_delete_missing_raise_not_found(self):
        self.session.request.return_value = make_response(status_code=404)

        with self.assertRaises(NotFoundError):
            self.store.update_one("room", 4, {"status": "occupied"})
        with self.assertRaises(NotFoundError):
            self.store.delete_one("room", 4)

    def test_server_error_becomes_persistence_error(self):
        self.session.request.return_value = make_response(status_code=500)

        with self.assertRaises(PersistenceError):
            self.store.fetch_all("room")

    def test_network_error_becomes_persistence_error(self):
        self.session.request.side_effect = requests.ConnectionError("connection refused")

        with self.assertRaises(PersistenceError) as ctx:
            self.store.delete_one("room", 1)

        self.assertIsInstance(ctx.exception.cause, requests.ConnectionError)

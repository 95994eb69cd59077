from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from housekeeping.models import HousekeepingTask
from housekeeping.tests.helpers import create_room, create_task


def tasks_url():
    return reverse("housekeeping:housekeeping-list")


class HousekeepingApiTests(APITestCase):
    def setUp(self):
        self.room = create_room()
        now = timezone.now()
        self.low = create_task(
            self.room, priority=HousekeepingTask.Priority.LOW, scheduled_time=now
        )
        self.high = create_task(
            self.room,
            priority=HousekeepingTask.Priority.HIGH,
            type=HousekeepingTask.TaskType.MAINTENANCE,
            scheduled_time=now + timedelta(minutes=30),
        )
        self.done = create_task(
            self.room,
            status=HousekeepingTask.TaskStatus.COMPLETED,
            completed_time=now,
            scheduled_time=now - timedelta(days=1),
        )

    def test_list_sorted_by_priority(self):
        res = self.client.get(tasks_url())

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([t["id"] for t in res.data], [self.high.id, self.done.id, self.low.id])

    def test_filter_by_status_and_type(self):
        res = self.client.get(tasks_url(), {"status": "pending", "type": "Maintenance"})

        self.assertEqual([t["id"] for t in res.data], [self.high.id])

    def test_pending(self):
        res = self.client.get(reverse("housekeeping:housekeeping-pending"))

        self.assertEqual([t["id"] for t in res.data], [self.high.id, self.low.id])

    def test_stats(self):
        res = self.client.get(reverse("housekeeping:housekeeping-stats"))

        self.assertEqual(
            res.data["status_counts"],
            {"all": 3, "pending": 2, "in-progress": 0, "completed": 1},
        )
        self.assertEqual(
            res.data["priority_counts"], {"all": 3, "low": 1, "medium": 1, "high": 1}
        )
        self.assertEqual(sorted(res.data["types"]), ["Cleaning", "Maintenance"])

    def test_create_task(self):
        payload = {
            "room_id": self.room.id,
            "type": "Turnover",
            "priority": "high",
            "assigned_to": "Lisa Chen",
            "scheduled_time": (timezone.now() + timedelta(hours=3)).isoformat(),
        }

        res = self.client.post(tasks_url(), payload, format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["status"], "pending")
        self.assertIsNone(res.data["completed_time"])

    def test_create_task_validation(self):
        payload = {
            "room_id": 9999,
            "assigned_to": "",
            "scheduled_time": (timezone.now() - timedelta(hours=1)).isoformat(),
        }

        res = self.client.post(tasks_url(), payload, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["type"][0], "Task type is required")
        self.assertEqual(res.data["assigned_to"][0], "Staff assignment is required")
        self.assertEqual(res.data["scheduled_time"][0], "Scheduled time cannot be in the past")
        self.assertIn("room_id", res.data)

    def test_start_then_complete(self):
        res = self.client.post(reverse("housekeeping:housekeeping-start", args=[self.low.id]))
        self.assertEqual(res.data["status"], "in-progress")

        res = self.client.post(reverse("housekeeping:housekeeping-complete", args=[self.low.id]))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "completed")
        self.assertIsNotNone(res.data["completed_time"])

    def test_complete_pending_task_is_400(self):
        res = self.client.post(reverse("housekeeping:housekeeping-complete", args=[self.high.id]))

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["detail"], "Only tasks in progress can be completed.")

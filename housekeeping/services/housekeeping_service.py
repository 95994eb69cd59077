from datetime import timedelta

from django.utils import timezone

from frontdesk.coercion import to_datetime, to_int, to_text
from frontdesk.services import EntityService
from housekeeping.models import HousekeepingTask
from housekeeping.status import TASK_TRANSITIONS

TaskStatus = HousekeepingTask.TaskStatus


class HousekeepingService(EntityService):
    """
    Housekeeping task board.

    A task carries a completed_time exactly when its status is completed:
    entering completed stamps the transition time, and any other status
    clears it.
    """

    collection = "housekeeping"
    label = "Task"

    readers = {
        "room_id": to_int,
        "type": to_text,
        "priority": to_text,
        "assigned_to": to_text,
        "status": to_text,
        "scheduled_time": to_datetime,
        "completed_time": to_datetime,
    }
    writers = readers

    def defaults(self) -> dict:
        return {
            "priority": HousekeepingTask.Priority.MEDIUM.value,
            "status": TaskStatus.PENDING.value,
            "scheduled_time": timezone.now() + timedelta(hours=1),
        }

    def prepare_create(self, fields: dict) -> dict:
        if fields["status"] == TaskStatus.COMPLETED:
            fields["completed_time"] = fields.get("completed_time") or timezone.now()
        else:
            fields["completed_time"] = None
        return fields

    def prepare_update(self, current: dict, fields: dict) -> dict:
        target = fields.get("status")
        if target is not None and target != current["status"]:
            TASK_TRANSITIONS.check(current["status"], target)
            if target == TaskStatus.COMPLETED:
                fields["completed_time"] = timezone.now()
            else:
                fields["completed_time"] = None
            return fields

        if current["status"] == TaskStatus.COMPLETED:
            if "completed_time" in fields and fields["completed_time"] is None:
                del fields["completed_time"]
        elif "completed_time" in fields:
            fields["completed_time"] = None
        return fields

    def get_today_tasks(self) -> list:
        today = timezone.localdate()
        return self.query(
            lambda task: timezone.localtime(task["scheduled_time"]).date() == today
        )

    def get_pending_tasks(self) -> list:
        return self.query(lambda task: task["status"] == TaskStatus.PENDING)

    def start(self, task_id: int):
        return self.apply(
            task_id,
            lambda task: {
                "status": TASK_TRANSITIONS.check(task["status"], TaskStatus.IN_PROGRESS.value)
            },
            success=lambda task: "Task started",
        )

    def complete(self, task_id: int):
        return self.apply(
            task_id,
            lambda task: {
                "status": TASK_TRANSITIONS.check(task["status"], TaskStatus.COMPLETED.value),
                "completed_time": timezone.now(),
            },
            success=lambda task: "Task completed successfully",
        )

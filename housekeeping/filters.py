from typing import Iterable

from housekeeping.models import HousekeepingTask

Priority = HousekeepingTask.Priority

PRIORITY_RANK = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}


def sort_tasks(items: Iterable[dict]) -> list:
    """High priority first, then earliest scheduled time."""
    return sorted(
        items,
        key=lambda task: (-PRIORITY_RANK.get(task["priority"], 0), task["scheduled_time"]),
    )


def urgent_tasks(items: Iterable[dict]) -> list:
    return [
        task
        for task in items
        if task["priority"] == Priority.HIGH
        and task["status"] != HousekeepingTask.TaskStatus.COMPLETED
    ]

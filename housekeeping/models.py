from django.db import models
from django.db.models import ForeignKey, Q

from room.models import Room


class HousekeepingTask(models.Model):
    class TaskType(models.TextChoices):
        CLEANING = "Cleaning"
        DEEP_CLEANING = "Deep Cleaning"
        MAINTENANCE = "Maintenance"
        INSPECTION = "Inspection"
        TURNOVER = "Turnover"
        LAUNDRY = "Laundry"
        RESTOCKING = "Restocking"
        REPAIR = "Repair"

    class Priority(models.TextChoices):
        LOW = "low", "Low"
        MEDIUM = "medium", "Medium"
        HIGH = "high", "High"

    class TaskStatus(models.TextChoices):
        PENDING = "pending", "Pending"
        IN_PROGRESS = "in-progress", "In progress"
        COMPLETED = "completed", "Completed"

    room = ForeignKey(Room, on_delete=models.CASCADE, related_name="tasks")
    type = models.CharField(choices=TaskType, max_length=20)
    priority = models.CharField(choices=Priority, max_length=10, default=Priority.MEDIUM)
    assigned_to = models.CharField(max_length=255)
    status = models.CharField(choices=TaskStatus, max_length=20, default=TaskStatus.PENDING)
    scheduled_time = models.DateTimeField()
    completed_time = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(status="completed", completed_time__isnull=False)
                    | (~Q(status="completed") & Q(completed_time__isnull=True))
                ),
                name="completed_time_iff_completed",
            ),
        ]

    def __str__(self):
        return f"{self.type} - Room {self.room_id}"

from django.utils import timezone
from rest_framework import serializers

from housekeeping.models import HousekeepingTask


class HousekeepingTaskSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    room_id = serializers.IntegerField()
    type = serializers.CharField()
    priority = serializers.CharField()
    assigned_to = serializers.CharField()
    status = serializers.CharField()
    scheduled_time = serializers.DateTimeField()
    completed_time = serializers.DateTimeField(allow_null=True)


class HousekeepingTaskCreateSerializer(serializers.Serializer):
    """Task form validation. ``rooms`` in the context lists the rooms a task may target."""

    room_id = serializers.IntegerField(
        error_messages={
            "required": "Room selection is required",
            "null": "Room selection is required",
            "invalid": "Room selection is required",
        },
    )
    type = serializers.ChoiceField(
        choices=HousekeepingTask.TaskType.choices,
        error_messages={
            "required": "Task type is required",
            "invalid_choice": "Task type is required",
        },
    )
    priority = serializers.ChoiceField(
        choices=HousekeepingTask.Priority.choices, required=False
    )
    assigned_to = serializers.CharField(
        max_length=255,
        error_messages={
            "required": "Staff assignment is required",
            "blank": "Staff assignment is required",
        },
    )
    status = serializers.ChoiceField(
        choices=HousekeepingTask.TaskStatus.choices, required=False
    )
    scheduled_time = serializers.DateTimeField(
        error_messages={
            "required": "Scheduled time is required",
            "null": "Scheduled time is required",
        },
    )

    def validate_scheduled_time(self, value):
        if self.context.get("instance") is None and value < timezone.now():
            raise serializers.ValidationError("Scheduled time cannot be in the past")
        return value

    def validate_room_id(self, value):
        instance = self.context.get("instance") or {}
        if value == instance.get("room_id"):
            return value
        if not any(room["id"] == value for room in self.context.get("rooms", [])):
            raise serializers.ValidationError("Selected room does not exist")
        return value

from decimal import Decimal

from rest_framework import serializers

from frontdesk.coercion import split_list
from room.models import Room


class AmenitiesField(serializers.Field):
    """Accepts a list or comma-joined text; always renders a list."""

    default_error_messages = {"invalid": "Amenities must be a list of names."}

    def to_internal_value(self, data):
        if not isinstance(data, (list, tuple, str)):
            self.fail("invalid")
        return split_list(data)

    def to_representation(self, value):
        return split_list(value)


class RoomSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    number = serializers.CharField()
    type = serializers.CharField()
    status = serializers.CharField()
    cleaning_status = serializers.CharField()
    floor = serializers.IntegerField()
    amenities = AmenitiesField()
    rate = serializers.DecimalField(max_digits=10, decimal_places=2)


class RoomCreateSerializer(serializers.Serializer):
    """Room form validation. ``rooms`` in the context enables the unique number check."""

    number = serializers.CharField(
        max_length=255,
        error_messages={
            "required": "Room number is required",
            "blank": "Room number is required",
        },
    )
    type = serializers.ChoiceField(
        choices=Room.RoomType.choices,
        error_messages={
            "required": "Room type is required",
            "invalid_choice": "Room type is required",
        },
    )
    status = serializers.ChoiceField(choices=Room.RoomStatus.choices, required=False)
    cleaning_status = serializers.ChoiceField(
        choices=Room.CleaningStatus.choices, required=False
    )
    floor = serializers.IntegerField(
        min_value=1,
        error_messages={
            "required": "Floor is required",
            "invalid": "Floor must be a positive number",
            "min_value": "Floor must be a positive number",
        },
    )
    amenities = AmenitiesField(required=False)
    rate = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0"),
        error_messages={
            "required": "Rate is required",
            "invalid": "Rate must be a valid positive number",
            "min_value": "Rate must be a valid positive number",
        },
    )

    def validate_number(self, value):
        number = value.strip()
        if not number:
            raise serializers.ValidationError("Room number is required")

        instance = self.context.get("instance")
        for room in self.context.get("rooms", []):
            if room["number"] == number and (instance is None or room["id"] != instance["id"]):
                raise serializers.ValidationError(f"Room number '{number}' already exists.")
        return number

from decimal import Decimal

from django.utils import timezone
from rest_framework import serializers

from reservation.models import Reservation
from reservation.services.pricing import calculate_nights, calculate_total


class ReservationSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    guest_name = serializers.CharField()
    guest_email = serializers.EmailField()
    guest_phone = serializers.CharField()
    room_id = serializers.IntegerField()
    check_in = serializers.DateField()
    check_out = serializers.DateField()
    status = serializers.CharField()
    total_amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    notes = serializers.CharField(allow_blank=True)
    total_nights = serializers.SerializerMethodField()

    def get_total_nights(self, obj):
        return calculate_nights(obj["check_in"], obj["check_out"])


class ReservationCreateSerializer(serializers.Serializer):
    """
    Reservation form validation.

    Context:
    - ``rooms``: rooms that can be booked (status available)
    - ``instance``: the stored reservation when validating a partial update
    """

    guest_name = serializers.CharField(
        max_length=255,
        error_messages={
            "required": "Guest name is required",
            "blank": "Guest name is required",
        },
    )
    guest_email = serializers.EmailField(
        error_messages={
            "required": "Email is required",
            "blank": "Email is required",
            "invalid": "Email is invalid",
        },
    )
    guest_phone = serializers.CharField(
        max_length=50,
        error_messages={
            "required": "Phone number is required",
            "blank": "Phone number is required",
        },
    )
    room_id = serializers.IntegerField(
        error_messages={
            "required": "Room selection is required",
            "null": "Room selection is required",
            "invalid": "Room selection is required",
        },
    )
    check_in = serializers.DateField(
        error_messages={
            "required": "Check-in date is required",
            "null": "Check-in date is required",
        },
    )
    check_out = serializers.DateField(
        error_messages={
            "required": "Check-out date is required",
            "null": "Check-out date is required",
        },
    )
    status = serializers.ChoiceField(
        choices=Reservation.ReservationStatus.choices, required=False
    )
    total_amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0"),
        required=False,
        allow_null=True,
        error_messages={
            "invalid": "Total amount must be a valid positive number",
            "min_value": "Total amount must be a valid positive number",
        },
    )
    notes = serializers.CharField(required=False, allow_blank=True)

    def validate_check_in(self, value):
        if self.context.get("instance") is None and value < timezone.localdate():
            raise serializers.ValidationError("Check-in date cannot be in the past")
        return value

    def find_room(self, room_id):
        for room in self.context.get("rooms", []):
            if room["id"] == room_id:
                return room
        return None

    def validate(self, attrs):
        instance = self.context.get("instance") or {}
        check_in = attrs.get("check_in", instance.get("check_in"))
        check_out = attrs.get("check_out", instance.get("check_out"))

        if check_in and check_out and check_out <= check_in:
            raise serializers.ValidationError(
                {"check_out": "Check-out date must be after check-in date"}
            )

        room = None
        room_id = attrs.get("room_id")
        if room_id is not None and room_id != instance.get("room_id"):
            room = self.find_room(room_id)
            if room is None:
                raise serializers.ValidationError(
                    {"room_id": "Selected room is not available"}
                )

        if not instance:
            if attrs.get("total_amount") is None:
                attrs["total_amount"] = calculate_total(room["rate"], check_in, check_out)
            if attrs["total_amount"] is None:
                raise serializers.ValidationError(
                    {"total_amount": "Total amount is required"}
                )
        elif "total_amount" in attrs and attrs["total_amount"] is None:
            raise serializers.ValidationError(
                {"total_amount": "Total amount is required"}
            )

        return attrs


class ReservationQuoteSerializer(serializers.Serializer):
    room_id = serializers.IntegerField()
    check_in = serializers.DateField()
    check_out = serializers.DateField()

    def validate(self, attrs):
        if attrs["check_out"] <= attrs["check_in"]:
            raise serializers.ValidationError(
                {"check_out": "Check-out date must be after check-in date"}
            )
        return attrs

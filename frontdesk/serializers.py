from rest_framework import serializers

from housekeeping.serializers import HousekeepingTaskSerializer
from reservation.serializers import ReservationSerializer


class RoomCountsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    occupied = serializers.IntegerField()
    available = serializers.IntegerField()
    maintenance = serializers.IntegerField()


class ActivitySerializer(serializers.Serializer):
    id = serializers.CharField()
    type = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    timestamp = serializers.DateTimeField()


class DashboardSerializer(serializers.Serializer):
    rooms = RoomCountsSerializer()
    occupancy_rate = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=12, decimal_places=2)
    arrivals = ReservationSerializer(many=True)
    departures = ReservationSerializer(many=True)
    tasks = HousekeepingTaskSerializer(many=True)
    urgent_tasks = HousekeepingTaskSerializer(many=True)
    activity = ActivitySerializer(many=True)


class PropertySettingsSerializer(serializers.Serializer):
    name = serializers.CharField()
    address = serializers.CharField()
    phone = serializers.CharField()
    email = serializers.EmailField()
    check_in_time = serializers.CharField()
    check_out_time = serializers.CharField()
    currency = serializers.CharField()
    tax_rate = serializers.DecimalField(max_digits=5, decimal_places=2)

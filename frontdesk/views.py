from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from frontdesk.dashboard import summarize
from frontdesk.serializers import DashboardSerializer, PropertySettingsSerializer
from housekeeping.filters import sort_tasks
from housekeeping.services.housekeeping_service import HousekeepingService
from notifications.notifier import Notifier
from reservation.services.reservation_service import ReservationService
from room.services.room_service import RoomService
from store import get_store


class DashboardView(APIView):
    @extend_schema(
        summary="Front desk dashboard",
        description=(
            "Room counts, occupancy rate, revenue from checked-in and "
            "checked-out stays, today's arrivals, departures and tasks, "
            "urgent tasks and today's activity feed."
        ),
        responses={200: DashboardSerializer},
    )
    def get(self, request):
        notifier = Notifier()
        store = get_store()
        rooms = RoomService(store, notifier)
        reservations = ReservationService(store, notifier)
        tasks = HousekeepingService(store, notifier)

        summary = summarize(
            rooms=rooms.get_all(),
            reservations=reservations.get_all(),
            arrivals=reservations.get_today_arrivals(),
            departures=reservations.get_today_departures(),
            tasks=sort_tasks(tasks.get_today_tasks()),
        )
        if notifier.last_error is not None:
            return Response(
                {"detail": "Failed to load dashboard data"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response(DashboardSerializer(summary).data)


class PropertySettingsView(APIView):
    @extend_schema(
        summary="Property settings",
        responses={200: PropertySettingsSerializer},
    )
    def get(self, request):
        return Response(PropertySettingsSerializer(settings.FRONTDESK_PROPERTY).data)

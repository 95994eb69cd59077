from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from frontdesk.derivation import ALL, count_by, filter_by
from frontdesk.viewsets import EntityViewSet
from reservation.filters import (
    WINDOWS,
    filter_by_window,
    search_reservations,
    sort_reservations,
)
from reservation.models import Reservation
from reservation.serializers import (
    ReservationCreateSerializer,
    ReservationQuoteSerializer,
    ReservationSerializer,
)
from reservation.services.reservation_service import ReservationService
from room.services.room_service import RoomService


class ReservationViewSet(EntityViewSet):
    serializer_class = ReservationSerializer
    create_serializer_class = ReservationCreateSerializer
    service_class = ReservationService

    def get_create_context(self):
        context = super().get_create_context()
        context["rooms"] = RoomService(self.service.store, self.notifier).get_available_rooms()
        return context

    def filter_entities(self, entities):
        params = self.request.query_params
        window = params.get("window", ALL)
        if window not in WINDOWS:
            window = ALL

        filtered = search_reservations(entities, params.get("search", ""))
        filtered = filter_by(filtered, "status", params.get("status", ALL))
        filtered = filter_by_window(filtered, window)
        return sort_reservations(filtered)

    @extend_schema(
        summary="List reservations",
        description=(
            "Reservations sorted by check-in date, most recent first.\n\n"
            "- `search` matches guest name, email or room id.\n"
            "- `status` narrows to one reservation status.\n"
            "- `window` is one of all, today, current, upcoming."
        ),
        parameters=[
            OpenApiParameter(
                name="search",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Guest name, email or room id",
                required=False,
            ),
            OpenApiParameter(
                name="status",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Reservation status (confirmed, checked-in, checked-out, cancelled)",
                required=False,
            ),
            OpenApiParameter(
                name="window",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Date window (all, today, current, upcoming)",
                required=False,
            ),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @action(detail=False, methods=["get"])
    def arrivals(self, request):
        return self.list_response(self.service.get_today_arrivals())

    @action(detail=False, methods=["get"])
    def departures(self, request):
        return self.list_response(self.service.get_today_departures())

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    @action(detail=False, methods=["get"])
    def stats(self, request):
        reservations = self.service.get_all()
        if self.notifier.last_error is not None:
            return self.failure_response()
        return Response(
            count_by(reservations, "status", Reservation.ReservationStatus.values)
        )

    @extend_schema(
        request=ReservationQuoteSerializer,
        responses={200: OpenApiTypes.OBJECT},
        description="Price a stay: nights times the room's nightly rate.",
    )
    @action(detail=False, methods=["post"])
    def quote(self, request):
        serializer = ReservationQuoteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        total = self.service.quote(data["room_id"], data["check_in"], data["check_out"])
        if total is None:
            return self.failure_response()
        return Response(
            {
                "room_id": data["room_id"],
                "nights": (data["check_out"] - data["check_in"]).days,
                "total_amount": f"{total:.2f}",
            }
        )

    @extend_schema(request=None, responses={200: ReservationSerializer})
    @action(detail=True, methods=["post"], url_path="check-in")
    def check_in(self, request, pk=None):
        reservation = self.service.check_in(int(pk))
        return self.entity_response(reservation, status.HTTP_200_OK)

    @extend_schema(request=None, responses={200: ReservationSerializer})
    @action(detail=True, methods=["post"], url_path="check-out")
    def check_out(self, request, pk=None):
        reservation = self.service.check_out(int(pk))
        return self.entity_response(reservation, status.HTTP_200_OK)

    @extend_schema(request=None, responses={200: ReservationSerializer})
    @action(detail=True, methods=["post"], url_path="cancel")
    def cancel(self, request, pk=None):
        reservation = self.service.cancel(int(pk))
        return self.entity_response(reservation, status.HTTP_200_OK)

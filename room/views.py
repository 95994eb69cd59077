from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from frontdesk.coercion import to_int
from frontdesk.derivation import ALL, count_by, filter_many
from frontdesk.viewsets import EntityViewSet
from room.models import Room
from room.serializers import RoomCreateSerializer, RoomSerializer
from room.services.room_service import RoomService


class RoomViewSet(EntityViewSet):
    serializer_class = RoomSerializer
    create_serializer_class = RoomCreateSerializer
    service_class = RoomService

    def get_create_context(self):
        context = super().get_create_context()
        context["rooms"] = self.service.get_all()
        return context

    def filter_entities(self, entities):
        params = self.request.query_params
        floor = params.get("floor", ALL)
        if floor != ALL:
            try:
                floor = to_int(floor)
            except ValueError:
                return []
            if floor is None:
                return []

        return filter_many(
            entities,
            {
                "status": params.get("status", ALL),
                "type": params.get("type", ALL),
                "cleaning_status": params.get("cleaning_status", ALL),
                "floor": floor,
            },
        )

    @extend_schema(
        summary="List rooms",
        description=(
            "Room status board.\n\n"
            "Filters combine with AND; `all` (the default) disables a filter."
        ),
        parameters=[
            OpenApiParameter(
                name="status",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Room status (available, occupied, maintenance, checkout, reserved)",
                required=False,
            ),
            OpenApiParameter(
                name="floor",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Floor number",
                required=False,
            ),
            OpenApiParameter(
                name="type",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Room type (Single, Double, Suite, ...)",
                required=False,
            ),
            OpenApiParameter(
                name="cleaning_status",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Cleaning status",
                required=False,
            ),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @action(detail=False, methods=["get"])
    def available(self, request):
        return self.list_response(self.service.get_available_rooms())

    @extend_schema(
        responses={200: OpenApiTypes.OBJECT},
        description="Room count per status, plus `all`.",
    )
    @action(detail=False, methods=["get"])
    def stats(self, request):
        rooms = self.service.get_all()
        if self.notifier.last_error is not None:
            return self.failure_response()
        return Response(count_by(rooms, "status", Room.RoomStatus.values))

    @extend_schema(request=None, responses={200: RoomSerializer})
    @action(detail=True, methods=["post"], url_path="advance-status")
    def advance_status(self, request, pk=None):
        room = self.service.advance_status(int(pk))
        if room is None:
            return self.failure_response()
        return Response(RoomSerializer(room).data, status=status.HTTP_200_OK)

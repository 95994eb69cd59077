from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.decorators import action
from rest_framework.response import Response

from frontdesk.derivation import ALL, count_by, distinct_values, filter_many
from frontdesk.viewsets import EntityViewSet
from housekeeping.filters import sort_tasks
from housekeeping.models import HousekeepingTask
from housekeeping.serializers import (
    HousekeepingTaskCreateSerializer,
    HousekeepingTaskSerializer,
)
from housekeeping.services.housekeeping_service import HousekeepingService
from room.services.room_service import RoomService


class HousekeepingTaskViewSet(EntityViewSet):
    serializer_class = HousekeepingTaskSerializer
    create_serializer_class = HousekeepingTaskCreateSerializer
    service_class = HousekeepingService

    def get_create_context(self):
        context = super().get_create_context()
        context["rooms"] = RoomService(self.service.store, self.notifier).get_all()
        return context

    def filter_entities(self, entities):
        params = self.request.query_params
        filtered = filter_many(
            entities,
            {
                "status": params.get("status", ALL),
                "priority": params.get("priority", ALL),
                "type": params.get("type", ALL),
            },
        )
        return sort_tasks(filtered)

    @extend_schema(
        summary="List housekeeping tasks",
        description="Tasks sorted by priority (high first), then by scheduled time.",
        parameters=[
            OpenApiParameter(
                name="status",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Task status (pending, in-progress, completed)",
                required=False,
            ),
            OpenApiParameter(
                name="priority",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Priority (low, medium, high)",
                required=False,
            ),
            OpenApiParameter(
                name="type",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Task type",
                required=False,
            ),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @action(detail=False, methods=["get"])
    def today(self, request):
        return self.list_response(sort_tasks(self.service.get_today_tasks()))

    @action(detail=False, methods=["get"])
    def pending(self, request):
        return self.list_response(sort_tasks(self.service.get_pending_tasks()))

    @extend_schema(
        responses={200: OpenApiTypes.OBJECT},
        description="Task counts per status and per priority, and the task types in use.",
    )
    @action(detail=False, methods=["get"])
    def stats(self, request):
        tasks = self.service.get_all()
        if self.notifier.last_error is not None:
            return self.failure_response()
        return Response(
            {
                "status_counts": count_by(tasks, "status", HousekeepingTask.TaskStatus.values),
                "priority_counts": count_by(tasks, "priority", HousekeepingTask.Priority.values),
                "types": distinct_values(tasks, "type"),
            }
        )

    @extend_schema(request=None, responses={200: HousekeepingTaskSerializer})
    @action(detail=True, methods=["post"])
    def start(self, request, pk=None):
        return self.entity_response(self.service.start(int(pk)))

    @extend_schema(request=None, responses={200: HousekeepingTaskSerializer})
    @action(detail=True, methods=["post"])
    def complete(self, request, pk=None):
        return self.entity_response(self.service.complete(int(pk)))

from rest_framework import status, viewsets
from rest_framework.response import Response

from frontdesk.exceptions import InvalidTransition
from notifications.notifier import Notifier
from store import get_store
from store.exceptions import NotFoundError


class EntityViewSet(viewsets.GenericViewSet):
    """
    CRUD endpoints over an EntityService.

    A fresh service and notifier are built per request. Lists come back
    from the service as plain dicts and are filtered in memory by
    ``filter_entities``.
    """

    service_class = None
    create_serializer_class = None
    lookup_value_regex = r"\d+"

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.notifier = Notifier()
        self.service = self.service_class(get_store(), self.notifier)

    def get_serializer_class(self):
        if self.action in ("create", "partial_update"):
            return self.create_serializer_class
        return self.serializer_class

    def handle_exception(self, exc):
        if isinstance(exc, InvalidTransition):
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return super().handle_exception(exc)

    def failure_response(self):
        notice = self.notifier.last_error
        if notice is None:
            return Response(
                {"detail": f"{self.service.label} not found"},
                status=status.HTTP_404_NOT_FOUND,
            )
        if isinstance(notice.error, NotFoundError):
            return Response({"detail": notice.message}, status=status.HTTP_404_NOT_FOUND)
        return Response(
            {"detail": notice.message}, status=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    def entity_response(self, entity, status_code=status.HTTP_200_OK):
        if entity is None:
            return self.failure_response()
        return Response(self.serializer_class(entity).data, status=status_code)

    def list_response(self, entities):
        if self.notifier.last_error is not None:
            return self.failure_response()
        return Response(self.serializer_class(entities, many=True).data)

    def filter_entities(self, entities: list) -> list:
        return entities

    def get_create_context(self) -> dict:
        return self.get_serializer_context()

    def list(self, request, *args, **kwargs):
        entities = self.service.get_all()
        return self.list_response(self.filter_entities(entities))

    def retrieve(self, request, pk=None):
        return self.entity_response(self.service.get_by_id(int(pk)))

    def create(self, request, *args, **kwargs):
        context = self.get_create_context()
        # a failed lookup leaves the validation context incomplete
        if self.notifier.last_error is not None:
            return self.failure_response()

        serializer = self.create_serializer_class(data=request.data, context=context)
        serializer.is_valid(raise_exception=True)

        entity = self.service.create(serializer.validated_data)
        if entity is None:
            return self.failure_response()
        return self.entity_response(entity, status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):
        current = self.service.get_by_id(int(pk))
        if current is None:
            return self.failure_response()

        context = self.get_create_context()
        if self.notifier.last_error is not None:
            return self.failure_response()
        context["instance"] = current
        serializer = self.create_serializer_class(
            data=request.data, context=context, partial=True
        )
        serializer.is_valid(raise_exception=True)

        return self.entity_response(self.service.update(int(pk), serializer.validated_data))

    def destroy(self, request, pk=None):
        if not self.service.delete(int(pk)):
            return self.failure_response()
        return Response(status=status.HTTP_204_NO_CONTENT)

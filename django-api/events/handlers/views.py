"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import DomainError, ErrorCode, EventId
from events.handlers.serializers import (
    EventCreateSerializer,
    EventDetailSerializer,
    EventPatchSerializer,
    EventSummarySerializer,
    ListEventsQuerySerializer,
)
from events.services import EventService
from events.stores.django_store import DjangoEventStore

ERROR_STATUS = {
    ErrorCode.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.DATABASE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: DomainError) -> Response:
    message = error.message
    if error.code is ErrorCode.DATABASE_ERROR:
        message = "Internal error"
    return Response(
        {"code": error.code.value, "message": message},
        status=ERROR_STATUS[error.code],
    )


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except ValueError:
        raise DomainError.invalid_argument("Invalid event ID format") from None


class EventAPIView(APIView):
    """Base view wiring the service and turning domain errors into responses."""

    def get_service(self) -> EventService:
        return EventService(DjangoEventStore())

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            return error_response(exc)
        return super().handle_exception(exc)


class EventListView(EventAPIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        query = ListEventsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        events = self.get_service().list_events(query.to_page(), query.to_sort())
        return Response(EventSummarySerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event_id = self.get_service().create_event(serializer.to_domain())
        return Response({"id": str(event_id)}, status=status.HTTP_201_CREATED)


class EventDetailView(EventAPIView):
    """Handler for GET/PATCH/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = self.get_service().get_event_details(parse_event_id(event_id))
        return Response(EventDetailSerializer(event).data)

    def patch(self, request: Request, event_id: str) -> Response:
        target = parse_event_id(event_id)
        serializer = EventPatchSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        updated_id = self.get_service().update_event(serializer.to_domain(target))
        return Response({"id": str(updated_id)})

    def delete(self, request: Request, event_id: str) -> Response:
        self.get_service().delete_event(parse_event_id(event_id))
        return Response(status=status.HTTP_204_NO_CONTENT)

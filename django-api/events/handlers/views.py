"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.apps import apps
from django.core.cache import cache
from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.utils.text import slugify
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.caching import (
    FEED_CACHE_KEY,
    LIST_CACHE_KEY,
    RAW_LIST_CACHE_KEY,
    cache_timeout,
    detail_cache_key,
)
from events.domain import Event, EventStatus
from events.domain.errors import DomainError, ErrorCode
from events.handlers.renderers import ICalendarRenderer
from events.handlers.serializers import EventInputSerializer, EventSerializer
from events.services.event_service import EventService, parse_status

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STATUS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TIME_RANGE: status.HTTP_400_BAD_REQUEST,
}


def get_event_service() -> EventService:
    return apps.get_app_config("events").event_service


def calendar_response(body: str, filename: str) -> Response:
    response = Response(body)
    response["Content-Disposition"] = f'attachment; filename="{filename}"'
    return response


def calendar_filename(event: Event) -> str:
    return f"{slugify(event.title) or 'event'}.ics"


class EventAPIView(APIView):
    """Base view mapping domain errors to responses."""

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            return Response(
                {"error": {"code": exc.code.value, "message": exc.message}},
                status=_STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
            )
        if isinstance(exc, (APIException, Http404, PermissionDenied)):
            return super().handle_exception(exc)
        logger.exception("Unhandled error in %s", type(self).__name__)
        return Response(
            {"error": {"code": "INTERNAL_ERROR", "message": "Internal Server Error"}},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    def get_visible_event(self, request: Request, event_id: str) -> Event:
        """Drafts, cancellations and archives are only shown to signed-in users."""
        event = get_event_service().get_event(event_id)
        if event.status is not EventStatus.PUBLISHED and not request.user.is_authenticated:
            raise Http404
        return event


class EventListView(EventAPIView):
    """Handler for GET/POST /api/events"""

    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request: Request) -> Response:
        expand = request.query_params.get("expand", "true").lower() != "false"
        key = LIST_CACHE_KEY if expand else RAW_LIST_CACHE_KEY
        payload = cache.get(key)
        if payload is None:
            service = get_event_service()
            events = (
                service.list_public_events_expanded() if expand else service.list_public_events()
            )
            payload = {"events": EventSerializer(events, many=True).data}
            cache.set(key, payload, cache_timeout())
        return Response(payload)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().create_event(
            serializer.validated_data, created_by=str(request.user.pk)
        )
        return Response(
            {"success": True, "event": EventSerializer(event).data},
            status=status.HTTP_201_CREATED,
        )


class AdminEventListView(EventAPIView):
    """Handler for GET /api/events/admin/all"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        service = get_event_service()
        status_filter = request.query_params.get("status")
        if status_filter:
            events = service.list_events_by_status_raw(parse_status(status_filter))
        else:
            events = service.list_all_events()
        return Response({"events": EventSerializer(events, many=True).data})


class EventDetailView(EventAPIView):
    """Handler for GET/PUT/PATCH/DELETE /api/events/{event_id}"""

    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request: Request, event_id: str) -> Response:
        key = detail_cache_key(event_id)
        payload = cache.get(key)
        if payload is not None:
            return Response(payload)

        event = self.get_visible_event(request, event_id)
        payload = {"event": EventSerializer(event).data}
        if event.status is EventStatus.PUBLISHED:
            cache.set(key, payload, cache_timeout())
        return Response(payload)

    def put(self, request: Request, event_id: str) -> Response:
        return self._update(request, event_id)

    def patch(self, request: Request, event_id: str) -> Response:
        return self._update(request, event_id)

    def delete(self, request: Request, event_id: str) -> Response:
        get_event_service().delete_event(event_id)
        return Response({"success": True, "message": "Event deleted successfully"})

    def _update(self, request: Request, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().update_event(event_id, serializer.validated_data)
        return Response({"success": True, "event": EventSerializer(event).data})


class EventDuplicateView(EventAPIView):
    """Handler for POST /api/events/{event_id}/duplicate"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        event = get_event_service().duplicate_event(event_id)
        return Response(
            {"success": True, "event": EventSerializer(event).data},
            status=status.HTTP_201_CREATED,
        )


class EventCalendarView(EventAPIView):
    """Handler for GET /api/events/{event_id}/calendar.ics"""

    renderer_classes = [ICalendarRenderer]

    def get(self, request: Request, event_id: str) -> Response:
        event = self.get_visible_event(request, event_id)
        body = get_event_service().export_event(event_id)
        return calendar_response(body, calendar_filename(event))


class CalendarFeedView(EventAPIView):
    """Handler for GET /api/events/calendar.ics"""

    renderer_classes = [ICalendarRenderer]

    def get(self, request: Request) -> Response:
        body = cache.get(FEED_CACHE_KEY)
        if body is None:
            body = get_event_service().export_feed()
            cache.set(FEED_CACHE_KEY, body, cache_timeout())
        return calendar_response(body, "events.ics")

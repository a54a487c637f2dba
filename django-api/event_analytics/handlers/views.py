"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Resolve the acting user from the request
- Call services for all statistics
- Map domain errors to HTTP responses
- Never contain business logic
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from event_analytics.domain import Actor, owns_event
from event_analytics.domain.errors import DomainError, EventNotFoundError
from event_analytics.handlers.serializers import (
    EventStatsSerializer,
    OwnerAnalyticsSerializer,
    RealTimeStatsSerializer,
)
from event_analytics.services.factory import build_calculator, build_owner_analytics


def actor_for(request: Request) -> Actor | None:
    user = request.user
    if user is None or not user.is_authenticated:
        return None
    return Actor(id=str(user.pk), name=user.get_full_name() or user.get_username())


def error_response(error: DomainError, http_status: int) -> Response:
    return Response({"code": error.code.value, "message": error.message}, status=http_status)


class OverviewStatsView(APIView):
    """Handler for GET /api/analytics/overview"""

    def get(self, request: Request) -> Response:
        stats = build_calculator().calculate_overall_stats(actor_for(request))
        return Response(RealTimeStatsSerializer(stats).data)


class EventStatsView(APIView):
    """Handler for GET /api/analytics/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        calculator = build_calculator()
        event = calculator.store.get_event(event_id)
        # events owned by someone else are reported as missing
        if event is None or not owns_event(actor_for(request), event):
            return error_response(EventNotFoundError(event_id), status.HTTP_404_NOT_FOUND)
        stats = calculator.calculate_event_stats(event_id)
        if stats is None:
            return error_response(EventNotFoundError(event_id), status.HTTP_404_NOT_FOUND)
        return Response(EventStatsSerializer(stats).data)


class OwnerAnalyticsView(APIView):
    """Handler for GET /api/analytics/summary"""

    def get(self, request: Request) -> Response:
        service = build_owner_analytics(actor_for(request))
        return Response(OwnerAnalyticsSerializer(service.refresh_analytics()).data)

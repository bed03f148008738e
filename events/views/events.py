from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticatedOrReadOnly, AllowAny
from rest_framework import status

from core.responses import api_error
from events.serializers import EventSearchSerializer, EventWriteSerializer
from events.services import (
    create_event,
    get_event,
    get_featured_events,
    search_events,
    update_event,
)


class EventListCreateView(APIView):
    """
    GET  /api/events/?q=&status=&format=&prizeMin=&sortBy=date|popular|prize
    POST /api/events/
    """
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request):
        params = EventSearchSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data

        events = search_events(
            query=data.get("q", ""),
            status=data.get("status"),
            event_format=data.get("format"),
            prize_min=data.get("prizeMin"),
            sort_by=data.get("sortBy"),
        )
        return Response(events)

    def post(self, request):
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        event = create_event(request.user, serializer.validated_data)
        return Response(event, status=status.HTTP_201_CREATED)


class FeaturedEventsView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(get_featured_events())


class EventDetailView(APIView):
    """
    GET   /api/events/<slug>/
    PATCH /api/events/<slug>/   (organizer only)
    """
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request, slug):
        event = get_event(slug)
        if event is None:
            return api_error("Event not found", status.HTTP_404_NOT_FOUND)
        return Response(event)

    def patch(self, request, slug):
        event = get_event(slug)
        if event is None:
            return api_error("Event not found", status.HTTP_404_NOT_FOUND)

        serializer = EventWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        updated = update_event(request.user, event["id"], serializer.validated_data)
        return Response(updated)

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from core.responses import api_error
from events.services import (
    get_event,
    get_event_registrations,
    get_user_event_registrations,
    register_for_event,
    unregister_from_event,
)


class RegisterEventView(APIView):
    """
    POST   /api/events/<slug>/register/
    DELETE /api/events/<slug>/register/
    """
    permission_classes = [IsAuthenticated]

    def post(self, request, slug):
        event = get_event(slug)
        if event is None:
            return api_error("Event not found", status.HTTP_404_NOT_FOUND)

        registration = register_for_event(request.user, event["id"])
        return Response(registration, status=status.HTTP_201_CREATED)

    def delete(self, request, slug):
        event = get_event(slug)
        if event is None:
            return api_error("Event not found", status.HTTP_404_NOT_FOUND)

        unregister_from_event(request.user, event["id"])
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventRegistrationsView(APIView):
    """
    GET /api/events/<slug>/registrations/   (organizer only)
    """
    permission_classes = [IsAuthenticated]

    def get(self, request, slug):
        event = get_event(slug)
        if event is None:
            return api_error("Event not found", status.HTTP_404_NOT_FOUND)
        return Response(get_event_registrations(request.user, event["id"]))


class MyRegistrationsView(APIView):
    """
    GET /api/events/me/registrations/  -> list of event ids
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(get_user_event_registrations(request.user))

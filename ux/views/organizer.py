# ux/views/organizer.py

from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from core.responses import ux_response
from ux.services.organizer import get_managed_events


class UXOrganizerEventsSummaryView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return ux_response({"events": get_managed_events(request.user)})

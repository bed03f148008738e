# ux/views/dashboard.py

from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from core.responses import ux_response
from ux.services.dashboard import get_dashboard_summary


class UXDashboardSummaryView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return ux_response(get_dashboard_summary(request.user))

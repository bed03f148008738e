from django.urls import path
from ux.views.dashboard import UXDashboardSummaryView
from ux.views.leaderboards import UXLeaderboardView
from ux.views.organizer import UXOrganizerEventsSummaryView

urlpatterns = [
    path(
        "me/dashboard/",
        UXDashboardSummaryView.as_view(),
        name="ux-dashboard-summary",
    ),
    path(
        "leaderboards/<str:board>/",
        UXLeaderboardView.as_view(),
        name="ux-leaderboard",
    ),
    path(
        "organizer/events/summary/",
        UXOrganizerEventsSummaryView.as_view(),
        name="ux-organizer-events-summary",
    ),
]

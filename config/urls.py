from django.contrib import admin
from django.urls import path, include
from core.views import HealthCheckView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/users/', include('users.urls')),
    path('api/events/', include('events.urls')),
    path('api/teams/<uuid:team_id>/mails/', include('teammail.urls')),
    path('api/teams/', include('teams.urls')),
    path('api/submissions/', include('submissions.urls')),
    path('api/judging/', include('judging.urls')),
    path('api/ux/', include('ux.urls')),
    path("api/health/", HealthCheckView.as_view(), name="health-check"),
]

from django.urls import path
from .views import (
    EventListCreateView,
    FeaturedEventsView,
    EventDetailView,
    RegisterEventView,
    EventRegistrationsView,
    MyRegistrationsView,
)

urlpatterns = [
    path("", EventListCreateView.as_view(), name="event-list"),
    path("featured/", FeaturedEventsView.as_view(), name="event-featured"),
    path("me/registrations/", MyRegistrationsView.as_view(), name="event-my-registrations"),
    path("<slug:slug>/", EventDetailView.as_view(), name="event-detail"),
    path("<slug:slug>/register/", RegisterEventView.as_view(), name="event-register"),
    path("<slug:slug>/registrations/", EventRegistrationsView.as_view(), name="event-registrations"),
]

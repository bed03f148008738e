from .events import EventListCreateView, FeaturedEventsView, EventDetailView
from .registrations import (
    RegisterEventView,
    EventRegistrationsView,
    MyRegistrationsView,
)

# events/models.py
import uuid

from django.conf import settings
from django.db import models


class Event(models.Model):
    STATUS_UPCOMING = "upcoming"
    STATUS_REGISTRATION_OPEN = "registration_open"
    STATUS_ACTIVE = "active"
    STATUS_COMPLETED = "completed"

    STATUS_CHOICES = [
        (STATUS_UPCOMING, "Upcoming"),
        (STATUS_REGISTRATION_OPEN, "Registration open"),
        (STATUS_ACTIVE, "Active"),
        (STATUS_COMPLETED, "Completed"),
    ]

    FORMAT_ONLINE = "online"
    FORMAT_IN_PERSON = "in-person"
    FORMAT_HYBRID = "hybrid"

    FORMAT_CHOICES = [
        (FORMAT_ONLINE, "Online"),
        (FORMAT_IN_PERSON, "In person"),
        (FORMAT_HYBRID, "Hybrid"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    slug = models.SlugField(max_length=255, unique=True)
    title = models.CharField(max_length=255)
    tagline = models.CharField(max_length=255, blank=True, null=True)
    description = models.TextField(blank=True, default="")
    long_description = models.TextField(blank=True, null=True)

    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    registration_open = models.DateTimeField(blank=True, null=True)
    registration_close = models.DateTimeField(blank=True, null=True)
    submission_open = models.DateTimeField(blank=True, null=True)
    submission_close = models.DateTimeField(blank=True, null=True)

    status = models.CharField(max_length=32, choices=STATUS_CHOICES, default=STATUS_UPCOMING)
    format = models.CharField(max_length=32, choices=FORMAT_CHOICES, default=FORMAT_ONLINE)
    location = models.CharField(max_length=255, blank=True, default="")
    prize_pool = models.PositiveIntegerField(default=0)
    max_team_size = models.PositiveIntegerField(default=4)

    # Cached; changed only by the participant-count procedures in events.services
    participant_count = models.PositiveIntegerField(default=0)

    organizer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="organized_events",
    )

    # Presentation blocks
    tracks = models.JSONField(default=list, blank=True)
    tags = models.JSONField(default=list, blank=True)
    judges = models.JSONField(default=list, blank=True)
    sponsors = models.JSONField(default=list, blank=True)
    socials = models.JSONField(blank=True, null=True)
    links = models.JSONField(blank=True, null=True)
    hero = models.JSONField(blank=True, null=True)
    criteria = models.JSONField(blank=True, null=True, help_text="[{name, percentage, description}]")
    why_join = models.JSONField(blank=True, null=True)
    gallery = models.JSONField(blank=True, null=True)
    eligibility = models.JSONField(blank=True, null=True)
    community = models.JSONField(blank=True, null=True)
    contact = models.JSONField(blank=True, null=True)
    prizes = models.JSONField(default=list, blank=True)
    timeline = models.JSONField(blank=True, null=True)
    rules = models.JSONField(blank=True, null=True)
    faqs = models.JSONField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "events"
        indexes = [
            models.Index(fields=["organizer", "start_date"], name="event_org_start_idx"),
            models.Index(fields=["status", "start_date"], name="event_status_start_idx"),
        ]

    def __str__(self):
        return self.title


class EventRegistration(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="registrations")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="event_registrations",
    )
    registered_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "event_registrations"
        constraints = [
            models.UniqueConstraint(fields=["event", "user"], name="unique_event_registration"),
        ]

    def __str__(self):
        return f"{self.user} -> {self.event}"

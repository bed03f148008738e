# submissions/models.py
import uuid

from django.conf import settings
from django.db import models


class Submission(models.Model):
    STATUS_DRAFT = "draft"
    STATUS_SUBMITTED = "submitted"
    STATUS_JUDGING = "judging"
    STATUS_JUDGED = "judged"

    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_SUBMITTED, "Submitted"),
        (STATUS_JUDGING, "Judging"),
        (STATUS_JUDGED, "Judged"),
    ]

    # Visible in the public gallery
    PUBLIC_STATUSES = (STATUS_SUBMITTED, STATUS_JUDGING, STATUS_JUDGED)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    tagline = models.CharField(max_length=255, blank=True, null=True)
    description = models.TextField(blank=True, default="")
    long_description = models.TextField(blank=True, null=True)

    event = models.ForeignKey("events.Event", on_delete=models.CASCADE, related_name="submissions")
    team = models.ForeignKey(
        "teams.Team",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="submissions",
    )
    submitted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="submissions",
    )

    track = models.CharField(max_length=100, blank=True, null=True)
    tags = models.JSONField(default=list, blank=True)
    tech_stack = models.JSONField(default=list, blank=True)
    demo_url = models.URLField(max_length=1024, blank=True, null=True)
    github_url = models.URLField(max_length=1024, blank=True, null=True)
    slides_url = models.URLField(max_length=1024, blank=True, null=True)
    video_url = models.URLField(max_length=1024, blank=True, null=True)
    images = models.JSONField(default=list, blank=True)
    features = models.JSONField(default=list, blank=True)

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    average_score = models.FloatField(blank=True, null=True)
    awards = models.JSONField(blank=True, null=True)
    submitted_at = models.DateTimeField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "submissions"
        indexes = [
            models.Index(fields=["event", "status"], name="submission_event_status_idx"),
        ]

    def __str__(self):
        return self.title

# judging/models.py
import uuid

from django.conf import settings
from django.db import models


class Judge(models.Model):
    """Judge details layered over a profile; shares the profile's id."""
    AVAILABILITY_CHOICES = [
        ("Available", "Available"),
        ("Limited", "Limited"),
        ("Unavailable", "Unavailable"),
    ]

    profile = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        db_column="id",
        related_name="judge",
    )
    title = models.CharField(max_length=255, blank=True, default="")
    company = models.CharField(max_length=255, blank=True, default="")
    linkedin = models.CharField(max_length=255, blank=True, null=True)
    twitter = models.CharField(max_length=255, blank=True, null=True)
    website = models.CharField(max_length=255, blank=True, null=True)
    events_judged = models.PositiveIntegerField(default=0)
    rating = models.FloatField(default=0)
    quote = models.TextField(blank=True, null=True)
    availability = models.CharField(max_length=20, choices=AVAILABILITY_CHOICES, default="Available")
    timezone = models.CharField(max_length=64, blank=True, null=True)

    class Meta:
        db_table = "judges"

    def __str__(self):
        return f"Judge {self.profile}"


class EventJudge(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey("events.Event", on_delete=models.CASCADE, related_name="judge_assignments")
    judge = models.ForeignKey(Judge, on_delete=models.CASCADE, related_name="assignments")
    assigned_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "event_judges"
        constraints = [
            models.UniqueConstraint(fields=["event", "judge"], name="unique_event_judge"),
        ]

    def __str__(self):
        return f"{self.judge} @ {self.event}"


class Scorecard(models.Model):
    STATUS_DRAFT = "draft"
    STATUS_SUBMITTED = "submitted"

    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_SUBMITTED, "Submitted"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    submission = models.ForeignKey("submissions.Submission", on_delete=models.CASCADE, related_name="scorecards")
    judge = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="scorecards",
    )
    event = models.ForeignKey("events.Event", on_delete=models.CASCADE, related_name="scorecards")
    scores = models.JSONField(default=dict, blank=True, help_text="{criterion name: score}")
    total_score = models.FloatField(blank=True, null=True)
    feedback = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    time_spent = models.PositiveIntegerField(blank=True, null=True, help_text="Seconds")
    submitted_at = models.DateTimeField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "scorecards"
        constraints = [
            models.UniqueConstraint(fields=["submission", "judge"], name="unique_scorecard_per_judge"),
        ]

    def __str__(self):
        return f"{self.judge} -> {self.submission} ({self.status})"

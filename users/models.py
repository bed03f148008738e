# users/models.py
import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils import timezone


class User(AbstractUser):
    """
    Platform profile.

    The primary key is the Supabase auth user id, so a verified token maps
    straight onto this row (see core.supabase_auth).
    """
    ROLE_PARTICIPANT = "participant"
    ROLE_ORGANIZER = "organizer"
    ROLE_JUDGE = "judge"

    ROLE_CHOICES = (
        (ROLE_PARTICIPANT, 'Participant'),
        (ROLE_ORGANIZER, 'Organizer'),
        (ROLE_JUDGE, 'Judge'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    role = models.CharField(
        max_length=30,
        choices=ROLE_CHOICES,
        default=ROLE_PARTICIPANT
    )

    full_name = models.CharField(max_length=255, blank=True, default="")
    avatar_url = models.CharField(max_length=1024, blank=True, null=True)
    headline = models.CharField(max_length=255, blank=True, null=True)
    bio = models.TextField(blank=True, null=True)
    phone = models.CharField(max_length=20, blank=True, null=True)
    location = models.CharField(max_length=255, blank=True, null=True)

    # Technical Profile
    skills = models.JSONField(default=list, blank=True, help_text="List of technical skills")
    preferred_roles = models.JSONField(
        default=list,
        blank=True,
        help_text="Roles the user wants to fill on a team (used by team matching)",
    )
    expertise = models.JSONField(default=list, blank=True)
    interests = models.JSONField(default=list, blank=True)
    badges = models.JSONField(default=list, blank=True)

    # Portfolio & Links
    github = models.CharField(max_length=255, blank=True, null=True)
    linkedin = models.CharField(max_length=255, blank=True, null=True)
    twitter = models.CharField(max_length=255, blank=True, null=True)
    website = models.CharField(max_length=255, blank=True, null=True)

    join_date = models.DateTimeField(default=timezone.now)

    # Aggregate stats, maintained by results and organizer actions
    hackathons_participated = models.PositiveIntegerField(default=0)
    wins = models.PositiveIntegerField(default=0)
    finals = models.PositiveIntegerField(default=0)
    organized = models.PositiveIntegerField(default=0)
    judged = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "profiles"
        indexes = [
            models.Index(fields=["role", "wins"], name="profile_role_wins_idx"),
        ]

    def __str__(self):
        return self.username

    @property
    def display_name(self):
        return self.full_name or self.username

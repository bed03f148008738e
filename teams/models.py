# teams/models.py
import uuid

from django.conf import settings
from django.db import models


class Team(models.Model):
    """
    A participant team for an event.

    Members live in ``team_members``; the leader is both ``leader`` here and
    a ``leader`` membership row.
    """
    STATUS_RECRUITING = "recruiting"
    STATUS_FULL = "full"
    STATUS_DISBANDED = "disbanded"

    STATUS_CHOICES = [
        (STATUS_RECRUITING, "Recruiting"),
        (STATUS_FULL, "Full"),
        (STATUS_DISBANDED, "Disbanded"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default="")
    event = models.ForeignKey("events.Event", on_delete=models.CASCADE, related_name="teams")
    leader = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="led_teams",
    )
    max_size = models.PositiveIntegerField(default=4)
    join_code = models.CharField(max_length=12, unique=True)

    skills = models.JSONField(default=list, blank=True, help_text="Skills the team is looking for")
    looking_for = models.JSONField(default=list, blank=True, help_text="Roles the team wants to fill")
    track = models.CharField(max_length=100, blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_RECRUITING)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "teams"
        indexes = [
            models.Index(fields=["event", "status"], name="team_event_status_idx"),
        ]

    def __str__(self):
        return self.name


class TeamMember(models.Model):
    ROLE_LEADER = "leader"
    ROLE_MEMBER = "member"

    ROLE_CHOICES = [
        (ROLE_LEADER, "Team Leader"),
        (ROLE_MEMBER, "Member"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name="members")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="team_memberships",
    )
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_MEMBER)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "team_members"
        constraints = [
            models.UniqueConstraint(fields=["team", "user"], name="unique_team_member"),
        ]
        indexes = [
            models.Index(fields=["team", "joined_at"], name="teammember_team_joined_idx"),
        ]

    def __str__(self):
        return f"{self.user} in {self.team}"


class TeamApplication(models.Model):
    STATUS_PENDING = "pending"
    STATUS_ACCEPTED = "accepted"
    STATUS_REJECTED = "rejected"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_ACCEPTED, "Accepted"),
        (STATUS_REJECTED, "Rejected"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name="applications")
    applicant = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="team_applications",
    )
    message = models.TextField(blank=True, default="")
    skills = models.JSONField(default=list, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    applied_at = models.DateTimeField(auto_now_add=True)
    reviewed_at = models.DateTimeField(blank=True, null=True)
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reviewed_team_applications",
    )

    class Meta:
        db_table = "team_applications"
        indexes = [
            models.Index(fields=["team", "status"], name="teamapp_team_status_idx"),
        ]

    def __str__(self):
        return f"{self.applicant} -> {self.team} ({self.status})"


class TeamInvitation(models.Model):
    STATUS_PENDING = "pending"
    STATUS_ACCEPTED = "accepted"
    STATUS_REJECTED = "rejected"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_ACCEPTED, "Accepted"),
        (STATUS_REJECTED, "Rejected"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name="invitations")
    inviter = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_team_invitations",
    )
    invitee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="team_invitations",
    )
    message = models.TextField(blank=True, default="")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    sent_at = models.DateTimeField(auto_now_add=True)
    responded_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        db_table = "team_invitations"
        indexes = [
            models.Index(fields=["invitee", "status"], name="teaminv_invitee_status_idx"),
        ]

    def __str__(self):
        return f"{self.inviter} invited {self.invitee} to {self.team}"

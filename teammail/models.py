# teammail/models.py
import uuid

from django.conf import settings
from django.db import models


PRIORITY_CHOICES = [
    ("low", "Low"),
    ("normal", "Normal"),
    ("high", "High"),
    ("urgent", "Urgent"),
]

MAIL_TYPE_CHOICES = [
    ("team", "Team"),
    ("announcement", "Announcement"),
    ("meeting", "Meeting"),
    ("update", "Update"),
    ("alert", "Alert"),
]


class TeamMail(models.Model):
    """
    A message sent inside a team. Per-reader state (read, starred,
    archived, deleted) lives on TeamMailRecipient.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey("teams.Team", on_delete=models.CASCADE, related_name="mails")
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_team_mails",
    )
    recipient_ids = models.JSONField(default=list, blank=True)
    subject = models.CharField(max_length=255)
    body = models.TextField(blank=True, default="")
    priority = models.CharField(max_length=10, choices=PRIORITY_CHOICES, default="normal")
    mail_type = models.CharField(max_length=20, choices=MAIL_TYPE_CHOICES, default="team")
    attachments = models.JSONField(default=list, blank=True)
    important = models.BooleanField(default=False)
    sent_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "team_mails"
        indexes = [
            models.Index(fields=["team", "sent_at"], name="teammail_team_sent_idx"),
        ]

    def __str__(self):
        return self.subject


class TeamMailRecipient(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    mail = models.ForeignKey(TeamMail, on_delete=models.CASCADE, related_name="recipients")
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="team_mail_states",
    )
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(blank=True, null=True)
    is_starred = models.BooleanField(default=False)
    is_archived = models.BooleanField(default=False)
    is_deleted = models.BooleanField(default=False)

    class Meta:
        db_table = "team_mail_recipients"
        constraints = [
            models.UniqueConstraint(fields=["mail", "recipient"], name="unique_mail_recipient"),
        ]

    def __str__(self):
        return f"{self.recipient} <- {self.mail}"


class TeamMailDraft(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey("teams.Team", on_delete=models.CASCADE, related_name="mail_drafts")
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="team_mail_drafts",
    )
    subject = models.CharField(max_length=255, blank=True, default="")
    body = models.TextField(blank=True, default="")
    recipient_ids = models.JSONField(default=list, blank=True)
    mail_type = models.CharField(max_length=20, choices=MAIL_TYPE_CHOICES, default="team")
    priority = models.CharField(max_length=10, choices=PRIORITY_CHOICES, default="normal")
    attachments = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "team_mail_drafts"

    def __str__(self):
        return self.subject or "(no subject)"

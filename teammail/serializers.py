from rest_framework import serializers

from core.sanitizers import sanitize_description, sanitize_title
from .models import MAIL_TYPE_CHOICES, PRIORITY_CHOICES
from .triage import ALL_TYPES, FOLDERS


class MailSendSerializer(serializers.Serializer):
    recipientIds = serializers.ListField(child=serializers.UUIDField(), allow_empty=False)
    subject = serializers.CharField(max_length=255)
    body = serializers.CharField(required=False, allow_blank=True, default="")
    priority = serializers.ChoiceField(choices=PRIORITY_CHOICES, default="normal")
    mailType = serializers.ChoiceField(choices=MAIL_TYPE_CHOICES, default="team")
    attachments = serializers.ListField(child=serializers.JSONField(), required=False, default=list)
    important = serializers.BooleanField(required=False, default=False)
    draftId = serializers.UUIDField(required=False)

    def validate_subject(self, value):
        value = sanitize_title(value)
        if not value:
            raise serializers.ValidationError("Subject cannot be empty")
        return value

    def validate_body(self, value):
        return sanitize_description(value)


class DraftSerializer(serializers.Serializer):
    id = serializers.UUIDField(required=False)
    recipientIds = serializers.ListField(child=serializers.CharField(), required=False)
    subject = serializers.CharField(max_length=255, required=False, allow_blank=True)
    body = serializers.CharField(required=False, allow_blank=True)
    priority = serializers.ChoiceField(choices=PRIORITY_CHOICES, required=False)
    mailType = serializers.ChoiceField(choices=MAIL_TYPE_CHOICES, required=False)
    attachments = serializers.ListField(child=serializers.JSONField(), required=False)

    def validate_subject(self, value):
        return sanitize_title(value)

    def validate_body(self, value):
        return sanitize_description(value)


class MailboxQuerySerializer(serializers.Serializer):
    folder = serializers.ChoiceField(choices=FOLDERS, default="inbox")
    q = serializers.CharField(required=False, allow_blank=True, default="")
    type = serializers.ChoiceField(
        choices=[ALL_TYPES] + [value for value, _ in MAIL_TYPE_CHOICES],
        default=ALL_TYPES,
    )


class MarkReadSerializer(serializers.Serializer):
    mailIds = serializers.ListField(child=serializers.UUIDField(), allow_empty=False)


class FlagSerializer(serializers.Serializer):
    value = serializers.BooleanField(default=True)

from rest_framework import serializers

from core.sanitizers import sanitize_description, sanitize_tags, sanitize_text, sanitize_title
from .models import Team


class TeamWriteSerializer(serializers.Serializer):
    """camelCase team payload for create (full) and update (partial)."""
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True)
    eventId = serializers.UUIDField()
    maxSize = serializers.IntegerField(min_value=1, max_value=20, required=False)
    requiredSkills = serializers.ListField(child=serializers.CharField(), required=False)
    lookingForRoles = serializers.ListField(child=serializers.CharField(), required=False)
    track = serializers.CharField(max_length=100, required=False, allow_null=True, allow_blank=True)
    status = serializers.ChoiceField(choices=Team.STATUS_CHOICES, required=False)

    def validate_name(self, value):
        value = sanitize_title(value)[:100]
        if not value:
            raise serializers.ValidationError("Team name cannot be empty")
        return value

    def validate_description(self, value):
        return sanitize_description(value)

    def validate_requiredSkills(self, value):
        return sanitize_tags(value)

    def validate_lookingForRoles(self, value):
        return sanitize_tags(value)

    def validate_track(self, value):
        if value is None:
            return None
        return sanitize_title(value)[:100] or None


class JoinTeamSerializer(serializers.Serializer):
    joinCode = serializers.CharField(max_length=12)


class TransferLeadershipSerializer(serializers.Serializer):
    newLeaderId = serializers.UUIDField()


class ApplicationSerializer(serializers.Serializer):
    message = serializers.CharField(required=False, allow_blank=True, default="")
    skills = serializers.ListField(child=serializers.CharField(), required=False, default=list)

    def validate_message(self, value):
        return sanitize_text(value, max_length=2000)

    def validate_skills(self, value):
        return sanitize_tags(value)


class InvitationSerializer(serializers.Serializer):
    inviteeId = serializers.UUIDField()
    message = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_message(self, value):
        return sanitize_text(value, max_length=2000)


class DecisionSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=["accepted", "rejected"])


class TeamQuerySerializer(serializers.Serializer):
    event = serializers.UUIDField(required=False)

from rest_framework import serializers

from core.sanitizers import sanitize_description, sanitize_tags, sanitize_title
from .models import Event


# -----------------------------------------
# EVENT WRITE SERIALIZER (camelCase payload)
# -----------------------------------------
class EventWriteSerializer(serializers.Serializer):
    """
    Validates an event view model for create/update. ``participantCount``
    and ``organizerId`` are not accepted.
    """
    slug = serializers.SlugField(max_length=255, required=False)
    title = serializers.CharField(max_length=255)
    tagline = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    longDescription = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    startDate = serializers.DateTimeField()
    endDate = serializers.DateTimeField()
    registrationOpen = serializers.DateTimeField(required=False, allow_null=True)
    registrationClose = serializers.DateTimeField(required=False, allow_null=True)
    submissionOpen = serializers.DateTimeField(required=False, allow_null=True)
    submissionClose = serializers.DateTimeField(required=False, allow_null=True)

    status = serializers.ChoiceField(choices=Event.STATUS_CHOICES, required=False)
    format = serializers.ChoiceField(choices=Event.FORMAT_CHOICES, required=False)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    prizePool = serializers.IntegerField(min_value=0, required=False)
    maxTeamSize = serializers.IntegerField(min_value=1, max_value=20, required=False)

    tracks = serializers.ListField(child=serializers.CharField(), required=False)
    tags = serializers.ListField(child=serializers.CharField(), required=False)
    judges = serializers.ListField(child=serializers.CharField(), required=False)
    sponsors = serializers.ListField(child=serializers.CharField(), required=False)
    socials = serializers.JSONField(required=False, allow_null=True)
    links = serializers.JSONField(required=False, allow_null=True)
    hero = serializers.JSONField(required=False, allow_null=True)
    criteria = serializers.ListField(child=serializers.DictField(), required=False, allow_null=True)
    whyJoin = serializers.ListField(child=serializers.CharField(), required=False, allow_null=True)
    gallery = serializers.JSONField(required=False, allow_null=True)
    eligibility = serializers.JSONField(required=False, allow_null=True)
    community = serializers.JSONField(required=False, allow_null=True)
    contact = serializers.JSONField(required=False, allow_null=True)
    prizes = serializers.JSONField(required=False)
    timeline = serializers.JSONField(required=False, allow_null=True)
    rules = serializers.ListField(child=serializers.CharField(), required=False, allow_null=True)
    faqs = serializers.JSONField(required=False, allow_null=True)

    def validate_title(self, value):
        value = sanitize_title(value)
        if not value:
            raise serializers.ValidationError("Title cannot be empty")
        return value

    def validate_description(self, value):
        return sanitize_description(value)

    def validate_longDescription(self, value):
        return sanitize_description(value) if value is not None else None

    def validate_tracks(self, value):
        return sanitize_tags(value)

    def validate_tags(self, value):
        return sanitize_tags(value)

    def validate_criteria(self, value):
        if value is None:
            return value
        for item in value:
            percentage = item.get("percentage")
            if not isinstance(percentage, (int, float)) or percentage < 0:
                raise serializers.ValidationError("Each criterion needs a non-negative percentage")
        return value

    def validate(self, attrs):
        start = attrs.get("startDate")
        end = attrs.get("endDate")
        if start and end and end < start:
            raise serializers.ValidationError({"endDate": "End date must be after start date"})
        return attrs


class EventSearchSerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, default="")
    status = serializers.ChoiceField(choices=Event.STATUS_CHOICES, required=False)
    format = serializers.ChoiceField(choices=Event.FORMAT_CHOICES, required=False)
    prizeMin = serializers.IntegerField(min_value=0, required=False)
    sortBy = serializers.ChoiceField(choices=["date", "popular", "prize"], required=False)

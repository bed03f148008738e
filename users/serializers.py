from django.contrib.auth import get_user_model
from rest_framework import serializers

from core.sanitizers import sanitize_description, sanitize_tags, sanitize_text, sanitize_title

User = get_user_model()


class ProfileUpdateSerializer(serializers.Serializer):
    """
    Validates a camelCase profile patch. ``role`` and the stats block are
    not editable through the profile endpoint.
    """
    username = serializers.CharField(max_length=150, required=False)
    name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    avatar = serializers.CharField(max_length=1024, required=False, allow_null=True, allow_blank=True)
    headline = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    bio = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    skills = serializers.ListField(child=serializers.CharField(), required=False)
    preferredRoles = serializers.ListField(child=serializers.CharField(), required=False)
    location = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    github = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    linkedin = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    twitter = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    website = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    badges = serializers.ListField(child=serializers.CharField(), required=False)
    expertise = serializers.ListField(child=serializers.CharField(), required=False)

    def validate_username(self, value):
        value = sanitize_text(value, max_length=150)
        if not value:
            raise serializers.ValidationError("Username cannot be empty")

        current = self.context.get("user")
        clash = User.objects.filter(username=value)
        if current is not None:
            clash = clash.exclude(pk=current.pk)
        if clash.exists():
            raise serializers.ValidationError("Username is already taken")
        return value

    def validate_name(self, value):
        return sanitize_title(value)

    def validate_bio(self, value):
        return sanitize_description(value) if value is not None else None

    def validate_skills(self, value):
        return sanitize_tags(value)

    def validate_preferredRoles(self, value):
        return sanitize_tags(value)

    def validate_expertise(self, value):
        return sanitize_tags(value)


class UserSearchSerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, default="")
    location = serializers.CharField(required=False, allow_blank=True)
    skills = serializers.CharField(required=False, allow_blank=True)
    sortBy = serializers.ChoiceField(choices=["alphabetical", "recent"], required=False)

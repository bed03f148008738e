from rest_framework import serializers

from core.sanitizers import sanitize_description, sanitize_tags, sanitize_title


class SubmissionWriteSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    tagline = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    longDescription = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    eventId = serializers.UUIDField()
    teamId = serializers.UUIDField(required=False, allow_null=True)
    track = serializers.CharField(max_length=100, required=False, allow_null=True, allow_blank=True)
    tags = serializers.ListField(child=serializers.CharField(), required=False)
    techStack = serializers.ListField(child=serializers.CharField(), required=False)
    demoUrl = serializers.URLField(max_length=1024, required=False, allow_null=True, allow_blank=True)
    githubUrl = serializers.URLField(max_length=1024, required=False, allow_null=True, allow_blank=True)
    slidesUrl = serializers.URLField(max_length=1024, required=False, allow_null=True, allow_blank=True)
    videoUrl = serializers.URLField(max_length=1024, required=False, allow_null=True, allow_blank=True)
    features = serializers.ListField(child=serializers.CharField(), required=False)

    def validate_title(self, value):
        value = sanitize_title(value)
        if not value:
            raise serializers.ValidationError("Title cannot be empty")
        return value

    def validate_tagline(self, value):
        return sanitize_title(value) if value is not None else None

    def validate_description(self, value):
        return sanitize_description(value)

    def validate_longDescription(self, value):
        return sanitize_description(value) if value is not None else None

    def validate_tags(self, value):
        return sanitize_tags(value)

    def validate_techStack(self, value):
        return sanitize_tags(value)

    def validate_features(self, value):
        return [sanitize_title(item) for item in value if sanitize_title(item)]


class SubmissionQuerySerializer(serializers.Serializer):
    event = serializers.UUIDField(required=False)


class MySubmissionsQuerySerializer(serializers.Serializer):
    user = serializers.UUIDField(required=False)


class GalleryQuerySerializer(serializers.Serializer):
    event = serializers.UUIDField(required=False)
    track = serializers.CharField(required=False, allow_blank=True)
    tag = serializers.CharField(required=False, allow_blank=True)
    q = serializers.CharField(required=False, allow_blank=True, default="")
    sort = serializers.ChoiceField(choices=["newest", "top"], default="newest")

from rest_framework import serializers

from core.sanitizers import sanitize_description


class AssignJudgeSerializer(serializers.Serializer):
    judgeId = serializers.UUIDField()


class ScorecardSerializer(serializers.Serializer):
    submissionId = serializers.UUIDField()
    scores = serializers.DictField(child=serializers.FloatField(min_value=0, max_value=100), required=False)
    feedback = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    timeSpent = serializers.IntegerField(min_value=0, required=False, allow_null=True)

    def validate_feedback(self, value):
        return sanitize_description(value) if value is not None else None


class ScorecardLookupSerializer(serializers.Serializer):
    submission = serializers.UUIDField()
    judge = serializers.UUIDField(required=False)

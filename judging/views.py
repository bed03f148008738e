# judging/views.py - Judges, assignments and scorecards

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly, AllowAny
from rest_framework import status

from core.responses import api_error
from .serializers import AssignJudgeSerializer, ScorecardLookupSerializer, ScorecardSerializer
from .services import (
    assign_judge_to_event,
    create_scorecard,
    get_event_judges,
    get_judge,
    get_judge_events,
    get_judges,
    get_scorecard,
    get_submission_scorecards,
    remove_judge_from_event,
    submit_scorecard,
    update_scorecard,
)


class JudgeListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(get_judges())


class JudgeDetailView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, judge_id):
        judge = get_judge(judge_id)
        if judge is None:
            return api_error("Judge not found", status.HTTP_404_NOT_FOUND)
        return Response(judge)


class EventJudgesView(APIView):
    """
    GET  /api/judging/events/<event_id>/judges/
    POST /api/judging/events/<event_id>/judges/   (organizer only)
    """
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request, event_id):
        return Response(get_event_judges(event_id))

    def post(self, request, event_id):
        serializer = AssignJudgeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        judges = assign_judge_to_event(request.user, event_id, serializer.validated_data["judgeId"])
        return Response(judges, status=status.HTTP_201_CREATED)


class EventJudgeDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def delete(self, request, event_id, judge_id):
        remove_judge_from_event(request.user, event_id, judge_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class MyJudgingEventsView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(get_judge_events(request.user))


class ScorecardListCreateView(APIView):
    """
    GET  /api/judging/scorecards/?submission=<id>&judge=<id>   (judge defaults to me)
    POST /api/judging/scorecards/
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        params = ScorecardLookupSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data

        scorecard = get_scorecard(data["submission"], data.get("judge") or request.user.pk)
        if scorecard is None:
            return api_error("Scorecard not found", status.HTTP_404_NOT_FOUND)
        return Response(scorecard)

    def post(self, request):
        serializer = ScorecardSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        scorecard = create_scorecard(request.user, data["submissionId"], data)
        return Response(scorecard, status=status.HTTP_201_CREATED)


class ScorecardDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def patch(self, request, scorecard_id):
        serializer = ScorecardSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        return Response(update_scorecard(request.user, scorecard_id, serializer.validated_data))


class SubmitScorecardView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, scorecard_id):
        return Response(submit_scorecard(request.user, scorecard_id))


class SubmissionScorecardsView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, submission_id):
        return Response(get_submission_scorecards(submission_id))

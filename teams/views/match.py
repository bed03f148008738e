# teams/views/match.py - Swipe-style team matching

import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework.exceptions import APIException
from rest_framework import status

from core.analytics import track_team_like
from core.responses import api_error
from teams.matching import rank_teams
from teams.serializers import TeamQuerySerializer
from teams.services import apply_to_team, get_teams
from teams.session import MatchSession
from teams.throttles import TeamApplyThrottle

logger = logging.getLogger("hackhub.teams")


def like_message(skills):
    listed = ", ".join(skills) if skills else "relevant"
    return (
        f"I'm interested in joining your team! I have {listed} skills "
        f"that could contribute to your project."
    )


def _ranked_for(request):
    params = TeamQuerySerializer(data=request.query_params)
    params.is_valid(raise_exception=True)

    user = request.user
    teams = get_teams(params.validated_data.get("event"))
    return rank_teams(user.pk, user.skills or [], user.preferred_roles or [], teams)


def _match_state(ranked, session):
    remaining = session.available(ranked)
    return {
        "current": remaining[0] if remaining else None,
        "remaining": len(remaining),
        "queue": remaining,
        **session.as_dict(),
    }


class MatchView(APIView):
    """
    GET /api/teams/match/?event=<event_id>

    Ranked candidate teams for the current user, minus the ones already
    liked or passed in this session.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        session = MatchSession.load(request.session)
        return Response(_match_state(_ranked_for(request), session))


class MatchLikeView(APIView):
    """
    POST /api/teams/match/<team_id>/like/

    Applies to the team, then records the like. A failed application
    leaves the session untouched so the user can try again.
    """
    permission_classes = [IsAuthenticated]
    throttle_classes = [TeamApplyThrottle]

    def post(self, request, team_id):
        ranked = _ranked_for(request)
        team = next((t for t in ranked if str(t["id"]) == str(team_id)), None)
        if team is None:
            return api_error("Team is not available for matching", status.HTTP_404_NOT_FOUND)

        skills = list(request.user.skills or [])
        try:
            apply_to_team(request.user, team_id, message=like_message(skills), skills=skills)
        except APIException as exc:
            logger.info(f"Match like failed: team={team_id}, user={request.user.pk}, error={exc.detail}")
            return api_error(str(_first_message(exc.detail)), exc.status_code)

        session = MatchSession.load(request.session)
        session.like(team_id)
        session.save(request.session)
        track_team_like(team_id, request.user.pk, team["matchScore"])

        return Response(_match_state(ranked, session))


class MatchPassView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, team_id):
        session = MatchSession.load(request.session)
        session.skip(team_id)
        session.save(request.session)
        return Response(_match_state(_ranked_for(request), session))


class MatchResetView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        session = MatchSession.reset(request.session)
        return Response(_match_state(_ranked_for(request), session))


def _first_message(detail):
    """Flatten a DRF error detail (str, list or dict) to one message."""
    if isinstance(detail, dict):
        detail = next(iter(detail.values()), "")
    if isinstance(detail, list):
        detail = detail[0] if detail else ""
    return detail

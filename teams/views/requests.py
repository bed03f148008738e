# teams/views/requests.py - Applications and invitations

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from teams.serializers import ApplicationSerializer, DecisionSerializer, InvitationSerializer
from teams.throttles import TeamApplyThrottle
from teams.services import (
    apply_to_team,
    get_team_applications,
    get_team_invitations,
    get_user_applications,
    get_user_invitations,
    invite_to_team,
    respond_to_invitation,
    review_application,
)


class TeamApplicationsView(APIView):
    """
    GET  /api/teams/<id>/applications/   (leader only)
    POST /api/teams/<id>/applications/   apply
    """
    permission_classes = [IsAuthenticated]
    throttle_classes = [TeamApplyThrottle]

    def get(self, request, team_id):
        return Response(get_team_applications(request.user, team_id))

    def post(self, request, team_id):
        serializer = ApplicationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        application = apply_to_team(
            request.user,
            team_id,
            message=serializer.validated_data["message"],
            skills=serializer.validated_data["skills"],
        )
        return Response(application, status=status.HTTP_201_CREATED)


class MyApplicationsView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(get_user_applications(request.user))


class ApplicationReviewView(APIView):
    """
    PATCH /api/teams/applications/<id>/
    Body: {"status": "accepted" | "rejected"}
    """
    permission_classes = [IsAuthenticated]

    def patch(self, request, application_id):
        serializer = DecisionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        application = review_application(
            request.user, application_id, serializer.validated_data["status"]
        )
        return Response(application)


class TeamInvitationsView(APIView):
    """
    GET  /api/teams/<id>/invitations/   (members only)
    POST /api/teams/<id>/invitations/
    """
    permission_classes = [IsAuthenticated]

    def get(self, request, team_id):
        return Response(get_team_invitations(request.user, team_id))

    def post(self, request, team_id):
        serializer = InvitationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        invitation = invite_to_team(
            request.user,
            team_id,
            serializer.validated_data["inviteeId"],
            message=serializer.validated_data["message"],
        )
        return Response(invitation, status=status.HTTP_201_CREATED)


class MyInvitationsView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(get_user_invitations(request.user))


class InvitationRespondView(APIView):
    """
    POST /api/teams/invitations/<id>/respond/
    Body: {"status": "accepted" | "rejected"}
    """
    permission_classes = [IsAuthenticated]

    def post(self, request, invitation_id):
        serializer = DecisionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        invitation = respond_to_invitation(
            request.user, invitation_id, serializer.validated_data["status"]
        )
        return Response(invitation)

# teams/views/teams.py - Team CRUD and membership

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework import status

from core.responses import api_error
from teams.serializers import JoinTeamSerializer, TeamQuerySerializer, TeamWriteSerializer, TransferLeadershipSerializer
from teams.services import (
    create_team,
    delete_team,
    get_team,
    get_teams,
    join_team,
    leave_team,
    remove_member,
    transfer_leadership,
    update_team,
)


class TeamListCreateView(APIView):
    """
    GET  /api/teams/?event=<event_id>
    POST /api/teams/
    """
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request):
        params = TeamQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        return Response(get_teams(params.validated_data.get("event")))

    def post(self, request):
        serializer = TeamWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        team = create_team(request.user, serializer.validated_data)
        return Response(team, status=status.HTTP_201_CREATED)


class TeamDetailView(APIView):
    """
    GET    /api/teams/<id>/
    PATCH  /api/teams/<id>/   (leader only)
    DELETE /api/teams/<id>/   (leader only)
    """
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request, team_id):
        team = get_team(team_id)
        if team is None:
            return api_error("Team not found", status.HTTP_404_NOT_FOUND)
        return Response(team)

    def patch(self, request, team_id):
        serializer = TeamWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        return Response(update_team(request.user, team_id, serializer.validated_data))

    def delete(self, request, team_id):
        delete_team(request.user, team_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class JoinTeamView(APIView):
    """
    POST /api/teams/join/
    Body: {"joinCode": "AB12CD"}
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = JoinTeamSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        team = join_team(request.user, serializer.validated_data["joinCode"])
        return Response(team, status=status.HTTP_200_OK)


class LeaveTeamView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, team_id):
        leave_team(request.user, team_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class TeamMemberDetailView(APIView):
    """
    DELETE /api/teams/<id>/members/<user_id>/   (leader only)
    """
    permission_classes = [IsAuthenticated]

    def delete(self, request, team_id, user_id):
        return Response(remove_member(request.user, team_id, user_id))


class TransferLeadershipView(APIView):
    """
    POST /api/teams/<id>/transfer/
    Body: {"newLeaderId": "<uuid>"}
    """
    permission_classes = [IsAuthenticated]

    def post(self, request, team_id):
        serializer = TransferLeadershipSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        team = transfer_leadership(request.user, team_id, serializer.validated_data["newLeaderId"])
        return Response(team)

# teammail/views.py - Team mailbox API

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from .serializers import DraftSerializer, FlagSerializer, MailboxQuerySerializer, MailSendSerializer, MarkReadSerializer
from .services import (
    archive_mail,
    delete_mail,
    get_mailbox,
    get_team_mail_drafts,
    mark_mails_read,
    save_draft,
    send_team_mail,
    star_mail,
)
from .throttles import TeamMailSendThrottle


class TeamMailListView(APIView):
    """
    GET  /api/teams/<team_id>/mails/?folder=inbox|sent|starred|archived&q=&type=all|<mailType>
    POST /api/teams/<team_id>/mails/
    """
    permission_classes = [IsAuthenticated]
    throttle_classes = [TeamMailSendThrottle]

    def get(self, request, team_id):
        params = MailboxQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data

        mails = get_mailbox(
            request.user,
            team_id,
            folder=data["folder"],
            query=data["q"],
            mail_type=data["type"],
        )
        return Response(mails)

    def post(self, request, team_id):
        serializer = MailSendSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        mail = send_team_mail(request.user, team_id, serializer.validated_data)
        return Response(mail, status=status.HTTP_201_CREATED)


class MarkReadView(APIView):
    """
    POST /api/teams/<team_id>/mails/read/
    Body: {"mailIds": [...]}  -> the re-read mail list
    """
    permission_classes = [IsAuthenticated]

    def post(self, request, team_id):
        serializer = MarkReadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response(mark_mails_read(request.user, team_id, serializer.validated_data["mailIds"]))


class DraftListView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, team_id):
        return Response(get_team_mail_drafts(request.user, team_id))

    def post(self, request, team_id):
        serializer = DraftSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        draft = save_draft(request.user, team_id, serializer.validated_data)
        code = status.HTTP_200_OK if "id" in serializer.validated_data else status.HTTP_201_CREATED
        return Response(draft, status=code)


class StarMailView(APIView):
    """
    POST /api/teams/<team_id>/mails/<mail_id>/star/
    Body: {"value": true|false}
    """
    permission_classes = [IsAuthenticated]

    def post(self, request, team_id, mail_id):
        serializer = FlagSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response(star_mail(request.user, team_id, mail_id, serializer.validated_data["value"]))


class ArchiveMailView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, team_id, mail_id):
        serializer = FlagSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response(archive_mail(request.user, team_id, mail_id, serializer.validated_data["value"]))


class MailDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def delete(self, request, team_id, mail_id):
        delete_mail(request.user, team_id, mail_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

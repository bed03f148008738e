# submissions/views.py - Project submissions API

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly, AllowAny
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework import status

from core.responses import api_error
from .serializers import (
    GalleryQuerySerializer,
    MySubmissionsQuerySerializer,
    SubmissionQuerySerializer,
    SubmissionWriteSerializer,
)
from .services import (
    create_submission,
    get_gallery,
    get_submission,
    get_submissions,
    get_user_submissions,
    submit_submission,
    update_submission,
    upload_images,
)


class SubmissionListCreateView(APIView):
    """
    GET  /api/submissions/?event=<event_id>   (submitted only)
    POST /api/submissions/                    (creates a draft)
    """
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request):
        params = SubmissionQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        return Response(get_submissions(params.validated_data.get("event")))

    def post(self, request):
        serializer = SubmissionWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        submission = create_submission(request.user, serializer.validated_data)
        return Response(submission, status=status.HTTP_201_CREATED)


class GalleryView(APIView):
    """
    GET /api/submissions/gallery/?event=&track=&tag=&q=&sort=newest|top
    """
    permission_classes = [AllowAny]

    def get(self, request):
        params = GalleryQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data

        return Response(get_gallery(
            event_id=data.get("event"),
            track=data.get("track") or None,
            tag=data.get("tag") or None,
            query=data["q"],
            sort=data["sort"],
        ))


class MySubmissionsView(APIView):
    """
    GET /api/submissions/me/?user=<user_id>
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        params = MySubmissionsQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        return Response(get_user_submissions(request.user, params.validated_data.get("user")))


class SubmissionDetailView(APIView):
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request, submission_id):
        submission = get_submission(submission_id)
        if submission is None:
            return api_error("Submission not found", status.HTTP_404_NOT_FOUND)
        return Response(submission)

    def patch(self, request, submission_id):
        serializer = SubmissionWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        return Response(update_submission(request.user, submission_id, serializer.validated_data))


class SubmitSubmissionView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, submission_id):
        return Response(submit_submission(request.user, submission_id))


class SubmissionImagesView(APIView):
    """
    POST /api/submissions/<id>/images/   multipart, field "images" (repeatable)
    """
    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request, submission_id):
        files = request.FILES.getlist("images")
        return Response(upload_images(request.user, submission_id, files), status=status.HTTP_201_CREATED)

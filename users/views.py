# users/views.py - Profile API

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework import status

from core.responses import api_error
from .serializers import ProfileUpdateSerializer, UserSearchSerializer
from .services import (
    get_user,
    get_user_by_username,
    search_users,
    update_profile,
)


class UserSearchView(APIView):
    """
    GET /api/users/?q=&location=&skills=&sortBy=alphabetical|recent
    """
    permission_classes = [AllowAny]

    def get(self, request):
        params = UserSearchSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data

        users = search_users(
            query=data.get("q", ""),
            location=data.get("location") or None,
            skill=data.get("skills") or None,
            sort_by=data.get("sortBy"),
        )
        return Response(users)


class MeView(APIView):
    """
    GET   /api/users/me/
    PATCH /api/users/me/
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(get_user(request.user.pk))

    def patch(self, request):
        serializer = ProfileUpdateSerializer(
            data=request.data,
            partial=True,
            context={"user": request.user},
        )
        serializer.is_valid(raise_exception=True)

        profile = update_profile(request.user, request.user.pk, serializer.validated_data)
        return Response(profile)


class UserDetailView(APIView):
    """
    GET /api/users/<uuid>/
    """
    permission_classes = [AllowAny]

    def get(self, request, user_id):
        profile = get_user(user_id)
        if profile is None:
            return api_error("User not found", status.HTTP_404_NOT_FOUND)
        return Response(profile)


class UserByUsernameView(APIView):
    """
    GET /api/users/by-username/<username>/
    """
    permission_classes = [AllowAny]

    def get(self, request, username):
        profile = get_user_by_username(username)
        if profile is None:
            return api_error("User not found", status.HTTP_404_NOT_FOUND)
        return Response(profile)

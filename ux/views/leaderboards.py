# ux/views/leaderboards.py

from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework import status

from core.responses import api_error, ux_response
from ux.services.leaderboards import LEADERBOARD_TYPES, get_leaderboard


class UXLeaderboardView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, board):
        if board not in LEADERBOARD_TYPES:
            return api_error("Invalid leaderboard type", status.HTTP_404_NOT_FOUND)
        return ux_response({"board": board, "entries": get_leaderboard(board)})

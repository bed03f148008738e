# ux/services/leaderboards.py

from django.contrib.auth import get_user_model

from core.backend import fetch_rows
from judging.mappers import JUDGE_SELECT
from judging.models import Judge
from judging.services import with_profiles
from users.mappers import PROFILE_SELECT, profile_from_row

User = get_user_model()

LEADERBOARD_SIZE = 20

LEADERBOARD_TYPES = ("hackers", "organizers", "judges")


def get_leaderboard(board="hackers"):
    """
    Top profiles per board:
    - hackers: participants by wins
    - organizers: organizers by events organized
    - judges: judges by events judged
    """
    if board == "hackers":
        qs = User.objects.filter(role=User.ROLE_PARTICIPANT, is_active=True).order_by("-wins", "username")
    elif board == "organizers":
        qs = User.objects.filter(role=User.ROLE_ORGANIZER, is_active=True).order_by("-organized", "username")
    elif board == "judges":
        rows = fetch_rows(Judge.objects.order_by("-events_judged")[:LEADERBOARD_SIZE], *JUDGE_SELECT)
        return _rank(with_profiles(rows))
    else:
        raise ValueError(f"Invalid leaderboard type: {board!r}")

    rows = fetch_rows(qs[:LEADERBOARD_SIZE], *PROFILE_SELECT)
    return _rank([profile_from_row(row) for row in rows])


def _rank(entries):
    for position, entry in enumerate(entries, start=1):
        entry["rank"] = position
    return entries

# users/services.py

import logging

from django.contrib.auth import get_user_model
from django.db.models import Q
from rest_framework.exceptions import PermissionDenied

from core.backend import fetch_rows, fetch_single, fetch_single_or_none, require_user
from .mappers import PROFILE_SELECT, profile_from_row, profile_to_row

logger = logging.getLogger("hackhub.users")

User = get_user_model()

SEARCH_LIMIT = 50


def get_users():
    rows = fetch_rows(User.objects.order_by("username"), *PROFILE_SELECT)
    return [profile_from_row(row) for row in rows]


def get_user(user_id):
    row = fetch_single_or_none(User.objects.filter(pk=user_id), *PROFILE_SELECT)
    return profile_from_row(row)


def get_user_by_username(username):
    row = fetch_single_or_none(User.objects.filter(username=username), *PROFILE_SELECT)
    return profile_from_row(row)


def update_profile(user, profile_id, data):
    """
    Apply a (partial) camelCase profile to the row and return the re-read
    profile. Users can only edit their own profile.
    """
    require_user(user)
    if str(user.pk) != str(profile_id):
        raise PermissionDenied("You can only update your own profile")

    row = profile_to_row(data)
    if row:
        User.objects.filter(pk=profile_id).update(**row)
        logger.info(f"Profile updated: user={profile_id}, fields={sorted(row)}")

    return profile_from_row(fetch_single(User.objects.filter(pk=profile_id), *PROFILE_SELECT))


def search_users(query="", location=None, skill=None, sort_by=None):
    """
    Text search over name, username, headline and bio.

    ``skill`` must be contained in the profile's skill list.
    """
    qs = User.objects.filter(is_active=True)

    if query:
        qs = qs.filter(
            Q(full_name__icontains=query)
            | Q(username__icontains=query)
            | Q(headline__icontains=query)
            | Q(bio__icontains=query)
        )

    if location:
        qs = qs.filter(location__icontains=location)

    if sort_by == "recent":
        qs = qs.order_by("-created_at")
    else:
        qs = qs.order_by("full_name", "username")

    rows = fetch_rows(qs, *PROFILE_SELECT)
    if skill:
        # skills__contains is Postgres-only
        rows = [row for row in rows if skill in (row.get("skills") or [])]

    return [profile_from_row(row) for row in rows[:SEARCH_LIMIT]]

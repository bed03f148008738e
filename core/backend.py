# core/backend.py
# Shared helpers for talking to the Postgres backend through the ORM.
#
# Rows are read as plain snake_case dicts (``QuerySet.values()``) so the
# per-app mappers can turn them into camelCase view models.

import logging

from rest_framework.exceptions import NotAuthenticated

logger = logging.getLogger("hackhub")

# PostgREST code for "JSON object requested, multiple (or no) rows returned".
NO_ROWS_CODE = "PGRST116"


class BackendError(Exception):
    """
    An error reported by the data backend.

    ``code`` mirrors the backend error code so callers can branch on it
    (e.g. ``NO_ROWS_CODE``); everything else is propagated unchanged.
    """

    def __init__(self, message, code=None, details=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def __str__(self):
        return self.message


def require_user(user):
    """
    Return ``user`` if it is an authenticated session user.

    Raised before any query is issued, so an anonymous call never
    touches the database.
    """
    if user is None or not getattr(user, "is_authenticated", False):
        raise NotAuthenticated("User not authenticated")
    return user


def fetch_single(queryset, *fields):
    """
    Fetch exactly one row from ``queryset`` as a dict.

    Zero or several rows raise ``BackendError`` with ``NO_ROWS_CODE``.
    """
    rows = list(queryset.values(*fields)[:2])
    if len(rows) != 1:
        raise BackendError(
            "JSON object requested, multiple (or no) rows returned",
            code=NO_ROWS_CODE,
            details=f"The result contains {len(rows)} rows",
        )
    return rows[0]


def fetch_single_or_none(queryset, *fields):
    """Like ``fetch_single`` but "no rows" becomes ``None``."""
    try:
        return fetch_single(queryset, *fields)
    except BackendError as exc:
        if exc.code == NO_ROWS_CODE:
            return None
        raise


def fetch_rows(queryset, *fields):
    return list(queryset.values(*fields))

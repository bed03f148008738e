# users/mappers.py
"""
Profile row (snake_case, ``profiles`` table) <-> user view model (camelCase).

Two-way fields are listed in PROFILE_FIELDS. ``id``, ``joinDate`` and the
``stats`` block are read-only: stats move through results, not profile edits.
"""

# (view key, column, default when the column is missing/None)
PROFILE_FIELDS = (
    ("username", "username", None),
    ("avatar", "avatar_url", None),
    ("role", "role", None),
    ("headline", "headline", None),
    ("bio", "bio", None),
    ("skills", "skills", list),
    ("preferredRoles", "preferred_roles", list),
    ("location", "location", None),
    ("github", "github", None),
    ("linkedin", "linkedin", None),
    ("twitter", "twitter", None),
    ("website", "website", None),
    ("badges", "badges", list),
    ("expertise", "expertise", list),
)

STAT_FIELDS = (
    ("hackathonsParticipated", "hackathons_participated"),
    ("wins", "wins"),
    ("finals", "finals"),
    ("organized", "organized"),
    ("judged", "judged"),
)

# Columns a profile update may write (name is stored as full_name)
PROFILE_COLUMNS = tuple(column for _, column, _ in PROFILE_FIELDS) + ("full_name",)

# Columns read for a profile; never includes credentials
PROFILE_SELECT = ("id", "join_date") + PROFILE_COLUMNS + tuple(column for _, column in STAT_FIELDS)


def _value(row, column, default):
    value = row.get(column)
    if value is None and default is not None:
        return default()
    return value


def profile_from_row(row):
    if row is None:
        return None

    user = {"id": row.get("id")}
    for key, column, default in PROFILE_FIELDS:
        user[key] = _value(row, column, default)

    user["name"] = row.get("full_name") or row.get("username")
    user["joinDate"] = row.get("join_date")
    user["stats"] = {key: row.get(column) or 0 for key, column in STAT_FIELDS}
    return user


def profile_to_row(user):
    """
    Only keys present in ``user`` are emitted, so a partial view model
    produces a partial update.
    """
    row = {}
    if "name" in user:
        row["full_name"] = user["name"] or ""
    for key, column, _ in PROFILE_FIELDS:
        if key in user:
            row[column] = user[key]
    return row


def sender_summary_from_row(row):
    """Compact author block used by mails and applications."""
    if row is None:
        return None
    return {
        "id": row.get("id"),
        "username": row.get("username"),
        "name": row.get("full_name") or row.get("username"),
        "avatar": row.get("avatar_url"),
    }

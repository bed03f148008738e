# teams/mappers.py
"""
Team row (``teams`` table) <-> team view model.

``id``, ``leaderId``, ``joinCode``, ``createdAt``, ``lastActivity``, ``tags``
and ``members`` are derived or read-only; only the TEAM_FIELDS columns are
written back.
"""

# (view key, column, default when the column is missing/None)
TEAM_FIELDS = (
    ("name", "name", None),
    ("description", "description", None),
    ("eventId", "event_id", None),
    ("maxSize", "max_size", None),
    ("requiredSkills", "skills", list),
    ("lookingForRoles", "looking_for", list),
    ("track", "track", None),
    ("status", "status", None),
)

TEAM_SELECT = (
    "id", "leader_id", "join_code", "created_at", "updated_at",
) + tuple(column for _, column, _ in TEAM_FIELDS)

APPLICATION_SELECT = (
    "id", "team_id", "applicant_id", "message", "skills", "status",
    "applied_at", "reviewed_at", "reviewed_by_id",
)

INVITATION_SELECT = (
    "id", "team_id", "inviter_id", "invitee_id", "message", "status",
    "sent_at", "responded_at",
)


def team_from_row(row, members=None):
    if row is None:
        return None

    team = {"id": row.get("id")}
    for key, column, default in TEAM_FIELDS:
        value = row.get(column)
        if value is None and default is not None:
            value = default()
        team[key] = value

    track = row.get("track")
    team.update({
        "leaderId": row.get("leader_id"),
        "joinCode": row.get("join_code"),
        "createdAt": row.get("created_at"),
        "lastActivity": row.get("updated_at") or row.get("created_at"),
        "tags": [track] if track else [],
        "members": list(members or []),
    })
    return team


def team_to_row(team):
    row = {}
    for key, column, _ in TEAM_FIELDS:
        if key in team:
            row[column] = team[key]
    return row


def application_from_row(row, applicant=None, team=None):
    if row is None:
        return None
    return {
        "id": row.get("id"),
        "teamId": row.get("team_id"),
        "applicantId": row.get("applicant_id"),
        "message": row.get("message") or "",
        "skills": row.get("skills") or [],
        "status": row.get("status"),
        "appliedAt": row.get("applied_at"),
        "reviewedAt": row.get("reviewed_at"),
        "reviewedBy": row.get("reviewed_by_id"),
        "applicant": applicant,
        "team": team,
    }


def invitation_from_row(row, inviter=None, invitee=None, team=None):
    if row is None:
        return None
    return {
        "id": row.get("id"),
        "teamId": row.get("team_id"),
        "inviterId": row.get("inviter_id"),
        "inviteeId": row.get("invitee_id"),
        "message": row.get("message") or "",
        "status": row.get("status"),
        "sentAt": row.get("sent_at"),
        "respondedAt": row.get("responded_at"),
        "inviter": inviter,
        "invitee": invitee,
        "team": team,
    }

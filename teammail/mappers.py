# teammail/mappers.py
"""
Mail rows -> mail view models.

A mail view model merges three sources: the ``team_mails`` row, the
sender's profile summary and the reader's ``team_mail_recipients`` row.
A reader without a state row sees the mail unread, unstarred and open.
"""

MAIL_SELECT = (
    "id", "team_id", "sender_id", "recipient_ids", "subject", "body",
    "priority", "mail_type", "attachments", "important", "sent_at",
)

STATE_SELECT = ("mail_id", "is_read", "read_at", "is_starred", "is_archived", "is_deleted")

DRAFT_SELECT = (
    "id", "team_id", "author_id", "subject", "body", "recipient_ids",
    "mail_type", "priority", "attachments", "created_at", "updated_at",
)

# (view key, column) pairs a draft save may write
DRAFT_FIELDS = (
    ("subject", "subject"),
    ("body", "body"),
    ("recipientIds", "recipient_ids"),
    ("mailType", "mail_type"),
    ("priority", "priority"),
    ("attachments", "attachments"),
)


def mail_from_row(row, sender=None, state=None):
    if row is None:
        return None

    sender = sender or {}
    state = state or {}
    return {
        "id": row.get("id"),
        "teamId": row.get("team_id"),
        "senderId": row.get("sender_id"),
        "senderName": sender.get("full_name") or sender.get("username") or "Unknown",
        "senderAvatar": sender.get("avatar_url"),
        "recipientIds": row.get("recipient_ids") or [],
        "subject": row.get("subject"),
        "body": row.get("body"),
        "priority": row.get("priority"),
        "mailType": row.get("mail_type"),
        "attachments": row.get("attachments") or [],
        "isRead": bool(state.get("is_read")),
        "isStarred": bool(state.get("is_starred")),
        "isArchived": bool(state.get("is_archived")),
        "important": bool(row.get("important")),
        "sentAt": row.get("sent_at"),
        "readAt": state.get("read_at"),
    }


def draft_from_row(row):
    if row is None:
        return None

    draft = {
        "id": row.get("id"),
        "teamId": row.get("team_id"),
        "authorId": row.get("author_id"),
        "updatedAt": row.get("updated_at"),
    }
    for key, column in DRAFT_FIELDS:
        draft[key] = row.get(column)
    draft["recipientIds"] = draft["recipientIds"] or []
    draft["attachments"] = draft["attachments"] or []
    return draft


def draft_to_row(draft):
    return {column: draft[key] for key, column in DRAFT_FIELDS if key in draft}

# teammail/triage.py
"""
Mailbox filtering over already-fetched mail view models.

A mail is shown when it matches the free-text query, the mail-type facet
and the folder. Team mailboxes are small, so this runs in memory over the
full list.
"""

FOLDER_INBOX = "inbox"
FOLDER_SENT = "sent"
FOLDER_STARRED = "starred"
FOLDER_ARCHIVED = "archived"

FOLDERS = (FOLDER_INBOX, FOLDER_SENT, FOLDER_STARRED, FOLDER_ARCHIVED)

ALL_TYPES = "all"


def matches_query(mail, query):
    if not query:
        return True
    needle = query.lower()
    return any(
        needle in (mail.get(field) or "").lower()
        for field in ("subject", "body", "senderName")
    )


def matches_type(mail, mail_type):
    return mail_type == ALL_TYPES or mail.get("mailType") == mail_type


def in_folder(mail, folder, current_user_id):
    if folder == FOLDER_INBOX:
        return not mail.get("isArchived")
    if folder == FOLDER_SENT:
        return str(mail.get("senderId")) == str(current_user_id)
    if folder == FOLDER_ARCHIVED:
        return bool(mail.get("isArchived"))
    if folder == FOLDER_STARRED:
        return bool(mail.get("isStarred"))
    raise ValueError(f"Unknown folder: {folder!r}")


def filter_mails(mails, query="", mail_type=ALL_TYPES, folder=FOLDER_INBOX, current_user_id=None):
    if folder not in FOLDERS:
        raise ValueError(f"Unknown folder: {folder!r}")

    return [
        mail for mail in mails
        if matches_query(mail, query)
        and matches_type(mail, mail_type)
        and in_folder(mail, folder, current_user_id)
    ]


def unread_count(mails):
    """Unread, unarchived mails: the badge shown next to the inbox."""
    return sum(1 for mail in mails if not mail.get("isRead") and not mail.get("isArchived"))

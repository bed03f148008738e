# teammail/services.py

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from core.analytics import track_mail_sent
from core.backend import fetch_rows, fetch_single, require_user
from teams.models import Team, TeamMember
from .mappers import (
    DRAFT_SELECT,
    MAIL_SELECT,
    STATE_SELECT,
    draft_from_row,
    draft_to_row,
    mail_from_row,
)
from .models import TeamMail, TeamMailDraft, TeamMailRecipient
from .triage import filter_mails

logger = logging.getLogger("hackhub.teammail")

User = get_user_model()


def _require_member(user, team_id):
    if not Team.objects.filter(pk=team_id).exists():
        raise NotFound("Team not found")
    if not TeamMember.objects.filter(team_id=team_id, user=user).exists():
        raise PermissionDenied("Only team members can access team mail")


def get_team_mails(user, team_id):
    """
    Every mail of the team, newest first, with the sender summary and the
    reader's own state. Mails the reader deleted are left out.
    """
    require_user(user)
    _require_member(user, team_id)

    rows = fetch_rows(TeamMail.objects.filter(team_id=team_id).order_by("-sent_at"), *MAIL_SELECT)
    if not rows:
        return []

    states = {
        state["mail_id"]: state
        for state in fetch_rows(
            TeamMailRecipient.objects.filter(
                mail_id__in=[row["id"] for row in rows], recipient=user
            ),
            *STATE_SELECT,
        )
    }
    senders = {
        sender["id"]: sender
        for sender in fetch_rows(
            User.objects.filter(pk__in={row["sender_id"] for row in rows}),
            "id", "username", "full_name", "avatar_url",
        )
    }

    return [
        mail_from_row(row, sender=senders.get(row["sender_id"]), state=states.get(row["id"]))
        for row in rows
        if not states.get(row["id"], {}).get("is_deleted")
    ]


def get_mailbox(user, team_id, folder="inbox", query="", mail_type="all"):
    mails = get_team_mails(user, team_id)
    return filter_mails(mails, query=query, mail_type=mail_type, folder=folder, current_user_id=user.pk)


def send_team_mail(user, team_id, data):
    """
    Insert the mail and one state row per recipient in a single
    transaction. Every recipient must be a member of the team.
    """
    require_user(user)
    _require_member(user, team_id)

    recipient_ids = list(dict.fromkeys(data.get("recipientIds") or []))
    if not recipient_ids:
        raise ValidationError({"recipientIds": "Select at least one recipient"})

    member_ids = set(TeamMember.objects.filter(team_id=team_id).values_list("user_id", flat=True))
    outsiders = [str(rid) for rid in recipient_ids if rid not in member_ids]
    if outsiders:
        raise ValidationError({"recipientIds": f"Not team members: {', '.join(outsiders)}"})

    with transaction.atomic():
        mail = TeamMail.objects.create(
            team_id=team_id,
            sender=user,
            recipient_ids=[str(rid) for rid in recipient_ids],
            subject=data["subject"],
            body=data.get("body", ""),
            priority=data.get("priority", "normal"),
            mail_type=data.get("mailType", "team"),
            attachments=data.get("attachments") or [],
            important=data.get("important", False),
        )
        TeamMailRecipient.objects.bulk_create([
            TeamMailRecipient(mail=mail, recipient_id=rid) for rid in recipient_ids
        ])

        draft_id = data.get("draftId")
        if draft_id:
            TeamMailDraft.objects.filter(pk=draft_id, author=user).delete()

    track_mail_sent(team_id, user.pk, len(recipient_ids))
    logger.info(f"Team mail sent: team={team_id}, mail={mail.id}, recipients={len(recipient_ids)}")

    sender = fetch_single(User.objects.filter(pk=user.pk), "id", "username", "full_name", "avatar_url")
    return mail_from_row(fetch_single(TeamMail.objects.filter(pk=mail.pk), *MAIL_SELECT), sender=sender)


# ------------------------------------------------------------------
# Drafts
# ------------------------------------------------------------------

def get_team_mail_drafts(user, team_id):
    require_user(user)
    _require_member(user, team_id)

    rows = fetch_rows(
        TeamMailDraft.objects.filter(team_id=team_id, author=user).order_by("-updated_at"),
        *DRAFT_SELECT,
    )
    return [draft_from_row(row) for row in rows]


def save_draft(user, team_id, data):
    """Insert a draft, or update the author's draft named by ``data["id"]``."""
    require_user(user)
    _require_member(user, team_id)

    row = draft_to_row(data)
    draft_id = data.get("id")
    if draft_id:
        draft = TeamMailDraft.objects.filter(pk=draft_id, team_id=team_id, author=user).first()
        if draft is None:
            raise NotFound("Draft not found")
        for column, value in row.items():
            setattr(draft, column, value)
        draft.save()
    else:
        draft = TeamMailDraft.objects.create(team_id=team_id, author=user, **row)

    return draft_from_row(fetch_single(TeamMailDraft.objects.filter(pk=draft.pk), *DRAFT_SELECT))


# ------------------------------------------------------------------
# Reader state
# ------------------------------------------------------------------

def _state_rows(user, team_id, mail_ids):
    """
    The reader's state rows for ``mail_ids`` (restricted to the team),
    created on demand so members outside the recipient list (and the
    sender) can keep their own flags too.
    """
    mail_ids = list(
        TeamMail.objects.filter(team_id=team_id, pk__in=mail_ids).values_list("id", flat=True)
    )
    existing = set(
        TeamMailRecipient.objects.filter(mail_id__in=mail_ids, recipient=user).values_list("mail_id", flat=True)
    )
    TeamMailRecipient.objects.bulk_create([
        TeamMailRecipient(mail_id=mail_id, recipient=user)
        for mail_id in mail_ids if mail_id not in existing
    ])
    return TeamMailRecipient.objects.filter(mail_id__in=mail_ids, recipient=user), mail_ids


def mark_mails_read(user, team_id, mail_ids):
    """Mark a batch read and return the re-read mailbox."""
    require_user(user)
    _require_member(user, team_id)

    with transaction.atomic():
        states, found = _state_rows(user, team_id, mail_ids)
        states.filter(is_read=False).update(is_read=True, read_at=timezone.now())

    logger.debug(f"Mails marked read: team={team_id}, user={user.pk}, count={len(found)}")
    return get_team_mails(user, team_id)


def _set_flag(user, team_id, mail_id, **flags):
    require_user(user)
    _require_member(user, team_id)

    with transaction.atomic():
        states, found = _state_rows(user, team_id, [mail_id])
        if not found:
            raise NotFound("Mail not found")
        states.update(**flags)

    return get_team_mails(user, team_id)


def star_mail(user, team_id, mail_id, starred=True):
    return _set_flag(user, team_id, mail_id, is_starred=starred)


def archive_mail(user, team_id, mail_id, archived=True):
    return _set_flag(user, team_id, mail_id, is_archived=archived)


def delete_mail(user, team_id, mail_id):
    """Soft delete: the mail disappears for this reader only."""
    mails = _set_flag(user, team_id, mail_id, is_deleted=True)
    logger.info(f"Mail deleted for reader: mail={mail_id}, user={user.pk}")
    return mails


def unread_mail_count(user):
    """Unread mails addressed to ``user`` across all teams."""
    require_user(user)
    return TeamMailRecipient.objects.filter(
        recipient=user, is_read=False, is_archived=False, is_deleted=False
    ).count()

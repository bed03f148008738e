# teams/services.py

import logging
import secrets
import string

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from core.backend import fetch_rows, fetch_single, fetch_single_or_none, require_user
from events.models import Event
from users.mappers import PROFILE_SELECT, profile_from_row, sender_summary_from_row
from .mappers import (
    APPLICATION_SELECT,
    INVITATION_SELECT,
    TEAM_SELECT,
    application_from_row,
    invitation_from_row,
    team_from_row,
    team_to_row,
)
from .models import Team, TeamApplication, TeamInvitation, TeamMember

logger = logging.getLogger("hackhub.teams")

User = get_user_model()

JOIN_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_join_code(length=None):
    length = length or settings.TEAM_JOIN_CODE_LENGTH
    return "".join(secrets.choice(JOIN_CODE_ALPHABET) for _ in range(length))


def _unique_join_code():
    while True:
        code = generate_join_code()
        if not Team.objects.filter(join_code=code).exists():
            return code


# ------------------------------------------------------------------
# Reads
# ------------------------------------------------------------------

def _members_by_team(team_ids):
    """Member profiles per team id, in join order."""
    memberships = fetch_rows(
        TeamMember.objects.filter(team_id__in=team_ids).order_by("joined_at"),
        "team_id", "user_id",
    )
    profiles = {
        row["id"]: profile_from_row(row)
        for row in fetch_rows(
            User.objects.filter(pk__in={m["user_id"] for m in memberships}),
            *PROFILE_SELECT,
        )
    }

    members = {team_id: [] for team_id in team_ids}
    for membership in memberships:
        profile = profiles.get(membership["user_id"])
        if profile is not None:
            members[membership["team_id"]].append(profile)
    return members


def _team_summaries(team_ids):
    rows = fetch_rows(Team.objects.filter(pk__in=team_ids), *TEAM_SELECT)
    return {row["id"]: team_from_row(row) for row in rows}


def _profile_summaries(user_ids):
    rows = fetch_rows(
        User.objects.filter(pk__in=user_ids),
        "id", "username", "full_name", "avatar_url",
    )
    return {row["id"]: sender_summary_from_row(row) for row in rows}


def get_teams(event_id=None):
    qs = Team.objects.order_by("-created_at")
    if event_id:
        qs = qs.filter(event_id=event_id)

    rows = fetch_rows(qs, *TEAM_SELECT)
    members = _members_by_team([row["id"] for row in rows])
    return [team_from_row(row, members.get(row["id"])) for row in rows]


def get_team(team_id):
    row = fetch_single_or_none(Team.objects.filter(pk=team_id), *TEAM_SELECT)
    if row is None:
        return None
    return team_from_row(row, _members_by_team([row["id"]])[row["id"]])


def get_user_teams(user):
    require_user(user)
    team_ids = list(
        TeamMember.objects.filter(user=user).values_list("team_id", flat=True)
    )
    rows = fetch_rows(Team.objects.filter(pk__in=team_ids).order_by("-created_at"), *TEAM_SELECT)
    members = _members_by_team([row["id"] for row in rows])
    return [team_from_row(row, members.get(row["id"])) for row in rows]


def _get_team_or_404(team_id):
    team = Team.objects.filter(pk=team_id).first()
    if team is None:
        raise NotFound("Team not found")
    return team


def _require_leader(team, user, message="Only the team leader can do this"):
    if team.leader_id != user.pk:
        raise PermissionDenied(message)


def is_team_member(team_id, user_id):
    return TeamMember.objects.filter(team_id=team_id, user_id=user_id).exists()


# ------------------------------------------------------------------
# Team lifecycle
# ------------------------------------------------------------------

def create_team(user, data):
    """
    Insert the team and the creator's leader membership in one
    transaction, then return the re-read team.
    """
    require_user(user)

    row = team_to_row(data)
    if not Event.objects.filter(pk=row.get("event_id")).exists():
        raise ValidationError({"eventId": "Event not found"})

    row["max_size"] = row.get("max_size") or settings.TEAM_DEFAULT_MAX_SIZE
    row["status"] = row.get("status") or Team.STATUS_RECRUITING
    row.setdefault("skills", [])
    row.setdefault("looking_for", [])

    with transaction.atomic():
        team = Team.objects.create(leader=user, join_code=_unique_join_code(), **row)
        TeamMember.objects.create(team=team, user=user, role=TeamMember.ROLE_LEADER)

    logger.info(f"Team created: id={team.id}, event={team.event_id}, leader={user.pk}")
    return get_team(team.id)


def update_team(user, team_id, data):
    require_user(user)
    team = _get_team_or_404(team_id)
    _require_leader(team, user, "Only the team leader can update the team")

    row = team_to_row(data)
    row.pop("event_id", None)
    if "max_size" in row and row["max_size"] < team.members.count():
        raise ValidationError({"maxSize": "Team already has more members than that"})

    if row:
        for column, value in row.items():
            setattr(team, column, value)
        team.save(update_fields=list(row) + ["updated_at"])
        logger.info(f"Team updated: id={team_id}, fields={sorted(row)}")

    return get_team(team_id)


def delete_team(user, team_id):
    require_user(user)
    team = _get_team_or_404(team_id)
    _require_leader(team, user, "Only the team leader can delete the team")

    team.delete()
    logger.info(f"Team deleted: id={team_id}, by={user.pk}")


def _add_member(team, user_id, role=TeamMember.ROLE_MEMBER):
    """Membership insert shared by every join path. Full teams refuse."""
    if team.status == Team.STATUS_DISBANDED:
        raise ValidationError("This team has been disbanded")
    if TeamMember.objects.filter(team=team, user_id=user_id).exists():
        raise ValidationError("Already a member of this team")
    if team.members.count() >= team.max_size:
        raise ValidationError("Team is full")

    try:
        with transaction.atomic():
            member = TeamMember.objects.create(team=team, user_id=user_id, role=role)
    except IntegrityError:
        raise ValidationError("Already a member of this team")

    Team.objects.filter(pk=team.pk).update(updated_at=timezone.now())
    return member


def join_team(user, join_code):
    require_user(user)

    code = (join_code or "").strip().upper()
    team = Team.objects.filter(join_code=code).first()
    if team is None:
        raise NotFound("Invalid join code")

    _add_member(team, user.pk)
    logger.info(f"Team joined by code: team={team.id}, user={user.pk}")
    return get_team(team.id)


def leave_team(user, team_id):
    require_user(user)
    team = _get_team_or_404(team_id)

    if team.leader_id == user.pk:
        raise ValidationError("Transfer leadership before leaving the team")

    deleted, _ = TeamMember.objects.filter(team=team, user=user).delete()
    if not deleted:
        raise ValidationError("You are not a member of this team")
    logger.info(f"Team left: team={team_id}, user={user.pk}")


def remove_member(user, team_id, member_id):
    require_user(user)
    team = _get_team_or_404(team_id)
    _require_leader(team, user, "Only team leader can remove members")

    if str(member_id) == str(team.leader_id):
        raise ValidationError("The leader cannot be removed")

    deleted, _ = TeamMember.objects.filter(team=team, user_id=member_id).delete()
    if not deleted:
        raise NotFound("Member not found")
    logger.info(f"Team member removed: team={team_id}, member={member_id}, by={user.pk}")
    return get_team(team_id)


def transfer_leadership(user, team_id, new_leader_id):
    require_user(user)
    team = _get_team_or_404(team_id)
    _require_leader(team, user, "Only the team leader can transfer leadership")

    if str(new_leader_id) == str(user.pk):
        raise ValidationError("You are already the leader")
    if not is_team_member(team.pk, new_leader_id):
        raise ValidationError("New leader must be a member of the team")

    with transaction.atomic():
        Team.objects.filter(pk=team.pk).update(leader_id=new_leader_id, updated_at=timezone.now())
        TeamMember.objects.filter(team=team, user=user).update(role=TeamMember.ROLE_MEMBER)
        TeamMember.objects.filter(team=team, user_id=new_leader_id).update(role=TeamMember.ROLE_LEADER)

    logger.info(f"Leadership transferred: team={team_id}, {user.pk} -> {new_leader_id}")
    return get_team(team_id)


# ------------------------------------------------------------------
# Applications
# ------------------------------------------------------------------

def apply_to_team(user, team_id, message="", skills=None):
    require_user(user)
    team = _get_team_or_404(team_id)

    if is_team_member(team.pk, user.pk):
        raise ValidationError("You are already a member of this team")
    if team.status != Team.STATUS_RECRUITING:
        raise ValidationError("This team is not recruiting")
    if TeamApplication.objects.filter(
        team=team, applicant=user, status=TeamApplication.STATUS_PENDING
    ).exists():
        raise ValidationError("You have already applied to this team")

    application = TeamApplication.objects.create(
        team=team,
        applicant=user,
        message=message or "",
        skills=list(skills or []),
    )
    logger.info(f"Team application: team={team_id}, applicant={user.pk}")
    return application_from_row(
        fetch_single(TeamApplication.objects.filter(pk=application.pk), *APPLICATION_SELECT)
    )


def get_team_applications(user, team_id):
    require_user(user)
    team = _get_team_or_404(team_id)
    _require_leader(team, user, "Only the team leader can view applications")

    rows = fetch_rows(
        TeamApplication.objects.filter(team=team).order_by("-applied_at"),
        *APPLICATION_SELECT,
    )
    applicants = {
        row["id"]: profile_from_row(row)
        for row in fetch_rows(
            User.objects.filter(pk__in={r["applicant_id"] for r in rows}),
            *PROFILE_SELECT,
        )
    }
    summary = team_from_row(fetch_single(Team.objects.filter(pk=team.pk), *TEAM_SELECT))
    return [
        application_from_row(row, applicant=applicants.get(row["applicant_id"]), team=summary)
        for row in rows
    ]


def get_user_applications(user):
    require_user(user)

    rows = fetch_rows(
        TeamApplication.objects.filter(applicant=user).order_by("-applied_at"),
        *APPLICATION_SELECT,
    )
    teams = _team_summaries({row["team_id"] for row in rows})
    return [application_from_row(row, team=teams.get(row["team_id"])) for row in rows]


def review_application(user, application_id, status):
    """
    Accept or reject a pending application. Accepting adds the applicant
    as a member; both writes happen in one transaction.
    """
    require_user(user)
    if status not in (TeamApplication.STATUS_ACCEPTED, TeamApplication.STATUS_REJECTED):
        raise ValidationError({"status": "Must be accepted or rejected"})

    application = TeamApplication.objects.select_related("team").filter(pk=application_id).first()
    if application is None:
        raise NotFound("Application not found")
    _require_leader(application.team, user, "Only the team leader can review applications")
    if application.status != TeamApplication.STATUS_PENDING:
        raise ValidationError("Application has already been reviewed")

    with transaction.atomic():
        if status == TeamApplication.STATUS_ACCEPTED:
            _add_member(application.team, application.applicant_id)
        application.status = status
        application.reviewed_at = timezone.now()
        application.reviewed_by = user
        application.save(update_fields=["status", "reviewed_at", "reviewed_by"])

    logger.info(f"Application reviewed: id={application_id}, status={status}, by={user.pk}")
    return application_from_row(
        fetch_single(TeamApplication.objects.filter(pk=application.pk), *APPLICATION_SELECT)
    )


# ------------------------------------------------------------------
# Invitations
# ------------------------------------------------------------------

def invite_to_team(user, team_id, invitee_id, message=""):
    require_user(user)
    team = _get_team_or_404(team_id)

    if not is_team_member(team.pk, user.pk):
        raise PermissionDenied("Only team members can send invitations")
    if not User.objects.filter(pk=invitee_id).exists():
        raise ValidationError({"inviteeId": "User not found"})
    if is_team_member(team.pk, invitee_id):
        raise ValidationError("User is already a member of this team")
    if TeamInvitation.objects.filter(
        team=team, invitee_id=invitee_id, status=TeamInvitation.STATUS_PENDING
    ).exists():
        raise ValidationError("User already has a pending invitation")

    invitation = TeamInvitation.objects.create(
        team=team,
        inviter=user,
        invitee_id=invitee_id,
        message=message or "",
    )
    logger.info(f"Team invitation: team={team_id}, invitee={invitee_id}, by={user.pk}")
    return invitation_from_row(
        fetch_single(TeamInvitation.objects.filter(pk=invitation.pk), *INVITATION_SELECT)
    )


def get_team_invitations(user, team_id):
    require_user(user)
    team = _get_team_or_404(team_id)
    if not is_team_member(team.pk, user.pk):
        raise PermissionDenied("Only team members can view invitations")

    rows = fetch_rows(
        TeamInvitation.objects.filter(team=team).order_by("-sent_at"),
        *INVITATION_SELECT,
    )
    people = _profile_summaries(
        {row["inviter_id"] for row in rows} | {row["invitee_id"] for row in rows}
    )
    summary = team_from_row(fetch_single(Team.objects.filter(pk=team.pk), *TEAM_SELECT))
    return [
        invitation_from_row(
            row,
            inviter=people.get(row["inviter_id"]),
            invitee=people.get(row["invitee_id"]),
            team=summary,
        )
        for row in rows
    ]


def get_user_invitations(user):
    """Pending invitations addressed to ``user``."""
    require_user(user)

    rows = fetch_rows(
        TeamInvitation.objects.filter(
            invitee=user, status=TeamInvitation.STATUS_PENDING
        ).order_by("-sent_at"),
        *INVITATION_SELECT,
    )
    inviters = _profile_summaries({row["inviter_id"] for row in rows})
    teams = _team_summaries({row["team_id"] for row in rows})
    return [
        invitation_from_row(
            row,
            inviter=inviters.get(row["inviter_id"]),
            team=teams.get(row["team_id"]),
        )
        for row in rows
    ]


def respond_to_invitation(user, invitation_id, status):
    require_user(user)
    if status not in (TeamInvitation.STATUS_ACCEPTED, TeamInvitation.STATUS_REJECTED):
        raise ValidationError({"status": "Must be accepted or rejected"})

    invitation = TeamInvitation.objects.select_related("team").filter(
        pk=invitation_id, invitee=user
    ).first()
    if invitation is None:
        raise NotFound("Invitation not found")
    if invitation.status != TeamInvitation.STATUS_PENDING:
        raise ValidationError("Invitation has already been answered")

    with transaction.atomic():
        if status == TeamInvitation.STATUS_ACCEPTED:
            _add_member(invitation.team, user.pk)
        invitation.status = status
        invitation.responded_at = timezone.now()
        invitation.save(update_fields=["status", "responded_at"])

    logger.info(f"Invitation answered: id={invitation_id}, status={status}, user={user.pk}")
    return invitation_from_row(
        fetch_single(TeamInvitation.objects.filter(pk=invitation.pk), *INVITATION_SELECT)
    )

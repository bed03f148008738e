# ux/services/dashboard.py

from events.models import EventRegistration
from teams.models import TeamApplication, TeamInvitation
from teams.services import get_user_teams
from teammail.services import unread_mail_count


def get_dashboard_summary(user):
    # 1️⃣ Teams
    teams = get_user_teams(user)

    # 2️⃣ Registrations
    registered_event_ids = list(
        EventRegistration.objects.filter(user=user).values_list("event_id", flat=True)
    )

    # 3️⃣ Pending applications & invitations
    pending_applications = TeamApplication.objects.filter(
        applicant=user,
        status=TeamApplication.STATUS_PENDING,
    ).count()
    pending_invitations = TeamInvitation.objects.filter(
        invitee=user,
        status=TeamInvitation.STATUS_PENDING,
    ).count()

    return {
        "stats": {
            "teams": len(teams),
            "registrations": len(registered_event_ids),
            "pending_applications": pending_applications,
            "pending_invitations": pending_invitations,
            "unread_mails": unread_mail_count(user),
        },
        "teams": teams,
        "registered_event_ids": registered_event_ids,
    }

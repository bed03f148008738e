# ux/services/organizer.py

from django.db.models import Count, Q

from events.models import Event
from judging.models import Scorecard


def get_managed_events(user):
    """
    Per-event summary for every event the user organizes, newest first.

    ``participant_drift`` is the cached participant count minus the real
    registration count; non-zero until the reconciliation job runs.
    """
    events_qs = (
        Event.objects
        .filter(organizer=user)
        .annotate(
            registrations_count=Count("registrations", distinct=True),
            teams_count=Count("teams", distinct=True),
            submissions_count=Count(
                "submissions",
                filter=~Q(submissions__status="draft"),
                distinct=True,
            ),
            judges_count=Count("judge_assignments", distinct=True),
        )
        .order_by("-start_date")
    )

    events = []
    for event in events_qs:
        events.append({
            "id": event.id,
            "slug": event.slug,
            "title": event.title,
            "status": event.status,
            "start_date": event.start_date,
            "registrations": event.registrations_count,
            "participant_count": event.participant_count,
            "participant_drift": event.participant_count - event.registrations_count,
            "teams": event.teams_count,
            "submissions": event.submissions_count,
            "judges": event.judges_count,
            "scorecards_submitted": Scorecard.objects.filter(
                event=event,
                status=Scorecard.STATUS_SUBMITTED,
            ).count(),
        })

    return events

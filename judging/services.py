# judging/services.py

import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from core.backend import fetch_rows, fetch_single, fetch_single_or_none, require_user
from events.mappers import EVENT_SELECT, event_from_row
from events.models import Event
from submissions.models import Submission
from submissions.services import recompute_average_score
from users.mappers import PROFILE_SELECT, profile_from_row
from .mappers import JUDGE_SELECT, SCORECARD_SELECT, judge_from_row, scorecard_from_row, scorecard_to_row
from .models import EventJudge, Judge, Scorecard
from .scoring import compute_total_score

logger = logging.getLogger("hackhub.judging")

User = get_user_model()


def with_profiles(rows):
    profiles = {
        row["id"]: profile_from_row(row)
        for row in fetch_rows(
            User.objects.filter(pk__in=[r["profile_id"] for r in rows]),
            *PROFILE_SELECT,
        )
    }
    return [judge_from_row(row, profiles.get(row["profile_id"])) for row in rows]


def get_judges():
    return with_profiles(fetch_rows(Judge.objects.order_by("-events_judged"), *JUDGE_SELECT))


def get_judge(judge_id):
    row = fetch_single_or_none(Judge.objects.filter(pk=judge_id), *JUDGE_SELECT)
    if row is None:
        return None
    return with_profiles([row])[0]


def _require_organizer(user, event_id):
    organizer_id = Event.objects.filter(pk=event_id).values_list("organizer_id", flat=True).first()
    if organizer_id is None:
        raise NotFound("Event not found")
    if organizer_id != user.pk and not user.is_staff:
        raise PermissionDenied("Only the organizer can manage judges for this event")


def assign_judge_to_event(user, event_id, judge_id):
    require_user(user)
    _require_organizer(user, event_id)
    if not Judge.objects.filter(pk=judge_id).exists():
        raise ValidationError({"judgeId": "Judge not found"})

    try:
        with transaction.atomic():
            EventJudge.objects.create(event_id=event_id, judge_id=judge_id)
            Judge.objects.filter(pk=judge_id).update(events_judged=F("events_judged") + 1)
    except IntegrityError:
        raise ValidationError("Judge is already assigned to this event")

    logger.info(f"Judge assigned: event={event_id}, judge={judge_id}, by={user.pk}")
    return get_event_judges(event_id)


def remove_judge_from_event(user, event_id, judge_id):
    require_user(user)
    _require_organizer(user, event_id)

    with transaction.atomic():
        deleted, _ = EventJudge.objects.filter(event_id=event_id, judge_id=judge_id).delete()
        if not deleted:
            raise NotFound("Judge is not assigned to this event")
        Judge.objects.filter(pk=judge_id, events_judged__gt=0).update(events_judged=F("events_judged") - 1)

    logger.info(f"Judge removed: event={event_id}, judge={judge_id}, by={user.pk}")


def get_event_judges(event_id):
    judge_ids = list(EventJudge.objects.filter(event_id=event_id).values_list("judge_id", flat=True))
    return with_profiles(fetch_rows(Judge.objects.filter(pk__in=judge_ids), *JUDGE_SELECT))


def get_judge_events(user, judge_id=None):
    target = judge_id or require_user(user).pk
    event_ids = list(EventJudge.objects.filter(judge_id=target).values_list("event_id", flat=True))
    rows = fetch_rows(Event.objects.filter(pk__in=event_ids).order_by("-start_date"), *EVENT_SELECT)
    return [event_from_row(row) for row in rows]


# ------------------------------------------------------------------
# Scorecards
# ------------------------------------------------------------------

def get_scorecard(submission_id, judge_id):
    return scorecard_from_row(
        fetch_single_or_none(
            Scorecard.objects.filter(submission_id=submission_id, judge_id=judge_id),
            *SCORECARD_SELECT,
        )
    )


def get_submission_scorecards(submission_id):
    rows = fetch_rows(
        Scorecard.objects.filter(
            submission_id=submission_id, status=Scorecard.STATUS_SUBMITTED
        ).order_by("submitted_at"),
        *SCORECARD_SELECT,
    )
    return [scorecard_from_row(row) for row in rows]


def _criteria_for(event_id):
    return Event.objects.filter(pk=event_id).values_list("criteria", flat=True).first() or []


def create_scorecard(user, submission_id, data):
    """
    Start a draft scorecard for ``submission_id`` judged by ``user``, who
    must be assigned to the submission's event.
    """
    require_user(user)

    submission = Submission.objects.filter(pk=submission_id).first()
    if submission is None:
        raise ValidationError({"submissionId": "Submission not found"})
    if not EventJudge.objects.filter(event_id=submission.event_id, judge_id=user.pk).exists():
        raise PermissionDenied("You are not a judge for this event")

    row = scorecard_to_row(data)
    row["total_score"] = compute_total_score(row.get("scores"), _criteria_for(submission.event_id))

    try:
        with transaction.atomic():
            scorecard = Scorecard.objects.create(
                submission=submission,
                judge=user,
                event_id=submission.event_id,
                status=Scorecard.STATUS_DRAFT,
                **row,
            )
    except IntegrityError:
        raise ValidationError("You already have a scorecard for this submission")

    logger.info(f"Scorecard created: id={scorecard.id}, submission={submission_id}, judge={user.pk}")
    return scorecard_from_row(fetch_single(Scorecard.objects.filter(pk=scorecard.pk), *SCORECARD_SELECT))


def _get_own_scorecard(user, scorecard_id):
    scorecard = Scorecard.objects.filter(pk=scorecard_id).first()
    if scorecard is None:
        raise NotFound("Scorecard not found")
    if scorecard.judge_id != user.pk:
        raise PermissionDenied("Only the judge who owns this scorecard can change it")
    return scorecard


def update_scorecard(user, scorecard_id, data):
    require_user(user)
    scorecard = _get_own_scorecard(user, scorecard_id)
    if scorecard.status == Scorecard.STATUS_SUBMITTED:
        raise ValidationError("Submitted scorecards cannot be edited")

    row = scorecard_to_row(data)
    if "scores" in row:
        row["total_score"] = compute_total_score(row["scores"], _criteria_for(scorecard.event_id))

    if row:
        Scorecard.objects.filter(pk=scorecard.pk).update(updated_at=timezone.now(), **row)
    return scorecard_from_row(fetch_single(Scorecard.objects.filter(pk=scorecard.pk), *SCORECARD_SELECT))


def submit_scorecard(user, scorecard_id):
    """Lock the scorecard and refresh the submission's average score."""
    require_user(user)
    scorecard = _get_own_scorecard(user, scorecard_id)
    if scorecard.status == Scorecard.STATUS_SUBMITTED:
        raise ValidationError("Scorecard has already been submitted")
    if not scorecard.scores:
        raise ValidationError({"scores": "Score at least one criterion before submitting"})

    with transaction.atomic():
        scorecard.status = Scorecard.STATUS_SUBMITTED
        scorecard.submitted_at = timezone.now()
        scorecard.save(update_fields=["status", "submitted_at", "updated_at"])
        average = recompute_average_score(scorecard.submission_id)

    logger.info(
        f"Scorecard submitted: id={scorecard_id}, submission={scorecard.submission_id}, average={average}"
    )
    return scorecard_from_row(fetch_single(Scorecard.objects.filter(pk=scorecard.pk), *SCORECARD_SELECT))

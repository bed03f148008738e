# submissions/services.py

import logging
import os
import uuid

from django.db.models import Avg, F, Q
from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from core.backend import fetch_rows, fetch_single, fetch_single_or_none, require_user
from core.exceptions import ServiceUnavailable
from core.supabase_client import get_public_url, remove_submission_images, upload_submission_image
from events.models import Event
from judging.models import Scorecard
from teams.models import TeamMember
from .mappers import SUBMISSION_SELECT, submission_from_row, submission_to_row
from .models import Submission

logger = logging.getLogger("hackhub.submissions")

ALLOWED_IMAGE_TYPES = {"image/png", "image/jpeg", "image/webp", "image/gif"}
MAX_IMAGE_BYTES = 5 * 1024 * 1024
MAX_IMAGES = 10

GALLERY_SORTS = {
    "newest": (F("submitted_at").desc(nulls_last=True),),
    "top": (F("average_score").desc(nulls_last=True), F("submitted_at").desc(nulls_last=True)),
}


def get_submissions(event_id=None):
    """Publicly listed submissions: only ``submitted`` ones."""
    qs = Submission.objects.filter(status=Submission.STATUS_SUBMITTED)
    if event_id:
        qs = qs.filter(event_id=event_id)
    return [submission_from_row(row) for row in fetch_rows(qs.order_by("-submitted_at"), *SUBMISSION_SELECT)]


def get_gallery(event_id=None, track=None, tag=None, query="", sort="newest"):
    qs = Submission.objects.filter(status__in=Submission.PUBLIC_STATUSES)
    if event_id:
        qs = qs.filter(event_id=event_id)
    if track:
        qs = qs.filter(track__iexact=track)
    if query:
        qs = qs.filter(
            Q(title__icontains=query)
            | Q(tagline__icontains=query)
            | Q(description__icontains=query)
        )

    qs = qs.order_by(*GALLERY_SORTS.get(sort, GALLERY_SORTS["newest"]))
    rows = fetch_rows(qs, *SUBMISSION_SELECT)
    if tag:
        wanted = tag.lower()
        rows = [row for row in rows if wanted in [t.lower() for t in row.get("tags") or []]]
    return [submission_from_row(row) for row in rows]


def get_submission(submission_id):
    return submission_from_row(
        fetch_single_or_none(Submission.objects.filter(pk=submission_id), *SUBMISSION_SELECT)
    )


def get_user_submissions(user, user_id=None):
    target = user_id or require_user(user).pk
    rows = fetch_rows(
        Submission.objects.filter(submitted_by_id=target).order_by("-created_at"),
        *SUBMISSION_SELECT,
    )
    return [submission_from_row(row) for row in rows]


def _get_own_submission(user, submission_id):
    submission = Submission.objects.filter(pk=submission_id).first()
    if submission is None:
        raise NotFound("Submission not found")
    if submission.submitted_by_id != user.pk:
        raise PermissionDenied("Only the submitter can change this submission")
    return submission


def _check_team(user, row):
    team_id = row.get("team_id")
    if team_id and not TeamMember.objects.filter(team_id=team_id, user=user).exists():
        raise ValidationError({"teamId": "You are not a member of this team"})


def create_submission(user, data):
    """New submissions always start as drafts owned by ``user``."""
    require_user(user)

    row = submission_to_row(data)
    if not Event.objects.filter(pk=row.get("event_id")).exists():
        raise ValidationError({"eventId": "Event not found"})
    _check_team(user, row)

    submission = Submission.objects.create(
        submitted_by=user,
        status=Submission.STATUS_DRAFT,
        **row,
    )
    logger.info(f"Submission created: id={submission.id}, event={submission.event_id}, by={user.pk}")
    return get_submission(submission.id)


def update_submission(user, submission_id, data):
    require_user(user)
    submission = _get_own_submission(user, submission_id)

    row = submission_to_row(data)
    row.pop("event_id", None)
    _check_team(user, row)

    if row:
        Submission.objects.filter(pk=submission.pk).update(updated_at=timezone.now(), **row)
        logger.info(f"Submission updated: id={submission_id}, fields={sorted(row)}")

    return submission_from_row(fetch_single(Submission.objects.filter(pk=submission.pk), *SUBMISSION_SELECT))


def submit_submission(user, submission_id):
    require_user(user)
    submission = _get_own_submission(user, submission_id)
    if submission.status != Submission.STATUS_DRAFT:
        raise ValidationError("Submission has already been submitted")

    submission.status = Submission.STATUS_SUBMITTED
    submission.submitted_at = timezone.now()
    submission.save(update_fields=["status", "submitted_at", "updated_at"])

    logger.info(f"Submission submitted: id={submission_id}, by={user.pk}")
    return get_submission(submission.pk)


def upload_images(user, submission_id, files):
    """
    Push screenshots to Supabase Storage and append their public URLs to
    the submission's ``images``.
    """
    require_user(user)
    submission = _get_own_submission(user, submission_id)

    if not files:
        raise ValidationError({"images": "No files uploaded"})
    if len(submission.images or []) + len(files) > MAX_IMAGES:
        raise ValidationError({"images": f"A submission can have at most {MAX_IMAGES} images"})

    for upload in files:
        if upload.content_type not in ALLOWED_IMAGE_TYPES:
            raise ValidationError({"images": f"Unsupported file type: {upload.content_type}"})
        if upload.size > MAX_IMAGE_BYTES:
            raise ValidationError({"images": f"{upload.name} is larger than 5 MB"})

    urls = []
    uploaded = []
    for upload in files:
        ext = os.path.splitext(upload.name)[1].lower()
        path = upload_submission_image(
            submission.pk, f"{uuid.uuid4().hex}{ext}", upload.read(), upload.content_type
        )
        if path is None:
            if uploaded:
                remove_submission_images(uploaded)
            raise ServiceUnavailable("Image storage is unavailable")
        uploaded.append(path)
        urls.append(get_public_url(path) or path)

    submission.images = list(submission.images or []) + urls
    submission.save(update_fields=["images", "updated_at"])
    return get_submission(submission.pk)


def recompute_average_score(submission_id):
    """Average of the submitted scorecards' totals, or None without any."""
    average = Scorecard.objects.filter(
        submission_id=submission_id,
        status=Scorecard.STATUS_SUBMITTED,
        total_score__isnull=False,
    ).aggregate(avg=Avg("total_score"))["avg"]

    if average is not None:
        average = round(average, 2)
    Submission.objects.filter(pk=submission_id).update(average_score=average)
    return average

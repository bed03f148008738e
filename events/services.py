# events/services.py

import logging

from django.contrib.auth import get_user_model
from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Count, F, Q
from django.utils.text import slugify
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from core.analytics import track_registration
from core.backend import fetch_rows, fetch_single, fetch_single_or_none, require_user
from users.mappers import PROFILE_SELECT, profile_from_row
from .mappers import EVENT_SELECT, event_from_row, event_to_row
from .models import Event, EventRegistration

logger = logging.getLogger("hackhub.events")

User = get_user_model()

FEATURED_LIMIT = 6

SORT_ORDERINGS = {
    "date": ("start_date",),
    "popular": ("-participant_count",),
    "prize": ("-prize_pool",),
}
DEFAULT_ORDERING = ("-start_date",)


def get_events():
    rows = fetch_rows(Event.objects.order_by(*DEFAULT_ORDERING), *EVENT_SELECT)
    return [event_from_row(row) for row in rows]


def get_event(slug):
    return event_from_row(fetch_single_or_none(Event.objects.filter(slug=slug), *EVENT_SELECT))


def get_event_by_id(event_id):
    return event_from_row(fetch_single_or_none(Event.objects.filter(pk=event_id), *EVENT_SELECT))


def get_featured_events():
    qs = Event.objects.order_by("-participant_count")[:FEATURED_LIMIT]
    return [event_from_row(row) for row in fetch_rows(qs, *EVENT_SELECT)]


def _unique_slug(base):
    base = slugify(base)[:240] or "event"
    slug = base
    counter = 1
    while Event.objects.filter(slug=slug).exists():
        counter += 1
        slug = f"{base}-{counter}"
    return slug


def create_event(user, data):
    """
    Insert an event owned by ``user``. A missing slug is derived from the
    title.
    """
    require_user(user)

    row = event_to_row(data)
    row["slug"] = row.get("slug") or _unique_slug(row.get("title", ""))
    if Event.objects.filter(slug=row["slug"]).exists():
        raise ValidationError({"slug": "An event with this slug already exists"})

    event = Event.objects.create(organizer=user, **row)
    logger.info(f"Event created: id={event.id}, slug={event.slug}, organizer={user.pk}")
    return get_event_by_id(event.id)


def update_event(user, event_id, data):
    require_user(user)

    organizer_id = Event.objects.filter(pk=event_id).values_list("organizer_id", flat=True).first()
    if organizer_id is None:
        raise NotFound("Event not found")
    if organizer_id != user.pk and not user.is_staff:
        raise PermissionDenied("Only the organizer can edit this event")

    row = event_to_row(data)
    if "slug" in row and Event.objects.filter(slug=row["slug"]).exclude(pk=event_id).exists():
        raise ValidationError({"slug": "An event with this slug already exists"})

    if row:
        Event.objects.filter(pk=event_id).update(**row)
        logger.info(f"Event updated: id={event_id}, fields={sorted(row)}")

    return event_from_row(fetch_single(Event.objects.filter(pk=event_id), *EVENT_SELECT))


def search_events(query="", status=None, event_format=None, prize_min=None, sort_by=None):
    qs = Event.objects.all()

    if query:
        qs = qs.filter(Q(title__icontains=query) | Q(description__icontains=query))
    if status:
        qs = qs.filter(status=status)
    if event_format:
        qs = qs.filter(format=event_format)
    if prize_min:
        qs = qs.filter(prize_pool__gte=prize_min)

    qs = qs.order_by(*SORT_ORDERINGS.get(sort_by, DEFAULT_ORDERING))
    return [event_from_row(row) for row in fetch_rows(qs, *EVENT_SELECT)]


# ------------------------------------------------------------------
# Participant counters
# ------------------------------------------------------------------

def increment_participant_count(event_id):
    """
    Bump the cached participant count in place. Failures are logged and
    swallowed; the reconciliation job repairs any drift.
    """
    try:
        Event.objects.filter(pk=event_id).update(participant_count=F("participant_count") + 1)
        return True
    except DatabaseError as exc:
        logger.warning(f"Failed to update participant count: event={event_id}, error={exc}")
        return False


def decrement_participant_count(event_id):
    """The count never goes below zero."""
    try:
        Event.objects.filter(pk=event_id, participant_count__gt=0).update(
            participant_count=F("participant_count") - 1
        )
        return True
    except DatabaseError as exc:
        logger.warning(f"Failed to update participant count: event={event_id}, error={exc}")
        return False


def participant_count_drift():
    """
    Events whose cached count disagrees with their registration rows,
    as ``{event_id: (cached, actual)}``.
    """
    rows = Event.objects.annotate(actual=Count("registrations")).values_list(
        "id", "participant_count", "actual"
    )
    return {event_id: (cached, actual) for event_id, cached, actual in rows if cached != actual}


def reconcile_participant_counts():
    fixed = 0
    for event_id, (cached, actual) in participant_count_drift().items():
        Event.objects.filter(pk=event_id).update(participant_count=actual)
        logger.info(f"Participant count reconciled: event={event_id}, {cached} -> {actual}")
        fixed += 1
    return fixed


# ------------------------------------------------------------------
# Registrations
# ------------------------------------------------------------------

def register_for_event(user, event_id):
    require_user(user)

    if not Event.objects.filter(pk=event_id).exists():
        raise NotFound("Event not found")
    if EventRegistration.objects.filter(event_id=event_id, user=user).exists():
        raise ValidationError("Already registered for this event")

    try:
        with transaction.atomic():
            registration = EventRegistration.objects.create(event_id=event_id, user=user)
    except IntegrityError:
        raise ValidationError("Already registered for this event")

    increment_participant_count(event_id)
    track_registration(event_id, user.pk)
    logger.info(f"User registered: event={event_id}, user={user.pk}")
    return {
        "id": registration.id,
        "eventId": event_id,
        "userId": user.pk,
        "registeredAt": registration.registered_at,
    }


def unregister_from_event(user, event_id):
    require_user(user)

    deleted, _ = EventRegistration.objects.filter(event_id=event_id, user=user).delete()
    if not deleted:
        raise NotFound("Registration not found")

    decrement_participant_count(event_id)
    logger.info(f"User unregistered: event={event_id}, user={user.pk}")


def get_user_event_registrations(user, user_id=None):
    """Event ids the user (or ``user_id``) is registered for."""
    target = user_id or require_user(user).pk
    return list(
        EventRegistration.objects.filter(user_id=target).values_list("event_id", flat=True)
    )


def get_event_registrations(user, event_id):
    """Registrations of an event, newest first, with the registrant profile."""
    require_user(user)

    organizer_id = Event.objects.filter(pk=event_id).values_list("organizer_id", flat=True).first()
    if organizer_id is None:
        raise NotFound("Event not found")
    if organizer_id != user.pk and not user.is_staff:
        raise PermissionDenied("Only the organizer can view registrations")

    registrations = fetch_rows(
        EventRegistration.objects.filter(event_id=event_id).order_by("-registered_at"),
        "id", "event_id", "user_id", "registered_at",
    )
    profiles = {
        row["id"]: profile_from_row(row)
        for row in fetch_rows(
            User.objects.filter(pk__in=[reg["user_id"] for reg in registrations]),
            *PROFILE_SELECT,
        )
    }
    return [
        {
            "id": reg["id"],
            "eventId": reg["event_id"],
            "userId": reg["user_id"],
            "registeredAt": reg["registered_at"],
            "user": profiles.get(reg["user_id"]),
        }
        for reg in registrations
    ]

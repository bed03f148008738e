import uuid
from datetime import timedelta
from unittest import mock

from django.db import DatabaseError
from django.test import TestCase
from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from events import services
from events.mappers import EVENT_FIELDS, event_from_row, event_to_row
from events.models import Event, EventRegistration
from users.models import User


def make_event(organizer, slug="hack-week", **extra):
    now = timezone.now()
    defaults = {
        "slug": slug,
        "title": slug.replace("-", " ").title(),
        "start_date": now,
        "end_date": now + timedelta(days=2),
        "organizer": organizer,
    }
    defaults.update(extra)
    return Event.objects.create(**defaults)


class ParticipantCountTests(TestCase):
    def setUp(self):
        self.organizer = User.objects.create_user(username="org", password="pass")
        self.alice = User.objects.create_user(username="alice", password="pass")
        self.event = make_event(self.organizer)

    def count(self):
        return Event.objects.get(pk=self.event.pk).participant_count

    def test_register_bumps_count_and_duplicate_is_refused(self):
        registration = services.register_for_event(self.alice, self.event.id)
        self.assertEqual(registration["eventId"], self.event.id)
        self.assertEqual(self.count(), 1)

        with self.assertRaises(ValidationError):
            services.register_for_event(self.alice, self.event.id)
        self.assertEqual(self.count(), 1)

    def test_register_unknown_event(self):
        with self.assertRaises(NotFound):
            services.register_for_event(self.alice, uuid.uuid4())

    def test_unregister_decrements_but_never_below_zero(self):
        services.register_for_event(self.alice, self.event.id)
        Event.objects.filter(pk=self.event.pk).update(participant_count=0)

        services.unregister_from_event(self.alice, self.event.id)
        self.assertEqual(self.count(), 0)
        self.assertFalse(EventRegistration.objects.filter(event=self.event, user=self.alice).exists())

        with self.assertRaises(NotFound):
            services.unregister_from_event(self.alice, self.event.id)

    def test_counter_failure_is_logged_not_raised(self):
        with mock.patch("events.services.Event.objects.filter", side_effect=DatabaseError("down")):
            with self.assertLogs("hackhub.events", level="WARNING"):
                self.assertFalse(services.increment_participant_count(self.event.id))

    def test_drift_and_reconcile(self):
        EventRegistration.objects.create(event=self.event, user=self.alice)
        Event.objects.filter(pk=self.event.pk).update(participant_count=5)

        self.assertEqual(services.participant_count_drift(), {self.event.id: (5, 1)})
        self.assertEqual(services.reconcile_participant_counts(), 1)
        self.assertEqual(self.count(), 1)
        self.assertEqual(services.participant_count_drift(), {})

    def test_my_registrations_and_organizer_view(self):
        services.register_for_event(self.alice, self.event.id)
        self.assertEqual(services.get_user_event_registrations(self.alice), [self.event.id])

        with self.assertRaises(PermissionDenied):
            services.get_event_registrations(self.alice, self.event.id)

        registrations = services.get_event_registrations(self.organizer, self.event.id)
        self.assertEqual(registrations[0]["user"]["username"], "alice")


class EventServiceTests(TestCase):
    def setUp(self):
        self.organizer = User.objects.create_user(username="org", password="pass")
        self.other = User.objects.create_user(username="other", password="pass")

    def test_create_derives_unique_slug(self):
        now = timezone.now()
        data = {"title": "AI Jam", "startDate": now, "endDate": now + timedelta(days=1)}
        first = services.create_event(self.organizer, data)
        second = services.create_event(self.organizer, data)
        self.assertEqual(first["slug"], "ai-jam")
        self.assertEqual(second["slug"], "ai-jam-2")
        self.assertEqual(first["organizerId"], self.organizer.id)
        self.assertEqual(first["participantCount"], 0)

    def test_only_organizer_updates(self):
        event = make_event(self.organizer)
        with self.assertRaises(PermissionDenied):
            services.update_event(self.other, event.id, {"title": "Hijacked"})

        updated = services.update_event(self.organizer, event.id, {"prizePool": 1000})
        self.assertEqual(updated["prizePool"], 1000)

    def test_search_filters_and_sorts(self):
        make_event(self.organizer, "small", prize_pool=100, participant_count=50)
        make_event(self.organizer, "big", prize_pool=5000, participant_count=10, format=Event.FORMAT_IN_PERSON)

        by_prize = services.search_events(sort_by="prize")
        self.assertEqual([e["slug"] for e in by_prize], ["big", "small"])
        by_popularity = services.search_events(sort_by="popular")
        self.assertEqual([e["slug"] for e in by_popularity], ["small", "big"])

        self.assertEqual([e["slug"] for e in services.search_events(prize_min=1000)], ["big"])
        self.assertEqual(
            [e["slug"] for e in services.search_events(event_format=Event.FORMAT_IN_PERSON)],
            ["big"],
        )
        self.assertEqual([e["slug"] for e in services.search_events(query="SMA")], ["small"])

    def test_missing_event_is_none(self):
        self.assertIsNone(services.get_event("nope"))


class EventMapperTests(TestCase):
    def test_round_trip_reproduces_every_column(self):
        organizer = User.objects.create_user(username="org", password="pass")
        event = make_event(
            organizer,
            tagline="Build things",
            long_description="Long",
            tracks=["AI"],
            tags=["ml"],
            judges=["j1"],
            sponsors=["Acme"],
            socials={"x": "@hack"},
            links={"discord": "https://discord.example"},
            hero={"image": "hero.png"},
            criteria=[{"name": "Impact", "percentage": 100}],
            why_join=["Fun"],
            gallery=["a.png"],
            eligibility=["Students"],
            community={"size": 10},
            contact={"email": "team@example.com"},
            prizes=[{"place": 1, "amount": 100}],
            timeline=[{"date": "2026-01-01", "label": "Kickoff"}],
            rules=["Be nice"],
            faqs=[{"q": "?", "a": "!"}],
        )
        row = Event.objects.filter(pk=event.pk).values(*services.EVENT_SELECT)[0]

        back = event_to_row(event_from_row(row))
        for _, column, _ in EVENT_FIELDS:
            self.assertEqual(back[column], row[column])

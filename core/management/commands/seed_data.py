from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from events.models import Event, EventRegistration
from judging.models import EventJudge, Judge
from teams.models import Team, TeamMember
from teams.services import generate_join_code

User = get_user_model()


class Command(BaseCommand):
    help = "Seeds the database with sample hackers, an event, a team and a judge"

    def _user(self, username, role, **defaults):
        user, created = User.objects.get_or_create(
            username=username,
            defaults={"email": f"{username}@example.com", "role": role, **defaults},
        )
        if created:
            user.set_password("password")
            user.save()
        return user

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding data...")

        organizer = self._user("organizer", User.ROLE_ORGANIZER, full_name="Olivia Organizer")
        alice = self._user(
            "alice", User.ROLE_PARTICIPANT,
            full_name="Alice Hacker",
            skills=["React", "TypeScript", "Node.js"],
            preferred_roles=["Frontend Developer"],
        )
        bob = self._user(
            "bob", User.ROLE_PARTICIPANT,
            full_name="Bob Builder",
            skills=["Python", "Django", "PostgreSQL"],
            preferred_roles=["Backend Developer"],
        )
        judge_user = self._user("judy", User.ROLE_JUDGE, full_name="Judy Judge")

        now = timezone.now()
        event, created = Event.objects.get_or_create(
            slug="build-for-good",
            defaults={
                "title": "Build for Good",
                "tagline": "48 hours to ship something that matters",
                "description": "A weekend hackathon for social impact projects.",
                "start_date": now + timezone.timedelta(days=12),
                "end_date": now + timezone.timedelta(days=14),
                "registration_open": now,
                "registration_close": now + timezone.timedelta(days=11),
                "status": Event.STATUS_REGISTRATION_OPEN,
                "format": Event.FORMAT_HYBRID,
                "location": "Innovation Hub",
                "prize_pool": 5000,
                "organizer": organizer,
                "tracks": ["Climate", "Health", "Education"],
                "tags": ["social-impact", "open-source"],
                "criteria": [
                    {"name": "Impact", "percentage": 40, "description": "Who does it help?"},
                    {"name": "Execution", "percentage": 40, "description": "Does it work?"},
                    {"name": "Presentation", "percentage": 20, "description": "Is it clear?"},
                ],
            },
        )
        if created:
            self.stdout.write(f"Created Event: {event.title}")

        for user in (alice, bob):
            _, registered = EventRegistration.objects.get_or_create(event=event, user=user)
            if registered:
                Event.objects.filter(pk=event.pk).update(participant_count=event.registrations.count())

        team = Team.objects.filter(event=event, leader=alice).first()
        if team is None:
            team = Team.objects.create(
                name="Green Stack",
                description="Carbon tracking for small businesses.",
                event=event,
                leader=alice,
                join_code=generate_join_code(),
                skills=["Python", "React", "Data Science"],
                looking_for=["Backend Developer", "Designer"],
                track="Climate",
            )
            TeamMember.objects.create(team=team, user=alice, role=TeamMember.ROLE_LEADER)
            self.stdout.write(f"Created Team: {team.name} (join code {team.join_code})")

        judge, _ = Judge.objects.get_or_create(
            profile=judge_user,
            defaults={"title": "Staff Engineer", "company": "Acme", "events_judged": 0},
        )
        _, assigned = EventJudge.objects.get_or_create(event=event, judge=judge)
        if assigned:
            Judge.objects.filter(pk=judge.pk).update(events_judged=judge.events_judged + 1)

        self.stdout.write(self.style.SUCCESS("Seeding complete"))

from datetime import timedelta

from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from events.models import Event, EventRegistration
from judging.models import Judge
from teammail.models import TeamMail, TeamMailRecipient
from teams.models import Team, TeamApplication, TeamInvitation, TeamMember
from ux.services.leaderboards import get_leaderboard
from users.models import User


class LeaderboardTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        User.objects.create_user(username="ada", password="pass", wins=3)
        User.objects.create_user(username="bob", password="pass", wins=5)
        User.objects.create_user(username="org", password="pass", role="organizer", organized=2)
        judge = User.objects.create_user(username="judy", password="pass", role="judge")
        Judge.objects.create(profile=judge, events_judged=4)

    def test_hackers_ranked_by_wins(self):
        entries = get_leaderboard("hackers")
        self.assertEqual([(e["username"], e["rank"]) for e in entries], [("bob", 1), ("ada", 2)])

    def test_organizers_and_judges(self):
        self.assertEqual([e["username"] for e in get_leaderboard("organizers")], ["org"])
        judges = get_leaderboard("judges")
        self.assertEqual(judges[0]["eventsJudged"], 4)
        self.assertEqual(judges[0]["rank"], 1)

    def test_invalid_board(self):
        with self.assertRaises(ValueError):
            get_leaderboard("sponsors")

        resp = self.client.get("/api/ux/leaderboards/sponsors/")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)

    def test_api_envelope(self):
        resp = self.client.get("/api/ux/leaderboards/hackers/")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        body = resp.json()
        self.assertTrue(body["meta"]["success"])
        self.assertEqual(body["data"]["board"], "hackers")
        self.assertEqual(len(body["data"]["entries"]), 2)


class DashboardTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.organizer = User.objects.create_user(username="org", password="pass", role="organizer")
        self.hacker = User.objects.create_user(username="hacker", password="pass")

        now = timezone.now()
        self.event = Event.objects.create(
            slug="dash",
            title="Dash",
            start_date=now,
            end_date=now + timedelta(days=1),
            organizer=self.organizer,
            participant_count=3,
        )
        EventRegistration.objects.create(event=self.event, user=self.hacker)

        mine = Team.objects.create(name="Mine", event=self.event, leader=self.hacker, join_code="MINE01")
        TeamMember.objects.create(team=mine, user=self.hacker, role=TeamMember.ROLE_LEADER)
        TeamMember.objects.create(team=mine, user=self.organizer)

        other = Team.objects.create(name="Other", event=self.event, leader=self.organizer, join_code="OTHR01")
        TeamMember.objects.create(team=other, user=self.organizer, role=TeamMember.ROLE_LEADER)
        TeamApplication.objects.create(team=other, applicant=self.hacker)
        TeamInvitation.objects.create(team=other, inviter=self.organizer, invitee=self.hacker)

        mail = TeamMail.objects.create(team=mine, sender=self.organizer, subject="Hi", recipient_ids=[str(self.hacker.id)])
        TeamMailRecipient.objects.create(mail=mail, recipient=self.hacker)

    def test_dashboard_summary(self):
        self.client.force_authenticate(user=self.hacker)
        resp = self.client.get("/api/ux/me/dashboard/")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)

        data = resp.json()["data"]
        self.assertEqual(
            data["stats"],
            {
                "teams": 1,
                "registrations": 1,
                "pending_applications": 1,
                "pending_invitations": 1,
                "unread_mails": 1,
            },
        )
        self.assertEqual(data["teams"][0]["name"], "Mine")
        self.assertEqual(data["registered_event_ids"], [str(self.event.id)])

    def test_organizer_summary_reports_drift(self):
        self.client.force_authenticate(user=self.organizer)
        resp = self.client.get("/api/ux/organizer/events/summary/")
        events = resp.json()["data"]["events"]
        self.assertEqual(len(events), 1)
        self.assertEqual(events[0]["registrations"], 1)
        self.assertEqual(events[0]["participant_drift"], 2)
        self.assertEqual(events[0]["teams"], 2)

from datetime import timedelta

from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from events.models import Event
from teams.models import Team, TeamApplication, TeamMember
from users.models import User


class TeamApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.leader = User.objects.create_user(username="leader", password="pass")
        self.hacker = User.objects.create_user(
            username="hacker",
            password="pass",
            skills=["React", "Python"],
            preferred_roles=["Frontend Developer"],
        )

        now = timezone.now()
        self.event = Event.objects.create(
            slug="hack-week",
            title="Hack Week",
            start_date=now,
            end_date=now + timedelta(days=2),
            organizer=self.leader,
        )

    def auth(self, user):
        self.client.force_authenticate(user=user)

    def create_team(self, **extra):
        self.auth(self.leader)
        payload = {"name": "Rocket", "eventId": str(self.event.id), **extra}
        resp = self.client.post("/api/teams/", payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        return resp.json()

    def test_create_and_fetch_team(self):
        team = self.create_team(requiredSkills=["Python"], track="AI")
        self.assertEqual(len(team["joinCode"]), 6)
        self.assertEqual(team["tags"], ["AI"])

        self.client.force_authenticate(user=None)
        resp = self.client.get(f"/api/teams/{team['id']}/")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json()["name"], "Rocket")

        resp = self.client.get(f"/api/teams/?event={self.event.id}")
        self.assertEqual([t["id"] for t in resp.json()], [team["id"]])

    def test_unknown_team_is_404(self):
        resp = self.client.get("/api/teams/00000000-0000-0000-0000-000000000000/")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.json()["error"], "Team not found")

    def test_anonymous_create_is_rejected(self):
        resp = self.client.post("/api/teams/", {"name": "X", "eventId": str(self.event.id)}, format="json")
        self.assertIn(resp.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))
        self.assertFalse(Team.objects.exists())

    def test_join_by_code(self):
        team = self.create_team()
        self.auth(self.hacker)
        resp = self.client.post("/api/teams/join/", {"joinCode": team["joinCode"]}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(len(resp.json()["members"]), 2)

        resp = self.client.post("/api/teams/join/", {"joinCode": "ZZZZZZ"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)

    def test_match_queue_like_and_pass(self):
        liked = self.create_team(
            requiredSkills=["React", "Go", "Python"],
            lookingForRoles=["Frontend Developer"],
        )
        passed = self.create_team(name="Slow", requiredSkills=["Rust"])

        self.auth(self.hacker)
        resp = self.client.get("/api/teams/match/")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        data = resp.json()
        self.assertEqual(data["remaining"], 2)
        self.assertEqual(data["current"]["id"], liked["id"])
        self.assertEqual(data["current"]["matchScore"], 83)
        self.assertEqual(data["current"]["matchLabel"], "Good Match")

        resp = self.client.post(f"/api/teams/match/{liked['id']}/like/")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json()["liked"], [liked["id"]])
        self.assertEqual(resp.json()["current"]["id"], passed["id"])

        application = TeamApplication.objects.get(team_id=liked["id"], applicant=self.hacker)
        self.assertIn("React, Python", application.message)

        resp = self.client.post(f"/api/teams/match/{passed['id']}/pass/")
        self.assertEqual(resp.json()["passed"], [passed["id"]])
        self.assertIsNone(resp.json()["current"])

        resp = self.client.post("/api/teams/match/reset/")
        self.assertEqual(resp.json()["remaining"], 2)
        self.assertEqual(resp.json()["liked"], [])

    def test_malformed_event_filter_is_rejected(self):
        resp = self.client.get("/api/teams/?event=abc")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("event", resp.json()["errors"])

        self.auth(self.hacker)
        resp = self.client.get("/api/teams/match/?event=abc")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("event", resp.json()["errors"])

    def test_failed_like_leaves_session_untouched(self):
        team = self.create_team()
        TeamApplication.objects.create(team_id=team["id"], applicant=self.hacker)

        self.auth(self.hacker)
        resp = self.client.post(f"/api/teams/match/{team['id']}/like/")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.json()["error"], "You have already applied to this team")

        resp = self.client.get("/api/teams/match/")
        self.assertEqual(resp.json()["liked"], [])
        self.assertEqual(resp.json()["current"]["id"], team["id"])

    def test_application_review_flow(self):
        team = self.create_team()
        self.auth(self.hacker)
        resp = self.client.post(
            f"/api/teams/{team['id']}/applications/",
            {"message": "Let me in", "skills": ["React"]},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        application_id = resp.json()["id"]

        resp = self.client.get(f"/api/teams/{team['id']}/applications/")
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)

        self.auth(self.leader)
        resp = self.client.patch(
            f"/api/teams/applications/{application_id}/",
            {"status": "accepted"},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertTrue(TeamMember.objects.filter(team_id=team["id"], user=self.hacker).exists())

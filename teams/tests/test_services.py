import re
import uuid
from datetime import timedelta
from unittest import mock

from django.contrib.auth.models import AnonymousUser
from django.test import TestCase
from django.utils import timezone
from rest_framework.exceptions import NotAuthenticated, PermissionDenied, ValidationError

from core.backend import BackendError, NO_ROWS_CODE
from events.models import Event
from teams import services
from teams.models import Team, TeamApplication, TeamInvitation, TeamMember
from users.models import User


class TeamServiceTestCase(TestCase):
    def setUp(self):
        self.leader = User.objects.create_user(username="leader", password="pass")
        self.alice = User.objects.create_user(username="alice", password="pass")
        self.bob = User.objects.create_user(username="bob", password="pass")

        now = timezone.now()
        self.event = Event.objects.create(
            slug="hack-week",
            title="Hack Week",
            start_date=now,
            end_date=now + timedelta(days=2),
            organizer=self.leader,
        )
        self.team = services.create_team(self.leader, {
            "name": "Rocket",
            "eventId": self.event.id,
            "maxSize": 2,
            "requiredSkills": ["Python"],
        })

    def test_create_team_adds_leader_membership(self):
        self.assertEqual(self.team["leaderId"], self.leader.id)
        self.assertEqual(self.team["status"], Team.STATUS_RECRUITING)
        self.assertEqual([m["id"] for m in self.team["members"]], [self.leader.id])
        self.assertTrue(
            TeamMember.objects.filter(
                team_id=self.team["id"], user=self.leader, role=TeamMember.ROLE_LEADER
            ).exists()
        )

    def test_create_team_rolls_back_when_membership_fails(self):
        with mock.patch.object(TeamMember.objects, "create", side_effect=RuntimeError("boom")):
            with self.assertRaises(RuntimeError):
                services.create_team(self.alice, {"name": "Ghost", "eventId": self.event.id})
        self.assertFalse(Team.objects.filter(name="Ghost").exists())

    def test_create_team_requires_existing_event(self):
        with self.assertRaises(ValidationError):
            services.create_team(self.alice, {"name": "Lost", "eventId": uuid.uuid4()})

    def test_anonymous_user_is_rejected_before_any_query(self):
        with self.assertNumQueries(0):
            with self.assertRaises(NotAuthenticated):
                services.get_user_teams(AnonymousUser())

    def test_join_code_format(self):
        code = services.generate_join_code()
        self.assertRegex(code, re.compile(r"^[A-Z0-9]{6}$"))
        self.assertRegex(self.team["joinCode"], r"^[A-Z0-9]{6}$")

    def test_get_team_missing_returns_none(self):
        self.assertIsNone(services.get_team(uuid.uuid4()))

    def test_get_team_no_rows_error_returns_none(self):
        error = BackendError("JSON object requested, multiple (or no) rows returned", code=NO_ROWS_CODE)
        with mock.patch("core.backend.fetch_single", side_effect=error):
            self.assertIsNone(services.get_team(self.team["id"]))

    def test_get_team_other_backend_errors_propagate(self):
        error = BackendError("permission denied for table teams", code="42501")
        with mock.patch("core.backend.fetch_single", side_effect=error):
            with self.assertRaises(BackendError):
                services.get_team(self.team["id"])

    def test_join_by_code_and_full_team_refused(self):
        team = services.join_team(self.alice, self.team["joinCode"].lower())
        self.assertEqual(len(team["members"]), 2)

        with self.assertRaises(ValidationError):
            services.join_team(self.bob, self.team["joinCode"])
        self.assertFalse(is_member(self.team["id"], self.bob))

    def test_leader_must_transfer_before_leaving(self):
        services.join_team(self.alice, self.team["joinCode"])
        with self.assertRaises(ValidationError):
            services.leave_team(self.leader, self.team["id"])

        team = services.transfer_leadership(self.leader, self.team["id"], self.alice.id)
        self.assertEqual(team["leaderId"], self.alice.id)
        services.leave_team(self.leader, self.team["id"])
        self.assertFalse(is_member(self.team["id"], self.leader))

    def test_only_leader_removes_members(self):
        services.join_team(self.alice, self.team["joinCode"])
        with self.assertRaises(PermissionDenied):
            services.remove_member(self.alice, self.team["id"], self.leader.id)
        team = services.remove_member(self.leader, self.team["id"], self.alice.id)
        self.assertEqual(len(team["members"]), 1)

    def test_accepting_application_adds_member(self):
        application = services.apply_to_team(self.alice, self.team["id"], message="Hi", skills=["Python"])
        self.assertEqual(application["status"], TeamApplication.STATUS_PENDING)

        with self.assertRaises(ValidationError):
            services.apply_to_team(self.alice, self.team["id"])

        reviewed = services.review_application(self.leader, application["id"], "accepted")
        self.assertEqual(reviewed["status"], TeamApplication.STATUS_ACCEPTED)
        self.assertEqual(reviewed["reviewedBy"], self.leader.id)
        self.assertTrue(is_member(self.team["id"], self.alice))

    def test_accepting_application_into_full_team_changes_nothing(self):
        services.join_team(self.alice, self.team["joinCode"])
        application = services.apply_to_team(self.bob, self.team["id"])

        with self.assertRaises(ValidationError):
            services.review_application(self.leader, application["id"], "accepted")
        self.assertEqual(
            TeamApplication.objects.get(pk=application["id"]).status,
            TeamApplication.STATUS_PENDING,
        )

    def test_invitation_flow(self):
        with self.assertRaises(PermissionDenied):
            services.invite_to_team(self.bob, self.team["id"], self.alice.id)

        invitation = services.invite_to_team(self.leader, self.team["id"], self.alice.id, "Join us")
        pending = services.get_user_invitations(self.alice)
        self.assertEqual([i["id"] for i in pending], [invitation["id"]])
        self.assertEqual(pending[0]["team"]["name"], "Rocket")

        answered = services.respond_to_invitation(self.alice, invitation["id"], "accepted")
        self.assertEqual(answered["status"], TeamInvitation.STATUS_ACCEPTED)
        self.assertTrue(is_member(self.team["id"], self.alice))
        self.assertEqual(services.get_user_invitations(self.alice), [])

    def test_update_team_refuses_shrinking_below_member_count(self):
        services.join_team(self.alice, self.team["joinCode"])
        with self.assertRaises(ValidationError):
            services.update_team(self.leader, self.team["id"], {"maxSize": 1})

        team = services.update_team(self.leader, self.team["id"], {"maxSize": 3, "track": "AI"})
        self.assertEqual(team["maxSize"], 3)
        self.assertEqual(team["tags"], ["AI"])


def is_member(team_id, user):
    return TeamMember.objects.filter(team_id=team_id, user=user).exists()

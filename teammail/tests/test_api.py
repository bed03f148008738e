from datetime import timedelta

from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from events.models import Event
from teammail.models import TeamMail, TeamMailDraft, TeamMailRecipient
from teams.models import Team, TeamMember
from users.models import User


class TeamMailApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.leader = User.objects.create_user(username="leader", password="pass", full_name="Lea Leader")
        self.member = User.objects.create_user(username="member", password="pass")
        self.outsider = User.objects.create_user(username="outsider", password="pass")

        now = timezone.now()
        event = Event.objects.create(
            slug="mail-jam",
            title="Mail Jam",
            start_date=now,
            end_date=now + timedelta(days=1),
            organizer=self.leader,
        )
        self.team = Team.objects.create(name="Inbox Zero", event=event, leader=self.leader, join_code="MAIL01")
        TeamMember.objects.create(team=self.team, user=self.leader, role=TeamMember.ROLE_LEADER)
        TeamMember.objects.create(team=self.team, user=self.member)

        self.base = f"/api/teams/{self.team.id}/mails/"

    def auth(self, user):
        self.client.force_authenticate(user=user)

    def send(self, subject="Standup", **extra):
        self.auth(self.leader)
        payload = {"recipientIds": [str(self.member.id)], "subject": subject, "body": "At 10", **extra}
        resp = self.client.post(self.base, payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        return resp.json()

    def test_send_creates_mail_and_recipient_rows(self):
        mail = self.send()
        self.assertEqual(mail["senderName"], "Lea Leader")
        self.assertEqual(mail["priority"], "normal")
        self.assertEqual(TeamMailRecipient.objects.filter(mail_id=mail["id"]).count(), 1)

        self.auth(self.member)
        resp = self.client.get(self.base)
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual([m["id"] for m in resp.json()], [mail["id"]])
        self.assertFalse(resp.json()[0]["isRead"])

    def test_recipients_must_be_team_members(self):
        self.auth(self.leader)
        resp = self.client.post(
            self.base,
            {"recipientIds": [str(self.outsider.id)], "subject": "Hi"},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(TeamMail.objects.exists())

    def test_outsiders_cannot_read(self):
        self.send()
        self.auth(self.outsider)
        resp = self.client.get(self.base)
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)

    def test_sending_removes_the_draft(self):
        self.auth(self.leader)
        resp = self.client.post(self.base + "drafts/", {"subject": "WIP"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        draft_id = resp.json()["id"]

        self.send(subject="Final", draftId=draft_id)
        self.assertFalse(TeamMailDraft.objects.filter(pk=draft_id).exists())

    def test_mark_read_star_archive_and_delete(self):
        mail = self.send()
        self.auth(self.member)

        resp = self.client.post(self.base + "read/", {"mailIds": [mail["id"]]}, format="json")
        self.assertTrue(resp.json()[0]["isRead"])

        resp = self.client.post(self.base + f"{mail['id']}/star/", {"value": True}, format="json")
        self.assertTrue(resp.json()[0]["isStarred"])

        resp = self.client.post(self.base + f"{mail['id']}/archive/", {"value": True}, format="json")
        self.assertTrue(resp.json()[0]["isArchived"])
        self.assertEqual(self.client.get(self.base).json(), [])
        archived = self.client.get(self.base + "?folder=archived").json()
        self.assertEqual([m["id"] for m in archived], [mail["id"]])

        resp = self.client.delete(self.base + f"{mail['id']}/")
        self.assertEqual(resp.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(self.client.get(self.base + "?folder=archived").json(), [])

        # Deleting only hides the mail for this reader
        self.auth(self.leader)
        sent = self.client.get(self.base + "?folder=sent").json()
        self.assertEqual([m["id"] for m in sent], [mail["id"]])

    def test_search_and_unknown_folder(self):
        self.send(subject="Urgent: meeting moved", priority="urgent")
        self.send(subject="Lunch")

        self.auth(self.member)
        found = self.client.get(self.base + "?q=urgent").json()
        self.assertEqual([m["subject"] for m in found], ["Urgent: meeting moved"])

        resp = self.client.get(self.base + "?folder=spam")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

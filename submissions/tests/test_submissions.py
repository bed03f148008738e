from datetime import timedelta
from unittest import mock

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import PermissionDenied, ValidationError
from rest_framework.test import APIClient

from events.models import Event
from submissions import services
from submissions.models import Submission
from teams.models import Team, TeamMember
from users.models import User


class SubmissionTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.hacker = User.objects.create_user(username="hacker", password="pass")
        self.other = User.objects.create_user(username="other", password="pass")

        now = timezone.now()
        self.event = Event.objects.create(
            slug="ship-it",
            title="Ship It",
            start_date=now,
            end_date=now + timedelta(days=2),
            organizer=self.other,
        )
        self.team = Team.objects.create(name="Shippers", event=self.event, leader=self.hacker, join_code="SHIP01")
        TeamMember.objects.create(team=self.team, user=self.hacker, role=TeamMember.ROLE_LEADER)

    def create(self, **extra):
        data = {"title": "Carbon Lens", "eventId": self.event.id, "teamId": self.team.id, "tags": ["Climate"]}
        data.update(extra)
        return services.create_submission(self.hacker, data)

    def test_new_submission_is_a_hidden_draft(self):
        submission = self.create()
        self.assertEqual(submission["status"], Submission.STATUS_DRAFT)
        self.assertEqual(submission["submittedBy"], self.hacker.id)
        self.assertEqual(services.get_submissions(self.event.id), [])
        self.assertEqual(services.get_gallery(self.event.id), [])

    def test_team_must_include_submitter(self):
        with self.assertRaises(ValidationError):
            services.create_submission(
                self.other, {"title": "Sneaky", "eventId": self.event.id, "teamId": self.team.id}
            )

    def test_submit_publishes_once(self):
        submission = self.create()
        with self.assertRaises(PermissionDenied):
            services.submit_submission(self.other, submission["id"])

        submitted = services.submit_submission(self.hacker, submission["id"])
        self.assertEqual(submitted["status"], Submission.STATUS_SUBMITTED)
        self.assertIsNotNone(submitted["submittedAt"])
        self.assertEqual([s["id"] for s in services.get_submissions(self.event.id)], [submission["id"]])

        with self.assertRaises(ValidationError):
            services.submit_submission(self.hacker, submission["id"])

    def test_gallery_filters_and_sorts(self):
        first = services.submit_submission(self.hacker, self.create(title="Alpha", track="AI")["id"])
        second = services.submit_submission(self.hacker, self.create(title="Beta", tags=["Health"])["id"])
        Submission.objects.filter(pk=first["id"]).update(average_score=90)
        Submission.objects.filter(pk=second["id"]).update(average_score=70)

        top = services.get_gallery(self.event.id, sort="top")
        self.assertEqual([s["title"] for s in top], ["Alpha", "Beta"])
        self.assertEqual([s["title"] for s in services.get_gallery(track="ai")], ["Alpha"])
        self.assertEqual([s["title"] for s in services.get_gallery(tag="health")], ["Beta"])
        self.assertEqual([s["title"] for s in services.get_gallery(query="bet")], ["Beta"])

    def test_upload_validates_files(self):
        submission = self.create()
        self.client.force_authenticate(user=self.hacker)
        url = f"/api/submissions/{submission['id']}/images/"

        text = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")
        resp = self.client.post(url, {"images": [text]}, format="multipart")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

        big = SimpleUploadedFile("big.png", b"x" * (services.MAX_IMAGE_BYTES + 1), content_type="image/png")
        resp = self.client.post(url, {"images": [big]}, format="multipart")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    @mock.patch("submissions.services.get_public_url", side_effect=lambda path: f"https://cdn.example/{path}")
    @mock.patch("submissions.services.upload_submission_image", side_effect=lambda sid, name, content, ctype: f"{sid}/{name}")
    def test_upload_appends_public_urls(self, upload, public_url):
        submission = self.create()
        self.client.force_authenticate(user=self.hacker)

        image = SimpleUploadedFile("shot.png", b"\x89PNG", content_type="image/png")
        resp = self.client.post(
            f"/api/submissions/{submission['id']}/images/", {"images": [image]}, format="multipart"
        )
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        images = resp.json()["images"]
        self.assertEqual(len(images), 1)
        self.assertTrue(images[0].startswith(f"https://cdn.example/{submission['id']}/"))
        self.assertTrue(images[0].endswith(".png"))

    @mock.patch("submissions.services.upload_submission_image", return_value=None)
    def test_storage_outage_is_503(self, upload):
        submission = self.create()
        self.client.force_authenticate(user=self.hacker)

        image = SimpleUploadedFile("shot.png", b"\x89PNG", content_type="image/png")
        resp = self.client.post(
            f"/api/submissions/{submission['id']}/images/", {"images": [image]}, format="multipart"
        )
        self.assertEqual(resp.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(Submission.objects.get(pk=submission["id"]).images, [])

    @mock.patch("submissions.services.remove_submission_images", return_value=True)
    @mock.patch("submissions.services.get_public_url", return_value=None)
    @mock.patch("submissions.services.upload_submission_image")
    def test_partial_upload_failure_removes_stored_images(self, upload, public_url, remove):
        submission = self.create()
        upload.side_effect = [f"{submission['id']}/one.png", None]
        self.client.force_authenticate(user=self.hacker)

        first = SimpleUploadedFile("one.png", b"\x89PNG", content_type="image/png")
        second = SimpleUploadedFile("two.png", b"\x89PNG", content_type="image/png")
        resp = self.client.post(
            f"/api/submissions/{submission['id']}/images/", {"images": [first, second]}, format="multipart"
        )
        self.assertEqual(resp.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(upload.call_count, 2)

        remove.assert_called_once_with([f"{submission['id']}/one.png"])
        self.assertEqual(Submission.objects.get(pk=submission["id"]).images, [])

    def test_malformed_id_filters_are_rejected(self):
        resp = self.client.get("/api/submissions/?event=abc")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("event", resp.json()["errors"])

        self.client.force_authenticate(user=self.hacker)
        resp = self.client.get("/api/submissions/me/?user=abc")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("user", resp.json()["errors"])

        resp = self.client.get(f"/api/submissions/me/?user={self.hacker.id}")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)

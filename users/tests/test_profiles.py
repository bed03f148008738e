from django.test import SimpleTestCase, TestCase
from rest_framework import status
from rest_framework.test import APIClient

from users.mappers import PROFILE_FIELDS, profile_from_row, profile_to_row
from users.models import User


class ProfileMapperTests(SimpleTestCase):
    def test_round_trip(self):
        row = {
            "id": "u1",
            "join_date": "2026-01-01T00:00:00Z",
            "full_name": "Ada Lovelace",
            "username": "ada",
            "avatar_url": "https://cdn.example/ada.png",
            "role": "participant",
            "headline": "Engines",
            "bio": "First programmer",
            "skills": ["Math"],
            "preferred_roles": ["Backend Developer"],
            "location": "London",
            "github": "ada",
            "linkedin": "ada",
            "twitter": "ada",
            "website": "https://ada.example",
            "badges": ["pioneer"],
            "expertise": ["Analysis"],
            "hackathons_participated": 3,
            "wins": 1,
            "finals": 2,
            "organized": 0,
            "judged": 0,
        }
        profile = profile_from_row(row)
        self.assertEqual(profile["name"], "Ada Lovelace")
        self.assertEqual(profile["stats"]["hackathonsParticipated"], 3)

        back = profile_to_row(profile)
        self.assertEqual(back["full_name"], row["full_name"])
        for _, column, _ in PROFILE_FIELDS:
            self.assertEqual(back[column], row[column])

    def test_name_falls_back_to_username(self):
        profile = profile_from_row({"id": "u2", "username": "bob", "skills": None})
        self.assertEqual(profile["name"], "bob")
        self.assertEqual(profile["skills"], [])
        self.assertEqual(profile["stats"]["wins"], 0)


class ProfileApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.ada = User.objects.create_user(
            username="ada", password="pass", full_name="Ada Lovelace",
            location="London", skills=["Python", "Math"],
        )
        self.bob = User.objects.create_user(username="bob", password="pass", location="Paris", skills=["Go"])

    def test_me_requires_auth(self):
        resp = self.client.get("/api/users/me/")
        self.assertIn(resp.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

    def test_patch_me_updates_only_given_fields(self):
        self.client.force_authenticate(user=self.ada)
        resp = self.client.patch(
            "/api/users/me/",
            {"headline": "Analyst", "skills": ["Python", " Python "]},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        body = resp.json()
        self.assertEqual(body["headline"], "Analyst")
        self.assertEqual(body["skills"], ["Python"])
        self.assertEqual(body["location"], "London")

    def test_username_must_be_unique(self):
        self.client.force_authenticate(user=self.ada)
        resp = self.client.patch("/api/users/me/", {"username": "bob"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_lookup_by_id_and_username(self):
        resp = self.client.get(f"/api/users/{self.bob.id}/")
        self.assertEqual(resp.json()["username"], "bob")

        resp = self.client.get("/api/users/by-username/ada/")
        self.assertEqual(resp.json()["name"], "Ada Lovelace")

        resp = self.client.get("/api/users/by-username/nobody/")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)

    def test_search(self):
        resp = self.client.get("/api/users/?q=love")
        self.assertEqual([u["username"] for u in resp.json()], ["ada"])

        resp = self.client.get("/api/users/?location=paris")
        self.assertEqual([u["username"] for u in resp.json()], ["bob"])

        resp = self.client.get("/api/users/?skills=Math")
        self.assertEqual([u["username"] for u in resp.json()], ["ada"])

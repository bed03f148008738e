import uuid

from django.test import SimpleTestCase
from django.utils import timezone

from teams.mappers import TEAM_FIELDS, team_from_row, team_to_row


class TeamMapperTests(SimpleTestCase):
    def setUp(self):
        now = timezone.now()
        self.row = {
            "id": uuid.uuid4(),
            "leader_id": uuid.uuid4(),
            "join_code": "AB12CD",
            "created_at": now,
            "updated_at": now,
            "name": "Green Stack",
            "description": "Carbon tracking",
            "event_id": uuid.uuid4(),
            "max_size": 5,
            "skills": ["Python", "React"],
            "looking_for": ["Designer"],
            "track": "Climate",
            "status": "recruiting",
        }

    def test_round_trip_reproduces_writable_columns(self):
        team = team_from_row(self.row)
        back = team_to_row(team)
        for _, column, _ in TEAM_FIELDS:
            self.assertEqual(back[column], self.row[column])

    def test_derived_fields(self):
        team = team_from_row(self.row, members=[{"id": "m1"}])
        self.assertEqual(team["tags"], ["Climate"])
        self.assertEqual(team["joinCode"], "AB12CD")
        self.assertEqual(team["members"], [{"id": "m1"}])
        self.assertEqual(team["lastActivity"], self.row["updated_at"])

    def test_missing_lists_default_to_empty(self):
        row = {**self.row, "skills": None, "looking_for": None, "track": None}
        team = team_from_row(row)
        self.assertEqual(team["requiredSkills"], [])
        self.assertEqual(team["lookingForRoles"], [])
        self.assertEqual(team["tags"], [])

    def test_partial_view_model_gives_partial_row(self):
        self.assertEqual(team_to_row({"name": "X"}), {"name": "X"})
        self.assertIsNone(team_from_row(None))

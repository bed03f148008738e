from django.test import SimpleTestCase

from teams.session import MatchSession


class FakeSession(dict):
    modified = False


class MatchSessionTests(SimpleTestCase):
    def setUp(self):
        self.ranked = [{"id": "a"}, {"id": "b"}, {"id": "c"}]

    def test_current_skips_liked_and_passed(self):
        session = MatchSession()
        self.assertEqual(session.current(self.ranked)["id"], "a")
        session.like("a")
        session.skip("b")
        self.assertEqual(session.current(self.ranked)["id"], "c")
        session.skip("c")
        self.assertIsNone(session.current(self.ranked))

    def test_team_is_recorded_once(self):
        session = MatchSession()
        session.like("a")
        session.skip("a")
        session.like("a")
        self.assertEqual(session.as_dict(), {"liked": ["a"], "passed": []})

    def test_save_load_and_reset(self):
        store = FakeSession()
        session = MatchSession()
        session.like("a")
        session.skip("b")
        session.save(store)
        self.assertTrue(store.modified)

        loaded = MatchSession.load(store)
        self.assertEqual(loaded.as_dict(), {"liked": ["a"], "passed": ["b"]})

        cleared = MatchSession.reset(store)
        self.assertNotIn(MatchSession.SESSION_KEY, store)
        self.assertEqual(cleared.available(self.ranked), self.ranked)

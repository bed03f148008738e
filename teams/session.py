# teams/session.py


class MatchSession:
    """
    Swipe state for team matching: the teams a user liked or passed on.

    Kept in the request session (not the database) and cleared by
    ``reset``. The current team is the first ranked team in neither set.
    """
    SESSION_KEY = "team_match"

    def __init__(self, liked=None, passed=None):
        self.liked = [str(team_id) for team_id in liked or []]
        self.passed = [str(team_id) for team_id in passed or []]

    @classmethod
    def load(cls, session):
        data = session.get(cls.SESSION_KEY) or {}
        return cls(liked=data.get("liked"), passed=data.get("passed"))

    def save(self, session):
        session[self.SESSION_KEY] = {"liked": self.liked, "passed": self.passed}
        session.modified = True

    @classmethod
    def reset(cls, session):
        session.pop(cls.SESSION_KEY, None)
        session.modified = True
        return cls()

    def seen(self, team_id):
        team_id = str(team_id)
        return team_id in self.liked or team_id in self.passed

    def like(self, team_id):
        if not self.seen(team_id):
            self.liked.append(str(team_id))

    def skip(self, team_id):
        if not self.seen(team_id):
            self.passed.append(str(team_id))

    def available(self, ranked):
        return [team for team in ranked if not self.seen(team["id"])]

    def current(self, ranked):
        remaining = self.available(ranked)
        return remaining[0] if remaining else None

    def as_dict(self):
        return {"liked": list(self.liked), "passed": list(self.passed)}

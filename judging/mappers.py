# judging/mappers.py

JUDGE_SELECT = (
    "profile_id", "title", "company", "linkedin", "twitter", "website",
    "events_judged", "rating", "quote", "availability", "timezone",
)

SCORECARD_SELECT = (
    "id", "submission_id", "judge_id", "event_id", "scores", "total_score",
    "feedback", "status", "time_spent", "submitted_at",
)


def judge_from_row(row, profile=None):
    """
    A judge row merged with its profile view model (name, avatar, bio,
    expertise, location, badges).
    """
    if row is None:
        return None

    profile = profile or {}
    return {
        "id": row.get("profile_id"),
        "name": profile.get("name"),
        "avatar": profile.get("avatar"),
        "bio": profile.get("bio"),
        "expertise": profile.get("expertise") or [],
        "location": profile.get("location"),
        "badges": profile.get("badges") or [],
        "title": row.get("title"),
        "company": row.get("company"),
        "social": {
            "linkedin": row.get("linkedin"),
            "twitter": row.get("twitter"),
            "website": row.get("website"),
        },
        "eventsJudged": row.get("events_judged") or 0,
        "rating": row.get("rating") or 0,
        "quote": row.get("quote"),
        "availability": row.get("availability"),
        "timezone": row.get("timezone"),
    }


def scorecard_from_row(row):
    if row is None:
        return None
    return {
        "id": row.get("id"),
        "submissionId": row.get("submission_id"),
        "judgeId": row.get("judge_id"),
        "eventId": row.get("event_id"),
        "scores": row.get("scores") or {},
        "totalScore": row.get("total_score"),
        "feedback": row.get("feedback"),
        "status": row.get("status"),
        "timeSpent": row.get("time_spent"),
        "submittedAt": row.get("submitted_at"),
    }


def scorecard_to_row(scorecard):
    row = {}
    for key, column in (("scores", "scores"), ("feedback", "feedback"), ("timeSpent", "time_spent")):
        if key in scorecard:
            row[column] = scorecard[key]
    return row

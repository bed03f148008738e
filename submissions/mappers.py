# submissions/mappers.py
"""
Submission row (``submissions`` table) <-> submission view model.

``status``, ``averageScore`` and ``submittedAt`` are moved by the submit and
judging flows, never by an edit.
"""

# (view key, column, default when the column is missing/None)
SUBMISSION_FIELDS = (
    ("title", "title", None),
    ("tagline", "tagline", None),
    ("description", "description", None),
    ("longDescription", "long_description", None),
    ("eventId", "event_id", None),
    ("teamId", "team_id", None),
    ("track", "track", None),
    ("tags", "tags", list),
    ("techStack", "tech_stack", list),
    ("demoUrl", "demo_url", None),
    ("githubUrl", "github_url", None),
    ("slidesUrl", "slides_url", None),
    ("videoUrl", "video_url", None),
    ("images", "images", list),
    ("features", "features", list),
    ("awards", "awards", None),
)

SUBMISSION_SELECT = (
    "id", "submitted_by_id", "status", "average_score", "submitted_at", "created_at",
) + tuple(column for _, column, _ in SUBMISSION_FIELDS)


def submission_from_row(row):
    if row is None:
        return None

    submission = {"id": row.get("id")}
    for key, column, default in SUBMISSION_FIELDS:
        value = row.get(column)
        if value is None and default is not None:
            value = default()
        submission[key] = value

    submission.update({
        "submittedBy": row.get("submitted_by_id"),
        "status": row.get("status"),
        "averageScore": row.get("average_score"),
        "submittedAt": row.get("submitted_at"),
        "createdAt": row.get("created_at"),
    })
    return submission


def submission_to_row(submission):
    row = {}
    for key, column, _ in SUBMISSION_FIELDS:
        if key in submission:
            row[column] = submission[key]
    return row

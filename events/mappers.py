# events/mappers.py
"""
Event row (``events`` table) <-> event view model.

``id``, ``organizerId`` and ``participantCount`` are read-only: the count is
owned by the participant-count procedures, never by an event edit.
"""

# (view key, column, default when the column is missing/None)
EVENT_FIELDS = (
    ("slug", "slug", None),
    ("title", "title", None),
    ("tagline", "tagline", None),
    ("description", "description", None),
    ("longDescription", "long_description", None),
    ("startDate", "start_date", None),
    ("endDate", "end_date", None),
    ("registrationOpen", "registration_open", None),
    ("registrationClose", "registration_close", None),
    ("submissionOpen", "submission_open", None),
    ("submissionClose", "submission_close", None),
    ("status", "status", None),
    ("format", "format", None),
    ("location", "location", None),
    ("prizePool", "prize_pool", None),
    ("maxTeamSize", "max_team_size", None),
    ("tracks", "tracks", list),
    ("tags", "tags", list),
    ("judges", "judges", list),
    ("sponsors", "sponsors", list),
    ("socials", "socials", None),
    ("links", "links", None),
    ("hero", "hero", None),
    ("criteria", "criteria", None),
    ("whyJoin", "why_join", None),
    ("gallery", "gallery", None),
    ("eligibility", "eligibility", None),
    ("community", "community", None),
    ("contact", "contact", None),
    ("prizes", "prizes", list),
    ("timeline", "timeline", None),
    ("rules", "rules", None),
    ("faqs", "faqs", None),
)

EVENT_COLUMNS = tuple(column for _, column, _ in EVENT_FIELDS)

EVENT_SELECT = ("id", "organizer_id", "participant_count") + EVENT_COLUMNS


def event_from_row(row):
    if row is None:
        return None

    event = {"id": row.get("id")}
    for key, column, default in EVENT_FIELDS:
        value = row.get(column)
        if value is None and default is not None:
            value = default()
        event[key] = value

    event["participantCount"] = row.get("participant_count") or 0
    event["organizerId"] = row.get("organizer_id")
    return event


def event_to_row(event):
    row = {}
    for key, column, _ in EVENT_FIELDS:
        if key in event:
            row[column] = event[key]
    return row

# teams/matching.py
"""
Team-match scoring.

A user is scored against a team out of 100:

    skills   (0-50)  share of the team's required skills the user has
    roles    (0-30)  share of the team's wanted roles the user prefers
    capacity (0-20)  the team still has a free seat

A team that lists no skills (or no roles) gets the neutral half of that
component. The total is rounded half-up to an integer.
"""
import math
from collections import namedtuple

SKILLS_WEIGHT = 50
ROLES_WEIGHT = 30
CAPACITY_BONUS = 20
DEFAULT_MAX_SIZE = 4

ScoreComponents = namedtuple("ScoreComponents", ["skills", "roles", "capacity"])


def round_half_up(value):
    return int(math.floor(value + 0.5))


def _share(have, wanted, weight):
    wanted = set(wanted or ())
    if not wanted:
        return weight / 2
    return weight * len(set(have or ()) & wanted) / len(wanted)


def score_components(user_skills, user_roles, team):
    members = team.get("members") or []
    max_size = team.get("maxSize") or DEFAULT_MAX_SIZE

    return ScoreComponents(
        skills=_share(user_skills, team.get("requiredSkills"), SKILLS_WEIGHT),
        roles=_share(user_roles, team.get("lookingForRoles"), ROLES_WEIGHT),
        capacity=CAPACITY_BONUS if len(members) < max_size else 0,
    )


def match_score(user_skills, user_roles, team):
    components = score_components(user_skills, user_roles, team)
    return round_half_up(sum(components))


def compatibility(components):
    """Display percentages, derived from the same components as the score."""
    return {
        "skillsMatch": round_half_up(100 * components.skills / SKILLS_WEIGHT),
        "roleMatch": round_half_up(100 * components.roles / ROLES_WEIGHT),
        "eventMatch": True,
    }


def match_label(score):
    if score >= 85:
        return "Excellent Match"
    if score >= 70:
        return "Good Match"
    if score >= 50:
        return "Fair Match"
    return "Poor Match"


def _is_candidate(team, user_id):
    if team.get("status") != "recruiting":
        return False
    if str(team.get("leaderId")) == str(user_id):
        return False
    return not any(str(member.get("id")) == str(user_id) for member in team.get("members") or [])


def rank_teams(user_id, user_skills, user_roles, teams):
    """
    Recruiting teams the user is not already part of, best match first.
    Equal scores keep their input order.
    """
    ranked = []
    for team in teams:
        if not _is_candidate(team, user_id):
            continue
        components = score_components(user_skills, user_roles, team)
        score = round_half_up(sum(components))
        ranked.append({
            **team,
            "matchScore": score,
            "matchLabel": match_label(score),
            "compatibility": compatibility(components),
        })

    # list.sort is stable
    ranked.sort(key=lambda team: team["matchScore"], reverse=True)
    return ranked

# core/analytics.py
# Analytics tracking service for Supabase

import logging
from datetime import datetime
from typing import Any

logger = logging.getLogger("hackhub")

ANALYTICS_TABLE = "platform_analytics"


def _get_client():
    """Get Supabase client lazily."""
    from core.supabase_client import get_supabase_client
    return get_supabase_client()


def track_event(
    action: str,
    user_id=None,
    event_id=None,
    team_id=None,
    metadata: dict[str, Any] | None = None
) -> bool:
    """
    Track an analytics event to Supabase.

    Args:
        action: The action type (e.g., "registration", "team_like", "mail_sent")
        user_id: Optional acting user ID
        event_id: Optional event ID
        team_id: Optional team ID
        metadata: Optional additional metadata

    Returns:
        True if tracking succeeded, False otherwise
    """
    client = _get_client()
    if not client:
        logger.debug("Supabase client not available, skipping analytics")
        return False

    try:
        data = {
            "action": action,
            "user_id": str(user_id) if user_id else None,
            "event_id": str(event_id) if event_id else None,
            "team_id": str(team_id) if team_id else None,
            "metadata": metadata or {},
            "created_at": datetime.now().isoformat(),
        }

        client.table(ANALYTICS_TABLE).insert(data).execute()
        logger.debug(f"Tracked analytics event: {action}")
        return True
    except Exception as e:
        logger.error(f"Failed to track analytics: {e}")
        return False


def track_registration(event_id, user_id) -> bool:
    """Track a user registration for an event."""
    return track_event(
        action="registration",
        event_id=event_id,
        user_id=user_id,
        metadata={"type": "event_registration"},
    )


def track_team_like(team_id, user_id, score: int) -> bool:
    """Track a like on the team-match screen."""
    return track_event(
        action="team_like",
        team_id=team_id,
        user_id=user_id,
        metadata={"match_score": score},
    )


def track_mail_sent(team_id, user_id, recipient_count: int) -> bool:
    """Track an internal team mail being sent."""
    return track_event(
        action="mail_sent",
        team_id=team_id,
        user_id=user_id,
        metadata={"recipients": recipient_count},
    )

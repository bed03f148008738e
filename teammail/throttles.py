# teammail/throttles.py

from rest_framework.throttling import SimpleRateThrottle


class TeamMailSendThrottle(SimpleRateThrottle):
    """
    Throttle mail sending per user per team.

    Scope key: 'team-mail-send'
    Cache key shape:
      throttle_team-mail-send_u<user_id>_t<team_id>
    """
    scope = "team-mail-send"

    def get_cache_key(self, request, view):
        # Only throttle POST (send)
        if request.method != "POST":
            return None

        user = getattr(request, "user", None)
        if not user or not user.is_authenticated:
            return None

        team_id = getattr(view, "kwargs", {}).get("team_id", "unknown")
        return f"throttle_{self.scope}_u{user.pk}_t{team_id}"

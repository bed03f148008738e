# teams/throttles.py

from rest_framework.throttling import SimpleRateThrottle


class TeamApplyThrottle(SimpleRateThrottle):
    """
    Throttle team applications (including match likes) per user.

    Scope key: 'team-apply'
    Cache key shape:
      throttle_team-apply_u<user_id>
    """
    scope = "team-apply"

    def get_cache_key(self, request, view):
        # Only throttle POST (apply / like)
        if request.method != "POST":
            return None

        user = getattr(request, "user", None)
        if not user or not user.is_authenticated:
            return None

        return f"throttle_{self.scope}_u{user.pk}"

# core/supabase_auth.py
# Custom DRF authentication class to verify Supabase JWTs

import os
import logging
import uuid

import jwt
from django.contrib.auth import get_user_model
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

logger = logging.getLogger("hackhub")

User = get_user_model()


class SupabaseJWTAuthentication(BaseAuthentication):
    """
    Custom authentication class that validates Supabase JWTs.

    This authenticator:
    1. Extracts the JWT from the Authorization header
    2. Verifies the token signature using the Supabase JWT secret
    3. Looks up or creates the profile whose id is the Supabase user ID
    """

    def authenticate(self, request):
        auth_header = request.headers.get("Authorization", "")

        if not auth_header.startswith("Bearer "):
            return None  # Let other auth backends handle it

        token = auth_header.split(" ")[1]

        supabase_jwt_secret = os.environ.get("SUPABASE_JWT_SECRET")
        if not supabase_jwt_secret:
            logger.warning("SUPABASE_JWT_SECRET not configured")
            return None

        try:
            # Supabase uses HS256 by default
            payload = jwt.decode(
                token,
                supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationFailed("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.debug(f"Invalid Supabase token: {e}")
            return None  # Let other auth backends try

        supabase_user_id = payload.get("sub")
        if not supabase_user_id:
            raise AuthenticationFailed("Invalid token: missing user ID")

        try:
            profile_id = uuid.UUID(supabase_user_id)
        except ValueError:
            raise AuthenticationFailed("Invalid token: malformed user ID")

        user = self._get_or_create_user(profile_id, payload)
        return (user, payload)

    def authenticate_header(self, request):
        return 'Bearer realm="api"'

    def _get_or_create_user(self, profile_id, payload: dict):
        """
        The profile row shares its primary key with the Supabase auth user,
        so the first authenticated request creates it.
        """
        try:
            return User.objects.get(pk=profile_id)
        except User.DoesNotExist:
            pass

        email = payload.get("email") or ""
        metadata = payload.get("user_metadata") or {}

        username = metadata.get("username") or (email.split("@")[0] if email else f"user_{profile_id.hex[:8]}")
        # Ensure unique username
        base_username = username
        counter = 1
        while User.objects.filter(username=username).exists():
            username = f"{base_username}_{counter}"
            counter += 1

        user = User.objects.create(
            id=profile_id,
            username=username,
            email=email,
            full_name=metadata.get("full_name") or "",
            avatar_url=metadata.get("avatar_url"),
            # Password is not used for Supabase auth
        )
        user.set_unusable_password()
        user.save(update_fields=["password"])
        logger.info(f"Created profile from Supabase token: {username}")
        return user

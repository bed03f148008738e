# core/supabase_client.py
# Supabase client for storage and analytics operations

import os
import logging

from supabase import create_client

logger = logging.getLogger("hackhub")

SUBMISSIONS_BUCKET = "submissions"

_supabase_client = None


def get_supabase_client():
    """
    Get the Supabase client instance (singleton pattern).
    Uses service_role key for admin access.
    """
    global _supabase_client

    if _supabase_client is None:
        url = os.environ.get("SUPABASE_URL")
        key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY")

        if not url or not key:
            logger.warning("Supabase credentials not configured")
            return None

        try:
            _supabase_client = create_client(url, key)
            logger.info("Supabase client initialized")
        except Exception as e:
            logger.error(f"Failed to create Supabase client: {e}")
            return None

    return _supabase_client


def upload_submission_image(submission_id, filename: str, content: bytes, content_type: str) -> str | None:
    """
    Upload a submission screenshot to Supabase Storage.

    Args:
        submission_id: The submission's ID (for folder structure)
        filename: Original file name
        content: The file content as bytes
        content_type: MIME type sent along with the upload

    Returns:
        The storage path if successful, None otherwise
    """
    client = get_supabase_client()
    if not client:
        return None

    path = f"{submission_id}/{filename}"
    try:
        client.storage.from_(SUBMISSIONS_BUCKET).upload(
            path,
            content,
            file_options={"content-type": content_type, "upsert": "true"},
        )
        logger.info(f"Uploaded submission image to storage: {path}")
        return path
    except Exception as e:
        logger.error(f"Failed to upload submission image: {e}")
        return None


def get_public_url(path: str) -> str | None:
    """
    Public URL for an object in the submissions bucket.
    """
    client = get_supabase_client()
    if not client:
        return None

    try:
        return client.storage.from_(SUBMISSIONS_BUCKET).get_public_url(path)
    except Exception as e:
        logger.error(f"Failed to build public URL for {path}: {e}")
        return None


def remove_submission_images(paths: list[str]) -> bool:
    """
    Delete objects from the submissions bucket.

    Returns:
        True if the removal call succeeded, False otherwise
    """
    client = get_supabase_client()
    if not client:
        return False

    try:
        client.storage.from_(SUBMISSIONS_BUCKET).remove(paths)
        logger.info(f"Removed {len(paths)} submission image(s) from storage")
        return True
    except Exception as e:
        logger.error(f"Failed to remove submission images {paths}: {e}")
        return False

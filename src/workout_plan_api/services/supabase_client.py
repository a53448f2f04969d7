"""Supabase client access shared by the store implementations."""
import logging

from workout_plan_api.config import settings

logger = logging.getLogger(__name__)


def get_supabase_client():
    """Get Supabase client instance, or None when storage is not configured."""
    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        logger.warning("Supabase credentials not configured. Using in-memory storage.")
        return None

    from supabase import create_client

    try:
        return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    except Exception as e:
        logger.error(f"Failed to create Supabase client: {e}")
        return None

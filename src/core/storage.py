"""Profile store construction from settings."""

import logging

from src.core.config import Settings
from src.services.profile_store import MemoryProfileStore, ProfileStore

logger = logging.getLogger(__name__)


def create_profile_store(settings: Settings) -> ProfileStore:
    """Build the profile store selected by ``settings.storage_backend``.

    Args:
        settings: Application settings.

    Returns:
        ProfileStore: A fresh, unseeded store.
    """
    if settings.storage_backend == "supabase":
        from src.services.supabase_profile_store import SupabaseProfileStore

        logger.info("Using Supabase profile store at %s", settings.supabase_url)
        return SupabaseProfileStore()

    logger.info("Using in-memory profile store")
    return MemoryProfileStore()

#!/usr/bin/env python
"""Script to load the sample profiles into the Supabase profiles table.

Usage:
    python scripts/seed_profiles.py

Requirements:
    - SUPABASE_URL and SUPABASE_SECRET_KEY environment variables must be set
    - The tables from scripts/schema.sql must exist

Does nothing if the profiles table already has rows.
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.services.sample_profiles import seed_sample_profiles
from src.services.supabase_profile_store import SupabaseProfileStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def main() -> None:
    """Seed the Supabase profile store."""
    logger.info("Seeding sample profiles...")

    try:
        store = SupabaseProfileStore()
        health = await store.check_connection()
        if not health["healthy"]:
            raise RuntimeError(f"Database unreachable: {health.get('error')}")

        inserted = await seed_sample_profiles(store)
        logger.info("Inserted %d profiles", len(inserted))

    except Exception as e:
        logger.error(f"Seeding failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())

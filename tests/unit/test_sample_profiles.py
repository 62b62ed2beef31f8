"""Unit tests for sample profile seeding."""

import pytest

from src.schemas.profile import ProfileCreate
from src.services.profile_store import MemoryProfileStore
from src.services.sample_profiles import SAMPLE_PROFILES, seed_sample_profiles


def test_sample_profiles_satisfy_create_schema() -> None:
    for sample in SAMPLE_PROFILES:
        ProfileCreate.model_validate(sample)


@pytest.mark.asyncio
async def test_seeds_empty_store_in_order(empty_store: MemoryProfileStore) -> None:
    inserted = await seed_sample_profiles(empty_store)

    assert [p["location"] for p in inserted] == ["New York", "San Francisco", "London", "Berlin"]
    assert [p["id"] for p in inserted] == [1, 2, 3, 4]


@pytest.mark.asyncio
async def test_skips_populated_store(seeded_store: MemoryProfileStore) -> None:
    assert await seed_sample_profiles(seeded_store) == []
    assert len(await seeded_store.list_profiles()) == len(SAMPLE_PROFILES)

"""Unit tests for the in-memory profile store."""

from typing import Any

import pytest

from src.services.profile_store import (
    MemoryProfileStore,
    UsernameTakenError,
    matches_location,
    matches_query,
    merge_profile_update,
)
from src.services.sample_profiles import SAMPLE_PROFILES


def make_profile(**overrides: Any) -> dict[str, Any]:
    data = {
        "name": "Test Person",
        "title": "Engineer",
        "company": "Example Co",
        "location": "Paris",
        "description": "Builds things.",
        "email": "test@example.com",
        "latitude": 48.85,
        "longitude": 2.35,
        "image_url": "https://example.com/p.jpg",
    }
    data.update(overrides)
    return data


class TestMatchingRules:
    """Tests for the search and location predicates."""

    def test_query_matches_any_searchable_field(self) -> None:
        profile = make_profile(company="Globex")
        assert matches_query(profile, "glob")
        assert matches_query(profile, "ENGINEER")
        assert not matches_query(profile, "test@example")

    def test_location_requires_exact_match(self) -> None:
        profile = make_profile(location="New York")
        assert matches_location(profile, "new york")
        assert not matches_location(profile, "new")

    def test_merge_never_changes_id(self) -> None:
        profile = {"id": 3, **make_profile()}
        merged = merge_profile_update(profile, {"id": 99, "name": "Renamed", "bogus": 1})

        assert merged["id"] == 3
        assert merged["name"] == "Renamed"
        assert "bogus" not in merged


class TestCreateAndGet:
    """Tests for create_profile and get_profile."""

    @pytest.mark.asyncio
    async def test_ids_start_at_one_and_increase(self, empty_store: MemoryProfileStore) -> None:
        first = await empty_store.create_profile(make_profile())
        second = await empty_store.create_profile(make_profile(name="Other"))

        assert first["id"] == 1
        assert second["id"] > first["id"]

    @pytest.mark.asyncio
    async def test_get_returns_input_plus_id(self, empty_store: MemoryProfileStore) -> None:
        data = make_profile(phone="555", website=None)
        created = await empty_store.create_profile(data)

        fetched = await empty_store.get_profile(created["id"])

        assert fetched == {
            **data,
            "id": created["id"],
            "linkedin": None,
            "experience": None,
        }

    @pytest.mark.asyncio
    async def test_get_unknown_id_returns_none(self, seeded_store: MemoryProfileStore) -> None:
        assert await seeded_store.get_profile(999) is None

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, empty_store: MemoryProfileStore) -> None:
        created = await empty_store.create_profile(make_profile())
        await empty_store.delete_profile(created["id"])

        recreated = await empty_store.create_profile(make_profile())

        assert recreated["id"] > created["id"]

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, empty_store: MemoryProfileStore) -> None:
        created = await empty_store.create_profile(make_profile())
        created["name"] = "Mutated"

        fetched = await empty_store.get_profile(created["id"])
        assert fetched is not None
        assert fetched["name"] == "Test Person"


class TestUpdate:
    """Tests for update_profile partial-merge semantics."""

    @pytest.mark.asyncio
    async def test_changes_only_supplied_field(self, seeded_store: MemoryProfileStore) -> None:
        before = await seeded_store.get_profile(1)
        assert before is not None

        updated = await seeded_store.update_profile(1, {"title": "Staff Engineer"})

        assert updated == {**before, "title": "Staff Engineer"}
        assert await seeded_store.get_profile(1) == updated

    @pytest.mark.asyncio
    async def test_explicit_none_clears_optional_field(self, seeded_store: MemoryProfileStore) -> None:
        updated = await seeded_store.update_profile(2, {"phone": None})

        assert updated is not None
        assert updated["phone"] is None
        assert updated["website"] == "emilyjdesign.com"

    @pytest.mark.asyncio
    async def test_empty_update_returns_current_record(self, seeded_store: MemoryProfileStore) -> None:
        before = await seeded_store.get_profile(3)
        assert await seeded_store.update_profile(3, {}) == before

    @pytest.mark.asyncio
    async def test_unknown_id_returns_none_and_changes_nothing(
        self, seeded_store: MemoryProfileStore
    ) -> None:
        before = await seeded_store.list_profiles()

        assert await seeded_store.update_profile(999, {"name": "X"}) is None
        assert await seeded_store.list_profiles() == before


class TestDelete:
    """Tests for delete_profile."""

    @pytest.mark.asyncio
    async def test_delete_then_get_is_absent(self, seeded_store: MemoryProfileStore) -> None:
        assert await seeded_store.delete_profile(1) is True
        assert await seeded_store.get_profile(1) is None

    @pytest.mark.asyncio
    async def test_second_delete_returns_false(self, seeded_store: MemoryProfileStore) -> None:
        await seeded_store.delete_profile(1)
        assert await seeded_store.delete_profile(1) is False

    @pytest.mark.asyncio
    async def test_create_then_delete_keeps_list_length(self, seeded_store: MemoryProfileStore) -> None:
        count = len(await seeded_store.list_profiles())

        created = await seeded_store.create_profile(make_profile())
        await seeded_store.delete_profile(created["id"])

        assert len(await seeded_store.list_profiles()) == count


class TestSearchAndFilter:
    """Tests for search_profiles and filter_profiles_by_location."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", None])
    async def test_empty_query_returns_everything(
        self, seeded_store: MemoryProfileStore, query: str | None
    ) -> None:
        assert await seeded_store.search_profiles(query) == await seeded_store.list_profiles()

    @pytest.mark.asyncio
    async def test_search_data_finds_only_data_scientist(self, seeded_store: MemoryProfileStore) -> None:
        results = await seeded_store.search_profiles("data")

        assert [p["name"] for p in results] == ["Sarah Martinez"]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, seeded_store: MemoryProfileStore) -> None:
        results = await seeded_store.search_profiles("new york")

        assert [p["location"] for p in results] == ["New York"]

    @pytest.mark.asyncio
    async def test_filter_london(self, seeded_store: MemoryProfileStore) -> None:
        results = await seeded_store.filter_profiles_by_location("london")

        assert [p["name"] for p in results] == ["Michael Chang"]

    @pytest.mark.asyncio
    async def test_filter_is_exact_not_substring(self, empty_store: MemoryProfileStore) -> None:
        await empty_store.create_profile(make_profile(name="A", location="New York"))
        await empty_store.create_profile(make_profile(name="B", location="New York City"))

        results = await empty_store.filter_profiles_by_location("new york")

        assert [p["name"] for p in results] == ["A"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("location", ["", None])
    async def test_empty_location_returns_everything(
        self, seeded_store: MemoryProfileStore, location: str | None
    ) -> None:
        results = await seeded_store.filter_profiles_by_location(location)
        assert len(results) == len(SAMPLE_PROFILES)


class TestUsers:
    """Tests for the user operations."""

    @pytest.mark.asyncio
    async def test_create_and_lookup(self, empty_store: MemoryProfileStore) -> None:
        user = await empty_store.create_user({"username": "admin", "password": "secret"})

        assert user == {"id": 1, "username": "admin", "password": "secret"}
        assert await empty_store.get_user(1) == user
        assert await empty_store.get_user_by_username("admin") == user

    @pytest.mark.asyncio
    async def test_username_lookup_is_case_sensitive(self, empty_store: MemoryProfileStore) -> None:
        await empty_store.create_user({"username": "admin", "password": "secret"})

        assert await empty_store.get_user_by_username("Admin") is None
        assert await empty_store.get_user(42) is None

    @pytest.mark.asyncio
    async def test_duplicate_username_is_rejected(self, empty_store: MemoryProfileStore) -> None:
        await empty_store.create_user({"username": "admin", "password": "one"})

        with pytest.raises(UsernameTakenError):
            await empty_store.create_user({"username": "admin", "password": "two"})

        # the failed insert does not consume an id
        other = await empty_store.create_user({"username": "editor", "password": "x"})
        assert other["id"] == 2

    def test_constructor_accepts_initial_users(self) -> None:
        with pytest.raises(UsernameTakenError):
            MemoryProfileStore(
                users=[
                    {"username": "a", "password": "1"},
                    {"username": "a", "password": "2"},
                ]
            )

    @pytest.mark.asyncio
    async def test_check_connection_is_healthy(self, empty_store: MemoryProfileStore) -> None:
        assert await empty_store.check_connection() == {"healthy": True}

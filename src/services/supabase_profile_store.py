"""Profile store backed by the Supabase ``profiles`` and ``users`` tables."""

import logging
from typing import Any

from postgrest.exceptions import APIError as PostgrestAPIError
from supabase import Client

from src.core.supabase import check_database_connection, get_supabase_client
from src.models.profile import Profile, ProfileCreate, ProfileUpdate
from src.models.user import User, UserCreate
from src.services.profile_store import UPDATABLE_FIELDS, ProfileStore, UsernameTakenError

logger = logging.getLogger(__name__)

# Postgres error code for unique constraint violations
UNIQUE_VIOLATION = "23505"


class SupabaseProfileStore(ProfileStore):
    """Profile store that persists through PostgREST.

    Ids come from the tables' serial primary keys, so allocation is atomic
    on the database side. Search and location filtering run over the full
    result of ``list_profiles`` using the same matching rules as the
    in-memory store.
    """

    def __init__(self, client: Client | None = None) -> None:
        """Initialize the store with a Supabase client.

        Args:
            client: Client to use; defaults to the shared application client.
        """
        self.client = client or get_supabase_client()

    async def list_profiles(self) -> list[Profile]:
        response = (
            self.client.table("profiles")
            .select("*")
            .order("id")
            .execute()
        )
        return response.data or []

    async def get_profile(self, profile_id: int) -> Profile | None:
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("id", profile_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    async def create_profile(self, data: ProfileCreate) -> Profile:
        row = {key: value for key, value in data.items() if key in UPDATABLE_FIELDS}
        response = self.client.table("profiles").insert(row).execute()

        profile = response.data[0]
        logger.info("Created profile %d (%s)", profile["id"], profile["name"])
        return profile

    async def update_profile(self, profile_id: int, data: ProfileUpdate) -> Profile | None:
        """Update the supplied columns of a profile.

        An update with no columns returns the current row unchanged.
        """
        update_data = {key: value for key, value in data.items() if key in UPDATABLE_FIELDS}

        if not update_data:
            return await self.get_profile(profile_id)

        response = (
            self.client.table("profiles")
            .update(update_data)
            .eq("id", profile_id)
            .execute()
        )
        if not response.data:
            return None

        logger.info("Updated profile %d fields=%s", profile_id, sorted(update_data))
        return response.data[0]

    async def delete_profile(self, profile_id: int) -> bool:
        response = (
            self.client.table("profiles")
            .delete()
            .eq("id", profile_id)
            .execute()
        )
        if not response.data:
            return False

        logger.info("Deleted profile %d", profile_id)
        return True

    async def get_user(self, user_id: int) -> User | None:
        response = (
            self.client.table("users")
            .select("*")
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    async def get_user_by_username(self, username: str) -> User | None:
        response = (
            self.client.table("users")
            .select("*")
            .eq("username", username)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    async def create_user(self, data: UserCreate) -> User:
        try:
            response = (
                self.client.table("users")
                .insert({"username": data["username"], "password": data["password"]})
                .execute()
            )
        except PostgrestAPIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise UsernameTakenError(data["username"]) from e
            raise

        user = response.data[0]
        logger.info("Created user %d", user["id"])
        return user

    async def check_connection(self) -> dict[str, Any]:
        return check_database_connection(self.client)

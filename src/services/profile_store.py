"""Profile store interface and in-memory implementation.

The store is the only owner of profile and user records. It never raises
for expected conditions: a missing id yields ``None`` (or ``False`` for
deletes) and an empty query yields the full list.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from threading import Lock
from typing import Any

from src.models.profile import SEARCHABLE_FIELDS, Profile, ProfileCreate, ProfileUpdate
from src.models.user import User, UserCreate

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(ProfileUpdate.__annotations__)


class UsernameTakenError(Exception):
    """Raised when creating a user whose username already exists."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username already exists: {username}")


def matches_query(profile: Mapping[str, Any], query: str) -> bool:
    """Case-insensitive substring match against the searchable fields."""
    needle = query.casefold()
    return any(needle in str(profile.get(field) or "").casefold() for field in SEARCHABLE_FIELDS)


def matches_location(profile: Mapping[str, Any], location: str) -> bool:
    """Case-insensitive exact match on the location field."""
    return str(profile.get("location") or "").casefold() == location.casefold()


def merge_profile_update(profile: Profile, fields: Mapping[str, Any]) -> Profile:
    """Shallow-merge the supplied fields over a profile.

    Keys that are not updatable columns (including ``id``) are dropped.
    """
    merged = dict(profile)
    merged.update({key: value for key, value in fields.items() if key in UPDATABLE_FIELDS})
    merged["id"] = profile["id"]
    return merged  # type: ignore[return-value]


class ProfileStore(ABC):
    """Async interface shared by every profile store backend."""

    @abstractmethod
    async def list_profiles(self) -> list[Profile]:
        """Return every profile in store order."""

    @abstractmethod
    async def get_profile(self, profile_id: int) -> Profile | None:
        """Return the profile with ``profile_id`` or None."""

    @abstractmethod
    async def create_profile(self, data: ProfileCreate) -> Profile:
        """Store a new profile under the next unused id and return it."""

    @abstractmethod
    async def update_profile(self, profile_id: int, data: ProfileUpdate) -> Profile | None:
        """Merge ``data`` onto an existing profile; None if it does not exist."""

    @abstractmethod
    async def delete_profile(self, profile_id: int) -> bool:
        """Remove a profile, returning whether one was removed."""

    @abstractmethod
    async def get_user(self, user_id: int) -> User | None:
        """Return the user with ``user_id`` or None."""

    @abstractmethod
    async def get_user_by_username(self, username: str) -> User | None:
        """Return the user with exactly this username or None."""

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User:
        """Store a new user.

        Raises:
            UsernameTakenError: If the username is already in use.
        """

    async def search_profiles(self, query: str | None) -> list[Profile]:
        """Return profiles whose name, location, company, title or
        description contains ``query``, ignoring case.

        An empty or missing query returns every profile.
        """
        profiles = await self.list_profiles()
        if not query:
            return profiles
        return [profile for profile in profiles if matches_query(profile, query)]

    async def filter_profiles_by_location(self, location: str | None) -> list[Profile]:
        """Return profiles whose location equals ``location``, ignoring case.

        An empty or missing location returns every profile.
        """
        profiles = await self.list_profiles()
        if not location:
            return profiles
        return [profile for profile in profiles if matches_location(profile, location)]

    async def check_connection(self) -> dict[str, Any]:
        """Report whether the backing storage is reachable."""
        return {"healthy": True}

    async def close(self) -> None:
        """Release backend resources. No-op by default."""


class MemoryProfileStore(ProfileStore):
    """Profile store backed by in-process dictionaries.

    Ids start at 1 and are never reused, even after a delete. Mutations
    hold a lock so id allocation and insertion happen as one step when
    the store is shared between threads.
    """

    def __init__(
        self,
        profiles: Iterable[ProfileCreate] = (),
        users: Iterable[UserCreate] = (),
    ) -> None:
        self._profiles: dict[int, Profile] = {}
        self._users: dict[int, User] = {}
        self._next_profile_id = 1
        self._next_user_id = 1
        self._lock = Lock()

        for profile in profiles:
            self._insert_profile(profile)
        for user in users:
            self._insert_user(user)

    def _insert_profile(self, data: Mapping[str, Any]) -> Profile:
        with self._lock:
            profile_id = self._next_profile_id
            self._next_profile_id += 1
            profile: Profile = {
                "id": profile_id,
                "name": data["name"],
                "title": data["title"],
                "company": data["company"],
                "location": data["location"],
                "description": data["description"],
                "email": data["email"],
                "phone": data.get("phone"),
                "website": data.get("website"),
                "linkedin": data.get("linkedin"),
                "experience": data.get("experience"),
                "latitude": data["latitude"],
                "longitude": data["longitude"],
                "image_url": data["image_url"],
            }
            self._profiles[profile_id] = profile
        return dict(profile)  # type: ignore[return-value]

    def _insert_user(self, data: Mapping[str, Any]) -> User:
        with self._lock:
            username = data["username"]
            if any(user["username"] == username for user in self._users.values()):
                raise UsernameTakenError(username)
            user_id = self._next_user_id
            self._next_user_id += 1
            user: User = {"id": user_id, "username": username, "password": data["password"]}
            self._users[user_id] = user
        return dict(user)  # type: ignore[return-value]

    async def list_profiles(self) -> list[Profile]:
        return [dict(profile) for profile in self._profiles.values()]  # type: ignore[misc]

    async def get_profile(self, profile_id: int) -> Profile | None:
        profile = self._profiles.get(profile_id)
        return dict(profile) if profile else None  # type: ignore[return-value]

    async def create_profile(self, data: ProfileCreate) -> Profile:
        profile = self._insert_profile(data)
        logger.info("Created profile %d (%s)", profile["id"], profile["name"])
        return profile

    async def update_profile(self, profile_id: int, data: ProfileUpdate) -> Profile | None:
        with self._lock:
            existing = self._profiles.get(profile_id)
            if existing is None:
                return None
            updated = merge_profile_update(existing, data)
            self._profiles[profile_id] = updated

        logger.info("Updated profile %d fields=%s", profile_id, sorted(data))
        return dict(updated)  # type: ignore[return-value]

    async def delete_profile(self, profile_id: int) -> bool:
        with self._lock:
            removed = self._profiles.pop(profile_id, None)

        if removed is None:
            return False
        logger.info("Deleted profile %d", profile_id)
        return True

    async def get_user(self, user_id: int) -> User | None:
        user = self._users.get(user_id)
        return dict(user) if user else None  # type: ignore[return-value]

    async def get_user_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user["username"] == username:
                return dict(user)  # type: ignore[return-value]
        return None

    async def create_user(self, data: UserCreate) -> User:
        user = self._insert_user(data)
        logger.info("Created user %d", user["id"])
        return user

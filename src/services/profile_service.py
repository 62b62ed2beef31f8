"""Profile business logic service.

Sits between untrusted input and the profile store: parses path ids,
validates payloads against the profile schemas and turns absent store
results into not-found errors.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.api.middleware.error_handler import BadRequestError, NotFoundError, ValidationError
from src.models.profile import Profile
from src.schemas.profile import ProfileCreate, ProfileUpdate
from src.services.profile_store import ProfileStore

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

_PROFILE_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_profile_id(raw_id: str | int) -> int:
    """Parse a path id into an integer.

    Args:
        raw_id: The id as received from the request path.

    Returns:
        int: The parsed id.

    Raises:
        BadRequestError: If the id is not an integer.
    """
    if isinstance(raw_id, int):
        return raw_id
    raw_id = raw_id.strip()
    if not _PROFILE_ID_PATTERN.fullmatch(raw_id):
        raise BadRequestError("Invalid profile ID")
    return int(raw_id)


def validate_payload(schema: type[SchemaT], payload: SchemaT | Mapping[str, Any]) -> SchemaT:
    """Validate a raw payload against ``schema``.

    Already-validated models pass through untouched. Every violated
    constraint is reported in a single error.

    Raises:
        ValidationError: If the payload does not satisfy the schema.
    """
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError.from_errors(e.errors()) from None


class ProfileService:
    """Service for browsing and administering directory profiles."""

    def __init__(self, store: ProfileStore) -> None:
        """Initialize profile service with the application's store.

        Args:
            store: The profile store to dispatch to.
        """
        self.store = store

    async def list_profiles(self) -> list[Profile]:
        return await self.store.list_profiles()

    async def get_profile(self, raw_id: str | int) -> Profile:
        """Get a profile by its path id.

        Raises:
            BadRequestError: If the id is not numeric.
            NotFoundError: If no profile has this id.
        """
        profile = await self.store.get_profile(parse_profile_id(raw_id))
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    async def create_profile(self, data: ProfileCreate | Mapping[str, Any]) -> Profile:
        """Validate and store a new profile.

        Args:
            data: Full profile payload.

        Returns:
            Profile: The stored profile with its assigned id.

        Raises:
            ValidationError: If any field is missing or out of range.
        """
        validated = validate_payload(ProfileCreate, data)
        return await self.store.create_profile(validated.model_dump())

    async def update_profile(
        self,
        raw_id: str | int,
        data: ProfileUpdate | Mapping[str, Any],
    ) -> Profile:
        """Apply a partial update to a profile.

        Only fields present in the payload are changed. The id is checked
        before the body so a malformed id is reported first.

        Raises:
            BadRequestError: If the id is not numeric.
            ValidationError: If a supplied field violates its constraint.
            NotFoundError: If no profile has this id.
        """
        profile_id = parse_profile_id(raw_id)
        validated = validate_payload(ProfileUpdate, data)

        profile = await self.store.update_profile(profile_id, validated.to_update_fields())
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    async def delete_profile(self, raw_id: str | int) -> None:
        """Delete a profile.

        Raises:
            BadRequestError: If the id is not numeric.
            NotFoundError: If no profile has this id.
        """
        if not await self.store.delete_profile(parse_profile_id(raw_id)):
            raise NotFoundError("Profile not found")

    async def search_profiles(self, query: str | None = "") -> list[Profile]:
        return await self.store.search_profiles(query or "")

    async def filter_profiles_by_location(self, location: str | None = "") -> list[Profile]:
        return await self.store.filter_profiles_by_location(location or "")

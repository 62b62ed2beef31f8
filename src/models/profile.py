"""Profile model type definitions for database operations."""

from typing import NotRequired, TypedDict

# Fields a text search matches against, in match order.
SEARCHABLE_FIELDS = ("name", "location", "company", "title", "description")


class Profile(TypedDict):
    """Profile table row representation.

    Represents a directory entry stored in the profiles table.
    Maps directly to the database schema.
    """

    id: int
    name: str
    title: str
    company: str
    location: str
    description: str
    email: str
    phone: str | None
    website: str | None
    linkedin: str | None
    experience: str | None
    latitude: float
    longitude: float
    image_url: str


class ProfileCreate(TypedDict):
    """Data required to create a new profile.

    The id is assigned by the store; optional contact fields may be omitted.
    """

    name: str
    title: str
    company: str
    location: str
    description: str
    email: str
    latitude: float
    longitude: float
    image_url: str
    phone: NotRequired[str | None]
    website: NotRequired[str | None]
    linkedin: NotRequired[str | None]
    experience: NotRequired[str | None]


class ProfileUpdate(TypedDict, total=False):
    """Data that can be updated on a profile.

    All fields are optional for partial updates.
    """

    name: str
    title: str
    company: str
    location: str
    description: str
    email: str
    phone: str | None
    website: str | None
    linkedin: str | None
    experience: str | None
    latitude: float
    longitude: float
    image_url: str

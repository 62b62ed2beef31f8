"""User model type definitions for database operations."""

from typing import TypedDict


class User(TypedDict):
    """User table row representation."""

    id: int
    username: str
    password: str


class UserCreate(TypedDict):
    """Data required to create a new user."""

    username: str
    password: str

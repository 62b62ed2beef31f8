"""Database model type definitions."""

from src.models.profile import Profile, ProfileCreate, ProfileUpdate
from src.models.user import User, UserCreate

__all__ = [
    "Profile",
    "ProfileCreate",
    "ProfileUpdate",
    "User",
    "UserCreate",
]

"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends, Request

from src.services.profile_service import ProfileService
from src.services.profile_store import ProfileStore


def get_profile_store(request: Request) -> ProfileStore:
    """Return the profile store owned by the running application.

    The store is created once in the application lifespan (or injected
    into ``create_app``) and kept on ``app.state``.
    """
    return request.app.state.profile_store


def get_profile_service(
    store: Annotated[ProfileStore, Depends(get_profile_store)],
) -> ProfileService:
    """Build a ProfileService bound to the application's store."""
    return ProfileService(store)


# Type aliases for cleaner dependency injection
ProfileStoreDep = Annotated[ProfileStore, Depends(get_profile_store)]
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]

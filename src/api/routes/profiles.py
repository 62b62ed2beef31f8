"""Profile API routes.

Static paths (``/search``, ``/filter/location``) are declared before
``/{profile_id}`` so they are matched first.
"""

from fastapi import APIRouter, Query, Response, status

from src.api.deps import ProfileServiceDep
from src.schemas.common import ErrorResponse
from src.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate

router = APIRouter(prefix="/profiles", tags=["profiles"])

_ID_ERRORS = {
    400: {"model": ErrorResponse, "description": "Invalid profile ID"},
    404: {"model": ErrorResponse, "description": "Profile not found"},
}


@router.get(
    "",
    response_model=list[ProfileResponse],
    summary="List profiles",
    description="Returns every profile in the directory.",
)
async def list_profiles(service: ProfileServiceDep) -> list[ProfileResponse]:
    profiles = await service.list_profiles()
    return [ProfileResponse(**profile) for profile in profiles]


@router.get(
    "/search",
    response_model=list[ProfileResponse],
    summary="Search profiles",
    description=(
        "Case-insensitive substring search over name, location, company, title "
        "and description. An empty query returns every profile."
    ),
)
async def search_profiles(
    service: ProfileServiceDep,
    q: str = Query(default="", description="Free-text query"),
) -> list[ProfileResponse]:
    profiles = await service.search_profiles(q)
    return [ProfileResponse(**profile) for profile in profiles]


@router.get(
    "/filter/location",
    response_model=list[ProfileResponse],
    summary="Filter profiles by location",
    description="Case-insensitive exact match on location. An empty value returns every profile.",
)
async def filter_profiles_by_location(
    service: ProfileServiceDep,
    location: str = Query(default="", description="Location to match exactly"),
) -> list[ProfileResponse]:
    profiles = await service.filter_profiles_by_location(location)
    return [ProfileResponse(**profile) for profile in profiles]


@router.get(
    "/{profile_id}",
    response_model=ProfileResponse,
    responses=_ID_ERRORS,
    summary="Get a profile",
)
async def get_profile(profile_id: str, service: ProfileServiceDep) -> ProfileResponse:
    """Get a single profile.

    Args:
        profile_id: Numeric profile id from the path.
        service: Profile service bound to the application's store.

    Returns:
        ProfileResponse: The profile.

    Raises:
        BadRequestError: 400 if the id is not numeric.
        NotFoundError: 404 if no profile has this id.
    """
    profile = await service.get_profile(profile_id)
    return ProfileResponse(**profile)


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Validation error"}},
    summary="Create a profile",
)
async def create_profile(data: ProfileCreate, service: ProfileServiceDep) -> ProfileResponse:
    profile = await service.create_profile(data)
    return ProfileResponse(**profile)


@router.patch(
    "/{profile_id}",
    response_model=ProfileResponse,
    responses=_ID_ERRORS,
    summary="Update a profile",
    description="Updates only the fields present in the request body.",
)
async def update_profile(
    profile_id: str,
    data: ProfileUpdate,
    service: ProfileServiceDep,
) -> ProfileResponse:
    """Partially update a profile.

    Args:
        profile_id: Numeric profile id from the path.
        data: Fields to change.
        service: Profile service bound to the application's store.

    Returns:
        ProfileResponse: The merged profile.
    """
    profile = await service.update_profile(profile_id, data)
    return ProfileResponse(**profile)


@router.delete(
    "/{profile_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ID_ERRORS,
    summary="Delete a profile",
)
async def delete_profile(profile_id: str, service: ProfileServiceDep) -> Response:
    await service.delete_profile(profile_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

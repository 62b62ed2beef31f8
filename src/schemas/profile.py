"""Profile Pydantic schemas for API request/response models."""

from pydantic import BaseModel, ConfigDict, Field

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


class ProfileBase(BaseModel):
    """Profile fields shared by create requests and responses.

    ``image_url`` travels as ``imageUrl`` on the wire; either spelling is
    accepted on input.
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    name: str = Field(min_length=1, max_length=255, description="Full name")
    title: str = Field(min_length=1, max_length=255, description="Job title")
    company: str = Field(min_length=1, max_length=255, description="Employer")
    location: str = Field(min_length=1, max_length=255, description="City or region shown in the directory")
    description: str = Field(min_length=1, description="Free-text biography")
    email: str = Field(min_length=1, max_length=255, description="Contact email address")
    phone: str | None = Field(default=None, max_length=64, description="Contact phone number")
    website: str | None = Field(default=None, max_length=255, description="Personal website")
    linkedin: str | None = Field(default=None, max_length=255, description="LinkedIn profile URL")
    experience: str | None = Field(default=None, max_length=255, description="Experience summary, e.g. '5 years'")
    latitude: float = Field(
        strict=True,
        ge=LATITUDE_RANGE[0],
        le=LATITUDE_RANGE[1],
        allow_inf_nan=False,
        description="Map latitude in degrees",
    )
    longitude: float = Field(
        strict=True,
        ge=LONGITUDE_RANGE[0],
        le=LONGITUDE_RANGE[1],
        allow_inf_nan=False,
        description="Map longitude in degrees",
    )
    image_url: str = Field(min_length=1, alias="imageUrl", description="Portrait image URL")


class ProfileCreate(ProfileBase):
    """Schema for creating a profile.

    Every required field must be present; the id is assigned by the store.
    """


class ProfileUpdate(BaseModel):
    """Schema for partially updating a profile.

    All fields are optional, but a field that is present must satisfy the
    same constraints as on create. Required fields default to None without
    validation, so an explicit null for them is rejected while an omitted
    field is simply left out of the update.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default=None, min_length=1, max_length=255)
    title: str = Field(default=None, min_length=1, max_length=255)
    company: str = Field(default=None, min_length=1, max_length=255)
    location: str = Field(default=None, min_length=1, max_length=255)
    description: str = Field(default=None, min_length=1)
    email: str = Field(default=None, min_length=1, max_length=255)
    phone: str | None = Field(default=None, max_length=64)
    website: str | None = Field(default=None, max_length=255)
    linkedin: str | None = Field(default=None, max_length=255)
    experience: str | None = Field(default=None, max_length=255)
    latitude: float = Field(default=None, strict=True, ge=LATITUDE_RANGE[0], le=LATITUDE_RANGE[1], allow_inf_nan=False)
    longitude: float = Field(default=None, strict=True, ge=LONGITUDE_RANGE[0], le=LONGITUDE_RANGE[1], allow_inf_nan=False)
    image_url: str = Field(default=None, min_length=1, alias="imageUrl")

    def to_update_fields(self) -> dict:
        """Return only the fields the client actually sent, keyed by column name."""
        return self.model_dump(exclude_unset=True)


class ProfileResponse(ProfileBase):
    """Schema for profile API responses."""

    id: int = Field(description="Profile unique identifier")

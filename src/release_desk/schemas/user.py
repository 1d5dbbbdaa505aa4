"""Pydantic schemas for the settings endpoints."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from release_desk.models.user import UserRole


class UserProfileResponse(BaseModel):
    """The current user's profile."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(description="User ID")
    name: str = Field(description="Display name")
    email: str = Field(description="Email address")
    role: UserRole = Field(description="artist, label or admin")


class UserProfileUpdate(BaseModel):
    """Replacement values for the current user's profile."""

    name: str = Field(min_length=1, max_length=100, description="Display name")
    email: EmailStr = Field(description="Valid email address")
    role: UserRole = Field(description="artist, label or admin")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names made only of whitespace."""
        v = v.strip()
        if not v:
            msg = "Name must not be blank"
            raise ValueError(msg)
        return v

"""Account settings endpoints."""

from fastapi import APIRouter, Depends

from release_desk.models.user import UserProfile
from release_desk.schemas.user import UserProfileResponse, UserProfileUpdate
from release_desk.services.users import ProfileHolder, get_profile_holder
from release_desk.utils.security import CurrentUser

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/profile", response_model=UserProfileResponse)
async def get_profile(current_user: CurrentUser) -> UserProfileResponse:
    """Get the current user's profile."""
    return UserProfileResponse.model_validate(current_user)


@router.put("/profile", response_model=UserProfileResponse)
async def update_profile(
    update: UserProfileUpdate,
    current_user: CurrentUser,
    holder: ProfileHolder = Depends(get_profile_holder),
) -> UserProfileResponse:
    """Replace the current user's name, email and role. The id is kept."""
    profile = holder.replace(
        UserProfile(
            id=current_user.id,
            name=update.name,
            email=str(update.email),
            role=update.role,
        )
    )
    return UserProfileResponse.model_validate(profile)

"""Current-user dependencies and role gates."""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from release_desk.config import get_settings
from release_desk.models.user import UserProfile, UserRole
from release_desk.services.users import ProfileHolder, get_profile_holder


async def get_current_user(
    holder: ProfileHolder = Depends(get_profile_holder),
) -> UserProfile:
    """Get the signed-in user's profile.

    Identity is supplied by the profile holder; there is no login flow.
    """
    return holder.get()


# Type alias for use in route dependencies
CurrentUser = Annotated[UserProfile, Depends(get_current_user)]


async def require_reviewer(current_user: CurrentUser) -> UserProfile:
    """Allow only administrators through to the review queue.

    Raises:
        HTTPException 403: If review role enforcement is on and the user is
            not an admin.
    """
    if get_settings().enforce_review_role and current_user.role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only administrators can review releases",
        )
    return current_user


Reviewer = Annotated[UserProfile, Depends(require_reviewer)]

"""Holder for the current user's profile."""

import logging

from release_desk.config import get_settings
from release_desk.models.user import UserProfile, UserRole

logger = logging.getLogger(__name__)


def default_profile() -> UserProfile:
    """Build the seed profile from settings."""
    settings = get_settings()
    return UserProfile(
        id=settings.default_user_id,
        name=settings.default_user_name,
        email=settings.default_user_email,
        role=UserRole(settings.default_user_role),
    )


class ProfileHolder:
    """Keeps the single signed-in profile in memory.

    Replacing the profile is the only lifecycle it has; nothing is persisted.
    """

    def __init__(self, profile: UserProfile | None = None) -> None:
        self._profile = profile or default_profile()

    def get(self) -> UserProfile:
        return self._profile

    def replace(self, profile: UserProfile) -> UserProfile:
        if profile.role != self._profile.role:
            logger.info(
                "User %s role changed: %s -> %s", profile.id, self._profile.role, profile.role
            )
        self._profile = profile
        return profile


_holder: ProfileHolder | None = None


def get_profile_holder() -> ProfileHolder:
    """Return the process-wide profile holder. Usable as a FastAPI dependency."""
    global _holder
    if _holder is None:
        _holder = ProfileHolder()
    return _holder

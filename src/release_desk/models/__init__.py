"""Domain models."""

from release_desk.models.catalog import GENRES, LANGUAGES, TERRITORIES
from release_desk.models.release import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    AlbumType,
    AssetRef,
    Release,
    ReleaseStatus,
    can_transition,
)
from release_desk.models.user import UserProfile, UserRole

__all__ = [
    "ALLOWED_TRANSITIONS",
    "AlbumType",
    "AssetRef",
    "GENRES",
    "LANGUAGES",
    "Release",
    "ReleaseStatus",
    "TERMINAL_STATUSES",
    "TERRITORIES",
    "UserProfile",
    "UserRole",
    "can_transition",
]

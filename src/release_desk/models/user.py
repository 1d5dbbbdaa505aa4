"""Current user profile model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class UserRole(StrEnum):
    """Role of the dashboard user."""

    ARTIST = "artist"
    LABEL = "label"
    ADMIN = "admin"


@dataclass(frozen=True)
class UserProfile:
    """The single signed-in user of the dashboard."""

    id: str
    name: str
    email: str
    role: UserRole = UserRole.ARTIST

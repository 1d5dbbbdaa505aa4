"""Release domain model and status lifecycle."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class ReleaseStatus(StrEnum):
    """Lifecycle status of a release."""

    DRAFT = "draft"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"
    DISTRIBUTED = "distributed"


class AlbumType(StrEnum):
    """Product format of a release."""

    SINGLE = "single"
    EP = "ep"
    ALBUM = "album"


# Edges of the release lifecycle. Re-committing a draft or a release still
# under review from the upload wizard is a self or sideways edge.
ALLOWED_TRANSITIONS: dict[ReleaseStatus, frozenset[ReleaseStatus]] = {
    ReleaseStatus.DRAFT: frozenset({ReleaseStatus.DRAFT, ReleaseStatus.UNDER_REVIEW}),
    ReleaseStatus.UNDER_REVIEW: frozenset(
        {
            ReleaseStatus.DRAFT,
            ReleaseStatus.UNDER_REVIEW,
            ReleaseStatus.APPROVED,
            ReleaseStatus.REJECTED,
        }
    ),
    ReleaseStatus.APPROVED: frozenset({ReleaseStatus.DISTRIBUTED}),
    ReleaseStatus.REJECTED: frozenset(),
    ReleaseStatus.DISTRIBUTED: frozenset(),
}

TERMINAL_STATUSES = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)


def can_transition(current: ReleaseStatus, target: ReleaseStatus) -> bool:
    """Return True if a release may move from ``current`` to ``target``."""
    return target in ALLOWED_TRANSITIONS[current]


@dataclass(frozen=True)
class AssetRef:
    """Handle to an externally held audio or artwork file.

    Only metadata is kept; the file bytes live with the intake collaborator.
    """

    filename: str
    content_type: str
    size: int
    width: int | None = None
    height: int | None = None


@dataclass(frozen=True)
class Release:
    """A submitted work tracked from draft through distribution.

    Instances are immutable; the store replaces them wholesale on update so a
    reader never sees a half-applied change.
    """

    id: str
    track_title: str
    primary_artist: str
    status: ReleaseStatus
    created_at: datetime
    updated_at: datetime
    album_title: str | None = None
    album_type: AlbumType = AlbumType.SINGLE
    featuring_artists: str | None = None
    composer: str | None = None
    lyricist: str | None = None
    producer: str | None = None
    primary_genre: str | None = None
    secondary_genre: str | None = None
    language: str | None = None
    release_date: str | None = None
    pre_order_date: str | None = None
    label_name: str | None = None
    copyright_year: str | None = None
    territories: str | None = None
    lyrics: str | None = None
    is_explicit: bool = False
    isrc: str | None = None
    upc: str | None = None
    audio: AssetRef | None = None
    artwork: AssetRef | None = None
    rejection_reason: str | None = None
    version: int = 1

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def effective_rejection_reason(self) -> str | None:
        """Rejection reason, ignored unless the release is currently rejected."""
        if self.status == ReleaseStatus.REJECTED:
            return self.rejection_reason
        return None

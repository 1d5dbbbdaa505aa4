"""Admin review of submitted releases.

approve and reject act on releases under review; mark_distributed acts on
approved releases. Rejected and distributed are terminal.
"""

import logging
from collections.abc import Callable

from fastapi import Depends

from release_desk.config import get_settings
from release_desk.models.release import Release, ReleaseStatus, can_transition
from release_desk.models.user import UserProfile, UserRole
from release_desk.services.base import (
    InvalidTransitionError,
    PermissionDeniedError,
    ValidationFailedError,
)
from release_desk.services.identifiers import generate_isrc
from release_desk.services.reporting import filter_releases, status_counts
from release_desk.services.store import ReleaseStore, get_release_store

logger = logging.getLogger(__name__)


class ReviewWorkflow:
    """Status transitions controlled by an administrator."""

    def __init__(
        self,
        store: ReleaseStore,
        isrc_factory: Callable[[], str] = generate_isrc,
        enforce_role: bool | None = None,
    ) -> None:
        self._store = store
        self._isrc_factory = isrc_factory
        self._enforce_role = (
            get_settings().enforce_review_role if enforce_role is None else enforce_role
        )

    def _authorize(self, user: UserProfile | None) -> None:
        if not self._enforce_role:
            return
        if user is None or user.role != UserRole.ADMIN:
            raise PermissionDeniedError("Only administrators can review releases")

    def _require_transition(self, release_id: str, target: ReleaseStatus) -> Release:
        release = self._store.get(release_id)
        if not can_transition(release.status, target):
            raise InvalidTransitionError(
                f"Release {release_id} cannot move from {release.status} to {target}"
            )
        return release

    def _transition(
        self,
        release_id: str,
        target: ReleaseStatus,
        changes: dict,
        expected_version: int | None,
    ) -> Release:
        release = self._require_transition(release_id, target)
        updated = self._store.update(
            release_id, {"status": target, **changes}, expected_version=expected_version
        )
        logger.info("Release %s: %s -> %s", release_id, release.status, target)
        return updated

    def queue(self, status: str = ReleaseStatus.UNDER_REVIEW) -> list[Release]:
        """Releases awaiting attention, by default those under review.

        Pass ``"all"`` to list every release.
        """
        return filter_releases(self._store.list(), status=status)

    def statistics(self) -> dict[str, int]:
        return status_counts(self._store.list())

    def approve(
        self,
        release_id: str,
        user: UserProfile | None = None,
        expected_version: int | None = None,
    ) -> Release:
        """Approve a release under review, assigning an ISRC if it has none."""
        self._authorize(user)
        release = self._require_transition(release_id, ReleaseStatus.APPROVED)
        changes = {} if release.isrc else {"isrc": self._isrc_factory()}
        return self._transition(release_id, ReleaseStatus.APPROVED, changes, expected_version)

    def reject(
        self,
        release_id: str,
        reason: str,
        user: UserProfile | None = None,
        expected_version: int | None = None,
    ) -> Release:
        """Reject a release under review.

        Raises:
            ValidationFailedError: If ``reason`` is empty or whitespace. The
                release is left unchanged.
        """
        self._authorize(user)
        if not reason or not reason.strip():
            raise ValidationFailedError({"reason": "Please provide a rejection reason"})
        return self._transition(
            release_id,
            ReleaseStatus.REJECTED,
            {"rejection_reason": reason.strip()},
            expected_version,
        )

    def mark_distributed(
        self,
        release_id: str,
        user: UserProfile | None = None,
        expected_version: int | None = None,
    ) -> Release:
        """Mark an approved release as sent to stores."""
        self._authorize(user)
        return self._transition(release_id, ReleaseStatus.DISTRIBUTED, {}, expected_version)


def get_review_workflow(store: ReleaseStore = Depends(get_release_store)) -> ReviewWorkflow:
    """Factory function to create a review workflow over the shared store.

    Can be used as a FastAPI dependency.
    """
    return ReviewWorkflow(store)

"""In-memory release store."""

import logging
from collections.abc import Callable
from dataclasses import fields, replace
from datetime import UTC, datetime
from typing import Any

from release_desk.models.release import Release
from release_desk.services.base import ConflictError, NotFoundError, ValidationFailedError

logger = logging.getLogger(__name__)

# Fields owned by the store itself and never taken from an update payload.
_PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at", "version"})
_RELEASE_FIELDS = frozenset(f.name for f in fields(Release))


class ReleaseStore:
    """Authoritative collection of releases, kept in insertion order.

    Each operation runs to completion before returning and replaces records
    wholesale, so readers never observe a partially applied update.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._releases: dict[str, Release] = {}
        self._clock = clock or (lambda: datetime.now(UTC))

    def now(self) -> datetime:
        return self._clock()

    def __len__(self) -> int:
        return len(self._releases)

    def __contains__(self, release_id: object) -> bool:
        return release_id in self._releases

    def create(self, release: Release) -> Release:
        """Add a new release.

        Raises:
            ConflictError: If a release with the same id already exists.
        """
        if release.id in self._releases:
            raise ConflictError(f"Release {release.id} already exists")
        self._releases[release.id] = release
        logger.debug("Created release %s (%s)", release.id, release.status)
        return release

    def get(self, release_id: str) -> Release:
        """Return a release by id.

        Raises:
            NotFoundError: If no release has this id.
        """
        release = self._releases.get(release_id)
        if release is None:
            logger.warning("Release %s not found", release_id)
            raise NotFoundError(f"Release {release_id} not found")
        return release

    def update(
        self,
        release_id: str,
        changes: dict[str, Any],
        expected_version: int | None = None,
    ) -> Release:
        """Merge ``changes`` into a release and stamp ``updated_at``.

        Args:
            release_id: Id of the release to update.
            changes: Field values to merge. Store-owned fields are ignored.
            expected_version: If given, the update only applies when the
                stored release is still at this version.

        Returns:
            The updated release.

        Raises:
            NotFoundError: If no release has this id.
            ConflictError: If ``expected_version`` is stale.
            ValidationFailedError: If ``changes`` names unknown fields.
        """
        current = self.get(release_id)

        unknown = set(changes) - _RELEASE_FIELDS
        if unknown:
            raise ValidationFailedError(
                {name: "Unknown release field" for name in sorted(unknown)}
            )

        if expected_version is not None and expected_version != current.version:
            raise ConflictError(
                f"Release {release_id} is at version {current.version}, "
                f"not {expected_version}",
                current_version=current.version,
            )

        merged = {k: v for k, v in changes.items() if k not in _PROTECTED_FIELDS}
        updated = replace(
            current,
            **merged,
            updated_at=self.now(),
            version=current.version + 1,
        )
        self._releases[release_id] = updated
        logger.debug("Updated release %s to version %d", release_id, updated.version)
        return updated

    def delete(self, release_id: str) -> Release:
        """Remove a release and return it.

        Associated asset files are left to their owner.

        Raises:
            NotFoundError: If no release has this id.
        """
        release = self.get(release_id)
        del self._releases[release_id]
        logger.debug("Deleted release %s", release_id)
        return release

    def list(self) -> list[Release]:
        """Return all releases in insertion order."""
        return list(self._releases.values())

    def clear(self) -> None:
        self._releases.clear()


_store = ReleaseStore()


def get_release_store() -> ReleaseStore:
    """Return the process-wide store.

    Can be used as a FastAPI dependency and overridden in tests.
    """
    return _store

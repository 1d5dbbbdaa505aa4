"""Three-step upload wizard that produces committed releases.

Steps: collect files, collect metadata, review. Committing from the review
step either saves a draft or submits for review, then resets the wizard.
"""

import logging
import uuid
from collections.abc import Callable
from dataclasses import asdict, dataclass, fields, replace
from datetime import date
from enum import IntEnum
from typing import Any

from release_desk.config import get_settings
from release_desk.models.release import (
    AlbumType,
    AssetRef,
    Release,
    ReleaseStatus,
    can_transition,
)
from release_desk.services.base import (
    InvalidTransitionError,
    NotFoundError,
    ValidationFailedError,
)
from release_desk.services.identifiers import (
    generate_isrc,
    generate_upc,
    is_valid_isrc,
    is_valid_upc,
    normalize_isrc,
    normalize_upc,
)
from release_desk.services.intake import (
    DimensionProbe,
    IntakeResult,
    check_artwork,
    validate_audio,
)
from release_desk.services.store import ReleaseStore

logger = logging.getLogger(__name__)


class WizardStep(IntEnum):
    """Position of the upload wizard."""

    COLLECTING_FILES = 1
    COLLECTING_METADATA = 2
    REVIEWING = 3


REQUIRED_METADATA = {
    "track_title": "Track title is required",
    "primary_artist": "Primary artist is required",
    "album_title": "Album title is required",
    "primary_genre": "Primary genre is required",
    "language": "Language is required",
    "release_date": "Release date is required",
}

# Statuses a wizard commit may produce.
COMMIT_STATUSES = frozenset({ReleaseStatus.DRAFT, ReleaseStatus.UNDER_REVIEW})


def _current_year() -> str:
    return str(date.today().year)


@dataclass
class ReleaseForm:
    """Metadata form fields as entered by the user."""

    track_title: str = ""
    primary_artist: str = ""
    album_title: str = ""
    album_type: AlbumType = AlbumType.SINGLE
    isrc: str = ""
    upc: str = ""
    composer: str = ""
    lyricist: str = ""
    producer: str = ""
    featuring_artists: str = ""
    primary_genre: str = ""
    secondary_genre: str = ""
    language: str = ""
    release_date: str = ""
    pre_order_date: str = ""
    label_name: str = ""
    copyright_year: str = ""
    is_explicit: bool = False
    territories: str = "Worldwide"
    lyrics: str = ""

    def __post_init__(self) -> None:
        if not self.copyright_year:
            self.copyright_year = _current_year()

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    @classmethod
    def from_release(cls, release: Release) -> "ReleaseForm":
        """Seed the form from an existing release for the edit path."""
        return cls(
            track_title=release.track_title,
            primary_artist=release.primary_artist,
            album_title=release.album_title or "",
            album_type=release.album_type,
            isrc=release.isrc or "",
            upc=release.upc or "",
            composer=release.composer or "",
            lyricist=release.lyricist or "",
            producer=release.producer or "",
            featuring_artists=release.featuring_artists or "",
            primary_genre=release.primary_genre or "",
            secondary_genre=release.secondary_genre or "",
            language=release.language or "",
            release_date=release.release_date or "",
            pre_order_date=release.pre_order_date or "",
            label_name=release.label_name or "",
            copyright_year=release.copyright_year or _current_year(),
            is_explicit=release.is_explicit,
            territories=release.territories or "Worldwide",
            lyrics=release.lyrics or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _blank_to_none(value: str) -> str | None:
    value = value.strip()
    return value or None


class SubmissionWizard:
    """Single-user state machine driving one release submission.

    Validation failures never raise from step navigation: the wizard stays on
    its step and records per-field reasons in ``errors``. Commit actions raise
    ValidationFailedError so the caller can tell a refused commit apart from
    a committed release.
    """

    def __init__(
        self,
        store: ReleaseStore,
        editing: Release | None = None,
        *,
        wizard_id: str | None = None,
        probe: DimensionProbe | None = None,
        isrc_factory: Callable[[], str] = generate_isrc,
        upc_factory: Callable[[], str] = generate_upc,
    ) -> None:
        self.id = wizard_id or uuid.uuid4().hex
        self._store = store
        self._probe = probe
        self._isrc_factory = isrc_factory
        self._upc_factory = upc_factory
        # Bumped whenever the step or the loaded submission changes.
        self._generation = 0
        self.reset()
        if editing is not None:
            self.start_edit(editing)

    def reset(self) -> None:
        """Return every piece of wizard state to its initial value."""
        self._generation += 1
        self.step = WizardStep.COLLECTING_FILES
        self.audio: AssetRef | None = None
        self.artwork: AssetRef | None = None
        self.form = ReleaseForm()
        self.errors: dict[str, str] = {}
        self.editing: Release | None = None

    def start_edit(self, release: Release) -> None:
        """Load an existing release into the wizard.

        Approved, rejected and distributed releases belong to the review
        workflow and cannot be edited here.
        """
        if release.status not in COMMIT_STATUSES:
            raise InvalidTransitionError(
                f"Release {release.id} is {release.status} and can no longer be edited"
            )
        self.reset()
        self.editing = release
        self.form = ReleaseForm.from_release(release)

    @property
    def is_editing(self) -> bool:
        return self.editing is not None

    def _require_step(self, step: WizardStep, action: str) -> None:
        if self.step != step:
            raise InvalidTransitionError(f"Cannot {action} at step {int(self.step)}")

    def _move_to(self, step: WizardStep) -> None:
        self.step = step
        self._generation += 1

    # Step 1: files

    def attach_audio(self, candidate: AssetRef) -> IntakeResult:
        """Offer an audio file. A rejected candidate leaves state unchanged."""
        self._require_step(WizardStep.COLLECTING_FILES, "attach audio")
        result = validate_audio(candidate)
        if not result.accepted:
            self.errors["audio"] = result.reason or "Audio file rejected"
            return result
        self.audio = result.asset
        self.errors.pop("audio", None)
        return result

    async def attach_artwork(self, candidate: AssetRef) -> IntakeResult:
        """Offer an artwork file, including the decoded-dimension check.

        The artwork slot is only replaced once every check has passed. If the
        wizard changed step or was reset while the check was running, the
        outcome is discarded and state is left untouched.
        """
        self._require_step(WizardStep.COLLECTING_FILES, "attach artwork")
        generation = self._generation
        result = await check_artwork(candidate, probe=self._probe)
        if generation != self._generation:
            logger.info(
                "Wizard %s changed during artwork check; discarding %s",
                self.id,
                candidate.filename,
            )
            return IntakeResult.reject("Submission changed while the artwork was being checked.")
        if not result.accepted:
            self.errors["artwork"] = result.reason or "Artwork rejected"
            return result
        self.artwork = result.asset
        self.errors.pop("artwork", None)
        return result

    def validate_files(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        if self.audio is None and not self.is_editing:
            errors["audio"] = "Audio file is required"
        if self.artwork is None and not self.is_editing:
            errors["artwork"] = "Artwork is required"
        return errors

    # Step 2: metadata

    def update_metadata(self, **changes: Any) -> ReleaseForm:
        """Set form fields.

        Raises:
            ValidationFailedError: For unknown fields or an unknown album type.
        """
        self._require_step(WizardStep.COLLECTING_METADATA, "edit metadata")
        unknown = set(changes) - ReleaseForm.field_names()
        if unknown:
            raise ValidationFailedError({name: "Unknown form field" for name in sorted(unknown)})

        if "album_type" in changes:
            try:
                changes["album_type"] = AlbumType(changes["album_type"])
            except ValueError:
                raise ValidationFailedError(
                    {"album_type": "Album type must be single, ep or album"}
                ) from None

        self.form = replace(self.form, **changes)
        return self.form

    def generate_isrc(self) -> str:
        """Fill the ISRC field with a freshly generated code."""
        self._require_step(WizardStep.COLLECTING_METADATA, "generate an ISRC")
        self.form.isrc = self._isrc_factory()
        return self.form.isrc

    def generate_upc(self) -> str:
        """Fill the UPC field with a freshly generated code."""
        self._require_step(WizardStep.COLLECTING_METADATA, "generate a UPC")
        self.form.upc = self._upc_factory()
        return self.form.upc

    def validate_metadata(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        for name, message in REQUIRED_METADATA.items():
            if not getattr(self.form, name).strip():
                errors[name] = message
        if self.form.isrc.strip() and not is_valid_isrc(self.form.isrc):
            errors["isrc"] = "ISRC must look like CCXXXYYNNNNN"
        if self.form.upc.strip() and not is_valid_upc(self.form.upc):
            errors["upc"] = "UPC must be 12 or 13 digits"
        return errors

    # Navigation

    def next_step(self) -> bool:
        """Advance one step if the current step validates.

        Returns:
            True if the wizard advanced. On False, ``errors`` explains why.
        """
        if self.step == WizardStep.COLLECTING_FILES:
            self.errors = self.validate_files()
            if self.errors:
                return False
            self._move_to(WizardStep.COLLECTING_METADATA)
            return True

        if self.step == WizardStep.COLLECTING_METADATA:
            self.errors = self.validate_metadata()
            if self.errors:
                return False
            self._move_to(WizardStep.REVIEWING)
            return True

        raise InvalidTransitionError("Already at the review step; save or submit instead")

    def previous_step(self) -> WizardStep:
        """Go back one step, keeping everything entered so far."""
        if self.step > WizardStep.COLLECTING_FILES:
            self._move_to(WizardStep(self.step - 1))
            self.errors = {}
        return self.step

    # Step 3: commit

    def save_draft(self) -> Release:
        return self._commit(ReleaseStatus.DRAFT)

    def submit_for_review(self) -> Release:
        return self._commit(ReleaseStatus.UNDER_REVIEW)

    def _commit(self, status: ReleaseStatus) -> Release:
        self._require_step(WizardStep.REVIEWING, "commit")

        self.errors = self.validate_metadata()
        if self.errors:
            raise ValidationFailedError(dict(self.errors))

        form = self.form
        isrc = normalize_isrc(form.isrc) if form.isrc.strip() else self._isrc_factory()
        upc: str | None
        if form.upc.strip():
            upc = normalize_upc(form.upc)
        elif form.album_type != AlbumType.SINGLE:
            upc = self._upc_factory()
        else:
            upc = None

        values: dict[str, Any] = {
            "track_title": form.track_title.strip(),
            "primary_artist": form.primary_artist.strip(),
            "album_title": _blank_to_none(form.album_title),
            "album_type": form.album_type,
            "featuring_artists": _blank_to_none(form.featuring_artists),
            "composer": _blank_to_none(form.composer),
            "lyricist": _blank_to_none(form.lyricist),
            "producer": _blank_to_none(form.producer),
            "primary_genre": _blank_to_none(form.primary_genre),
            "secondary_genre": _blank_to_none(form.secondary_genre),
            "language": _blank_to_none(form.language),
            "release_date": _blank_to_none(form.release_date),
            "pre_order_date": _blank_to_none(form.pre_order_date),
            "label_name": _blank_to_none(form.label_name),
            "copyright_year": _blank_to_none(form.copyright_year),
            "territories": _blank_to_none(form.territories),
            "lyrics": _blank_to_none(form.lyrics),
            "is_explicit": form.is_explicit,
            "isrc": isrc,
            "upc": upc,
            "status": status,
            "rejection_reason": None,
        }

        if self.editing is not None:
            release = self._commit_edit(self.editing, values)
        else:
            now = self._store.now()
            release = self._store.create(
                Release(
                    id=uuid.uuid4().hex,
                    created_at=now,
                    updated_at=now,
                    audio=self.audio,
                    artwork=self.artwork,
                    **values,
                )
            )
            logger.info("Release %s created as %s", release.id, release.status)

        self.reset()
        return release

    def _commit_edit(self, original: Release, values: dict[str, Any]) -> Release:
        try:
            current = self._store.get(original.id)
        except NotFoundError:
            raise NotFoundError(f"Release {original.id} was deleted while being edited") from None

        if not can_transition(current.status, values["status"]):
            raise InvalidTransitionError(
                f"Release {current.id} cannot move from {current.status} to {values['status']}"
            )

        # Previously attached files carry over unless replaced.
        values["audio"] = self.audio or current.audio
        values["artwork"] = self.artwork or current.artwork
        release = self._store.update(original.id, values, expected_version=original.version)
        logger.info("Release %s updated as %s", release.id, release.status)
        return release

    def snapshot(self) -> dict[str, Any]:
        """Current wizard state for display."""
        return {
            "id": self.id,
            "step": int(self.step),
            "editing_release_id": self.editing.id if self.editing else None,
            "audio": asdict(self.audio) if self.audio else None,
            "artwork": asdict(self.artwork) if self.artwork else None,
            "form": self.form.to_dict(),
            "errors": dict(self.errors),
        }


class WizardRegistry:
    """Open wizards keyed by id, so stateless callers can drive them.

    At most ``max_open`` wizards are kept. Opening one more drops the wizard
    that was opened earliest, along with its uncommitted input.
    """

    def __init__(self, max_open: int | None = None) -> None:
        self._wizards: dict[str, SubmissionWizard] = {}
        self.max_open = max_open if max_open is not None else get_settings().max_open_wizards

    def open(
        self,
        store: ReleaseStore,
        editing: Release | None = None,
        probe: DimensionProbe | None = None,
    ) -> SubmissionWizard:
        wizard = SubmissionWizard(store, editing, probe=probe)
        while self._wizards and len(self._wizards) >= self.max_open:
            oldest = next(iter(self._wizards))
            del self._wizards[oldest]
            logger.warning("Wizard limit %d reached; dropped wizard %s", self.max_open, oldest)
        self._wizards[wizard.id] = wizard
        logger.debug("Opened wizard %s", wizard.id)
        return wizard

    def get(self, wizard_id: str) -> SubmissionWizard:
        wizard = self._wizards.get(wizard_id)
        if wizard is None:
            raise NotFoundError(f"Submission {wizard_id} not found")
        return wizard

    def discard(self, wizard_id: str) -> None:
        """Drop a wizard and any uncommitted state. There is no undo."""
        if self._wizards.pop(wizard_id, None) is None:
            raise NotFoundError(f"Submission {wizard_id} not found")
        logger.debug("Discarded wizard %s", wizard_id)

    def __len__(self) -> int:
        return len(self._wizards)


_registry = WizardRegistry()


def get_wizard_registry() -> WizardRegistry:
    """Return the process-wide wizard registry. Usable as a FastAPI dependency."""
    return _registry

"""Metadata checks for candidate audio and artwork files.

Only declared content type, byte size and decoded pixel dimensions are
inspected. File bytes are never read here.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Protocol

from release_desk.config import get_settings
from release_desk.models.release import AssetRef

logger = logging.getLogger(__name__)

AUDIO_CONTENT_TYPES = frozenset({"audio/wav", "audio/x-wav", "audio/flac", "audio/mpeg"})
ARTWORK_CONTENT_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png"})


@dataclass(frozen=True)
class IntakeResult:
    """Outcome of an intake check: either an accepted asset or a reason."""

    asset: AssetRef | None = None
    reason: str | None = None

    @property
    def accepted(self) -> bool:
        return self.asset is not None and self.reason is None

    @classmethod
    def accept(cls, asset: AssetRef) -> "IntakeResult":
        return cls(asset=asset)

    @classmethod
    def reject(cls, reason: str) -> "IntakeResult":
        return cls(reason=reason)


class ArtworkDecodeError(Exception):
    """Raised by a dimension probe when the candidate is not a decodable image."""


class DimensionProbe(Protocol):
    """Collaborator that decodes an image candidate's pixel dimensions."""

    async def probe(self, candidate: AssetRef) -> tuple[int, int]:
        """Return ``(width, height)`` or raise ArtworkDecodeError.

        OSError and ValueError raised by an image library are also read as a
        decode failure by check_artwork.
        """
        ...


class DeclaredDimensionProbe:
    """Probe that trusts the dimensions reported by the intake collaborator."""

    async def probe(self, candidate: AssetRef) -> tuple[int, int]:
        if candidate.width is None or candidate.height is None:
            raise ArtworkDecodeError(f"No pixel dimensions reported for {candidate.filename}")
        return candidate.width, candidate.height


def validate_audio(candidate: AssetRef, max_size: int | None = None) -> IntakeResult:
    """Check an audio candidate's type (WAV, FLAC or MP3) and size."""
    limit = max_size if max_size is not None else get_settings().max_audio_size_bytes

    if candidate.content_type not in AUDIO_CONTENT_TYPES:
        return IntakeResult.reject("Invalid file type. Please upload WAV, FLAC, or MP3 (320kbps).")

    if candidate.size > limit:
        return IntakeResult.reject(f"File size exceeds {limit // (1024 * 1024)}MB limit.")

    return IntakeResult.accept(candidate)


def validate_artwork(candidate: AssetRef, max_size: int | None = None) -> IntakeResult:
    """Check an artwork candidate's type (JPEG or PNG) and size.

    Pixel dimensions are checked separately by check_artwork.
    """
    limit = max_size if max_size is not None else get_settings().max_artwork_size_bytes

    if candidate.content_type not in ARTWORK_CONTENT_TYPES:
        return IntakeResult.reject("Invalid file type. Please upload JPG or PNG.")

    if candidate.size > limit:
        return IntakeResult.reject(f"File size exceeds {limit // (1024 * 1024)}MB limit.")

    return IntakeResult.accept(candidate)


async def check_artwork(
    candidate: AssetRef,
    probe: DimensionProbe | None = None,
    timeout: float | None = None,
    min_dimension: int | None = None,
) -> IntakeResult:
    """Run the full artwork intake: type and size, then decoded dimensions.

    Args:
        candidate: The offered artwork file.
        probe: Dimension collaborator. Defaults to DeclaredDimensionProbe.
        timeout: Seconds to wait for the probe. Defaults to settings.
        min_dimension: Minimum width and height in pixels. Defaults to settings.

    Returns:
        An accepted result carrying the asset with its decoded dimensions, or
        a rejection whose reason tells decode failure, timeout and undersized
        images apart.
    """
    settings = get_settings()
    probe = probe or DeclaredDimensionProbe()
    timeout = timeout if timeout is not None else settings.artwork_probe_timeout
    minimum = min_dimension if min_dimension is not None else settings.min_artwork_dimension

    result = validate_artwork(candidate)
    if not result.accepted:
        return result

    try:
        width, height = await asyncio.wait_for(probe.probe(candidate), timeout=timeout)
    except TimeoutError:
        logger.warning("Dimension probe timed out for %s after %.1fs", candidate.filename, timeout)
        return IntakeResult.reject("Timed out reading image dimensions.")
    except (ArtworkDecodeError, OSError, ValueError) as e:
        logger.info("Artwork decode failed: %s", e)
        return IntakeResult.reject("Artwork could not be read as an image.")

    if width < minimum or height < minimum:
        return IntakeResult.reject(f"Image must be at least {minimum}x{minimum} pixels.")

    return IntakeResult.accept(replace(candidate, width=width, height=height))


def get_dimension_probe() -> DimensionProbe:
    """Return the dimension probe used for artwork intake.

    Can be used as a FastAPI dependency and overridden in tests.
    """
    return DeclaredDimensionProbe()

"""Error types raised by the release desk services."""


class ReleaseDeskError(Exception):
    """Base exception for release desk errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(ReleaseDeskError):
    """Raised when a release or wizard id does not exist."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class ValidationFailedError(ReleaseDeskError):
    """Raised when input fails validation.

    ``errors`` maps a field name (``audio``, ``track_title``, ``reason``) to a
    human-readable reason.
    """

    def __init__(self, errors: dict[str, str], message: str = "Validation failed"):
        super().__init__(message, status_code=422)
        self.errors = errors


class InvalidTransitionError(ReleaseDeskError):
    """Raised when a status change is not an edge of the release lifecycle."""

    def __init__(self, message: str = "Invalid status transition"):
        super().__init__(message, status_code=409)


class ConflictError(ReleaseDeskError):
    """Raised when an update was based on a stale version of a release."""

    def __init__(
        self,
        message: str = "Release was modified concurrently",
        current_version: int | None = None,
    ) -> None:
        super().__init__(message, status_code=409)
        self.current_version = current_version


class PermissionDeniedError(ReleaseDeskError):
    """Raised when the current user's role does not allow an operation."""

    def __init__(self, message: str = "Permission denied"):
        super().__init__(message, status_code=403)

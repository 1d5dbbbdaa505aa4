"""Release lifecycle services."""

from release_desk.services.base import (
    ConflictError,
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
    ReleaseDeskError,
    ValidationFailedError,
)
from release_desk.services.review import ReviewWorkflow
from release_desk.services.store import ReleaseStore, get_release_store
from release_desk.services.submission import (
    SubmissionWizard,
    WizardRegistry,
    WizardStep,
    get_wizard_registry,
)
from release_desk.services.users import ProfileHolder, get_profile_holder

__all__ = [
    "ConflictError",
    "InvalidTransitionError",
    "NotFoundError",
    "PermissionDeniedError",
    "ProfileHolder",
    "ReleaseDeskError",
    "ReleaseStore",
    "ReviewWorkflow",
    "SubmissionWizard",
    "ValidationFailedError",
    "WizardRegistry",
    "WizardStep",
    "get_profile_holder",
    "get_release_store",
    "get_wizard_registry",
]

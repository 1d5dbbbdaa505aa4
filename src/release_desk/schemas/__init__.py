"""Pydantic schemas for request/response validation."""

from release_desk.schemas.release import (
    AssetSchema,
    ReleaseListResponse,
    ReleaseResponse,
    ReleaseStatsResponse,
)
from release_desk.schemas.review import RejectRequest, TransitionRequest
from release_desk.schemas.submission import (
    AdvanceResponse,
    FormOptionsResponse,
    IntakeResponse,
    MetadataUpdate,
    ReleaseFormSchema,
    SubmissionCreate,
    SubmissionResponse,
)
from release_desk.schemas.user import UserProfileResponse, UserProfileUpdate

__all__ = [
    # Release schemas
    "AssetSchema",
    "ReleaseResponse",
    "ReleaseListResponse",
    "ReleaseStatsResponse",
    # Submission schemas
    "SubmissionCreate",
    "ReleaseFormSchema",
    "MetadataUpdate",
    "SubmissionResponse",
    "IntakeResponse",
    "AdvanceResponse",
    "FormOptionsResponse",
    # Review schemas
    "TransitionRequest",
    "RejectRequest",
    # User schemas
    "UserProfileResponse",
    "UserProfileUpdate",
]

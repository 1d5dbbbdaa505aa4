"""Pydantic schemas for review endpoints."""

from pydantic import BaseModel, Field


class TransitionRequest(BaseModel):
    """Body for approve and distribute actions."""

    expected_version: int | None = Field(
        default=None, description="Only apply if the release is still at this version"
    )


class RejectRequest(TransitionRequest):
    """Body for the reject action."""

    reason: str = Field(default="", description="Why the release is rejected")

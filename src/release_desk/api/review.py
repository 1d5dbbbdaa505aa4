"""Admin review queue endpoints."""

from fastapi import APIRouter, Body, Depends, Query, Response

from release_desk.api.releases import STATUS_FILTER_PATTERN, csv_response
from release_desk.models.release import ReleaseStatus
from release_desk.schemas.release import ReleaseListResponse, ReleaseResponse
from release_desk.schemas.review import RejectRequest, TransitionRequest
from release_desk.services.reporting import export_releases
from release_desk.services.review import ReviewWorkflow, get_review_workflow
from release_desk.utils.security import CurrentUser, Reviewer

router = APIRouter(prefix="/review", tags=["review"])


@router.get("", response_model=ReleaseListResponse)
async def review_queue(
    current_user: Reviewer,  # noqa: ARG001 - Required for role enforcement
    status: str = Query(
        ReleaseStatus.UNDER_REVIEW.value,
        pattern=STATUS_FILTER_PATTERN,
        description="Status filter, defaults to releases awaiting review",
    ),
    workflow: ReviewWorkflow = Depends(get_review_workflow),
) -> ReleaseListResponse:
    """List releases for review.

    Requires the admin role when review role enforcement is enabled.
    """
    releases = workflow.queue(status)
    return ReleaseListResponse(
        total=len(releases),
        results=[ReleaseResponse.model_validate(r) for r in releases],
    )


@router.get("/export")
async def export_review_queue(
    current_user: Reviewer,  # noqa: ARG001 - Required for role enforcement
    status: str = Query(
        ReleaseStatus.UNDER_REVIEW.value,
        pattern=STATUS_FILTER_PATTERN,
        description="Status filter, defaults to releases awaiting review",
    ),
    workflow: ReviewWorkflow = Depends(get_review_workflow),
) -> Response:
    """Download the review queue as CSV with the full admin column set."""
    releases = workflow.queue(status)
    return csv_response(export_releases(releases, field_set="admin", prefix="admin-releases"))


@router.post("/{release_id}/approve", response_model=ReleaseResponse)
async def approve_release(
    release_id: str,
    current_user: CurrentUser,
    request: TransitionRequest | None = Body(None),
    workflow: ReviewWorkflow = Depends(get_review_workflow),
) -> ReleaseResponse:
    """Approve a release under review. An ISRC is assigned if missing."""
    release = workflow.approve(
        release_id,
        user=current_user,
        expected_version=request.expected_version if request else None,
    )
    return ReleaseResponse.model_validate(release)


@router.post("/{release_id}/reject", response_model=ReleaseResponse)
async def reject_release(
    release_id: str,
    request: RejectRequest,
    current_user: CurrentUser,
    workflow: ReviewWorkflow = Depends(get_review_workflow),
) -> ReleaseResponse:
    """Reject a release under review. A non-blank reason is required."""
    release = workflow.reject(
        release_id,
        request.reason,
        user=current_user,
        expected_version=request.expected_version,
    )
    return ReleaseResponse.model_validate(release)


@router.post("/{release_id}/distribute", response_model=ReleaseResponse)
async def distribute_release(
    release_id: str,
    current_user: CurrentUser,
    request: TransitionRequest | None = Body(None),
    workflow: ReviewWorkflow = Depends(get_review_workflow),
) -> ReleaseResponse:
    """Mark an approved release as distributed."""
    release = workflow.mark_distributed(
        release_id,
        user=current_user,
        expected_version=request.expected_version if request else None,
    )
    return ReleaseResponse.model_validate(release)

"""Release listing, search and export endpoints."""

from fastapi import APIRouter, Depends, Query, Response

from release_desk.models.release import ReleaseStatus
from release_desk.schemas.release import (
    ReleaseListResponse,
    ReleaseResponse,
    ReleaseStatsResponse,
)
from release_desk.services.reporting import (
    ALL_STATUSES,
    CsvExport,
    export_releases,
    filter_releases,
    status_counts,
)
from release_desk.services.store import ReleaseStore, get_release_store

router = APIRouter(prefix="/releases", tags=["releases"])

STATUS_FILTER_PATTERN = "^(" + "|".join([ALL_STATUSES, *(s.value for s in ReleaseStatus)]) + ")$"


def csv_response(export: CsvExport | None) -> Response:
    """Wrap an export as a CSV download, or 204 when there was nothing to export."""
    if export is None:
        return Response(status_code=204)
    return Response(
        content=export.content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.get("", response_model=ReleaseListResponse)
async def list_releases(
    search: str | None = Query(None, description="Match on track title or primary artist"),
    status: str = Query(ALL_STATUSES, pattern=STATUS_FILTER_PATTERN, description="Status filter"),
    store: ReleaseStore = Depends(get_release_store),
) -> ReleaseListResponse:
    """List releases in the order they were created.

    Search is a case-insensitive substring match; status ``all`` disables
    the status filter.
    """
    releases = filter_releases(store.list(), search_term=search, status=status)
    return ReleaseListResponse(
        total=len(releases),
        results=[ReleaseResponse.model_validate(r) for r in releases],
    )


@router.get("/stats", response_model=ReleaseStatsResponse)
async def release_stats(store: ReleaseStore = Depends(get_release_store)) -> ReleaseStatsResponse:
    """Count releases per status."""
    return ReleaseStatsResponse(total=len(store), **status_counts(store.list()))


@router.get("/export")
async def export_release_list(
    search: str | None = Query(None, description="Match on track title or primary artist"),
    status: str = Query(ALL_STATUSES, pattern=STATUS_FILTER_PATTERN, description="Status filter"),
    store: ReleaseStore = Depends(get_release_store),
) -> Response:
    """Download the filtered release list as CSV."""
    releases = filter_releases(store.list(), search_term=search, status=status)
    return csv_response(export_releases(releases, field_set="dashboard", prefix="releases"))


@router.get("/{release_id}", response_model=ReleaseResponse)
async def get_release(
    release_id: str,
    store: ReleaseStore = Depends(get_release_store),
) -> ReleaseResponse:
    """Get a single release.

    NotFoundError is translated to 404 globally.
    """
    return ReleaseResponse.model_validate(store.get(release_id))


@router.delete("/{release_id}", status_code=204)
async def delete_release(
    release_id: str,
    store: ReleaseStore = Depends(get_release_store),
) -> None:
    """Delete a release. Asset files are not touched."""
    store.delete(release_id)

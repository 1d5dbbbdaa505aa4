"""Upload wizard endpoints.

Navigation that fails validation answers 200 with ``advanced: false`` and the
per-field errors; the wizard simply stays where it is. Commit actions that
fail validation answer 422; a successful commit closes the wizard.
"""

from fastapi import APIRouter, Body, Depends

from release_desk.models.catalog import GENRES, LANGUAGES, TERRITORIES
from release_desk.models.release import AlbumType
from release_desk.schemas.release import AssetSchema, ReleaseResponse
from release_desk.schemas.submission import (
    AdvanceResponse,
    FormOptionsResponse,
    IntakeResponse,
    MetadataUpdate,
    SubmissionCreate,
    SubmissionResponse,
)
from release_desk.services.intake import DimensionProbe, get_dimension_probe
from release_desk.services.store import ReleaseStore, get_release_store
from release_desk.services.submission import (
    SubmissionWizard,
    WizardRegistry,
    get_wizard_registry,
)

router = APIRouter(prefix="/submissions", tags=["submissions"])


def submission_to_response(wizard: SubmissionWizard) -> SubmissionResponse:
    """Convert wizard state to a SubmissionResponse schema."""
    return SubmissionResponse.model_validate(wizard.snapshot())


@router.post("", response_model=SubmissionResponse, status_code=201)
async def open_submission(
    request: SubmissionCreate | None = Body(None),
    store: ReleaseStore = Depends(get_release_store),
    registry: WizardRegistry = Depends(get_wizard_registry),
    probe: DimensionProbe = Depends(get_dimension_probe),
) -> SubmissionResponse:
    """Start a new upload, or an edit of an existing release.

    Editing reuses the release's id, creation time and attached files.
    """
    editing = None
    if request is not None and request.release_id:
        editing = store.get(request.release_id)
    wizard = registry.open(store, editing=editing, probe=probe)
    return submission_to_response(wizard)


@router.get("/options", response_model=FormOptionsResponse)
async def form_options() -> FormOptionsResponse:
    """List the choices for album type, genre, language and territories."""
    return FormOptionsResponse(
        album_types=list(AlbumType),
        genres=list(GENRES),
        languages=list(LANGUAGES),
        territories=list(TERRITORIES),
    )


@router.get("/{submission_id}", response_model=SubmissionResponse)
async def get_submission(
    submission_id: str,
    registry: WizardRegistry = Depends(get_wizard_registry),
) -> SubmissionResponse:
    """Get the current state of a wizard."""
    return submission_to_response(registry.get(submission_id))


@router.delete("/{submission_id}", status_code=204)
async def discard_submission(
    submission_id: str,
    registry: WizardRegistry = Depends(get_wizard_registry),
) -> None:
    """Abandon a wizard. Uncommitted input is lost."""
    registry.discard(submission_id)


@router.put("/{submission_id}/audio", response_model=IntakeResponse)
async def attach_audio(
    submission_id: str,
    asset: AssetSchema,
    registry: WizardRegistry = Depends(get_wizard_registry),
) -> IntakeResponse:
    """Offer an audio file (WAV, FLAC or MP3 up to the size limit)."""
    wizard = registry.get(submission_id)
    result = wizard.attach_audio(asset.to_asset())
    return IntakeResponse(
        accepted=result.accepted,
        reason=result.reason,
        submission=submission_to_response(wizard),
    )


@router.put("/{submission_id}/artwork", response_model=IntakeResponse)
async def attach_artwork(
    submission_id: str,
    asset: AssetSchema,
    registry: WizardRegistry = Depends(get_wizard_registry),
) -> IntakeResponse:
    """Offer an artwork file (JPEG or PNG, at least the minimum dimensions)."""
    wizard = registry.get(submission_id)
    result = await wizard.attach_artwork(asset.to_asset())
    return IntakeResponse(
        accepted=result.accepted,
        reason=result.reason,
        submission=submission_to_response(wizard),
    )


@router.patch("/{submission_id}/metadata", response_model=SubmissionResponse)
async def update_metadata(
    submission_id: str,
    update: MetadataUpdate,
    registry: WizardRegistry = Depends(get_wizard_registry),
) -> SubmissionResponse:
    """Set metadata form fields. Fields omitted or null are left as they are."""
    wizard = registry.get(submission_id)
    changes = {k: v for k, v in update.model_dump(exclude_unset=True).items() if v is not None}
    wizard.update_metadata(**changes)
    return submission_to_response(wizard)


@router.post("/{submission_id}/generate-isrc", response_model=SubmissionResponse)
async def generate_isrc(
    submission_id: str,
    registry: WizardRegistry = Depends(get_wizard_registry),
) -> SubmissionResponse:
    """Fill the ISRC field with a generated code."""
    wizard = registry.get(submission_id)
    wizard.generate_isrc()
    return submission_to_response(wizard)


@router.post("/{submission_id}/generate-upc", response_model=SubmissionResponse)
async def generate_upc(
    submission_id: str,
    registry: WizardRegistry = Depends(get_wizard_registry),
) -> SubmissionResponse:
    """Fill the UPC field with a generated code."""
    wizard = registry.get(submission_id)
    wizard.generate_upc()
    return submission_to_response(wizard)


@router.post("/{submission_id}/next", response_model=AdvanceResponse)
async def next_step(
    submission_id: str,
    registry: WizardRegistry = Depends(get_wizard_registry),
) -> AdvanceResponse:
    """Validate the current step and move forward if it passes."""
    wizard = registry.get(submission_id)
    advanced = wizard.next_step()
    return AdvanceResponse(advanced=advanced, submission=submission_to_response(wizard))


@router.post("/{submission_id}/back", response_model=AdvanceResponse)
async def previous_step(
    submission_id: str,
    registry: WizardRegistry = Depends(get_wizard_registry),
) -> AdvanceResponse:
    """Go back one step without losing entered data."""
    wizard = registry.get(submission_id)
    before = wizard.step
    after = wizard.previous_step()
    return AdvanceResponse(
        advanced=after != before,
        submission=submission_to_response(wizard),
    )


@router.post("/{submission_id}/draft", response_model=ReleaseResponse, status_code=201)
async def save_draft(
    submission_id: str,
    registry: WizardRegistry = Depends(get_wizard_registry),
) -> ReleaseResponse:
    """Commit the release as a draft. The wizard is closed afterwards."""
    release = registry.get(submission_id).save_draft()
    registry.discard(submission_id)
    return ReleaseResponse.model_validate(release)


@router.post("/{submission_id}/submit", response_model=ReleaseResponse, status_code=201)
async def submit_for_review(
    submission_id: str,
    registry: WizardRegistry = Depends(get_wizard_registry),
) -> ReleaseResponse:
    """Commit the release for admin review. The wizard is closed afterwards."""
    release = registry.get(submission_id).submit_for_review()
    registry.discard(submission_id)
    return ReleaseResponse.model_validate(release)

"""Pydantic schemas for the upload wizard endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from release_desk.models.release import AlbumType
from release_desk.schemas.release import AssetSchema


class SubmissionCreate(BaseModel):
    """Open a wizard, optionally to edit an existing release."""

    release_id: str | None = Field(default=None, description="Release to edit")


class ReleaseFormSchema(BaseModel):
    """Metadata form as currently entered."""

    model_config = ConfigDict(extra="ignore")

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
    territories: str = ""
    lyrics: str = ""


class MetadataUpdate(BaseModel):
    """Partial form update. Only fields present in the request are applied."""

    model_config = ConfigDict(extra="forbid")

    track_title: str | None = None
    primary_artist: str | None = None
    album_title: str | None = None
    album_type: AlbumType | None = None
    isrc: str | None = None
    upc: str | None = None
    composer: str | None = None
    lyricist: str | None = None
    producer: str | None = None
    featuring_artists: str | None = None
    primary_genre: str | None = None
    secondary_genre: str | None = None
    language: str | None = None
    release_date: str | None = None
    pre_order_date: str | None = None
    label_name: str | None = None
    copyright_year: str | None = None
    is_explicit: bool | None = None
    territories: str | None = None
    lyrics: str | None = None


class SubmissionResponse(BaseModel):
    """Current wizard state."""

    id: str = Field(description="Wizard ID")
    step: int = Field(description="1 = files, 2 = metadata, 3 = review")
    editing_release_id: str | None = Field(default=None, description="Release being edited")
    audio: AssetSchema | None = None
    artwork: AssetSchema | None = None
    form: ReleaseFormSchema
    errors: dict[str, str] = Field(default_factory=dict, description="Per-field errors")


class IntakeResponse(BaseModel):
    """Outcome of offering a file to the wizard."""

    accepted: bool
    reason: str | None = None
    submission: SubmissionResponse


class AdvanceResponse(BaseModel):
    """Outcome of a step navigation request."""

    advanced: bool = Field(description="Whether the wizard changed step")
    submission: SubmissionResponse


class FormOptionsResponse(BaseModel):
    """Choices offered by the metadata form's pick-lists."""

    album_types: list[AlbumType]
    genres: list[str]
    languages: list[str]
    territories: list[str]

"""Pydantic schemas for release API endpoints."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from release_desk.models.release import AlbumType, AssetRef, ReleaseStatus


class AssetSchema(BaseModel):
    """Metadata of an audio or artwork file, as reported by the uploader."""

    model_config = ConfigDict(from_attributes=True)

    filename: str = Field(min_length=1, description="Original file name")
    content_type: str = Field(description="Declared MIME type (e.g., audio/wav)")
    size: int = Field(ge=0, description="File size in bytes")
    width: int | None = Field(default=None, ge=0, description="Decoded image width in pixels")
    height: int | None = Field(default=None, ge=0, description="Decoded image height in pixels")

    def to_asset(self) -> AssetRef:
        return AssetRef(
            filename=self.filename,
            content_type=self.content_type.lower(),
            size=self.size,
            width=self.width,
            height=self.height,
        )


class ReleaseResponse(BaseModel):
    """A release as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(description="Release ID")
    track_title: str = Field(description="Track title")
    primary_artist: str = Field(description="Primary artist name")
    album_title: str | None = Field(default=None, description="Album title")
    album_type: AlbumType = Field(description="single, ep or album")
    status: ReleaseStatus = Field(description="Lifecycle status")
    featuring_artists: str | None = None
    composer: str | None = None
    lyricist: str | None = None
    producer: str | None = None
    primary_genre: str | None = None
    secondary_genre: str | None = None
    language: str | None = None
    release_date: str | None = Field(default=None, description="Release date (YYYY-MM-DD)")
    pre_order_date: str | None = Field(default=None, description="Pre-order date (YYYY-MM-DD)")
    label_name: str | None = None
    copyright_year: str | None = None
    territories: str | None = None
    lyrics: str | None = None
    is_explicit: bool = False
    isrc: str | None = Field(default=None, description="International Standard Recording Code")
    upc: str | None = Field(default=None, description="Universal Product Code")
    audio: AssetSchema | None = None
    artwork: AssetSchema | None = None
    rejection_reason: str | None = Field(
        default=None,
        validation_alias=AliasChoices("effective_rejection_reason", "rejection_reason"),
        description="Why the release was rejected (only when rejected)",
    )
    created_at: datetime
    updated_at: datetime
    version: int = Field(description="Incremented on every change")
    is_terminal: bool = Field(default=False, description="No further status changes allowed")


class ReleaseListResponse(BaseModel):
    """List of releases in store order."""

    total: int = Field(description="Number of matching releases")
    results: list[ReleaseResponse] = Field(default_factory=list)


class ReleaseStatsResponse(BaseModel):
    """Release counts per status."""

    total: int
    draft: int = 0
    under_review: int = 0
    approved: int = 0
    rejected: int = 0
    distributed: int = 0

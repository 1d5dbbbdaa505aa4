"""Tests for release listing and export API endpoints."""

from datetime import UTC, datetime

import pytest
from httpx import AsyncClient

from release_desk.models.release import AlbumType, Release, ReleaseStatus
from release_desk.services.store import ReleaseStore


def create_release(
    id: str,
    track_title: str,
    primary_artist: str,
    status: ReleaseStatus = ReleaseStatus.DRAFT,
    **kwargs,
) -> Release:
    created = datetime(2025, 3, 1, 12, 30, tzinfo=UTC)
    return Release(
        id=id,
        track_title=track_title,
        primary_artist=primary_artist,
        status=status,
        created_at=created,
        updated_at=created,
        **kwargs,
    )


@pytest.fixture
def seeded_store(store: ReleaseStore) -> ReleaseStore:
    store.create(create_release("r1", "Sunset", "Nova", album_type=AlbumType.ALBUM))
    store.create(create_release("r2", "Rain Song", "Kay", ReleaseStatus.UNDER_REVIEW))
    store.create(
        create_release(
            "r3", "Night Drive", "Nova, Kay", ReleaseStatus.APPROVED, isrc="USXXX2500001"
        )
    )
    return store


class TestListReleases:
    """Tests for GET /api/releases."""

    async def test_empty(self, client: AsyncClient) -> None:
        response = await client.get("/api/releases")

        assert response.status_code == 200
        assert response.json() == {"total": 0, "results": []}

    async def test_insertion_order(self, client: AsyncClient, seeded_store: ReleaseStore) -> None:
        response = await client.get("/api/releases")

        data = response.json()
        assert data["total"] == 3
        assert [r["id"] for r in data["results"]] == ["r1", "r2", "r3"]

    async def test_search_and_status(
        self, client: AsyncClient, seeded_store: ReleaseStore
    ) -> None:
        response = await client.get("/api/releases", params={"search": "NOVA", "status": "draft"})

        assert [r["id"] for r in response.json()["results"]] == ["r1"]

    async def test_status_all(self, client: AsyncClient, seeded_store: ReleaseStore) -> None:
        response = await client.get("/api/releases", params={"status": "all"})

        assert response.json()["total"] == 3

    async def test_unknown_status_is_422(self, client: AsyncClient) -> None:
        response = await client.get("/api/releases", params={"status": "pending"})

        assert response.status_code == 422


class TestGetRelease:
    """Tests for GET and DELETE /api/releases/{id}."""

    async def test_get(self, client: AsyncClient, seeded_store: ReleaseStore) -> None:
        response = await client.get("/api/releases/r3")

        assert response.status_code == 200
        data = response.json()
        assert data["track_title"] == "Night Drive"
        assert data["status"] == "approved"
        assert data["isrc"] == "USXXX2500001"
        assert data["version"] == 1
        assert data["is_terminal"] is False

    async def test_get_missing(self, client: AsyncClient) -> None:
        response = await client.get("/api/releases/missing")

        assert response.status_code == 404
        assert "missing" in response.json()["detail"]

    async def test_delete(self, client: AsyncClient, seeded_store: ReleaseStore) -> None:
        response = await client.delete("/api/releases/r2")

        assert response.status_code == 204
        assert "r2" not in seeded_store
        assert len(seeded_store) == 2

    async def test_delete_missing(self, client: AsyncClient) -> None:
        response = await client.delete("/api/releases/missing")

        assert response.status_code == 404


class TestStats:
    """Tests for GET /api/releases/stats."""

    async def test_counts(self, client: AsyncClient, seeded_store: ReleaseStore) -> None:
        response = await client.get("/api/releases/stats")

        assert response.status_code == 200
        assert response.json() == {
            "total": 3,
            "draft": 1,
            "under_review": 1,
            "approved": 1,
            "rejected": 0,
            "distributed": 0,
        }


class TestExport:
    """Tests for GET /api/releases/export."""

    async def test_empty_export(self, client: AsyncClient) -> None:
        response = await client.get("/api/releases/export")

        assert response.status_code == 204
        assert response.content == b""

    async def test_csv(self, client: AsyncClient, seeded_store: ReleaseStore) -> None:
        response = await client.get("/api/releases/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        disposition = response.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="releases-')
        assert disposition.endswith('.csv"')

        lines = response.text.split("\n")
        assert lines[0] == (
            "Track Title,Primary Artist,Album,Album Type,Status,ISRC,UPC,Genre,"
            "Release Date,Created"
        )
        assert lines[1] == "Sunset,Nova,N/A,album,draft,N/A,N/A,N/A,N/A,2025-03-01"
        assert lines[3].startswith('Night Drive,"Nova, Kay",N/A,single,approved,USXXX2500001')
        assert len(lines) == 4

    async def test_filtered_export(self, client: AsyncClient, seeded_store: ReleaseStore) -> None:
        response = await client.get("/api/releases/export", params={"search": "rain"})

        lines = response.text.split("\n")
        assert len(lines) == 2
        assert lines[1].startswith("Rain Song,Kay,")

"""Tests for admin review API endpoints."""

from datetime import UTC, datetime

import pytest
from httpx import AsyncClient

from release_desk.models.release import Release, ReleaseStatus
from release_desk.models.user import UserProfile
from release_desk.services.store import ReleaseStore
from release_desk.services.users import ProfileHolder


def create_release(
    id: str = "r1",
    status: ReleaseStatus = ReleaseStatus.UNDER_REVIEW,
    isrc: str | None = None,
) -> Release:
    created = datetime(2025, 1, 1, tzinfo=UTC)
    return Release(
        id=id,
        track_title="Sunset",
        primary_artist="Nova",
        status=status,
        isrc=isrc,
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def as_admin(profile_holder: ProfileHolder, admin: UserProfile) -> UserProfile:
    """Switch the signed-in profile to an administrator."""
    return profile_holder.replace(admin)


class TestRoleGate:
    """Non-admin users cannot review."""

    async def test_queue_forbidden(self, client: AsyncClient) -> None:
        response = await client.get("/api/review")

        assert response.status_code == 403

    async def test_approve_forbidden(self, client: AsyncClient, store: ReleaseStore) -> None:
        store.create(create_release())

        response = await client.post("/api/review/r1/approve")

        assert response.status_code == 403
        assert store.get("r1").status == ReleaseStatus.UNDER_REVIEW

    async def test_role_change_grants_access(
        self, client: AsyncClient, store: ReleaseStore
    ) -> None:
        store.create(create_release())
        await client.put(
            "/api/settings/profile",
            json={"name": "Demo Artist", "email": "artist@demo.com", "role": "admin"},
        )

        response = await client.post("/api/review/r1/approve")

        assert response.status_code == 200


@pytest.mark.usefixtures("as_admin")
class TestQueue:
    """Tests for the review queue."""

    async def test_defaults_to_under_review(
        self, client: AsyncClient, store: ReleaseStore
    ) -> None:
        store.create(create_release("r1", ReleaseStatus.DRAFT))
        store.create(create_release("r2"))

        response = await client.get("/api/review")

        assert response.status_code == 200
        assert [r["id"] for r in response.json()["results"]] == ["r2"]

    async def test_all(self, client: AsyncClient, store: ReleaseStore) -> None:
        store.create(create_release("r1", ReleaseStatus.DRAFT))
        store.create(create_release("r2"))

        response = await client.get("/api/review", params={"status": "all"})

        assert response.json()["total"] == 2

    async def test_export(self, client: AsyncClient, store: ReleaseStore) -> None:
        store.create(create_release())

        response = await client.get("/api/review/export")

        assert response.status_code == 200
        assert 'filename="admin-releases-' in response.headers["content-disposition"]
        header = response.text.split("\n")[0]
        assert header.startswith("ID,Track Title,")
        assert header.endswith(",Rejection Reason")

    async def test_empty_export(self, client: AsyncClient) -> None:
        response = await client.get("/api/review/export")

        assert response.status_code == 204


@pytest.mark.usefixtures("as_admin")
class TestTransitions:
    """Tests for approve, reject and distribute."""

    async def test_approve_assigns_isrc(self, client: AsyncClient, store: ReleaseStore) -> None:
        store.create(create_release())

        response = await client.post("/api/review/r1/approve")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "approved"
        assert len(data["isrc"]) == 12
        assert data["version"] == 2

    async def test_reject_requires_reason(
        self, client: AsyncClient, store: ReleaseStore
    ) -> None:
        store.create(create_release())

        response = await client.post("/api/review/r1/reject", json={"reason": "   "})

        assert response.status_code == 422
        assert response.json()["errors"] == {"reason": "Please provide a rejection reason"}
        assert store.get("r1").status == ReleaseStatus.UNDER_REVIEW

    async def test_reject(self, client: AsyncClient, store: ReleaseStore) -> None:
        store.create(create_release())

        response = await client.post("/api/review/r1/reject", json={"reason": " Low quality "})

        assert response.status_code == 200
        assert response.json()["status"] == "rejected"
        assert response.json()["rejection_reason"] == "Low quality"
        assert response.json()["is_terminal"] is True

    async def test_rejected_is_terminal(self, client: AsyncClient, store: ReleaseStore) -> None:
        store.create(create_release())
        await client.post("/api/review/r1/reject", json={"reason": "No"})

        response = await client.post("/api/review/r1/approve")

        assert response.status_code == 409
        assert store.get("r1").status == ReleaseStatus.REJECTED

    async def test_distribute_requires_approval(
        self, client: AsyncClient, store: ReleaseStore
    ) -> None:
        store.create(create_release())

        response = await client.post("/api/review/r1/distribute")

        assert response.status_code == 409

    async def test_stale_version(self, client: AsyncClient, store: ReleaseStore) -> None:
        store.create(create_release())
        store.update("r1", {"track_title": "Sunrise"})

        response = await client.post("/api/review/r1/approve", json={"expected_version": 1})

        assert response.status_code == 409
        assert response.json()["current_version"] == 2
        assert store.get("r1").status == ReleaseStatus.UNDER_REVIEW

    async def test_missing_release(self, client: AsyncClient) -> None:
        response = await client.post("/api/review/missing/approve")

        assert response.status_code == 404


@pytest.mark.usefixtures("as_admin")
class TestEndToEnd:
    """A release travels from upload to distribution."""

    async def test_upload_review_distribute(
        self, client: AsyncClient, store: ReleaseStore
    ) -> None:
        wizard_id = (await client.post("/api/submissions")).json()["id"]
        await client.put(
            f"/api/submissions/{wizard_id}/audio",
            json={"filename": "a.flac", "content_type": "audio/flac", "size": 1024},
        )
        await client.put(
            f"/api/submissions/{wizard_id}/artwork",
            json={
                "filename": "a.jpg",
                "content_type": "image/jpeg",
                "size": 1024,
                "width": 3000,
                "height": 3200,
            },
        )
        await client.post(f"/api/submissions/{wizard_id}/next")
        await client.patch(
            f"/api/submissions/{wizard_id}/metadata",
            json={
                "track_title": "Sunset",
                "primary_artist": "Nova",
                "album_title": "Horizons",
                "primary_genre": "Pop",
                "language": "English",
                "release_date": "2025-01-01",
            },
        )
        await client.post(f"/api/submissions/{wizard_id}/next")
        submitted = (await client.post(f"/api/submissions/{wizard_id}/submit")).json()
        release_id = submitted["id"]

        queue = (await client.get("/api/review")).json()
        assert [r["id"] for r in queue["results"]] == [release_id]

        approved = await client.post(
            f"/api/review/{release_id}/approve",
            json={"expected_version": submitted["version"]},
        )
        assert approved.json()["status"] == "approved"
        assert approved.json()["isrc"] == submitted["isrc"]

        distributed = await client.post(f"/api/review/{release_id}/distribute")
        assert distributed.json()["status"] == "distributed"

        edit = await client.post("/api/submissions", json={"release_id": release_id})
        assert edit.status_code == 409

        stats = (await client.get("/api/releases/stats")).json()
        assert stats["distributed"] == 1
        assert stats["total"] == 1
        assert len(store) == 1

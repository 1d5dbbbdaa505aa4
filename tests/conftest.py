"""Pytest fixtures and configuration."""

import os
from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment variables before importing the app
os.environ.setdefault("DEBUG", "true")

from release_desk.main import app
from release_desk.models.user import UserProfile, UserRole
from release_desk.services.store import ReleaseStore, get_release_store
from release_desk.services.submission import WizardRegistry, get_wizard_registry
from release_desk.services.users import ProfileHolder, get_profile_holder


@pytest.fixture
def store() -> ReleaseStore:
    """An isolated, empty release store."""
    return ReleaseStore()


@pytest.fixture
def registry() -> WizardRegistry:
    """An isolated wizard registry."""
    return WizardRegistry()


@pytest.fixture
def artist() -> UserProfile:
    return UserProfile(id="1", name="Demo Artist", email="artist@demo.com", role=UserRole.ARTIST)


@pytest.fixture
def admin() -> UserProfile:
    return UserProfile(id="2", name="Demo Admin", email="admin@demo.com", role=UserRole.ADMIN)


@pytest.fixture
def profile_holder(artist: UserProfile) -> ProfileHolder:
    """Profile holder seeded with an artist."""
    return ProfileHolder(artist)


@pytest.fixture
async def client(
    store: ReleaseStore,
    registry: WizardRegistry,
    profile_holder: ProfileHolder,
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client wired to isolated store, registry and profile."""
    app.dependency_overrides[get_release_store] = lambda: store
    app.dependency_overrides[get_wizard_registry] = lambda: registry
    app.dependency_overrides[get_profile_holder] = lambda: profile_holder

    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()

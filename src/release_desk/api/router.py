"""Main API router aggregation."""

from fastapi import APIRouter

from release_desk.api.releases import router as releases_router
from release_desk.api.review import router as review_router
from release_desk.api.settings import router as settings_router
from release_desk.api.submissions import router as submissions_router

# Main API router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(releases_router)
api_router.include_router(submissions_router)
api_router.include_router(review_router)
api_router.include_router(settings_router)

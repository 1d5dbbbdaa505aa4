"""API routers."""

from release_desk.api.router import api_router

__all__ = ["api_router"]

"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from release_desk import __version__
from release_desk.api import api_router
from release_desk.config import get_settings
from release_desk.services.base import (
    ConflictError,
    ReleaseDeskError,
    ValidationFailedError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan - runs on startup and shutdown."""
    # Startup
    logger.info("Starting %s v%s", settings.app_name, __version__)
    logger.info("Debug mode: %s", settings.debug)
    logger.info(
        "ISRC prefix: %s%s", settings.isrc_country_code, settings.isrc_registrant_code
    )
    logger.info("Review role enforcement: %s", settings.enforce_review_role)

    # Validate and log warnings
    warnings = settings.validate_runtime_config()
    if warnings:
        logger.warning("Configuration warnings:")
        for warning in warnings:
            logger.warning("  - %s", warning)
    else:
        logger.info("Configuration validation passed - no warnings")

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Application shutting down")


app = FastAPI(
    title=settings.app_name,
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)


@app.exception_handler(ValidationFailedError)
async def validation_failed_handler(
    _request: Request, exc: ValidationFailedError
) -> JSONResponse:
    """Handle ValidationFailedError exceptions globally, with per-field errors."""
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc) or "Validation failed", "errors": exc.errors},
    )


@app.exception_handler(ConflictError)
async def conflict_error_handler(_request: Request, exc: ConflictError) -> JSONResponse:
    """Handle ConflictError exceptions globally."""
    return JSONResponse(
        status_code=409,
        content={"detail": str(exc), "current_version": exc.current_version},
    )


@app.exception_handler(ReleaseDeskError)
async def release_desk_error_handler(_request: Request, exc: ReleaseDeskError) -> JSONResponse:
    """Handle remaining ReleaseDeskError exceptions (404, 403, 409) globally."""
    return JSONResponse(
        status_code=exc.status_code or 500,
        content={"detail": str(exc) or "Request failed"},
    )


# Include API router
app.include_router(api_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the API is running."""
    return {"status": "healthy", "version": __version__}

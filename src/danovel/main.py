# src/danovel/main.py
"""Main entry point for the DaNovel application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from danovel.api.v1 import (
    chapters_router,
    comments_router,
    dashboard_router,
    follows_router,
    genres_router,
    library_router,
    notifications_router,
    novels_router,
    progress_router,
    ratings_router,
    transactions_router,
    users_router,
)
from danovel.core.logging import setup_logging
from danovel.core.settings import settings
from danovel.services.errors import (
    ConflictError,
    DomainError,
    InvalidOperationError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Web novel publishing platform API",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
for router in (
    users_router,
    genres_router,
    novels_router,
    chapters_router,
    ratings_router,
    transactions_router,
    comments_router,
    follows_router,
    progress_router,
    library_router,
    notifications_router,
    dashboard_router,
):
    app.include_router(router, prefix="/api/v1")


ERROR_STATUS: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    InvalidOperationError: status.HTTP_400_BAD_REQUEST,
}


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate service-layer errors into JSON responses."""
    status_code = next(
        (code for error_type, code in ERROR_STATUS.items() if isinstance(exc, error_type)),
        status.HTTP_400_BAD_REQUEST,
    )
    logger.warning(
        "%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


@app.on_event("startup")
async def on_startup() -> None:
    setup_logging(settings.log_level)
    logger.info("%s %s starting", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Web novel publishing platform API",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("danovel.main:app", host="0.0.0.0", port=8000, reload=settings.debug)

"""
Volunteer Match API - Main Application Entry Point

This module builds the FastAPI application with:
- An in-memory store, seeded with demo data unless disabled
- Permissive CORS headers and OPTIONS short-circuit
- Prometheus request metrics
- JSON error bodies of the form {"error": "..."}

Architecture:
    FastAPI App
    ├── PermissiveCORSMiddleware
    ├── PrometheusMiddleware (+ GET /metrics)
    └── API Router (/api)
        ├── /auth - Mock login and registration
        ├── /profiles - Profile lookup
        ├── /jobs - Job listing, creation, applications, feedback
        ├── /volunteers - A volunteer's applications
        └── /requesters - A requester's jobs
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from volunteer_match import __version__
from volunteer_match.api import api_router
from volunteer_match.config import Settings, get_settings
from volunteer_match.middleware import PermissiveCORSMiddleware, setup_metrics
from volunteer_match.services.store import MemoryStore

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON or wrongly typed fields."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid payload"},
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[MemoryStore] = None,
) -> FastAPI:
    """
    Build an application instance.

    Args:
        settings: Overrides the environment-derived settings
        store: Pre-built store; a fresh one is created (and seeded when
            ``seed_demo_data`` is set) if omitted

    Returns:
        Configured FastAPI app with the store on ``app.state.store``
    """
    settings = settings or get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())

    if store is None:
        store = MemoryStore()
        if settings.seed_demo_data:
            store.seed()

    app = FastAPI(
        title=settings.app_name,
        description="Volunteer matching API over in-memory profiles, jobs and applications",
        version=__version__,
    )
    app.state.store = store
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    if settings.metrics_enabled:
        setup_metrics(app)

    # Outermost middleware
    app.add_middleware(
        PermissiveCORSMiddleware,
        allow_origin=settings.cors_allow_origin,
        allow_headers=settings.cors_allow_headers,
        allow_methods=settings.cors_allow_methods,
    )

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/health")
    def health_check():
        with store.read():
            return {
                "status": "healthy",
                "users": len(store.users),
                "jobs": len(store.jobs),
                "applications": len(store.applications),
            }

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()

"""
FastAPI app assembly: logging, middleware, router wiring and health check.

``create_app`` builds the application around a service container; the
module-level ``app`` uses the container configured from the environment.
"""
import logging
import os
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.requests import Request
from starlette.responses import JSONResponse

from banderas import __version__
from banderas.api.auth import bearer_token
from banderas.api import (
    gallery,
    gallery_categories,
    historical_images,
    history,
    leadership,
    shield_values,
    shields,
    site_config,
    uploads,
    users,
)
from banderas.services.container import ServiceContainer, build_container
from banderas.services.storage import LocalStorage
from banderas.utils.runtime import dev_mode_active

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)

DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5000",
    "http://localhost:5173",
]

MUTATING_METHODS = ("POST", "PUT", "PATCH", "DELETE")

MAX_LOG_LINE = 80


def _allowed_origins() -> list[str]:
    configured = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
    return configured or DEFAULT_ORIGINS


def _guest_write_allowed(path: str) -> bool:
    """Mutations that need no credentials."""
    if path == "/api/health":
        return True
    return path.startswith("/api/users/") and path.endswith("/verify-email-complete")


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    if container is None:
        from banderas.db.database import SessionLocal

        container = build_container(SessionLocal)

    if dev_mode_active():
        logger.warning("DEV_MODE active: all requests are treated as the development admin user")

    app = FastAPI(
        title="Cuerpo de Banderas API",
        description="Content and administration API for the Cuerpo de Banderas website.",
        version=__version__,
    )
    # Avoid implicit trailing-slash redirects for predictable URLs
    app.router.redirect_slashes = False
    app.state.container = container

    # Middleware: enforce read-only for unauthenticated requests
    @app.middleware("http")
    async def enforce_readonly_for_guests(request: Request, call_next):
        path = request.url.path or ""
        if request.method in MUTATING_METHODS and path.startswith("/api") and not dev_mode_active():
            if not _guest_write_allowed(path) and not bearer_token(request.headers.get("authorization")):
                return JSONResponse(
                    {"detail": "Guest mode is read-only. Sign in to perform changes."},
                    status_code=status.HTTP_401_UNAUTHORIZED,
                )
        return await call_next(request)

    @app.middleware("http")
    async def log_api_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        path = request.url.path or ""
        if path.startswith("/api"):
            duration_ms = int((time.perf_counter() - start) * 1000)
            line = f"{request.method} {path} {response.status_code} in {duration_ms}ms"
            if len(line) > MAX_LOG_LINE:
                line = line[: MAX_LOG_LINE - 1] + "…"
            logger.info(line)
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
        max_age=600,
    )

    @app.get("/api/health", tags=["health"])
    def health_check():
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    for module in (
        shield_values,
        history,
        gallery_categories,
        gallery,
        leadership,
        shields,
        historical_images,
        site_config,
        uploads,
        users,
    ):
        app.include_router(module.router)

    storage = container.storage
    if isinstance(storage, LocalStorage) and storage.base_url.startswith("/"):
        app.mount(storage.base_url, StaticFiles(directory=str(storage.root), check_dir=False), name="uploads")

    logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)
    return app


app = create_app()

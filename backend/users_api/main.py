"""Users API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly in create_app (no auto-discovery)
    - No trailing-slash redirects: /users/ is an unknown route (404)
    - Global error handlers render every failure as {"error": message}
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - create_app() factory: tests build isolated apps with extra routes
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import health, users
from users_api.config import get_settings
from users_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"server running in http://localhost:{settings.port}",
        extra={"host": settings.host, "port": settings.port},
    )
    yield
    logger.info("Users API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_title, version=settings.app_version,
        lifespan=lifespan, redirect_slashes=False,
    )
    register_error_handlers(app)

    # Route table
    app.include_router(health.router)
    app.include_router(users.router)
    return app


app = create_app()


def run() -> None:
    """Serve the app on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "users_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()

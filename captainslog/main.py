"""
Captain's Log FastAPI application entry point.

Due-date engine: component schedules / documents / safety gear → alerts →
ranking → dismiss / complete → scheduled email digest
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from captainslog import __version__
from captainslog.config import get_settings
from captainslog.db.session import check_db_connection, engine

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Captain's Log starting")
    try:
        try:
            check_db_connection()
            logger.info("Database connection verified")
        except Exception as e:
            logger.critical("Database unreachable: %s", e)
            raise

        if not get_settings().cron_secret:
            logger.warning("CRON_SECRET is not set; /api/cron/* will reject every call")

        yield
    finally:
        logger.info("Captain's Log shutting down")
        engine.dispose()
        logger.info("Database connection pool closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Mount API routes
    from captainslog.api.alerts import router as alerts_router
    from captainslog.api.auth import router as auth_router
    from captainslog.api.components import router as components_router
    from captainslog.api.settings import router as settings_router

    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(alerts_router, prefix="/api", tags=["alerts"])
    app.include_router(components_router, prefix="/api/components", tags=["components"])
    app.include_router(settings_router, prefix="/api/settings", tags=["settings"])

    # Scheduled job endpoints (external cron - shared-secret authenticated)
    from captainslog.api.cron import router as cron_router

    app.include_router(cron_router, tags=["cron"])

    @app.get("/health")
    def health() -> dict:
        """Health check endpoint. Confirms DB connectivity."""
        from sqlalchemy import text

        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return {
                "status": "ok",
                "version": __version__,
                "database": "connected",
            }
        except Exception:
            from fastapi.responses import JSONResponse

            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "version": __version__,
                    "database": "disconnected",
                },
            )

    return app


app = create_app()

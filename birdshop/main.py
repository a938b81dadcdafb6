from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from .api.api import api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import configure_logging
from .db.repository import close_repository, open_repository
from .seed import seed_birds

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """FastAPI application factory."""
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
    )

    @app.on_event("startup")
    async def on_startup() -> None:
        """Open storage and seed before any request is served."""
        app.state.repository = await open_repository(settings)
        if settings.SEED_ON_STARTUP:
            await seed_birds(app.state.repository, only_if_empty=settings.SEED_ONLY_IF_EMPTY)
        logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} started")

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        await close_repository(app.state.repository)

    @app.get("/")
    def root() -> dict:
        """Health check."""
        return {"status": "ok", "version": settings.APP_VERSION}

    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


app = create_app()

"""Smart Transport API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the {success: false, message} envelope
    - CORS configured from settings (all origins by default)
    - Storage connected on startup via the lifespan and closed on shutdown;
      data routes answer 503 until it is READY

Design Decisions:
    - Lifespan over @app.on_event: awaited connect before serving, explicit cleanup
    - create_app() factory so tests can build an app per settings object
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smart_transport import __version__
from smart_transport.api.error_handlers import register_error_handlers
from smart_transport.api.routes import health, notices, transport_requests, users
from smart_transport.config import Settings, get_settings
from smart_transport.infrastructure.database import close_storage, init_storage
from smart_transport.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        await init_storage(settings)
        logger.info(f"Smart Transport API started on port {settings.port}")
        try:
            yield
        finally:
            logger.info("Smart Transport API shutting down")
            await close_storage()

    app = FastAPI(
        title="Smart Transport API", version=__version__, lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(transport_requests.router)
    app.include_router(users.router)
    app.include_router(notices.router)

    register_error_handlers(app)
    return app


app = create_app()

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config import get_settings
from src.dependencies import get_session_factory
from src.shared.api.middleware import CorrelationIdMiddleware
from src.shared.exceptions import register_exception_handlers  # central mapping
from src.shared.infrastructure.observability.logger import configure_logging, get_logger

from src.families.api import router as families_router
from src.shared.health import router as health_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup")
    yield
    # Only dispose an engine that was actually created
    if get_session_factory.cache_info().currsize:
        await get_session_factory().dispose()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, json_logs=settings.json_logs)

    app = FastAPI(
        title="Family Auto-Assignment API",
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    # X-Request-ID → logging context + request.state.request_id
    app.add_middleware(CorrelationIdMiddleware)

    # Routers
    app.include_router(families_router)
    app.include_router(health_router)

    # Centralized error handling → {code, message, details?, correlation_id?}
    register_exception_handlers(app)

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint."""
        return {
            "message": "Family Auto-Assignment API",
            "docs": "/docs",
            "health": "/_health/db",
        }

    return app


app = create_app()

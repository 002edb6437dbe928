"""
FastAPI application factory.

    uvicorn calendar_backend.main:app
    python -m calendar_backend
"""

# Standard library imports
import logging
from contextlib import asynccontextmanager
from pathlib import Path

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Local application imports
from .api.v1 import auth_router, user_router, events_router
from .core.config import Settings, get_settings
from .core.logging_config import configure_logging
from .infrastructure.db.mongo_connection import ensure_indexes, close_connection

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create MongoDB indexes on startup and close the client on shutdown (mongo backend only)."""
    backend = get_settings().storage_backend
    logger.info(f"Starting with {backend} storage")

    if backend == "mongo":
        try:
            await ensure_indexes()
        except Exception as e:
            # Startup continues; requests will surface the connection error
            logger.error(f"Could not create MongoDB indexes: {e}", exc_info=True)

    yield

    if backend == "mongo":
        close_connection()
    logger.info("Application shutdown complete")


def _add_cors(application: FastAPI, settings: Settings) -> None:
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _add_exception_handlers(application: FastAPI) -> None:
    @application.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def _include_routers(application: FastAPI) -> None:
    application.include_router(auth_router, prefix=f"{API_PREFIX}/auth")
    application.include_router(user_router, prefix=f"{API_PREFIX}/users")
    application.include_router(events_router, prefix=f"{API_PREFIX}/events")


def create_application() -> FastAPI:
    """
    Build the FastAPI app.

    Reads .env from the repository root (values already in the environment
    win), configures logging, then wires CORS, the catch-all error handler and
    the v1 routers.
    """
    load_dotenv(Path(__file__).resolve().parent.parent / ".env")

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Calendar Backend API",
        version="1.0.0",
        description="Shared calendar events with owners and participants",
        lifespan=lifespan,
    )
    _add_cors(application, settings)
    _add_exception_handlers(application)
    _include_routers(application)
    return application


app = create_application()

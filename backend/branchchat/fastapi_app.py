"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- auth, conversations, messages, video upload, video playback
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from dishka.integrations.fastapi import setup_dishka

from branchchat.config.logging_config import setup_logging, correlation_id_var
from branchchat.config.settings import Config, get_config
from branchchat.infrastructure.persistence import JsonRecordStore
from branchchat.infrastructure.storage import VideoStorageService
from branchchat.setup.ioc.container import create_container
from branchchat.presentation.api import (
    auth_router,
    conversations_router,
    messages_router,
    upload_router,
    videos_router,
)

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


def ensure_storage(config: type[Config] = Config) -> None:
    """Create the three record store files and the video directory if absent."""
    for path in (
        config.users_path(),
        config.conversations_path(),
        config.messages_path(),
    ):
        JsonRecordStore(path).ensure_exists()
    VideoStorageService(config.video_dir()).ensure_dir()


def create_fastapi_app(config: type[Config] = Config) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Returns:
        FastAPI application instance
    """
    # Container is created per app, before the app starts (Dishka adds middleware)
    container = create_container(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        ensure_storage(config)
        logger.info(
            f"Backend server started. Storage: {config.STORAGE_DIR}, "
            f"videos: {config.video_dir()}"
        )
        yield
        await container.close()
        logger.info("Backend server shutdown. DI container closed.")

    app = FastAPI(
        title="Branch Chat API",
        description="Video messaging backend: users, conversations, messages, video upload",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.config = config
    setup_dishka(container, app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Missing or malformed request body / params → 400
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.warning(f"[VALIDATION ERROR] {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request.", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error(f"[HTTP ERROR {exc.status_code}] {exc.detail}")
        else:
            logger.info(f"[HTTP {exc.status_code}] {request.method} {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
        )

    # Global exception handler (StorageError on writes ends up here)
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error."},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Backend server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(auth_router)  # POST /api/auth/register, /api/auth/login
    app.include_router(conversations_router)  # /api/conversations
    app.include_router(messages_router)  # POST /api/messages
    app.include_router(upload_router)  # POST /api/upload/video
    app.include_router(videos_router)  # GET /videos/{filename}

    return app


# Create the app instance
app = create_fastapi_app(get_config())

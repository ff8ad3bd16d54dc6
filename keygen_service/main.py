"""
Key Generation Service - FastAPI application
Application entry point with lifespan, logging and exception handling.
"""
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .core.redis import close_redis, init_redis
from .exceptions import AppException
from .generators import GeneratorConfigurationError, KeyGenerator
from .generators.factory import create_generator
from .logger import logger
from .schemas.keys import HealthResponse

# Suppress noisy loggers
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

HEALTH_PATHS = ("/api/health",)


def create_app(settings: Optional[Settings] = None, generator: Optional[KeyGenerator] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Service settings, defaults to the environment.
        generator: Prebuilt generator; when given, no Redis client is opened.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        logger.configure(settings.LOG_LEVEL, settings.LOG_FILE)
        logger.system(
            f"{settings.APP_NAME} starting",
            generator=settings.GENERATOR_TYPE.value,
            digits=settings.NUMBER_DIGITS
        )

        redis_opened = False
        key_generator = generator
        if key_generator is None:
            redis_client = None
            if settings.GENERATOR_TYPE.uses_counter:
                redis_client = init_redis(settings.REDIS_URL)
                redis_opened = True
            try:
                key_generator = create_generator(settings, redis_client)
            except GeneratorConfigurationError as e:
                logger.fatal(f"Invalid generator configuration: {e}")
                if redis_opened:
                    await close_redis()
                raise

        app.state.generator = key_generator

        yield

        if redis_opened:
            await close_redis()
        logger.system(f"{settings.APP_NAME} stopped")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Generates short fixed-width keys",
        version=settings.APP_VERSION,
        lifespan=lifespan
    )
    app.state.settings = settings

    from .routes import router
    app.include_router(router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log API requests with duration and client address."""
        if request.url.path in HEALTH_PATHS:
            return await call_next(request)

        start_time = time.time()
        client_host = request.client.host if request.client else "unknown"

        response = await call_next(request)

        process_time = time.time() - start_time
        status_code = response.status_code

        if status_code >= 500:
            logger.api_error(request.method, request.url.path, status_code, "Server error", client_host)
        elif status_code >= 400:
            logger.api_error(request.method, request.url.path, status_code, "Client error", client_host)
        else:
            logger.api(request.method, request.url.path, status_code, process_time, client_host)

        return response

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle application-specific exceptions."""
        logger.error(f"Application error: {exc.code} - {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "success": False,
                "error": {
                    "code": exc.code,
                    "message": exc.message,
                    "details": exc.details
                }
            }
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unexpected error: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "details": None
                }
            }
        )

    @app.get("/api/health", response_model=HealthResponse, tags=["Health"])
    async def health_check(request: Request):
        """Health check endpoint."""
        key_generator = getattr(request.app.state, "generator", None)
        return HealthResponse(
            status="healthy",
            version=settings.APP_VERSION,
            generator=key_generator.name if key_generator else None
        )

    return app

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import time
import logging
from driver_api.api.api_router import api_router
from driver_api.core.config import Settings, settings as default_settings
from driver_api.core.exceptions import StorageError
from driver_api.core.logging_setup import setup_logging
from driver_api.db.init_db import create_tables
from driver_api.db.session import ConnectionProvider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events"""
    logger.info(f"Starting {app.title}...")
    create_tables(app.state.provider)
    logger.info(f"{app.title} started successfully")

    yield

    logger.info(f"Shutting down {app.title}...")
    app.state.provider.dispose()
    logger.info(f"{app.title} shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="CRUD API for driver records.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.provider = ConnectionProvider(settings.DATABASE_URL)

    # Add request timing middleware
    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.4f}s")
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request for {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(StorageError)
    async def storage_exception_handler(request: Request, exc: StorageError):
        logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc), "details": exc.details},
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Global exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "An unexpected error occurred", "details": str(exc)},
        )

    app.include_router(api_router, prefix="/api")

    @app.get("/", tags=["Root"])
    async def read_root():
        """A simple health check endpoint."""
        return {"status": "ok", "message": f"Welcome to {settings.PROJECT_NAME}!", "version": "0.1.0"}

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Detailed health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": time.time(),
            "service": settings.PROJECT_NAME,
            "version": "0.1.0"
        }

    return app


app = create_app()

"""
FastAPI entrypoint for the Creator Finance backend application.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from creator_finance.api.router import api_router
from creator_finance.core.config import Settings, get_settings
from creator_finance.core.exceptions import AppError
from creator_finance.core.logging import configure_logging
from creator_finance.core.security import TokenService
from creator_finance.core.utils import format_message
from creator_finance.db.session import Database

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI):
    """Map application errors onto ``{"message": ...}`` responses."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content=format_message(exc.message))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=format_message(_validation_message(exc))
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_message("Internal server error")
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_message("Internal server error")
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own database pool and token service."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    database = Database.from_settings(settings)
    token_service = TokenService.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.uses_default_secret:
            logger.warning("SECRET_KEY is the built-in placeholder; set it before deploying")
        if settings.DB_AUTO_CREATE:
            database.create_all()
        yield
        database.dispose()
        logger.info("Database connections closed")

    app = FastAPI(
        title="Creator Finance API",
        description="Backend API for creator income, expenses and platform revenue",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.database = database
    app.state.token_service = token_service

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"message": "Creator Finance API is running"}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "OK", "message": "Server is running"}

    return app

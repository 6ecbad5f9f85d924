"""
FastAPI entrypoint for Tripboard backend application.
"""
from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from tripboard.core.config import Settings, settings as default_settings
from tripboard.core.errors import ErrorCode, TripboardError
from tripboard.core.utils import format_error
from tripboard.api.page_guard import page_guard
from tripboard.api.router import api_router
from tripboard.db.session import Database
from tripboard.services.auth_service import purge_expired_revocations

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI):
    """Map domain and store failures to JSON error responses."""

    @app.exception_handler(TripboardError)
    async def tripboard_error_handler(request: Request, exc: TripboardError):
        return JSONResponse(
            status_code=exc.status_code,
            content=format_error(exc.message, exc.code.value)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = [
            {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content=format_error("Invalid request", ErrorCode.VALIDATION_ERROR.value, details)
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=format_error("An unexpected error occurred", ErrorCode.INTERNAL_ERROR.value)
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=format_error("An unexpected error occurred", ErrorCode.INTERNAL_ERROR.value)
        )


def create_app(settings: Settings = default_settings) -> FastAPI:
    """Build the application around its own settings and database handle."""
    logging.basicConfig(level=settings.LOG_LEVEL)
    database = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.create_all()
        db = database.session()
        try:
            purged = purge_expired_revocations(db)
            if purged:
                logger.info(f"Purged {purged} expired session revocations")
        finally:
            db.close()
        yield
        database.dispose()

    app = FastAPI(
        title="Tripboard API",
        description="Backend API for trip planning",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.db = database

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(page_guard)

    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()

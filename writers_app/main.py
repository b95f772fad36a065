"""FastAPI application entry point.

Main application setup with routing, exception mapping and lifecycle
logging. Each application owns one ``WritersApp`` stored on
``app.state``.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from writers_app import __version__
from writers_app.api import assistance_router, documents_router, templates_router
from writers_app.api.schemas import ErrorResponse
from writers_app.core.config import Settings, get_settings
from writers_app.core.factory import ComponentFactory
from writers_app.core.logging_config import setup_logging
from writers_app.interfaces.store import RecordNotFoundError
from writers_app.interfaces.text_generator import (
    AIDisabledError,
    APIStatusError,
    TextGenerationError,
)
from writers_app.services.workspace import WritersApp

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    writers_app: WritersApp = app.state.writers_app

    logger.info(
        f"Starting Writers App API (AI features {'enabled' if writers_app.is_ai_enabled else 'disabled'})"
    )

    yield

    logger.info("Shutting down Writers App API...")


def create_app(
    settings: Settings | None = None,
    writers_app: WritersApp | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings. If None, loads from environment.
        writers_app: Optional application instance. If None, one is built
            from ``settings`` by the component factory.

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="Writers App",
        description="Templates, documents and AI writing assistance",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.writers_app = writers_app or ComponentFactory(settings).create_writers_app()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Static /documents routes must be registered before /documents/{id}
    app.include_router(templates_router)
    app.include_router(documents_router)
    app.include_router(assistance_router)
    logger.info("Registered templates, documents and assistance routers")

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint for load balancers and monitoring."""
        return {
            "status": "healthy",
            "service": "writers-app-api",
            "version": __version__,
            "ai_enabled": app.state.writers_app.is_ai_enabled,
        }

    # =========================================================================
    # Exception handlers
    # =========================================================================

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors."""
        errors = [
            {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
            for error in exc.errors()
        ]
        logger.warning(f"Validation error: {errors}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": "Validation error",
                "errors": errors,
            },
        )

    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(
                detail=str(exc),
                error_code="NOT_FOUND",
                extra={"record_type": exc.record_type, "record_id": str(exc.record_id)},
            ).model_dump(),
        )

    @app.exception_handler(AIDisabledError)
    async def ai_disabled_handler(request: Request, exc: AIDisabledError):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=ErrorResponse(detail=str(exc), error_code="AI_DISABLED").model_dump(),
        )

    @app.exception_handler(TextGenerationError)
    async def text_generation_handler(request: Request, exc: TextGenerationError):
        """Report a failed AI request as a bad gateway."""
        logger.error(f"AI request failed: {type(exc).__name__}: {exc}")
        extra = {"error_type": type(exc).__name__}
        if isinstance(exc, APIStatusError):
            extra["upstream_status"] = exc.status_code
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=ErrorResponse(
                detail=str(exc),
                error_code="AI_REQUEST_FAILED",
                extra=extra,
            ).model_dump(),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                detail="Internal server error",
                error_code="INTERNAL_ERROR",
            ).model_dump(),
        )

    logger.info("FastAPI application created successfully")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info("Starting uvicorn server on port 8000...")
    uvicorn.run(
        "writers_app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )

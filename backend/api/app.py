"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import ConfigurationError
from .routes import health
from modules.billing.routes import router as billing_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    if not settings.stripe_secret_key or not settings.stripe_verified_price_id:
        logger.warning("Stripe is not configured; checkout requests will fail")
    if not settings.stripe_verify_webhook_signature:
        logger.warning("Stripe webhook signature verification is disabled")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Report missing server configuration as a 500 with the usual error body."""
    logger.error(f"Configuration error on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=500, content={"error": exc.message})


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Stripe checkout and subscription sync for developer plans",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(ConfigurationError, configuration_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(billing_router, prefix="/api", tags=["billing"])

    return app


# Application instance for uvicorn
app = create_app()

"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    stripe: str
    database: str


def _configured(*values: str) -> str:
    return "configured" if all(values) else "missing"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports whether the Stripe and Supabase settings the billing
    endpoints need are present. Does not call either service.
    """
    settings = get_settings()
    stripe_status = _configured(
        settings.stripe_secret_key,
        settings.stripe_verified_price_id,
        settings.stripe_webhook_secret,
    )
    database_status = _configured(settings.supabase_url, settings.supabase_service_role_key)

    ready = stripe_status == "configured" and database_status == "configured"
    return ReadinessResponse(
        status="ready" if ready else "degraded",
        stripe=stripe_status,
        database=database_status,
    )

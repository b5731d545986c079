"""
Centralized configuration for the Swarmspace billing backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., STRIPE_*, SUPABASE_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Swarmspace Billing API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase (developer records)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    developers_table: str = "developers"

    # Stripe
    stripe_secret_key: str = ""
    stripe_webhook_secret: str = ""
    stripe_verified_price_id: str = ""
    stripe_verify_webhook_signature: bool = True
    stripe_webhook_tolerance: int = 300  # seconds
    stripe_reuse_customer_by_email: bool = False

    # Checkout redirects land on the app dashboard
    app_url: str = "https://swarmspace.dev"

    # Billing behavior
    billing_provenance_tag: str = "swarmspace"
    billing_enforce_event_order: bool = False


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()

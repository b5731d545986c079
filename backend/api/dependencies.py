"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together the billing
module's implementations. Routes depend on interfaces; this file decides
which concrete classes back them.
"""

from typing import TYPE_CHECKING

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.billing.interfaces import (
        IBillingProvider,
        ICheckoutService,
        IDeveloperBillingRepository,
        IEventReconciler,
    )


class ServiceContainer:
    """
    Container for all service instances.

    Settings are read once when the container is created and handed to
    every service. Services are created lazily on first access and cached.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._billing_provider: "IBillingProvider | None" = None
        self._developer_repository: "IDeveloperBillingRepository | None" = None
        self._checkout_service: "ICheckoutService | None" = None
        self._event_reconciler: "IEventReconciler | None" = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def billing_provider(self) -> "IBillingProvider":
        """Get the Stripe client."""
        if self._billing_provider is None:
            from modules.billing.provider import StripeBillingProvider
            self._billing_provider = StripeBillingProvider(self._settings.stripe_secret_key)
        return self._billing_provider

    @property
    def developer_repository(self) -> "IDeveloperBillingRepository":
        """Get the Supabase-backed developer record store."""
        if self._developer_repository is None:
            from modules.billing.repository import SupabaseDeveloperBillingRepository
            from shared.database import get_supabase_client
            self._developer_repository = SupabaseDeveloperBillingRepository(
                get_supabase_client(),
                table=self._settings.developers_table,
            )
        return self._developer_repository

    @property
    def checkout(self) -> "ICheckoutService":
        """Get the checkout service instance."""
        if self._checkout_service is None:
            from modules.billing.checkout import CheckoutService
            self._checkout_service = CheckoutService(
                settings=self._settings,
                provider=self.billing_provider,
            )
        return self._checkout_service

    @property
    def reconciler(self) -> "IEventReconciler":
        """Get the webhook reconciler instance."""
        if self._event_reconciler is None:
            from modules.billing.reconciler import EventReconciler
            self._event_reconciler = EventReconciler(
                settings=self._settings,
                repository_factory=lambda: self.developer_repository,
            )
        return self._event_reconciler

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._billing_provider = None
        self._developer_repository = None
        self._checkout_service = None
        self._event_reconciler = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_checkout_service() -> "ICheckoutService":
    """FastAPI dependency for the checkout service."""
    return get_container().checkout


def get_event_reconciler() -> "IEventReconciler":
    """FastAPI dependency for the webhook reconciler."""
    return get_container().reconciler

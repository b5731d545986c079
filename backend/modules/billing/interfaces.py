"""
Billing module interfaces.

Routes depend on ICheckoutService and IEventReconciler, not the concrete
implementations. Those services in turn depend on the two collaborator
boundaries: the payment provider (Stripe) and the developer record store
(Supabase).
"""

from typing import Optional, Protocol, runtime_checkable

from .models import (
    BillingRecordUpdate,
    CheckoutRequest,
    CheckoutResponse,
    CheckoutSession,
    DeveloperBillingRecord,
    LifecycleEvent,
    ReconcileResult,
)


@runtime_checkable
class IBillingProvider(Protocol):
    """
    Thin request/response interface to the payment provider.

    Implementations translate provider failures into PaymentProviderError.
    """

    def find_customer_by_email(self, email: str) -> Optional[str]:
        """
        Look up an existing provider customer by email.

        Returns:
            The first matching customer ID, or None
        """
        ...

    def create_customer(
        self,
        email: str,
        name: str,
        metadata: dict[str, str],
    ) -> str:
        """
        Create a provider customer.

        Returns:
            The new customer ID
        """
        ...

    def create_subscription_checkout(
        self,
        customer_id: str,
        price_id: str,
        success_url: str,
        cancel_url: str,
        subscription_metadata: dict[str, str],
        client_reference_id: Optional[str] = None,
    ) -> CheckoutSession:
        """
        Create a hosted checkout session in subscription mode.

        Quantity is always 1 and promotion codes are always allowed.
        """
        ...


@runtime_checkable
class IDeveloperBillingRepository(Protocol):
    """
    Partial-update interface to the developer record store.

    Updates that match no row are not errors; they return False.
    """

    def get_by_customer_id(self, customer_id: str) -> Optional[DeveloperBillingRecord]:
        """Get the record joined to a Stripe customer ID, if any."""
        ...

    def update_by_customer_id(
        self,
        customer_id: str,
        update: BillingRecordUpdate,
        event_created: Optional[int] = None,
    ) -> bool:
        """
        Apply a partial update to the record with this billing customer ID.

        Args:
            customer_id: Stripe customer ID to filter on
            update: Fields to write
            event_created: Event time; when given, rows that already applied
                a newer event are left alone

        Returns:
            True if a record was updated
        """
        ...

    def update_by_developer_id(
        self,
        developer_id: str,
        update: BillingRecordUpdate,
        event_created: Optional[int] = None,
    ) -> bool:
        """Same as update_by_customer_id, filtered on the developer ID."""
        ...


@runtime_checkable
class ICheckoutService(Protocol):
    """Starts hosted subscription checkouts."""

    async def create_checkout(self, request: CheckoutRequest) -> CheckoutResponse:
        """
        Resolve a Stripe customer and open a subscription checkout session.

        Raises:
            BillingNotConfiguredError: If Stripe key or price ID is missing
            PaymentProviderError: If any Stripe call fails
        """
        ...


@runtime_checkable
class IEventReconciler(Protocol):
    """Applies Stripe lifecycle events to developer billing records."""

    def construct_event(self, payload: bytes, signature: Optional[str]) -> LifecycleEvent:
        """
        Authenticate and parse a raw webhook body.

        Raises:
            WebhookVerificationError: Missing secret/signature or bad signature
            InvalidWebhookPayloadError: Empty body or not an event
        """
        ...

    async def reconcile(self, event: LifecycleEvent) -> ReconcileResult:
        """
        Apply the event's state transition, if it has one.

        Datastore exceptions propagate to the caller.
        """
        ...

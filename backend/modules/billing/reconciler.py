"""
Stripe webhook reconciliation.

Authenticates inbound webhook bodies, parses them into LifecycleEvents and
applies the matching transition from the transition table to the
developer record that carries the event's customer ID.

Delivery is at-least-once and unordered. Transitions are idempotent, and
by default the last delivered event wins. With billing_enforce_event_order
on, records remember the creation time of the last applied event and
ignore older ones.
"""

import logging
from typing import Any, Callable, Optional

import stripe
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings
from .exceptions import InvalidWebhookPayloadError, WebhookVerificationError
from .interfaces import IDeveloperBillingRepository
from .models import LifecycleEvent, ReconcileResult
from .transitions import EventType, transition_for

logger = logging.getLogger(__name__)


def _customer_id(event_object: dict[str, Any]) -> Optional[str]:
    customer = event_object.get("customer")
    # Expanded customers arrive as objects
    if isinstance(customer, dict):
        return customer.get("id")
    return customer


class EventReconciler:
    """Applies Stripe lifecycle events to developer billing records."""

    def __init__(
        self,
        settings: Settings,
        repository: Optional[IDeveloperBillingRepository] = None,
        repository_factory: Optional[Callable[[], IDeveloperBillingRepository]] = None,
    ):
        """
        Initialize the reconciler.

        Args:
            settings: Application settings (webhook secret, verification flags)
            repository: Developer record store
            repository_factory: Builds the record store on first reconcile
                when no repository is given
        """
        if repository is None and repository_factory is None:
            raise ValueError("EventReconciler needs a repository or a repository_factory")
        self._settings = settings
        self._repository = repository
        self._repository_factory = repository_factory

    @property
    def repository(self) -> IDeveloperBillingRepository:
        if self._repository is None:
            self._repository = self._repository_factory()
        return self._repository

    def construct_event(self, payload: bytes, signature: Optional[str]) -> LifecycleEvent:
        """
        Authenticate a raw webhook body and parse it.

        The signature is checked against the raw bytes before parsing. With
        stripe_verify_webhook_signature off, only its presence is required.

        Args:
            payload: Raw request body
            signature: Value of the Stripe-Signature header

        Returns:
            The parsed event

        Raises:
            WebhookVerificationError: Missing secret, missing or invalid signature
            InvalidWebhookPayloadError: Empty body or not a Stripe event
        """
        secret = self._settings.stripe_webhook_secret
        if not secret:
            raise WebhookVerificationError("Webhook secret not configured")
        if not signature:
            raise WebhookVerificationError("Missing Stripe-Signature header")
        if not payload:
            raise InvalidWebhookPayloadError("Empty request body")

        try:
            body = payload.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidWebhookPayloadError("Invalid JSON")

        if self._settings.stripe_verify_webhook_signature:
            try:
                stripe.WebhookSignature.verify_header(
                    body,
                    signature,
                    secret,
                    tolerance=self._settings.stripe_webhook_tolerance,
                )
            except stripe.SignatureVerificationError as e:
                logger.warning(f"Rejected webhook with bad signature: {e}")
                raise WebhookVerificationError()

        try:
            return LifecycleEvent.model_validate_json(body)
        except PydanticValidationError:
            raise InvalidWebhookPayloadError("Invalid JSON")

    async def reconcile(self, event: LifecycleEvent) -> ReconcileResult:
        """
        Apply the event's transition to the matching developer record.

        Unrecognized event types and failed preconditions make no datastore
        call. An update that matches no record is logged and reported as
        unmatched, not raised.
        """
        update = transition_for(event.type, event.object)
        if update is None:
            logger.debug(f"Ignoring {event.type} event {event.id}")
            return ReconcileResult(event_type=event.type, handled=False)

        customer_id = _customer_id(event.object)
        if not customer_id:
            logger.warning(f"{event.type} event {event.id} has no customer, skipping")
            return ReconcileResult(event_type=event.type, handled=False)

        event_created = event.created if self._settings.billing_enforce_event_order else None

        logger.info(f"Applying {event.type} event {event.id} to customer {customer_id}")
        matched = self.repository.update_by_customer_id(customer_id, update, event_created)

        # A first checkout has no customer ID stored yet; find the developer instead
        if not matched and event.type == EventType.CHECKOUT_SESSION_COMPLETED.value:
            developer_id = event.object.get("client_reference_id")
            if developer_id:
                matched = self.repository.update_by_developer_id(
                    developer_id, update, event_created
                )

        if not matched:
            logger.warning(
                f"{event.type} event {event.id} matched no developer for customer {customer_id}"
            )

        return ReconcileResult(
            event_type=event.type,
            handled=True,
            customer_id=customer_id,
            matched=matched,
        )

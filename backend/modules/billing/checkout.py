"""
Checkout initiation.

Resolves the Stripe customer for a developer and opens a hosted
subscription checkout for the verified plan. Nothing is written to the
developer record here: the customer and subscription IDs are persisted
when the checkout.session.completed webhook arrives, since the developer
may abandon the checkout.
"""

import logging
from typing import Optional

from shared.config import Settings
from .exceptions import BillingNotConfiguredError
from .interfaces import IBillingProvider
from .models import CheckoutRequest, CheckoutResponse

logger = logging.getLogger(__name__)

SUCCESS_PATH = "/dashboard.html?session=success"
CANCEL_PATH = "/dashboard.html?session=canceled"


class CheckoutService:
    """Checkout initiator for the verified developer plan."""

    def __init__(self, settings: Settings, provider: Optional[IBillingProvider] = None):
        """
        Initialize the checkout service.

        Args:
            settings: Application settings (Stripe key, price ID, app URL)
            provider: Billing provider client. When omitted, a Stripe client
                is built from settings on first use.
        """
        self._settings = settings
        self._provider = provider

    @property
    def provider(self) -> IBillingProvider:
        if self._provider is None:
            from .provider import StripeBillingProvider
            self._provider = StripeBillingProvider(self._settings.stripe_secret_key)
        return self._provider

    def _check_configured(self) -> None:
        missing = []
        if not self._settings.stripe_secret_key:
            missing.append("STRIPE_SECRET_KEY")
        if not self._settings.stripe_verified_price_id:
            missing.append("STRIPE_VERIFIED_PRICE_ID")
        if missing:
            raise BillingNotConfiguredError(missing)

    def _provenance(self) -> dict[str, str]:
        return {"source": self._settings.billing_provenance_tag}

    def resolve_customer(self, request: CheckoutRequest) -> str:
        """
        Get or create the Stripe customer for a checkout.

        A caller-supplied customer ID is trusted as-is.
        """
        if request.customer_id:
            return request.customer_id

        email = str(request.email)
        if self._settings.stripe_reuse_customer_by_email:
            existing = self.provider.find_customer_by_email(email)
            if existing:
                logger.info(f"Reusing Stripe customer {existing} for {email}")
                return existing

        customer_id = self.provider.create_customer(
            email=email,
            name=request.developer_name or email,
            metadata=self._provenance(),
        )
        logger.info(f"Created Stripe customer {customer_id} for {email}")
        return customer_id

    async def create_checkout(self, request: CheckoutRequest) -> CheckoutResponse:
        """Open a subscription checkout session for the verified plan."""
        self._check_configured()

        customer_id = self.resolve_customer(request)

        metadata = self._provenance()
        if request.developer_id:
            metadata["developer_id"] = request.developer_id

        app_url = self._settings.app_url.rstrip("/")
        session = self.provider.create_subscription_checkout(
            customer_id=customer_id,
            price_id=self._settings.stripe_verified_price_id,
            success_url=f"{app_url}{SUCCESS_PATH}",
            cancel_url=f"{app_url}{CANCEL_PATH}",
            subscription_metadata=metadata,
            client_reference_id=request.developer_id,
        )
        logger.info(f"Checkout session {session.session_id} created for customer {customer_id}")

        return CheckoutResponse(url=session.url, customer_id=customer_id)

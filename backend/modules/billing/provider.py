"""
Stripe implementation of the billing provider client.

Wraps the three Stripe calls checkout needs. The API key is passed per
call rather than assigned to stripe.api_key, so the client carries its own
configuration.
"""

import logging
from typing import Optional

import stripe

from .exceptions import PaymentProviderError
from .models import CheckoutSession

logger = logging.getLogger(__name__)


def _provider_error(exc: stripe.StripeError) -> PaymentProviderError:
    """Translate a Stripe SDK error, keeping Stripe's own message."""
    message = exc.user_message or str(exc) or "Stripe request failed"
    return PaymentProviderError(message, stripe_code=exc.code)


class StripeBillingProvider:
    """Billing provider client backed by the Stripe SDK."""

    def __init__(self, api_key: str):
        self._api_key = api_key

    def find_customer_by_email(self, email: str) -> Optional[str]:
        try:
            customers = stripe.Customer.list(api_key=self._api_key, email=email, limit=1)
        except stripe.StripeError as e:
            logger.error(f"Stripe error looking up customer by email: {e}")
            raise _provider_error(e) from e

        if not customers.data:
            return None
        return customers.data[0].id

    def create_customer(
        self,
        email: str,
        name: str,
        metadata: dict[str, str],
    ) -> str:
        try:
            customer = stripe.Customer.create(
                api_key=self._api_key,
                email=email,
                name=name,
                metadata=metadata,
            )
        except stripe.StripeError as e:
            logger.error(f"Stripe error creating customer: {e}")
            raise _provider_error(e) from e

        return customer.id

    def create_subscription_checkout(
        self,
        customer_id: str,
        price_id: str,
        success_url: str,
        cancel_url: str,
        subscription_metadata: dict[str, str],
        client_reference_id: Optional[str] = None,
    ) -> CheckoutSession:
        params = {
            "customer": customer_id,
            "mode": "subscription",
            "line_items": [{"price": price_id, "quantity": 1}],
            "success_url": success_url,
            "cancel_url": cancel_url,
            "subscription_data": {"metadata": subscription_metadata},
            "allow_promotion_codes": True,
        }
        if client_reference_id:
            params["client_reference_id"] = client_reference_id

        try:
            session = stripe.checkout.Session.create(api_key=self._api_key, **params)
        except stripe.StripeError as e:
            logger.error(f"Stripe error creating checkout session: {e}")
            raise _provider_error(e) from e

        return CheckoutSession(session_id=session.id, url=session.url)

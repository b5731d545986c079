"""
Billing module exceptions.

These exceptions are raised by the billing module and translated into
HTTP responses by the billing routes.
"""

from typing import Optional

from shared.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ExternalServiceError,
    ValidationError,
)


class BillingNotConfiguredError(ConfigurationError):
    """Raised when Stripe credentials or the plan price are not configured."""

    def __init__(self, missing: list[str]):
        super().__init__(
            "Stripe not configured",
            code="STRIPE_NOT_CONFIGURED",
            details={"missing": missing},
        )


class PaymentProviderError(ExternalServiceError):
    """
    Raised when a Stripe call fails or returns an error payload.

    The message is Stripe's own text so it can be shown to the developer.
    """

    def __init__(self, message: str, stripe_code: Optional[str] = None):
        super().__init__(
            message,
            service="stripe",
            code="PAYMENT_PROVIDER_ERROR",
            details={"stripe_code": stripe_code} if stripe_code else {},
        )


class WebhookVerificationError(AuthenticationError):
    """Raised when a webhook cannot be authenticated."""

    def __init__(self, reason: str = "Webhook signature verification failed"):
        super().__init__(
            reason,
            code="WEBHOOK_VERIFICATION_FAILED",
        )


class InvalidWebhookPayloadError(ValidationError):
    """Raised when a webhook body is empty or not a Stripe event."""

    def __init__(self, reason: str = "Invalid JSON"):
        super().__init__(
            reason,
            code="INVALID_WEBHOOK_PAYLOAD",
        )

"""Tests for billing module exceptions."""

from modules.billing.exceptions import (
    BillingNotConfiguredError,
    InvalidWebhookPayloadError,
    PaymentProviderError,
    WebhookVerificationError,
)
from shared.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ExternalServiceError,
    ValidationError,
)


class TestBillingNotConfiguredError:
    def test_billing_not_configured_error(self):
        """Should be a configuration error listing what is missing."""
        error = BillingNotConfiguredError(["STRIPE_SECRET_KEY"])
        assert isinstance(error, ConfigurationError)
        assert str(error) == "Stripe not configured"
        assert error.code == "STRIPE_NOT_CONFIGURED"
        assert error.details["missing"] == ["STRIPE_SECRET_KEY"]


class TestPaymentProviderError:
    def test_payment_provider_error(self):
        """Should keep Stripe's message and name the service."""
        error = PaymentProviderError("No such price: 'price_x'")
        assert isinstance(error, ExternalServiceError)
        assert error.message == "No such price: 'price_x'"
        assert error.code == "PAYMENT_PROVIDER_ERROR"
        assert error.service == "stripe"
        assert error.details == {"service": "stripe"}

    def test_payment_provider_error_with_code(self):
        """Should include Stripe's error code when provided."""
        error = PaymentProviderError("Invalid", stripe_code="resource_missing")
        assert error.details["stripe_code"] == "resource_missing"

    def test_code_and_message(self):
        error = PaymentProviderError("Boom")
        assert error.code == "PAYMENT_PROVIDER_ERROR"
        assert error.message == "Boom"


class TestWebhookVerificationError:
    def test_default_message(self):
        """Should create webhook verification error."""
        error = WebhookVerificationError()
        assert isinstance(error, AuthenticationError)
        assert "Webhook signature verification failed" in str(error)
        assert error.code == "WEBHOOK_VERIFICATION_FAILED"

    def test_custom_reason(self):
        error = WebhookVerificationError("Missing Stripe-Signature header")
        assert error.message == "Missing Stripe-Signature header"


class TestInvalidWebhookPayloadError:
    def test_invalid_payload_error(self):
        error = InvalidWebhookPayloadError()
        assert isinstance(error, ValidationError)
        assert error.message == "Invalid JSON"
        assert error.code == "INVALID_WEBHOOK_PAYLOAD"

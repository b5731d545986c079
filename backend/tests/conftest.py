"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import hashlib
import hmac
import json
import time
from typing import Any, Optional

import pytest

from api.dependencies import reset_container
from shared.config import Settings


# Test webhook secret (only for testing)
TEST_WEBHOOK_SECRET = "whsec_test_secret_for_testing_only"


def sign_payload(
    payload: str,
    secret: str = TEST_WEBHOOK_SECRET,
    timestamp: Optional[int] = None,
) -> str:
    """
    Build a Stripe-Signature header value for a payload.

    Args:
        payload: Raw JSON body
        secret: Webhook signing secret
        timestamp: Signature time (defaults to now)

    Returns:
        Header value in Stripe's "t=...,v1=..." format
    """
    timestamp = int(time.time()) if timestamp is None else timestamp
    signed = f"{timestamp}.{payload}".encode("utf-8")
    digest = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={digest}"


def make_event(
    event_type: str,
    event_object: dict[str, Any],
    event_id: str = "evt_test_123",
    created: int = 1_700_000_000,
) -> dict[str, Any]:
    """Build a Stripe event envelope."""
    return {
        "id": event_id,
        "object": "event",
        "type": event_type,
        "created": created,
        "data": {"object": event_object},
    }


def event_body(event_type: str, event_object: dict[str, Any], **kwargs) -> str:
    """Serialize a Stripe event envelope."""
    return json.dumps(make_event(event_type, event_object, **kwargs))


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def settings() -> Settings:
    """Settings with Stripe and Supabase configured."""
    return Settings(
        _env_file=None,
        stripe_secret_key="sk_test_123",
        stripe_webhook_secret=TEST_WEBHOOK_SECRET,
        stripe_verified_price_id="price_verified_123",
        app_url="https://app.example.com",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-service-key",
    )


@pytest.fixture
def customer_id() -> str:
    """Provide a consistent Stripe customer ID."""
    return "cus_test_123"

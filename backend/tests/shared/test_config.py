"""Tests for shared/config.py."""

import os
from unittest.mock import patch

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.app_name == "Swarmspace Billing API"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.app_url == "https://swarmspace.dev"
        assert settings.developers_table == "developers"
        assert settings.billing_provenance_tag == "swarmspace"
        assert settings.stripe_verify_webhook_signature is True
        assert settings.stripe_webhook_tolerance == 300
        assert settings.stripe_reuse_customer_by_email is False
        assert settings.billing_enforce_event_order is False
        assert settings.stripe_secret_key == ""

    def test_loads_stripe_config_from_env(self):
        """Stripe settings use the STRIPE_* variable names."""
        with patch.dict(os.environ, {
            "STRIPE_SECRET_KEY": "sk_live_abc",
            "STRIPE_WEBHOOK_SECRET": "whsec_abc",
            "STRIPE_VERIFIED_PRICE_ID": "price_abc",
            "APP_URL": "https://staging.swarmspace.dev",
        }):
            settings = Settings(_env_file=None)
            assert settings.stripe_secret_key == "sk_live_abc"
            assert settings.stripe_webhook_secret == "whsec_abc"
            assert settings.stripe_verified_price_id == "price_abc"
            assert settings.app_url == "https://staging.swarmspace.dev"

    def test_loads_supabase_config_from_env(self):
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
        }):
            settings = Settings(_env_file=None)
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"

    def test_loads_flags_from_env(self):
        with patch.dict(os.environ, {
            "STRIPE_VERIFY_WEBHOOK_SIGNATURE": "false",
            "BILLING_ENFORCE_EVENT_ORDER": "true",
        }):
            settings = Settings(_env_file=None)
            assert settings.stripe_verify_webhook_signature is False
            assert settings.billing_enforce_event_order is True


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2

"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    SwarmspaceError,
    ValidationError,
    AuthenticationError,
    ConfigurationError,
    ExternalServiceError,
)


class TestSwarmspaceError:
    def test_message(self):
        """SwarmspaceError should store message."""
        error = SwarmspaceError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code(self):
        """Code defaults to the class name."""
        assert SwarmspaceError("Test error").code == "SwarmspaceError"
        assert ConfigurationError("Missing key").code == "ConfigurationError"

    def test_custom_code_and_details(self):
        error = SwarmspaceError("Test error", code="CUSTOM_ERROR", details={"key": "value"})
        assert error.code == "CUSTOM_ERROR"
        assert error.details == {"key": "value"}

    def test_default_details(self):
        assert SwarmspaceError("Test error").details == {}

    def test_is_exception(self):
        assert isinstance(SwarmspaceError("Test error"), Exception)


class TestErrorTaxonomy:
    def test_subclasses_inherit_base(self):
        """Every category should be catchable as SwarmspaceError."""
        for cls in (ValidationError, AuthenticationError, ConfigurationError):
            assert isinstance(cls("boom"), SwarmspaceError)

    def test_configuration_is_not_validation(self):
        """Server misconfiguration must not look like a caller mistake."""
        assert not isinstance(ConfigurationError("Missing key"), ValidationError)


class TestExternalServiceError:
    def test_stores_service(self):
        error = ExternalServiceError("Connection failed", service="stripe")
        assert isinstance(error, SwarmspaceError)
        assert error.service == "stripe"
        assert error.details == {"service": "stripe"}

    def test_preserves_other_details(self):
        error = ExternalServiceError(
            "Connection failed",
            service="supabase",
            details={"status_code": 503},
        )
        assert error.details == {"status_code": 503, "service": "supabase"}

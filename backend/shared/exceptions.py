"""
Base exception classes for the Swarmspace billing backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class SwarmspaceError(Exception):
    """
    Base exception for all Swarmspace errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class ValidationError(SwarmspaceError):
    """Input validation failed."""

    pass


class AuthenticationError(SwarmspaceError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ConfigurationError(SwarmspaceError):
    """
    Required server-side configuration is missing.

    Distinct from ValidationError: the caller did nothing wrong.
    """

    pass


class ExternalServiceError(SwarmspaceError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service

"""
Shared infrastructure for the Swarmspace billing backend.

This package contains cross-cutting concerns used by feature modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base class for Supabase repositories

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    SwarmspaceError,
    ValidationError,
    AuthenticationError,
    ConfigurationError,
    ExternalServiceError,
)

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "SwarmspaceError",
    "ValidationError",
    "AuthenticationError",
    "ConfigurationError",
    "ExternalServiceError",
]

"""
Swarmspace billing API package.

Provides the FastAPI application for developer plan checkout and
Stripe webhook handling.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]

"""Accounts domain API package."""

from accounts.api.routes import auth_router

__all__ = ["auth_router"]

"""
Shared dependencies for the application.

Provides dependency injection functions used across routers. The
repository provider and store are owned by the application instance
(app.state), never by module globals.
"""

from fastapi import Request

from .repositories.user_repository import UserRepository, UserRepositoryProvider
from .store.base import KeyValueStore


def get_store(request: Request) -> KeyValueStore:
    """Get the store attached to the running application."""
    return request.app.state.store


def get_user_repository(request: Request) -> UserRepository:
    """
    Get user repository instance for dependency injection.

    Used by all routers that need the repository.
    """
    provider: UserRepositoryProvider = request.app.state.repository_provider
    return provider.get(request.app.state.store)

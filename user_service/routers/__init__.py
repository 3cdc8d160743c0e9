"""HTTP routers."""

from . import health_router, users

__all__ = ["health_router", "users"]

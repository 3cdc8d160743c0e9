"""
Custom exceptions for the user service domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, cache backend, etc.).
"""

from typing import Optional


class UserServiceException(Exception):
    """Base exception for all user service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UserNotFoundException(UserServiceException):
    """Raised by callers that require a user which is absent from the cache."""

    def __init__(self, user_id: str):
        super().__init__(message=f"User not found: {user_id}", details={"id": user_id})


class StoreFailureError(UserServiceException):
    """
    Raised when the underlying key-value store reports an unexpected fault.

    The original exception is kept as ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, operation: str, cause: BaseException):
        message = f"Store {operation} failed: {cause}"
        super().__init__(
            message=message,
            details={"operation": operation, "reason": str(cause)},
        )
        self.operation = operation
        self.cause = cause
        self.__cause__ = cause


class ProviderMisuseError(UserServiceException):
    """Raised when a repository is requested but cannot be constructed."""

    def __init__(self, provider: str, reason: str):
        super().__init__(
            message=f"{provider}: {reason}",
            details={"provider": provider, "reason": reason},
        )


class ResultAlreadyCompletedError(UserServiceException):
    """Raised when a single-assignment result is completed a second time."""

    def __init__(self, state: str):
        super().__init__(
            message=f"Result already completed with state '{state}'",
            details={"state": state},
        )

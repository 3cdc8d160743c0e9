"""
Pydantic models for User Service.
"""

from pydantic import BaseModel, Field

from .domain.entities import User, UserRequest


class UserRequestModel(BaseModel):
    """Create/update request body."""

    login: str = Field(..., description="User login")
    age: int = Field(..., description="User age")

    def to_domain(self) -> UserRequest:
        return UserRequest(login=self.login, age=self.age)


class UserResponse(BaseModel):
    """User response model."""

    id: str
    login: str
    age: int

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id, login=user.login, age=user.age)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str
    timestamp: str
    cache_entries: int

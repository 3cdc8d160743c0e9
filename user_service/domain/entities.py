"""
Domain entities for user records.

Core business objects stored in the cache. These entities are
framework-agnostic and carry no persistence behaviour.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


def generate_user_id() -> str:
    """Generate a fresh random identifier for a new user."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class UserRequest:
    """
    Transient input used to create or replace a user.

    Never carries an identifier; the id is owned by the stored User.
    """

    login: str
    age: int


@dataclass(frozen=True)
class User:
    """
    User record stored in the cache under its id.

    Identity is the id: two users compare equal when their ids match,
    regardless of login and age. The id is immutable once set.
    """

    id: str = field(default_factory=generate_user_id)
    login: str = field(default="", compare=False)
    age: int = field(default=0, compare=False)

    def __post_init__(self):
        """Validate field types on creation."""
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"Invalid user id: {self.id!r}")
        if not isinstance(self.login, str):
            raise ValueError(f"Invalid login: {self.login!r}")
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise ValueError(f"Invalid age: {self.age!r}")

    @classmethod
    def from_request(cls, request: UserRequest) -> "User":
        """Create a new user with a freshly generated id."""
        return cls(login=request.login, age=request.age)

    def replace_with(self, request: UserRequest) -> "User":
        """
        Build the full replacement of this user from a request.

        The id is kept; login and age are taken from the request as-is,
        no field-level merge is performed.
        """
        return User(id=self.id, login=request.login, age=request.age)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the user for stores that keep encoded values."""
        return {"id": self.id, "login": self.login, "age": self.age}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        """Deserialize a user produced by to_dict."""
        return cls(id=data["id"], login=data["login"], age=data["age"])


# Fixed records written by UserRepository.init()
SEED_USERS: Tuple[User, ...] = (
    User(id="e2ac4fba-ce48-42fe-a0b9-c7555b65154f", login="test", age=10),
    User(id="10b86e02-109d-488a-8e25-8bb63a7c4f1c", login="wojtek", age=18),
    User(id="4ca315c0-e214-4b62-9c2a-71d78e29412e", login="admin", age=60),
)

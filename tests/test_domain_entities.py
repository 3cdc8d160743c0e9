"""
Unit tests for domain entities.

Tests for User and UserRequest.
"""

import uuid

import pytest

from user_service.domain.entities import SEED_USERS, User, UserRequest


class TestUser:
    """Tests for User entity."""

    def test_generates_uuid_when_id_missing(self):
        """Test a fresh UUID is generated for new users."""
        user = User(login="bob", age=20)
        assert str(uuid.UUID(user.id)) == user.id

    def test_generated_ids_are_unique(self):
        """Test two new users never share an id."""
        assert User(login="a", age=1).id != User(login="a", age=1).id

    def test_equality_by_id(self):
        """Test users compare equal by id only."""
        assert User(id="x", login="a", age=1) == User(id="x", login="b", age=2)
        assert User(id="x", login="a", age=1) != User(id="y", login="a", age=1)
        assert hash(User(id="x", login="a", age=1)) == hash(User(id="x", login="b", age=9))

    def test_id_is_immutable(self, sample_user):
        """Test id cannot be reassigned."""
        with pytest.raises(AttributeError):
            sample_user.id = "other"

    def test_invalid_login(self):
        """Test non-string login raises ValueError."""
        with pytest.raises(ValueError, match="Invalid login"):
            User(login=None, age=10)

    def test_invalid_age(self):
        """Test non-integer age raises ValueError."""
        with pytest.raises(ValueError, match="Invalid age"):
            User(login="bob", age="ten")
        with pytest.raises(ValueError, match="Invalid age"):
            User(login="bob", age=True)

    def test_empty_id_rejected(self):
        """Test an empty id raises ValueError."""
        with pytest.raises(ValueError, match="Invalid user id"):
            User(id="", login="bob", age=1)

    def test_from_request(self):
        """Test creating a user from a request generates an id."""
        user = User.from_request(UserRequest(login="carol", age=44))
        assert user.id
        assert user.login == "carol"
        assert user.age == 44

    def test_replace_with_keeps_id(self, sample_user):
        """Test replacement keeps the id and takes every field from the request."""
        updated = sample_user.replace_with(UserRequest(login="renamed", age=50))
        assert updated.id == sample_user.id
        assert updated.login == "renamed"
        assert updated.age == 50
        assert sample_user.login == "alice"

    def test_dict_codec(self, sample_user):
        """Test serialization keeps every field."""
        data = sample_user.to_dict()
        assert data == {"id": sample_user.id, "login": "alice", "age": 31}
        restored = User.from_dict(data)
        assert (restored.id, restored.login, restored.age) == (sample_user.id, "alice", 31)


class TestSeedUsers:
    """Tests for the fixed seed set."""

    def test_seed_ids_are_distinct(self):
        """Test every seed user has its own id."""
        assert len({user.id for user in SEED_USERS}) == len(SEED_USERS) == 3

    def test_seed_content(self):
        """Test seed triples."""
        triples = {(u.id, u.login, u.age) for u in SEED_USERS}
        assert ("e2ac4fba-ce48-42fe-a0b9-c7555b65154f", "test", 10) in triples
        assert ("10b86e02-109d-488a-8e25-8bb63a7c4f1c", "wojtek", 18) in triples
        assert ("4ca315c0-e214-4b62-9c2a-71d78e29412e", "admin", 60) in triples

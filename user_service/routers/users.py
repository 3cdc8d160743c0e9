"""
User CRUD router.

Thin HTTP layer over UserRepository:
- GET    /api/users        list all users
- POST   /api/users        create a user with a fresh id
- GET    /api/users/{id}   fetch one user
- PUT    /api/users/{id}   replace login and age of an existing user
- DELETE /api/users/{id}   remove an existing user
"""

from typing import List

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..dependencies import get_user_repository
from ..domain.entities import User
from ..domain.exceptions import UserNotFoundException
from ..models import UserRequestModel, UserResponse
from ..repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


async def _require_user(repository: UserRepository, user_id: str) -> User:
    user = await repository.find_by_id(user_id)
    if user is None:
        error = UserNotFoundException(user_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.message)
    return user


@router.get("", response_model=List[UserResponse])
async def find_all(repository: UserRepository = Depends(get_user_repository)):
    """List every user currently in the cache."""
    return [UserResponse.from_domain(user) async for user in repository.find_all()]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserRequestModel,
    response: Response,
    repository: UserRepository = Depends(get_user_repository),
):
    """Create a user; the id is generated server-side."""
    user = await repository.save(User.from_request(body.to_domain()))
    response.headers["Location"] = f"/api/users/{user.id}"
    logger.info("User created", id=user.id, login=user.login)
    return UserResponse.from_domain(user)


@router.get("/{user_id}", response_model=UserResponse)
async def find_by_id(user_id: str, repository: UserRepository = Depends(get_user_repository)):
    """Fetch a user by id."""
    return UserResponse.from_domain(await _require_user(repository, user_id))


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    body: UserRequestModel,
    repository: UserRepository = Depends(get_user_repository),
):
    """
    Replace an existing user.

    Read-modify-write: the stored user is fetched, its login and age are
    replaced from the body, and the result is put back under the same id.
    """
    existing = await _require_user(repository, user_id)
    user = await repository.save(existing.replace_with(body.to_domain()))
    logger.info("User updated", id=user.id)
    return UserResponse.from_domain(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, repository: UserRepository = Depends(get_user_repository)):
    """Delete an existing user."""
    existing = await _require_user(repository, user_id)
    await repository.delete(existing)
    logger.info("User deleted", id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

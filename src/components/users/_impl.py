"""
UserService - User record management.

Handles user creation, partial updates and removal over an
in-memory repository.

Key behaviors:
- IDs are assigned from a monotonically increasing counter
- IDs are never reused, even after delete
- Failed update/delete leaves the repository untouched
- Callers only ever see copies of stored users
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from src.domain.entities import User

from .models import UserValidationError, not_found_error
from .ports import UserRepoPort

logger = logging.getLogger(__name__)

DEFAULT_SEED: tuple[User, ...] = (
    User(id=1, name="Alice Johnson", email="alice@example.com"),
    User(id=2, name="Bob Smith", email="bob@example.com"),
)


# --- In-Memory Repository ---


class InMemoryUserRepo:
    """
    In-memory user repository.

    Seeded with DEFAULT_SEED unless an explicit seed is given; pass an
    empty sequence for an empty repository. Not thread-safe: concurrent
    writers need one external lock around the whole repo.
    """

    def __init__(self, seed: Iterable[User] | None = None) -> None:
        self._users: dict[int, User] = {}
        self._next_id = 1

        for user in DEFAULT_SEED if seed is None else seed:
            self._users[user.id] = user.model_copy()
            self._next_id = max(self._next_id, user.id + 1)

    @property
    def next_id(self) -> int:
        return self._next_id

    def get(self, user_id: int) -> User | None:
        user = self._users.get(user_id)
        return user.model_copy() if user is not None else None

    def create(self, name: str, email: str) -> User:
        user = User(id=self._next_id, name=name, email=email)
        self._users[user.id] = user
        self._next_id += 1
        return user.model_copy()

    def save(self, user: User) -> User:
        self._users[user.id] = user.model_copy()
        self._next_id = max(self._next_id, user.id + 1)
        return user.model_copy()

    def delete(self, user_id: int) -> User | None:
        return self._users.pop(user_id, None)

    def list_all(self) -> list[User]:
        return [self._users[key].model_copy() for key in sorted(self._users)]


# --- User Service ---


class UserService:
    """
    User service.

    Owns the CRUD rules on top of a UserRepoPort.
    """

    def __init__(self, repo: UserRepoPort) -> None:
        """Initialize service."""
        self._repo = repo

    def get_all(self) -> list[User]:
        """Get all users, ascending by ID."""
        return self._repo.list_all()

    def get_by_id(self, user_id: int) -> User | None:
        """Get user by ID. A missing ID is not an error."""
        return self._repo.get(user_id)

    def create(self, name: str, email: str) -> User:
        """Create a new user. Always succeeds."""
        user = self._repo.create(name, email)
        logger.debug("Created user %d", user.id)
        return user

    def update(
        self,
        user_id: int,
        name: str | None = None,
        email: str | None = None,
    ) -> tuple[User | None, list[UserValidationError]]:
        """
        Update only the supplied fields of a user.

        Returns:
            Tuple of (user, errors). User is None if not found.
        """
        user = self._repo.get(user_id)
        if user is None:
            logger.info("Update skipped, user %d not found", user_id)
            return None, [not_found_error(user_id)]

        changes: dict[str, str] = {}
        if name is not None:
            changes["name"] = name
        if email is not None:
            changes["email"] = email

        if not changes:
            return user, []

        saved = self._repo.save(user.model_copy(update=changes))
        logger.debug("Updated user %d fields %s", user_id, sorted(changes))
        return saved, []

    def delete(self, user_id: int) -> tuple[User | None, list[UserValidationError]]:
        """
        Delete a user.

        Returns:
            Tuple of (removed user, errors).
        """
        removed = self._repo.delete(user_id)
        if removed is None:
            logger.info("Delete skipped, user %d not found", user_id)
            return None, [not_found_error(user_id)]

        logger.debug("Deleted user %d", user_id)
        return removed, []

"""
Users component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import User


class UserRepoPort(Protocol):
    """Repository interface for users."""

    def get(self, user_id: int) -> User | None:
        """Get user by ID, None when absent."""
        ...

    def create(self, name: str, email: str) -> User:
        """Store a new user under the next ID."""
        ...

    def save(self, user: User) -> User:
        """Replace an existing user."""
        ...

    def delete(self, user_id: int) -> User | None:
        """Remove and return user, None when absent."""
        ...

    def list_all(self) -> list[User]:
        """List all users."""
        ...

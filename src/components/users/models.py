"""
Users component - Data models.

Input and output DTOs for the user CRUD entry points.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import User

USER_NOT_FOUND = "user_not_found"

# --- Validation Errors ---


@dataclass(frozen=True)
class UserValidationError:
    """User operation error (NotFound is the only kind)."""

    code: str
    message: str
    field: str | None = None


def not_found_error(user_id: int) -> UserValidationError:
    """Build the NotFound error for a user ID."""
    return UserValidationError(
        code=USER_NOT_FOUND,
        message=f"User with ID {user_id} not found",
        field="id",
    )


# --- Input Models ---


@dataclass(frozen=True)
class CreateUserInput:
    """Input for creating a user."""

    name: str
    email: str


@dataclass(frozen=True)
class UpdateUserInput:
    """
    Input for updating a user.

    None means "leave unchanged"; an empty string is a real value.
    """

    user_id: int
    name: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class DeleteUserInput:
    """Input for deleting a user."""

    user_id: int


@dataclass(frozen=True)
class GetUserInput:
    """Input for getting a user."""

    user_id: int


# --- Output Models ---


@dataclass(frozen=True)
class UserOperationOutput:
    """Output from a user operation."""

    user: User | None
    errors: tuple[UserValidationError, ...]
    success: bool


@dataclass(frozen=True)
class UserListOutput:
    """Output from list operation."""

    users: tuple[User, ...]
    total: int

"""
Users component - User record CRUD.

Shell Layer - converts service results into component outputs.

Invariants:
- I1: Every stored user's ID equals its key
- I2: The next ID is greater than every ID ever issued
- I3: NotFound never changes repository state
"""

from __future__ import annotations

from ._impl import UserService
from .models import (
    CreateUserInput,
    DeleteUserInput,
    GetUserInput,
    UpdateUserInput,
    UserListOutput,
    UserOperationOutput,
    not_found_error,
)

# --- Shell Layer Functions ---


def run_create(
    input_data: CreateUserInput,
    service: UserService,
) -> UserOperationOutput:
    """Create a new user."""
    user = service.create(name=input_data.name, email=input_data.email)

    return UserOperationOutput(
        user=user,
        errors=(),
        success=True,
    )


def run_update(
    input_data: UpdateUserInput,
    service: UserService,
) -> UserOperationOutput:
    """Update an existing user."""
    user, errors = service.update(
        input_data.user_id,
        name=input_data.name,
        email=input_data.email,
    )

    return UserOperationOutput(
        user=user,
        errors=tuple(errors),
        success=user is not None,
    )


def run_delete(
    input_data: DeleteUserInput,
    service: UserService,
) -> UserOperationOutput:
    """Delete a user, returning the removed record."""
    user, errors = service.delete(input_data.user_id)

    return UserOperationOutput(
        user=user,
        errors=tuple(errors),
        success=user is not None,
    )


def run_get(
    input_data: GetUserInput,
    service: UserService,
) -> UserOperationOutput:
    """Get a user by ID."""
    user = service.get_by_id(input_data.user_id)

    if user is None:
        return UserOperationOutput(
            user=None,
            errors=(not_found_error(input_data.user_id),),
            success=False,
        )

    return UserOperationOutput(
        user=user,
        errors=(),
        success=True,
    )


def run_list(service: UserService) -> UserListOutput:
    """List all users."""
    users = service.get_all()
    return UserListOutput(
        users=tuple(users),
        total=len(users),
    )

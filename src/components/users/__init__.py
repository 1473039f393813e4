"""
Users component - In-memory user record management.
"""

from ._impl import DEFAULT_SEED, InMemoryUserRepo, UserService
from .component import (
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from .models import (
    USER_NOT_FOUND,
    CreateUserInput,
    DeleteUserInput,
    GetUserInput,
    UpdateUserInput,
    UserListOutput,
    UserOperationOutput,
    UserValidationError,
)
from .ports import UserRepoPort

__all__ = [
    # Entry points
    "run_create",
    "run_update",
    "run_delete",
    "run_get",
    "run_list",
    # Input models
    "CreateUserInput",
    "UpdateUserInput",
    "DeleteUserInput",
    "GetUserInput",
    # Output models
    "UserOperationOutput",
    "UserListOutput",
    "UserValidationError",
    "USER_NOT_FOUND",
    # Ports
    "UserRepoPort",
    # Implementation
    "InMemoryUserRepo",
    "UserService",
    "DEFAULT_SEED",
]

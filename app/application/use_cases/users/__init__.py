"""User use cases (users are counted on the admin dashboard)."""

from app.application.use_cases.users.user_operations import (
    CreateUserUseCase,
    DeleteUserUseCase,
    UpdateUserNameUseCase,
)
from app.application.use_cases.users.user_queries import (
    GetUserByEmailUseCase,
    GetUserByIdUseCase,
    GetUsersUseCase,
)

__all__ = [
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "GetUserByEmailUseCase",
    "GetUserByIdUseCase",
    "GetUsersUseCase",
    "UpdateUserNameUseCase",
]

from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase, SearchUsersUseCase

__all__ = [
    "GetUserUseCase",
    "ListUsersUseCase",
    "SearchUsersUseCase",
]

# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from .user_view import to_user_response


class ListUsersUseCase:
    """Use case for listing every user (used when picking participants)"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> List[UserResponse]:
        users = await self.user_repository.list_all()
        return [to_user_response(user) for user in users]


class SearchUsersUseCase:
    """Use case for finding users by a substring of username, email, first or last name"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, term: str) -> List[UserResponse]:
        users = await self.user_repository.search(term)
        return [to_user_response(user) for user in users]

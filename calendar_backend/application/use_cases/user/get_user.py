# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from ..lookups import require_user
from .user_view import to_user_response


class GetUserUseCase:
    """Use case for getting a user by ID"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        """
        Raises:
            NotFoundError: If the user does not exist
        """
        user = await require_user(self.user_repository, user_id)
        return to_user_response(user)

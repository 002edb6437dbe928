# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse
from ..user.user_view import to_user_response


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information

        Raises:
            ValueError: If the username or email is already taken
        """
        if await self.user_repository.find_by_username(request.username) is not None:
            raise ValueError("Username is already taken")

        if await self.user_repository.find_by_email(request.email) is not None:
            raise ValueError("Email is already in use")

        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            email=request.email,
            hashed_password=hash_password(request.password),
            first_name=request.first_name,
            last_name=request.last_name,
        )

        saved_user = await self.user_repository.save(new_user)
        return to_user_response(saved_user)

from ....domain.models.user import User
from ...dto.user_dto import UserResponse


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id or "",
        username=user.username,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
    )

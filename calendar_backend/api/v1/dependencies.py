# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...di.container import get_container


# A missing header is turned into a 401 in get_current_user
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UserResponse:
    """
    Resolve the caller from the Authorization: Bearer header.

    Raises:
        HTTPException: 401 if the header is missing, the token does not
            verify, or it names a user that no longer exists
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    use_case = get_container().get(GetCurrentUserUseCase)
    try:
        return await use_case.execute(credentials.credentials)
    except ValueError as e:
        raise _unauthorized(str(e))

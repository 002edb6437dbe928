"""
Auth API: account registration, username/password login, and the
caller's own profile.
"""

# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth import LoginUserUseCase, RegisterUserUseCase
from ...di.container import get_container
from .dependencies import get_current_user

logger = logging.getLogger(__name__)
router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> UserResponse:
    """Create an account. Username and email must both be unused."""
    use_case = get_container().get(RegisterUserUseCase)
    try:
        user = await use_case.execute(request)
    except ValueError as e:
        logger.info(f"Registration rejected for {request.username}: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    logger.info(f"Registered user {user.id} ({user.username})")
    return user


@router.post("/login", response_model=TokenResponse)
async def login_user(request: UserLoginRequest) -> TokenResponse:
    use_case = get_container().get(LoginUserUseCase)

    token_response = await use_case.execute(request)
    if token_response is None:
        logger.warning(f"Failed login for username {request.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token_response


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    return current_user

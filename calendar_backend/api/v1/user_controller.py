"""
Users API: the participant picker looks people up here.
"""

# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Query, status

# Local application imports
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.user import GetUserUseCase, ListUsersUseCase, SearchUsersUseCase
from ...di.container import get_container
from ...domain.exceptions import NotFoundError
from .dependencies import get_current_user

router = APIRouter(tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    return current_user


@router.get("", response_model=List[UserResponse])
async def list_users(
    current_user: UserResponse = Depends(get_current_user),
) -> List[UserResponse]:
    use_case = get_container().get(ListUsersUseCase)
    return await use_case.execute()


@router.get("/search", response_model=List[UserResponse])
async def search_users(
    term: str = Query(..., min_length=1),
    current_user: UserResponse = Depends(get_current_user),
) -> List[UserResponse]:
    """Find users whose username, email, first or last name contains the term"""
    use_case = get_container().get(SearchUsersUseCase)
    return await use_case.execute(term)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> UserResponse:
    use_case = get_container().get(GetUserUseCase)
    try:
        return await use_case.execute(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

from typing import TYPE_CHECKING

from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user import GetUserUseCase, ListUsersUseCase, SearchUsersUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User directory use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case in (GetUserUseCase, ListUsersUseCase, SearchUsersUseCase):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(user_repository=container.get(UserRepository)),
            )

# Standard library imports
from copy import deepcopy
from typing import Dict, Iterable, List, Optional
from uuid import uuid4

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User


class InMemoryUserRepository(UserRepository):
    """
    Process-local implementation of UserRepository.

    Users are stored and returned as copies. Insertion order is preserved
    for list_all and search results.
    """

    def __init__(self, users: Optional[Iterable[User]] = None) -> None:
        self._users: Dict[str, User] = {}
        for user in users or ():
            self._store(user)

    def _store(self, user: User) -> User:
        stored = deepcopy(user)
        if not stored.id:
            stored.id = uuid4().hex
        self._users[stored.id] = stored
        return deepcopy(stored)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self._users.get(user_id) if user_id else None
        return deepcopy(user) if user else None

    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        wanted = set(user_ids or ())
        return [deepcopy(user) for user_id, user in self._users.items() if user_id in wanted]

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if email and user.email == email:
                return deepcopy(user)
        return None

    async def find_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if username and user.username == username:
                return deepcopy(user)
        return None

    async def search(self, term: str) -> List[User]:
        if term is None:
            return []
        return [
            deepcopy(user)
            for user in self._users.values()
            if any(term in (value or "") for value in (user.username, user.email, user.first_name, user.last_name))
        ]

    async def list_all(self) -> List[User]:
        return [deepcopy(user) for user in self._users.values()]

    async def save(self, user: User) -> User:
        if not user:
            raise ValueError("User cannot be None")
        if user.id and user.id not in self._users:
            raise ValueError(f"User with ID {user.id} not found")
        return self._store(user)

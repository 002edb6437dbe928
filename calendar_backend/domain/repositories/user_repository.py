from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        """
        Find all users whose ID is in user_ids.

        Unknown or malformed IDs are skipped, not reported: the result holds
        only the users that exist.
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username"""
        pass

    @abstractmethod
    async def search(self, term: str) -> List[User]:
        """Case-sensitive substring match over username, email, first and last name"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """List every user"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update)"""
        pass

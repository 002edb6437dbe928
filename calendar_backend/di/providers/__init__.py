from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .user_provider import UserProvider
from .events_provider import EventsProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "UserProvider",
    "EventsProvider",
]

from .memory_user_repository import InMemoryUserRepository
from .memory_event_repository import InMemoryEventRepository

__all__ = [
    "InMemoryUserRepository",
    "InMemoryEventRepository",
]

import logging
from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.event_repository import EventRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_event_repository import MongoEventRepository
from ...infrastructure.memory import InMemoryUserRepository, InMemoryEventRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register repository implementations for the configured storage backend.

        Raises:
            ValueError: If STORAGE_BACKEND names an unknown backend
        """
        backend = get_settings().storage_backend

        if backend == "memory":
            logger.info("Using in-memory repositories")
            container.register_singleton(UserRepository, InMemoryUserRepository())
            container.register_singleton(EventRepository, InMemoryEventRepository())
            return

        if backend != "mongo":
            raise ValueError(f"Unknown storage backend: {backend}")

        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )
        container.register_singleton(
            EventRepository,
            MongoEventRepository(event_collection=container.get("event_collection"))
        )

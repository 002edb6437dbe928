from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_user_collection,
    get_event_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB database and its collections as singletons.
        Nothing is registered for the in-memory backend.
        """
        if get_settings().storage_backend != "mongo":
            return

        container.register_singleton("database", get_database())
        container.register_singleton("user_collection", get_user_collection())
        container.register_singleton("event_collection", get_event_collection())

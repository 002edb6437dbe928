from .mongo_connection import (
    get_database,
    get_user_collection,
    get_event_collection,
    ensure_indexes,
    close_connection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_event_repository import MongoEventRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_event_collection",
    "ensure_indexes",
    "close_connection",
    "MongoUserRepository",
    "MongoEventRepository",
]

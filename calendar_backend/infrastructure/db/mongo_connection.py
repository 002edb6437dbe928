# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import EventFields, UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
EVENTS_COLLECTION = "events"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]


def get_event_collection() -> AsyncIOMotorCollection:
    """
    Get events collection from MongoDB

    Returns:
        MongoDB collection for events
    """
    return get_database()[EVENTS_COLLECTION]


async def ensure_indexes() -> None:
    """
    Create the indexes the repositories rely on.

    participant_ids is a multikey index so the owner-or-participant query
    stays an index lookup instead of a collection scan.
    """
    users = get_user_collection()
    await users.create_index([(UserFields.USERNAME, ASCENDING)], unique=True)
    await users.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)

    events = get_event_collection()
    await events.create_index([(EventFields.OWNER_USER_ID, ASCENDING), (EventFields.START_TIME, ASCENDING)])
    await events.create_index([(EventFields.PARTICIPANT_IDS, ASCENDING), (EventFields.START_TIME, ASCENDING)])
    await events.create_index([(EventFields.START_TIME, ASCENDING)])
    logger.info("MongoDB indexes ensured")


def close_connection() -> None:
    """Close the shared client, if one was opened"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None

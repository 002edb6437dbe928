# Standard library imports
import re
from typing import Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")

    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        """
        Find every existing user among user_ids

        Malformed and unknown IDs are skipped; the result only holds users
        that exist.
        """
        object_ids = [oid for oid in (_to_object_id(user_id) for user_id in set(user_ids or ())) if oid is not None]
        if not object_ids:
            return []

        try:
            cursor = self.user_collection.find({UserFields.MONGO_ID: {"$in": object_ids}})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except Exception as e:
            raise RuntimeError(f"Error finding users by IDs: {str(e)}")

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")

    async def find_by_username(self, username: str) -> Optional[User]:
        if not username:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by username: {str(e)}")

    async def search(self, term: str) -> List[User]:
        """
        Case-sensitive substring search over username, email, first and last name.
        The term is escaped so it always matches literally.
        """
        if term is None:
            return []

        pattern = {"$regex": re.escape(term)}
        query = {"$or": [{field: pattern} for field in UserFields.SEARCHABLE]}

        try:
            cursor = self.user_collection.find(query)
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except Exception as e:
            raise RuntimeError(f"Error searching users: {str(e)}")

    async def list_all(self) -> List[User]:
        try:
            cursor = self.user_collection.find({})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except Exception as e:
            raise RuntimeError(f"Error listing users: {str(e)}")

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set
        """
        if not user:
            raise ValueError("User cannot be None")

        try:
            user_dict = self._user_to_dict(user)

            if user.id:
                object_id = _to_object_id(user.id)
                if object_id is None:
                    raise ValueError(f"Invalid user ID format: {user.id}")

                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": {k: v for k, v in user_dict.items() if k != UserFields.MONGO_ID}}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")

                updated_document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
                if updated_document is None:
                    raise RuntimeError(f"User {user.id} was updated but could not be retrieved")
                return self._document_to_user(updated_document)

            # Create new user
            user_dict.pop(UserFields.MONGO_ID, None)
            result = await self.user_collection.insert_one(user_dict)

            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise RuntimeError("User was created but could not be retrieved")

            return self._document_to_user(new_document)
        except DuplicateKeyError:
            raise ValueError("Username or email is already in use")
        except (ValueError, RuntimeError):
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            first_name=document.get(UserFields.FIRST_NAME),
            last_name=document.get(UserFields.LAST_NAME),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        user_dict = {
            UserFields.USERNAME: user.username,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.FIRST_NAME: user.first_name,
            UserFields.LAST_NAME: user.last_name,
        }

        object_id = _to_object_id(user.id) if user.id else None
        if object_id is not None:
            user_dict[UserFields.MONGO_ID] = object_id

        return user_dict

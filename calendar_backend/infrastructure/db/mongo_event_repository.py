# Standard library imports
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.event_repository import EventRepository
from ...domain.models.event import Event, EventStatus, EventType
from ...domain.constants import EventFields
from ...domain.exceptions import NotFoundError
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_event_collection


def _to_object_id(event_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(event_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoEventRepository(EventRepository):
    """
    MongoDB implementation of EventRepository.

    Participants are embedded in the event document as an array of user IDs,
    so an event and its participant set are always written together by a
    single-document operation.
    """

    SORT_ORDER = [(EventFields.START_TIME, ASCENDING), (EventFields.MONGO_ID, ASCENDING)]

    def __init__(self, event_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.event_collection = event_collection if event_collection is not None else get_event_collection()

    async def find_by_id(self, event_id: str) -> Optional[Event]:
        if not event_id:
            return None
        object_id = _to_object_id(event_id)
        if object_id is None:
            return None

        try:
            document = await self.event_collection.find_one({EventFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding event by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_event(document)

    async def find_by_owner(self, owner_user_id: str) -> List[Event]:
        if not owner_user_id:
            return []
        return await self._find({EventFields.OWNER_USER_ID: owner_user_id})

    async def find_involving(
        self,
        user_id: str,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        status: Optional[EventStatus] = None,
        event_type: Optional[EventType] = None,
        search_term: Optional[str] = None,
    ) -> List[Event]:
        if not user_id:
            return []
        return await self._find(
            self.build_involvement_query(
                user_id,
                start=start,
                end=end,
                status=status,
                event_type=event_type,
                search_term=search_term,
            )
        )

    @staticmethod
    def build_involvement_query(
        user_id: str,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        status: Optional[EventStatus] = None,
        event_type: Optional[EventType] = None,
        search_term: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Owner-or-participant predicate AND-ed with the optional filters"""
        query: Dict[str, Any] = {
            "$or": [
                {EventFields.OWNER_USER_ID: user_id},
                {EventFields.PARTICIPANT_IDS: user_id},
            ]
        }

        if start is not None or end is not None:
            ts_query = {}
            if start is not None:
                ts_query["$gte"] = start
            if end is not None:
                ts_query["$lte"] = end
            query[EventFields.START_TIME] = ts_query

        if status is not None:
            query[EventFields.STATUS] = status.value
        if event_type is not None:
            query[EventFields.EVENT_TYPE] = event_type.value
        if search_term is not None:
            # Literal, case-sensitive containment
            query[EventFields.TITLE] = {"$regex": re.escape(search_term)}

        return query

    async def save(self, event: Event) -> Event:
        """
        Save event (create new or update existing)

        Updates write every field and the participant array in one
        update_one call. The owner is left out of the update, so an existing
        event never changes hands, and an event deleted in the meantime is
        reported as not found rather than re-created.
        """
        if not event:
            raise ValueError("Event cannot be None")

        try:
            event_dict = self._event_to_dict(event)

            if event.id:
                object_id = _to_object_id(event.id)
                if object_id is None:
                    raise ValueError(f"Invalid event ID format: {event.id}")

                event_dict.pop(EventFields.OWNER_USER_ID)
                update_result = await self.event_collection.update_one(
                    {EventFields.MONGO_ID: object_id},
                    {"$set": event_dict},
                )
                if update_result.matched_count == 0:
                    raise NotFoundError("Event", event.id)
            else:
                result = await self.event_collection.insert_one(event_dict)
                object_id = result.inserted_id

            document = await self.event_collection.find_one({EventFields.MONGO_ID: object_id})
            if document is None and event.id:
                raise NotFoundError("Event", event.id)
            if document is None:
                raise RuntimeError("Event was saved but could not be retrieved")
            return self._document_to_event(document)
        except (ValueError, RuntimeError, NotFoundError):
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving event: {str(e)}")

    async def delete(self, event_id: str) -> bool:
        object_id = _to_object_id(event_id) if event_id else None
        if object_id is None:
            return False
        try:
            result = await self.event_collection.delete_one({EventFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting event: {str(e)}")
        return result.deleted_count > 0

    async def _find(self, query: Dict[str, Any]) -> List[Event]:
        try:
            cursor = self.event_collection.find(query).sort(self.SORT_ORDER)
            events: List[Event] = []
            async for document in cursor:
                events.append(self._document_to_event(document))
            return events
        except Exception as e:
            raise RuntimeError(f"Error listing events: {str(e)}")

    def _document_to_event(self, doc: Dict[str, Any]) -> Event:
        event_type = doc.get(EventFields.EVENT_TYPE)
        status = doc.get(EventFields.STATUS)
        return Event(
            id=str(doc.get(EventFields.MONGO_ID)),
            owner_user_id=doc.get(EventFields.OWNER_USER_ID) or "",
            title=doc.get(EventFields.TITLE) or "",
            description=doc.get(EventFields.DESCRIPTION),
            start_time=ensure_utc(doc.get(EventFields.START_TIME)),
            end_time=ensure_utc(doc.get(EventFields.END_TIME)),
            location=doc.get(EventFields.LOCATION),
            event_type=EventType(event_type) if event_type else None,
            status=EventStatus(status) if status else None,
            is_all_day=bool(doc.get(EventFields.IS_ALL_DAY, False)),
            is_recurring=bool(doc.get(EventFields.IS_RECURRING, False)),
            recurrence_pattern=doc.get(EventFields.RECURRENCE_PATTERN),
            participant_ids=set(doc.get(EventFields.PARTICIPANT_IDS) or []),
            created_at=ensure_utc(doc.get(EventFields.CREATED_AT)),
            updated_at=ensure_utc(doc.get(EventFields.UPDATED_AT)),
        )

    def _event_to_dict(self, event: Event) -> Dict[str, Any]:
        return {
            EventFields.OWNER_USER_ID: event.owner_user_id,
            EventFields.TITLE: event.title,
            EventFields.DESCRIPTION: event.description,
            EventFields.START_TIME: event.start_time,
            EventFields.END_TIME: event.end_time,
            EventFields.LOCATION: event.location,
            EventFields.EVENT_TYPE: event.event_type.value if event.event_type else None,
            EventFields.STATUS: event.status.value if event.status else None,
            EventFields.IS_ALL_DAY: event.is_all_day,
            EventFields.IS_RECURRING: event.is_recurring,
            EventFields.RECURRENCE_PATTERN: event.recurrence_pattern,
            EventFields.PARTICIPANT_IDS: sorted(event.participant_ids),
            EventFields.CREATED_AT: event.created_at,
            EventFields.UPDATED_AT: event.updated_at,
        }

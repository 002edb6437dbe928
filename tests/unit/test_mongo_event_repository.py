"""
Unit tests for MongoEventRepository query building and document mapping.
The collection is mocked; no MongoDB server is needed.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from calendar_backend.domain.constants import EventFields
from calendar_backend.domain.exceptions import NotFoundError
from calendar_backend.domain.models.event import Event, EventStatus, EventType
from calendar_backend.infrastructure.db.mongo_event_repository import MongoEventRepository

START = datetime(2030, 1, 1, 9, tzinfo=timezone.utc)


class TestBuildInvolvementQuery:

    def test_owner_or_participant_only(self):
        query = MongoEventRepository.build_involvement_query("u1")
        assert query == {
            "$or": [
                {EventFields.OWNER_USER_ID: "u1"},
                {EventFields.PARTICIPANT_IDS: "u1"},
            ]
        }

    def test_filters_are_added_alongside_involvement(self):
        end = datetime(2030, 1, 31, tzinfo=timezone.utc)
        query = MongoEventRepository.build_involvement_query(
            "u1",
            start=START,
            end=end,
            status=EventStatus.CONFIRMED,
            event_type=EventType.WORK,
        )
        assert query[EventFields.START_TIME] == {"$gte": START, "$lte": end}
        assert query[EventFields.STATUS] == "CONFIRMED"
        assert query[EventFields.EVENT_TYPE] == "WORK"
        assert "$or" in query

    def test_search_term_is_escaped(self):
        query = MongoEventRepository.build_involvement_query("u1", search_term="1:1 (weekly)")
        assert query[EventFields.TITLE] == {"$regex": r"1:1\ \(weekly\)"}


class TestDocumentMapping:

    def test_document_to_event(self):
        object_id = ObjectId()
        repo = MongoEventRepository(event_collection=MagicMock())
        event = repo._document_to_event({
            EventFields.MONGO_ID: object_id,
            EventFields.OWNER_USER_ID: "u1",
            EventFields.TITLE: "Planning",
            EventFields.START_TIME: datetime(2030, 1, 1, 9),
            EventFields.END_TIME: datetime(2030, 1, 1, 10),
            EventFields.STATUS: "TENTATIVE",
            EventFields.EVENT_TYPE: None,
            EventFields.PARTICIPANT_IDS: ["u2", "u3"],
        })
        assert event.id == str(object_id)
        assert event.start_time == START
        assert event.status == EventStatus.TENTATIVE
        assert event.event_type is None
        assert event.participant_ids == {"u2", "u3"}
        assert event.is_all_day is False

    def test_event_to_dict_stores_enum_values_and_sorted_participants(self):
        repo = MongoEventRepository(event_collection=MagicMock())
        event = Event(
            id=None,
            owner_user_id="u1",
            title="Planning",
            start_time=START,
            end_time=START,
            event_type=EventType.MEETING,
            participant_ids={"u3", "u2"},
        )
        document = repo._event_to_dict(event)
        assert document[EventFields.EVENT_TYPE] == "MEETING"
        assert document[EventFields.STATUS] is None
        assert document[EventFields.PARTICIPANT_IDS] == ["u2", "u3"]


class TestSave:

    @pytest.mark.asyncio
    async def test_update_never_overwrites_owner(self):
        object_id = ObjectId()
        collection = MagicMock()
        collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1))
        collection.find_one = AsyncMock(return_value={
            EventFields.MONGO_ID: object_id,
            EventFields.OWNER_USER_ID: "u1",
            EventFields.TITLE: "Renamed",
            EventFields.START_TIME: START,
            EventFields.END_TIME: START,
        })
        repo = MongoEventRepository(event_collection=collection)
        event = Event(id=str(object_id), owner_user_id="u1", title="Renamed", start_time=START, end_time=START)

        saved = await repo.save(event)

        filter_doc, update_doc = collection.update_one.call_args[0]
        assert filter_doc == {EventFields.MONGO_ID: object_id}
        assert set(update_doc) == {"$set"}
        assert EventFields.OWNER_USER_ID not in update_doc["$set"]
        assert collection.update_one.call_args.kwargs.get("upsert", False) is False
        assert saved.title == "Renamed"

    @pytest.mark.asyncio
    async def test_update_of_deleted_event_raises_not_found(self):
        object_id = ObjectId()
        collection = MagicMock()
        collection.update_one = AsyncMock(return_value=MagicMock(matched_count=0))
        collection.find_one = AsyncMock()
        repo = MongoEventRepository(event_collection=collection)
        event = Event(id=str(object_id), owner_user_id="u1", title="Gone", start_time=START, end_time=START)

        with pytest.raises(NotFoundError) as exc_info:
            await repo.save(event)

        assert exc_info.value.identifier == str(object_id)
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_driver_errors_are_wrapped(self):
        collection = MagicMock()
        collection.insert_one = AsyncMock(side_effect=Exception("connection refused"))
        repo = MongoEventRepository(event_collection=collection)
        event = Event(id=None, owner_user_id="u1", title="New", start_time=START, end_time=START)

        with pytest.raises(RuntimeError) as exc_info:
            await repo.save(event)
        assert "Error saving event" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_invalid_id_lookups_return_nothing(self):
        repo = MongoEventRepository(event_collection=MagicMock())
        assert await repo.find_by_id("not-an-object-id") is None
        assert await repo.delete("not-an-object-id") is False

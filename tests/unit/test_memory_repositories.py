"""
Unit tests for the in-memory repositories.
"""
from datetime import datetime, timezone

import pytest
from calendar_backend.domain.exceptions import NotFoundError
from calendar_backend.domain.models.event import Event, EventStatus
from calendar_backend.domain.models.user import User
from calendar_backend.infrastructure.memory import InMemoryEventRepository, InMemoryUserRepository


def make_event(owner: str = "alice-id", day: int = 1, **fields) -> Event:
    start = datetime(2030, 1, day, 9, tzinfo=timezone.utc)
    title = fields.pop("title", "Event")
    return Event(id=None, owner_user_id=owner, title=title, start_time=start, end_time=start, **fields)


class TestInMemoryUserRepository:

    @pytest.mark.asyncio
    async def test_find_by_ids_skips_unknown(self, user_repo):
        users = await user_repo.find_by_ids(["bob-id", "nobody", "alice-id"])
        assert {user.id for user in users} == {"alice-id", "bob-id"}

    @pytest.mark.asyncio
    async def test_search_matches_any_name_field(self, user_repo):
        assert [u.username for u in await user_repo.search("Baker")] == ["bob"]
        assert [u.username for u in await user_repo.search("carol@")] == ["carol"]
        assert len(await user_repo.search("example.com")) == 3

    @pytest.mark.asyncio
    async def test_save_assigns_id(self):
        repo = InMemoryUserRepository()
        saved = await repo.save(User(id=None, username="dan", email="dan@example.com", hashed_password="h"))
        assert saved.id
        assert (await repo.find_by_username("dan")).id == saved.id

    @pytest.mark.asyncio
    async def test_save_unknown_id_raises(self):
        repo = InMemoryUserRepository()
        with pytest.raises(ValueError):
            await repo.save(User(id="ghost", username="g", email="g@example.com", hashed_password="h"))

    @pytest.mark.asyncio
    async def test_returned_users_are_copies(self, user_repo):
        user = await user_repo.find_by_id("alice-id")
        user.first_name = "Changed"
        assert (await user_repo.find_by_id("alice-id")).first_name == "Alice"


class TestInMemoryEventRepository:

    @pytest.mark.asyncio
    async def test_find_involving_orders_by_start(self, event_repo):
        later = await event_repo.save(make_event(day=5))
        earlier = await event_repo.save(make_event(owner="bob-id", day=2, participant_ids={"alice-id"}))
        await event_repo.save(make_event(owner="bob-id", day=3))

        events = await event_repo.find_involving("alice-id")

        assert [e.id for e in events] == [earlier.id, later.id]

    @pytest.mark.asyncio
    async def test_filters_are_conjunctive(self, event_repo):
        await event_repo.save(make_event(day=1, title="Sync", status=EventStatus.CONFIRMED))
        match = await event_repo.save(make_event(day=2, title="Sync", status=EventStatus.CONFIRMED))
        await event_repo.save(make_event(day=2, title="Sync", status=EventStatus.CANCELLED))

        events = await event_repo.find_involving(
            "alice-id",
            start=datetime(2030, 1, 2, tzinfo=timezone.utc),
            status=EventStatus.CONFIRMED,
            search_term="Sy",
        )

        assert [e.id for e in events] == [match.id]

    @pytest.mark.asyncio
    async def test_save_never_changes_owner(self, event_repo):
        saved = await event_repo.save(make_event(owner="alice-id"))
        saved.owner_user_id = "bob-id"

        resaved = await event_repo.save(saved)

        assert resaved.owner_user_id == "alice-id"

    @pytest.mark.asyncio
    async def test_save_after_delete_raises_not_found(self, event_repo):
        saved = await event_repo.save(make_event())
        await event_repo.delete(saved.id)
        saved.add_participant("bob-id")

        with pytest.raises(NotFoundError):
            await event_repo.save(saved)

        assert await event_repo.find_by_id(saved.id) is None

    @pytest.mark.asyncio
    async def test_unsaved_changes_are_not_visible(self, event_repo):
        saved = await event_repo.save(make_event())
        saved.add_participant("bob-id")
        assert (await event_repo.find_by_id(saved.id)).participant_ids == set()

    @pytest.mark.asyncio
    async def test_delete_reports_whether_removed(self, event_repo):
        saved = await event_repo.save(make_event())
        assert await event_repo.delete(saved.id) is True
        assert await event_repo.delete(saved.id) is False
        assert await event_repo.find_by_id(saved.id) is None

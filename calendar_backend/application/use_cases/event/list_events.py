from datetime import datetime
from typing import List

from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.user_repository import UserRepository
from ....utils.datetime_utils import ensure_utc
from ...dto.event_dto import EventResponse
from ..lookups import require_user
from .event_view import build_event_responses


class ListInvolvedEventsUseCase:
    """All events the user owns or participates in, earliest start first"""

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self._event_repository = event_repository
        self._user_repository = user_repository

    async def execute(self, user_id: str) -> List[EventResponse]:
        await require_user(self._user_repository, user_id)
        events = await self._event_repository.find_involving(user_id)
        return await build_event_responses(events, self._user_repository)


class ListInvolvedEventsInRangeUseCase:
    """Involved events whose start time lies in [start, end]; an inverted range yields nothing"""

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self._event_repository = event_repository
        self._user_repository = user_repository

    async def execute(self, user_id: str, start: datetime, end: datetime) -> List[EventResponse]:
        await require_user(self._user_repository, user_id)
        events = await self._event_repository.find_involving(
            user_id,
            start=ensure_utc(start),
            end=ensure_utc(end),
        )
        return await build_event_responses(events, self._user_repository)


class ListOwnedEventsUseCase:
    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self._event_repository = event_repository
        self._user_repository = user_repository

    async def execute(self, user_id: str) -> List[EventResponse]:
        await require_user(self._user_repository, user_id)
        events = await self._event_repository.find_by_owner(user_id)
        return await build_event_responses(events, self._user_repository)

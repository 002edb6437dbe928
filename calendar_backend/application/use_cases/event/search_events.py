from typing import List

from ....domain.models.event import EventStatus, EventType
from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.event_dto import EventResponse
from ..lookups import require_user
from .event_view import build_event_responses


class SearchInvolvedEventsUseCase:
    """Involved events whose title contains the term (plain, case-sensitive substring)"""

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self._event_repository = event_repository
        self._user_repository = user_repository

    async def execute(self, user_id: str, term: str) -> List[EventResponse]:
        await require_user(self._user_repository, user_id)
        events = await self._event_repository.find_involving(user_id, search_term=term)
        return await build_event_responses(events, self._user_repository)


class ListInvolvedEventsByStatusUseCase:
    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self._event_repository = event_repository
        self._user_repository = user_repository

    async def execute(self, user_id: str, status: EventStatus) -> List[EventResponse]:
        await require_user(self._user_repository, user_id)
        events = await self._event_repository.find_involving(user_id, status=status)
        return await build_event_responses(events, self._user_repository)


class ListInvolvedEventsByTypeUseCase:
    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self._event_repository = event_repository
        self._user_repository = user_repository

    async def execute(self, user_id: str, event_type: EventType) -> List[EventResponse]:
        await require_user(self._user_repository, user_id)
        events = await self._event_repository.find_involving(user_id, event_type=event_type)
        return await build_event_responses(events, self._user_repository)

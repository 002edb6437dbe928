# Standard library imports
from copy import deepcopy
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional
from uuid import uuid4

# Local application imports
from ...domain.repositories.event_repository import EventRepository
from ...domain.models.event import Event, EventStatus, EventType
from ...domain.exceptions import NotFoundError


class InMemoryEventRepository(EventRepository):
    """
    Process-local implementation of EventRepository.

    Each method runs to completion without awaiting, so on a single event
    loop every save or delete is applied as one unit. Events go in and come
    out as copies, which keeps callers from mutating stored state without a
    save.
    """

    def __init__(self, events: Optional[Iterable[Event]] = None) -> None:
        self._events: Dict[str, Event] = {}
        for event in events or ():
            self._store(event)

    def _store(self, event: Event) -> Event:
        stored = deepcopy(event)
        if not stored.id:
            stored.id = uuid4().hex
        self._events[stored.id] = stored
        return deepcopy(stored)

    def _select(self, predicate: Callable[[Event], bool]) -> List[Event]:
        matches = [event for event in self._events.values() if predicate(event)]
        matches.sort(key=lambda event: event.start_time)
        return [deepcopy(event) for event in matches]

    async def find_by_id(self, event_id: str) -> Optional[Event]:
        event = self._events.get(event_id) if event_id else None
        return deepcopy(event) if event else None

    async def find_by_owner(self, owner_user_id: str) -> List[Event]:
        return self._select(lambda event: event.is_owned_by(owner_user_id))

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
        def matches(event: Event) -> bool:
            if not event.involves(user_id):
                return False
            if start is not None and event.start_time < start:
                return False
            if end is not None and event.start_time > end:
                return False
            if status is not None and event.status != status:
                return False
            if event_type is not None and event.event_type != event_type:
                return False
            if search_term is not None and search_term not in event.title:
                return False
            return True

        return self._select(matches)

    async def save(self, event: Event) -> Event:
        if not event:
            raise ValueError("Event cannot be None")
        existing = self._events.get(event.id) if event.id else None
        if event.id and existing is None:
            raise NotFoundError("Event", event.id)
        if existing is not None and existing.owner_user_id != event.owner_user_id:
            event = deepcopy(event)
            event.owner_user_id = existing.owner_user_id
        return self._store(event)

    async def delete(self, event_id: str) -> bool:
        return self._events.pop(event_id, None) is not None

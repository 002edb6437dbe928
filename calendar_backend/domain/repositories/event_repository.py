from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..models.event import Event, EventStatus, EventType


class EventRepository(ABC):
    """Repository interface - defines contract for event data access"""

    @abstractmethod
    async def find_by_id(self, event_id: str) -> Optional[Event]:
        """Find event by ID (not scoped to any user)"""
        pass

    @abstractmethod
    async def find_by_owner(self, owner_user_id: str) -> List[Event]:
        """Find all events owned by a user, ordered by start time ascending"""
        pass

    @abstractmethod
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
        """
        Find events the user owns or participates in, ordered by start time ascending.

        Every filter is conjunctive with the owner-or-participant predicate:
            start / end: inclusive bounds on start_time
            status / event_type: exact match
            search_term: case-sensitive substring of the title
        """
        pass

    @abstractmethod
    async def save(self, event: Event) -> Event:
        """
        Save event (create or update).

        Fields and the participant set are written in one atomic unit.
        Raises NotFoundError when the event has an id that is no longer stored.
        """
        pass

    @abstractmethod
    async def delete(self, event_id: str) -> bool:
        """Delete event together with its participant relations; True if something was removed"""
        pass

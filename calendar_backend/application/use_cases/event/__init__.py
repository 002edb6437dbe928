from .list_events import (
    ListInvolvedEventsUseCase,
    ListInvolvedEventsInRangeUseCase,
    ListOwnedEventsUseCase,
)
from .search_events import (
    SearchInvolvedEventsUseCase,
    ListInvolvedEventsByStatusUseCase,
    ListInvolvedEventsByTypeUseCase,
)
from .get_event import GetEventUseCase
from .create_event import CreateEventUseCase
from .update_event import UpdateEventUseCase
from .delete_event import DeleteEventUseCase
from .add_participant import AddParticipantUseCase
from .remove_participant import RemoveParticipantUseCase

__all__ = [
    "ListInvolvedEventsUseCase",
    "ListInvolvedEventsInRangeUseCase",
    "ListOwnedEventsUseCase",
    "SearchInvolvedEventsUseCase",
    "ListInvolvedEventsByStatusUseCase",
    "ListInvolvedEventsByTypeUseCase",
    "GetEventUseCase",
    "CreateEventUseCase",
    "UpdateEventUseCase",
    "DeleteEventUseCase",
    "AddParticipantUseCase",
    "RemoveParticipantUseCase",
]

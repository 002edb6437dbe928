from typing import TYPE_CHECKING

from ...domain.repositories.event_repository import EventRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.event import (
    ListInvolvedEventsUseCase,
    ListInvolvedEventsInRangeUseCase,
    ListOwnedEventsUseCase,
    SearchInvolvedEventsUseCase,
    ListInvolvedEventsByStatusUseCase,
    ListInvolvedEventsByTypeUseCase,
    GetEventUseCase,
    CreateEventUseCase,
    UpdateEventUseCase,
    DeleteEventUseCase,
    AddParticipantUseCase,
    RemoveParticipantUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class EventsProvider:
    """Events use case provider - registers all event-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        # Use cases that need both the event store and the identity lookup
        for use_case in (
            ListInvolvedEventsUseCase,
            ListInvolvedEventsInRangeUseCase,
            ListOwnedEventsUseCase,
            SearchInvolvedEventsUseCase,
            ListInvolvedEventsByStatusUseCase,
            ListInvolvedEventsByTypeUseCase,
            GetEventUseCase,
            CreateEventUseCase,
            UpdateEventUseCase,
            AddParticipantUseCase,
            RemoveParticipantUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    event_repository=container.get(EventRepository),
                    user_repository=container.get(UserRepository),
                ),
            )

        container.register_factory(
            DeleteEventUseCase,
            lambda: DeleteEventUseCase(event_repository=container.get(EventRepository)),
        )

from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .user import (
    GetUserUseCase,
    ListUsersUseCase,
    SearchUsersUseCase,
)
from .event import (
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

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "SearchUsersUseCase",
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

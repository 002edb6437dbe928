"""
Events API: list, search and filter the caller's events, CRUD on a single
event, and participant management.

Fixed paths (/range, /search, /owned, /status/..., /type/...) are declared
before /{event_id} so they are not captured as an event id.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from datetime import datetime
from typing import List

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends, HTTPException, Query, status

# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------
from ...application.dto.event_dto import EventRequest, EventResponse, MessageResponse
from ...application.dto.user_dto import UserResponse
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
from ...di.container import get_container
from ...domain.exceptions import CalendarError, ForbiddenError, NotFoundError
from ...domain.models.event import EventStatus, EventType

from .dependencies import get_current_user

# -----------------------------------------------------------------------------
# Router
# -----------------------------------------------------------------------------
router = APIRouter(tags=["events"])


def to_http_exception(exception: CalendarError) -> HTTPException:
    """
    Map a domain error to the HTTP error returned to the client.

    Anything that is not a CalendarError is left to the application-wide
    handler registered in main.py.
    """
    if isinstance(exception, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exception))
    if isinstance(exception, ForbiddenError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exception))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))


# -----------------------------------------------------------------------------
# Collection queries
# -----------------------------------------------------------------------------
@router.get("", response_model=List[EventResponse])
async def list_events(
    current_user: UserResponse = Depends(get_current_user),
) -> List[EventResponse]:
    """List every event the current user owns or participates in."""
    use_case = get_container().get(ListInvolvedEventsUseCase)
    try:
        return await use_case.execute(current_user.id)
    except CalendarError as e:
        raise to_http_exception(e)


@router.get("/range", response_model=List[EventResponse])
async def list_events_in_range(
    start_date: datetime = Query(..., description="Inclusive lower bound on start time"),
    end_date: datetime = Query(..., description="Inclusive upper bound on start time"),
    current_user: UserResponse = Depends(get_current_user),
) -> List[EventResponse]:
    use_case = get_container().get(ListInvolvedEventsInRangeUseCase)
    try:
        return await use_case.execute(current_user.id, start_date, end_date)
    except CalendarError as e:
        raise to_http_exception(e)


@router.get("/search", response_model=List[EventResponse])
async def search_events(
    term: str = Query(..., min_length=1),
    current_user: UserResponse = Depends(get_current_user),
) -> List[EventResponse]:
    use_case = get_container().get(SearchInvolvedEventsUseCase)
    try:
        return await use_case.execute(current_user.id, term)
    except CalendarError as e:
        raise to_http_exception(e)


@router.get("/owned", response_model=List[EventResponse])
async def list_owned_events(
    current_user: UserResponse = Depends(get_current_user),
) -> List[EventResponse]:
    use_case = get_container().get(ListOwnedEventsUseCase)
    try:
        return await use_case.execute(current_user.id)
    except CalendarError as e:
        raise to_http_exception(e)


@router.get("/status/{event_status}", response_model=List[EventResponse])
async def list_events_by_status(
    event_status: EventStatus,
    current_user: UserResponse = Depends(get_current_user),
) -> List[EventResponse]:
    use_case = get_container().get(ListInvolvedEventsByStatusUseCase)
    try:
        return await use_case.execute(current_user.id, event_status)
    except CalendarError as e:
        raise to_http_exception(e)


@router.get("/type/{event_type}", response_model=List[EventResponse])
async def list_events_by_type(
    event_type: EventType,
    current_user: UserResponse = Depends(get_current_user),
) -> List[EventResponse]:
    use_case = get_container().get(ListInvolvedEventsByTypeUseCase)
    try:
        return await use_case.execute(current_user.id, event_type)
    except CalendarError as e:
        raise to_http_exception(e)


# -----------------------------------------------------------------------------
# Single event
# -----------------------------------------------------------------------------
@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    request: EventRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> EventResponse:
    """Create an event owned by the current user."""
    use_case = get_container().get(CreateEventUseCase)
    try:
        return await use_case.execute(request, current_user.id)
    except CalendarError as e:
        raise to_http_exception(e)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> EventResponse:
    use_case = get_container().get(GetEventUseCase)
    try:
        return await use_case.execute(event_id, current_user.id)
    except CalendarError as e:
        raise to_http_exception(e)


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: str,
    request: EventRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> EventResponse:
    """
    Replace an event's fields. Only the owner may do this.
    Omitting participant_ids keeps the current participants.
    """
    use_case = get_container().get(UpdateEventUseCase)
    try:
        return await use_case.execute(event_id, request, current_user.id)
    except CalendarError as e:
        raise to_http_exception(e)


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_event(
    event_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> MessageResponse:
    use_case = get_container().get(DeleteEventUseCase)
    try:
        await use_case.execute(event_id, current_user.id)
    except CalendarError as e:
        raise to_http_exception(e)
    return MessageResponse(message="Event deleted successfully!")


# -----------------------------------------------------------------------------
# Participants
# -----------------------------------------------------------------------------
@router.post("/{event_id}/participants/{participant_id}", response_model=EventResponse)
async def add_participant(
    event_id: str,
    participant_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> EventResponse:
    use_case = get_container().get(AddParticipantUseCase)
    try:
        return await use_case.execute(event_id, participant_id, current_user.id)
    except CalendarError as e:
        raise to_http_exception(e)


@router.delete("/{event_id}/participants/{participant_id}", response_model=EventResponse)
async def remove_participant(
    event_id: str,
    participant_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> EventResponse:
    """The owner may remove anyone; a participant may remove only themself."""
    use_case = get_container().get(RemoveParticipantUseCase)
    try:
        return await use_case.execute(event_id, participant_id, current_user.id)
    except CalendarError as e:
        raise to_http_exception(e)

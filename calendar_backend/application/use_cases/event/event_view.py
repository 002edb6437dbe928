# Standard library imports
from typing import Dict, List, Sequence

# Local application imports
from ....domain.models.event import Event
from ....domain.models.user import User
from ....domain.repositories.user_repository import UserRepository
from ...dto.event_dto import EventResponse
from ..user.user_view import to_user_response


async def build_event_responses(
    events: Sequence[Event],
    user_repository: UserRepository,
) -> List[EventResponse]:
    """
    Convert events to response DTOs, preserving their order.

    Owners and participants of every event are resolved with a single batch
    lookup; users that no longer exist are left out of the participant list.
    """
    if not events:
        return []

    user_ids = set()
    for event in events:
        user_ids.add(event.owner_user_id)
        user_ids.update(event.participant_ids)

    users: Dict[str, User] = {
        user.id: user for user in await user_repository.find_by_ids(user_ids) if user.id
    }
    return [_to_event_response(event, users) for event in events]


async def build_event_response(event: Event, user_repository: UserRepository) -> EventResponse:
    responses = await build_event_responses([event], user_repository)
    return responses[0]


def _to_event_response(event: Event, users: Dict[str, User]) -> EventResponse:
    owner = users.get(event.owner_user_id)
    participant_ids = sorted(event.participant_ids)
    return EventResponse(
        id=event.id or "",
        title=event.title,
        description=event.description,
        start_time=event.start_time,
        end_time=event.end_time,
        location=event.location,
        event_type=event.event_type,
        status=event.status,
        is_all_day=event.is_all_day,
        is_recurring=event.is_recurring,
        recurrence_pattern=event.recurrence_pattern,
        owner_id=event.owner_user_id,
        owner_username=owner.username if owner else None,
        participant_ids=participant_ids,
        participants=[
            to_user_response(users[participant_id])
            for participant_id in participant_ids
            if participant_id in users
        ],
    )

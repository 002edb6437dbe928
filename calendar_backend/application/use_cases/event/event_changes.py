# Standard library imports
from typing import Iterable, Set

# Local application imports
from ....domain.models.event import Event
from ....domain.repositories.user_repository import UserRepository
from ...dto.event_dto import EventRequest


def apply_request_fields(event: Event, request: EventRequest) -> None:
    """
    Overwrite every scalar field of the event from the request.

    This is a full replace: optional fields missing from the request are
    cleared. Owner, participants and bookkeeping timestamps are left alone.
    """
    event.title = request.title
    event.description = request.description
    event.start_time = request.start_time
    event.end_time = request.end_time
    event.location = request.location
    event.event_type = request.event_type
    event.status = request.status
    event.is_all_day = request.is_all_day
    event.is_recurring = request.is_recurring
    event.recurrence_pattern = request.recurrence_pattern


async def resolve_participant_ids(user_repository: UserRepository, user_ids: Iterable[str]) -> Set[str]:
    """
    Return the subset of user_ids that belong to existing users.

    Unknown IDs are dropped; inviting someone who does not exist
    is not an error.
    """
    requested = {user_id for user_id in user_ids if user_id}
    if not requested:
        return set()
    users = await user_repository.find_by_ids(requested)
    return {user.id for user in users if user.id}

# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import ForbiddenError
from ....domain.policies.event_access import ensure_owner
from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.user_repository import UserRepository
from ....utils.datetime_utils import utc_now
from ...dto.event_dto import EventRequest, EventResponse
from ..lookups import require_event, require_user
from .event_changes import apply_request_fields, resolve_participant_ids
from .event_view import build_event_response

logger = logging.getLogger(__name__)


class UpdateEventUseCase:
    """Use case for replacing an event's fields (owner only)"""

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self.event_repository = event_repository
        self.user_repository = user_repository

    async def execute(self, event_id: str, request: EventRequest, user_id: str) -> EventResponse:
        """
        Overwrite every scalar field of the event and optionally its participants.

        request.participant_ids of None keeps the current participants; a list,
        even an empty one, replaces them with the users that exist.

        Raises:
            NotFoundError: If the event or the caller does not exist
            ForbiddenError: If the caller is not the owner
        """
        event = await require_event(self.event_repository, event_id)
        await require_user(self.user_repository, user_id)

        try:
            ensure_owner(event, user_id, "update this event")
        except ForbiddenError:
            logger.warning(f"User {user_id} attempted to update event {event_id} owned by {event.owner_user_id}")
            raise

        # Resolve before touching the event so a lookup failure leaves it intact
        participant_ids = None
        if request.participant_ids is not None:
            participant_ids = await resolve_participant_ids(self.user_repository, request.participant_ids)

        apply_request_fields(event, request)
        if participant_ids is not None:
            event.replace_participants(participant_ids)
        event.updated_at = utc_now()

        saved_event = await self.event_repository.save(event)
        logger.info(f"Updated event {saved_event.id} by owner {user_id}")
        return await build_event_response(saved_event, self.user_repository)

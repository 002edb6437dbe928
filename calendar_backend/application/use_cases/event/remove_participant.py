import logging

from ....domain.exceptions import ForbiddenError
from ....domain.policies.event_access import ensure_can_remove_participant
from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.user_repository import UserRepository
from ....utils.datetime_utils import utc_now
from ...dto.event_dto import EventResponse
from ..lookups import require_event, require_user
from .event_view import build_event_response

logger = logging.getLogger(__name__)


class RemoveParticipantUseCase:
    """Use case for removing a participant; the owner or the participant themself may do it"""

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self.event_repository = event_repository
        self.user_repository = user_repository

    async def execute(self, event_id: str, participant_id: str, user_id: str) -> EventResponse:
        """
        Remove participant_id from the event; removing a non-participant is a no-op.

        Raises:
            NotFoundError: If the event or the participant does not exist
            ForbiddenError: Unless the caller is the owner or participant_id itself
        """
        event = await require_event(self.event_repository, event_id)
        await require_user(self.user_repository, participant_id, "Participant")

        try:
            ensure_can_remove_participant(event, participant_id, user_id)
        except ForbiddenError:
            logger.warning(f"User {user_id} attempted to remove participant {participant_id} from event {event_id}")
            raise

        event.remove_participant(participant_id)
        event.updated_at = utc_now()

        saved_event = await self.event_repository.save(event)
        logger.info(f"Removed participant {participant_id} from event {event_id} (by {user_id})")
        return await build_event_response(saved_event, self.user_repository)

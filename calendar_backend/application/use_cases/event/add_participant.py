import logging

from ....domain.exceptions import ForbiddenError
from ....domain.policies.event_access import ensure_owner
from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.user_repository import UserRepository
from ....utils.datetime_utils import utc_now
from ...dto.event_dto import EventResponse
from ..lookups import require_event, require_user
from .event_view import build_event_response

logger = logging.getLogger(__name__)


class AddParticipantUseCase:
    """Use case for inviting a user to an event (owner only, idempotent)"""

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self.event_repository = event_repository
        self.user_repository = user_repository

    async def execute(self, event_id: str, participant_id: str, user_id: str) -> EventResponse:
        """
        Add participant_id to the event; adding an existing participant is a no-op.

        Raises:
            NotFoundError: If the event or the participant does not exist
            ForbiddenError: If the caller is not the owner
        """
        event = await require_event(self.event_repository, event_id)
        participant = await require_user(self.user_repository, participant_id, "Participant")

        try:
            ensure_owner(event, user_id, "add participants")
        except ForbiddenError:
            logger.warning(f"User {user_id} attempted to add participant to event {event_id}")
            raise

        event.add_participant(participant.id or participant_id)
        event.updated_at = utc_now()

        saved_event = await self.event_repository.save(event)
        logger.info(f"Added participant {participant_id} to event {event_id}")
        return await build_event_response(saved_event, self.user_repository)

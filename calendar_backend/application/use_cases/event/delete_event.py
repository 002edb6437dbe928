import logging

from ....domain.exceptions import ForbiddenError
from ....domain.policies.event_access import ensure_owner
from ....domain.repositories.event_repository import EventRepository
from ..lookups import require_event

logger = logging.getLogger(__name__)


class DeleteEventUseCase:
    def __init__(self, event_repository: EventRepository) -> None:
        self.event_repository = event_repository

    async def execute(self, event_id: str, user_id: str) -> None:
        """
        Delete an event and its participant relations (owner only)

        Raises:
            NotFoundError: If the event does not exist
            ForbiddenError: If the caller is not the owner
        """
        event = await require_event(self.event_repository, event_id)

        try:
            ensure_owner(event, user_id, "delete this event")
        except ForbiddenError:
            logger.warning(f"User {user_id} attempted to delete event {event_id} owned by {event.owner_user_id}")
            raise

        await self.event_repository.delete(event_id)
        logger.info(f"Deleted event {event_id} by owner {user_id}")

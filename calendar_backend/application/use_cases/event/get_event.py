import logging

from ....domain.exceptions import AccessDeniedError
from ....domain.policies.event_access import ensure_can_read
from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.event_dto import EventResponse
from ..lookups import require_event, require_user
from .event_view import build_event_response

logger = logging.getLogger(__name__)


class GetEventUseCase:
    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self._event_repository = event_repository
        self._user_repository = user_repository

    async def execute(self, event_id: str, user_id: str) -> EventResponse:
        """
        Get a single event visible to the caller.

        Raises:
            NotFoundError: If the event or the caller does not exist
            AccessDeniedError: If the caller is neither owner nor participant
        """
        event = await require_event(self._event_repository, event_id)
        await require_user(self._user_repository, user_id)

        try:
            ensure_can_read(event, user_id)
        except AccessDeniedError:
            logger.warning(f"User {user_id} denied read access to event {event_id}")
            raise

        return await build_event_response(event, self._user_repository)

# Standard library imports
import logging

# Local application imports
from ....domain.models.event import Event
from ....domain.repositories.event_repository import EventRepository
from ....domain.repositories.user_repository import UserRepository
from ....utils.datetime_utils import utc_now
from ...dto.event_dto import EventRequest, EventResponse
from ..lookups import require_user
from .event_changes import apply_request_fields, resolve_participant_ids
from .event_view import build_event_response

logger = logging.getLogger(__name__)


class CreateEventUseCase:
    """Use case for creating a new event owned by the caller"""

    def __init__(self, event_repository: EventRepository, user_repository: UserRepository) -> None:
        self.event_repository = event_repository
        self.user_repository = user_repository

    async def execute(self, request: EventRequest, owner_user_id: str) -> EventResponse:
        """
        Create a new event

        Args:
            request: Event fields and optional participant IDs
            owner_user_id: ID of the user creating (and owning) the event

        Returns:
            EventResponse for the persisted event

        Raises:
            NotFoundError: If the owner does not exist
        """
        owner = await require_user(self.user_repository, owner_user_id)

        created_at = utc_now()
        new_event = Event(
            id=None,  # Will be set by repository
            owner_user_id=owner.id or owner_user_id,
            title=request.title,
            start_time=request.start_time,
            end_time=request.end_time,
            created_at=created_at,
            updated_at=created_at,
        )
        apply_request_fields(new_event, request)

        # Unknown participant IDs are silently dropped, not rejected
        if request.participant_ids:
            new_event.replace_participants(
                await resolve_participant_ids(self.user_repository, request.participant_ids)
            )

        saved_event = await self.event_repository.save(new_event)
        logger.info(
            f"Created event {saved_event.id} for owner {saved_event.owner_user_id} "
            f"with {len(saved_event.participant_ids)} participant(s)"
        )
        return await build_event_response(saved_event, self.user_repository)

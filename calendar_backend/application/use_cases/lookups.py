"""Shared loaders that turn a missing user or event into NotFoundError."""

# Local application imports
from ...domain.exceptions import NotFoundError
from ...domain.models.event import Event
from ...domain.models.user import User
from ...domain.repositories.event_repository import EventRepository
from ...domain.repositories.user_repository import UserRepository


async def require_event(event_repository: EventRepository, event_id: str) -> Event:
    event = await event_repository.find_by_id(event_id)
    if event is None:
        raise NotFoundError("Event", event_id)
    return event


async def require_user(user_repository: UserRepository, user_id: str, resource: str = "User") -> User:
    user = await user_repository.find_by_id(user_id)
    if user is None:
        raise NotFoundError(resource, user_id)
    return user

"""
Event access rules.

| Operation                          | Who may perform                              |
|------------------------------------|----------------------------------------------|
| read single event                  | owner or participant                         |
| list / search events               | scoped to owner-or-participant               |
| create                             | any authenticated user (becomes owner)       |
| update / delete / add-participant  | owner only                                   |
| remove-participant                 | owner, or the participant removing themself  |

The ensure_* helpers raise before anything is mutated, so a rejected
operation never touches the stored event.
"""

from ..exceptions import AccessDeniedError, ForbiddenError
from ..models.event import Event


def can_read(event: Event, user_id: str) -> bool:
    return event.involves(user_id)


def can_modify(event: Event, user_id: str) -> bool:
    return event.is_owned_by(user_id)


def can_remove_participant(event: Event, participant_id: str, user_id: str) -> bool:
    return event.is_owned_by(user_id) or participant_id == user_id


def ensure_can_read(event: Event, user_id: str) -> None:
    if not can_read(event, user_id):
        raise AccessDeniedError()


def ensure_owner(event: Event, user_id: str, action: str) -> None:
    """Raise ForbiddenError unless user_id owns the event; action completes 'Only the event owner can ...'"""
    if not can_modify(event, user_id):
        raise ForbiddenError(f"Only the event owner can {action}")


def ensure_can_remove_participant(event: Event, participant_id: str, user_id: str) -> None:
    if not can_remove_participant(event, participant_id, user_id):
        raise ForbiddenError("Access denied")

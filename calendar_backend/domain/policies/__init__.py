from .event_access import (
    can_read,
    can_modify,
    can_remove_participant,
    ensure_can_read,
    ensure_owner,
    ensure_can_remove_participant,
)

__all__ = [
    "can_read",
    "can_modify",
    "can_remove_participant",
    "ensure_can_read",
    "ensure_owner",
    "ensure_can_remove_participant",
]

# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Set


class EventType(str, Enum):
    MEETING = "MEETING"
    APPOINTMENT = "APPOINTMENT"
    REMINDER = "REMINDER"
    BIRTHDAY = "BIRTHDAY"
    HOLIDAY = "HOLIDAY"
    PERSONAL = "PERSONAL"
    WORK = "WORK"


class EventStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"
    TENTATIVE = "TENTATIVE"


@dataclass
class Event:
    """
    Pure domain model for a calendar Event.

    The owner is fixed at creation. Participants are kept as a set of user
    IDs, separate from the owner: a user may appear in both, and the owner is
    authorized regardless of participant membership.

    start_time and end_time carry no ordering constraint. recurrence_pattern
    is stored verbatim and never interpreted.
    """
    id: Optional[str]
    owner_user_id: str
    title: str
    start_time: datetime
    end_time: datetime

    description: Optional[str] = None
    location: Optional[str] = None
    event_type: Optional[EventType] = None
    status: Optional[EventStatus] = None

    is_all_day: bool = False
    is_recurring: bool = False
    recurrence_pattern: Optional[str] = None

    participant_ids: Set[str] = field(default_factory=set)

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.owner_user_id:
            raise ValueError("Owner user ID is required")
        self.participant_ids = set(self.participant_ids or ())

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        return bool(user_id) and self.owner_user_id == user_id

    def has_participant(self, user_id: Optional[str]) -> bool:
        return bool(user_id) and user_id in self.participant_ids

    def involves(self, user_id: Optional[str]) -> bool:
        """Owner or participant - the visibility predicate for reads and listings."""
        return self.is_owned_by(user_id) or self.has_participant(user_id)

    def add_participant(self, user_id: str) -> None:
        self.participant_ids.add(user_id)

    def remove_participant(self, user_id: str) -> None:
        self.participant_ids.discard(user_id)

    def replace_participants(self, user_ids: Set[str]) -> None:
        self.participant_ids = set(user_ids)

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ...domain.models.event import EventStatus, EventType
from ...utils.datetime_utils import ensure_utc
from .user_dto import UserResponse


class EventRequest(BaseModel):
    """
    DTO for creating or fully replacing an event.

    participant_ids distinguishes "absent" from "empty":
        None -> leave the current participants untouched (update only)
        []   -> remove every participant
    Unknown IDs in the list are dropped when the event is saved.
    No ordering is enforced between start_time and end_time.
    """
    title: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    start_time: datetime
    end_time: datetime
    location: Optional[str] = Field(default=None, max_length=100)
    event_type: Optional[EventType] = None
    status: Optional[EventStatus] = None
    is_all_day: bool = False
    is_recurring: bool = False
    recurrence_pattern: Optional[str] = None
    participant_ids: Optional[List[str]] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title must not be blank")
        return value

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_to_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class EventResponse(BaseModel):
    """DTO for event response, with owner and participants resolved"""
    id: str
    title: str
    description: Optional[str] = None
    start_time: datetime
    end_time: datetime
    location: Optional[str] = None
    event_type: Optional[EventType] = None
    status: Optional[EventStatus] = None
    is_all_day: bool = False
    is_recurring: bool = False
    recurrence_pattern: Optional[str] = None

    owner_id: str
    owner_username: Optional[str] = None
    participant_ids: List[str] = Field(default_factory=list)
    participants: List[UserResponse] = Field(default_factory=list)


class MessageResponse(BaseModel):
    message: str

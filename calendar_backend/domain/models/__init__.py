from .user import User
from .event import Event, EventStatus, EventType

__all__ = ["User", "Event", "EventStatus", "EventType"]

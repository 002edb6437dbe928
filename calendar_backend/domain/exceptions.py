"""Domain errors raised by use cases and mapped to HTTP status codes by the API layer."""

from typing import Optional


class CalendarError(Exception):
    """Base class for all calendar domain errors"""


class NotFoundError(CalendarError):
    """A referenced user or event does not exist"""

    def __init__(self, resource: str, identifier: Optional[str] = None) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class ForbiddenError(CalendarError):
    """The caller lacks the relationship to the event that the operation requires"""


class AccessDeniedError(ForbiddenError):
    """The caller is neither owner nor participant of the event being read"""

    def __init__(self, message: str = "Access denied to this event") -> None:
        super().__init__(message)

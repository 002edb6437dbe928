from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse
from .event_dto import EventRequest, EventResponse, MessageResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "EventRequest",
    "EventResponse",
    "MessageResponse",
]

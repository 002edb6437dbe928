from .auth_controller import router as auth_router
from .user_controller import router as user_router
from .events_controller import router as events_router


__all__ = ["auth_router", "user_router", "events_router"]

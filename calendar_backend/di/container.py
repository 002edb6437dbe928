# Standard library imports
from typing import Optional, Tuple

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    EventsProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Application container: every provider registers into it once, in
    PROVIDERS order. Repositories look up the database handles and use case
    factories look up the repositories, so the order is load-bearing.
    """

    PROVIDERS: Tuple[type, ...] = (
        DatabaseProvider,
        RepositoryProvider,
        AuthProvider,
        UserProvider,
        EventsProvider,
    )

    def __init__(self) -> None:
        super().__init__()
        for provider in self.PROVIDERS:
            provider.register(self)


_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Return the process-wide container, building it on first use."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Forget the process-wide container; the next get_container() rebuilds it from current settings."""
    global _container
    _container = None

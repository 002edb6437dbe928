# Standard library imports
import logging
from typing import Optional

# Local application imports
from .config import get_settings


_INITIALIZED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Configure application-wide console logging once per process."""
    global _INITIALIZED
    if _INITIALIZED:
        return

    resolved_level = getattr(logging, (level or get_settings().log_level).upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(resolved_level)
    root.addHandler(console_handler)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured at level %s", logging.getLevelName(resolved_level))

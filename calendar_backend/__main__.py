"""Run the API with uvicorn: python -m calendar_backend"""

# Standard library imports
import logging

# External package imports
import uvicorn

# Local application imports
from .core.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logger.info(f"Starting calendar backend on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "calendar_backend.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

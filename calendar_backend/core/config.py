# Standard library imports
import os
from typing import Final, List, Optional


def _split_csv(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Storage Configuration
        # "mongo" uses Motor against MONGO_URI, "memory" keeps everything in-process
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "mongo").lower()
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "calendar_app")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )
        # bcrypt accepts 4..31; each step doubles hashing time
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "12"))

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # HTTP Configuration
        self.api_host: Final[str] = os.getenv("API_HOST", "127.0.0.1")
        self.api_port: Final[int] = int(os.getenv("API_PORT", "8000"))
        self.cors_origins: Final[List[str]] = _split_csv(
            os.getenv("CORS_ORIGINS", "http://localhost:4200,http://localhost:3000")
        )


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

"""
Shared pytest fixtures for calendar_backend tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from calendar_backend.domain.models.user import User
from calendar_backend.infrastructure.memory import InMemoryEventRepository, InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_calendar_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "STORAGE_BACKEND": "memory",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.storage_backend = "memory"
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.bcrypt_rounds = 4
    mock.log_level = "INFO"
    mock.cors_origins = ["http://localhost:4200"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("calendar_backend.core.config.get_settings", return_value=mock), patch(
        "calendar_backend.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def memory_backend(monkeypatch):
    """
    Run the real application wiring against the in-memory repositories.
    Settings and the DI container are rebuilt for the test and dropped after it.
    """
    from calendar_backend.core import config
    from calendar_backend.di.container import reset_container

    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("JWT_SECRET_KEY", "test_secret_key_for_testing_only")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setattr(config, "_settings", None)
    reset_container()
    yield
    reset_container()


@pytest.fixture
def alice():
    return User(id="alice-id", username="alice", email="alice@example.com", hashed_password="hashed",
                first_name="Alice", last_name="Archer")


@pytest.fixture
def bob():
    return User(id="bob-id", username="bob", email="bob@example.com", hashed_password="hashed",
                first_name="Bob", last_name="Baker")


@pytest.fixture
def carol():
    return User(id="carol-id", username="carol", email="carol@example.com", hashed_password="hashed")


@pytest.fixture
def user_repo(alice, bob, carol):
    return InMemoryUserRepository([alice, bob, carol])


@pytest.fixture
def event_repo():
    return InMemoryEventRepository()

"""
Unit tests for the dependency injection container.
"""
import pytest
from calendar_backend.application.use_cases.event import CreateEventUseCase, DeleteEventUseCase
from calendar_backend.di.base_container import BaseContainer
from calendar_backend.domain.repositories import EventRepository, UserRepository
from calendar_backend.infrastructure.memory import InMemoryEventRepository, InMemoryUserRepository


def test_unregistered_key_raises():
    container = BaseContainer()
    with pytest.raises(ValueError) as exc_info:
        container.get(CreateEventUseCase)
    assert "CreateEventUseCase" in str(exc_info.value)


def test_factories_build_fresh_instances():
    container = BaseContainer()
    container.register_factory("thing", object)
    assert container.get("thing") is not container.get("thing")


def test_memory_backend_wiring(memory_backend):
    from calendar_backend.di.container import get_container

    container = get_container()

    assert isinstance(container.get(UserRepository), InMemoryUserRepository)
    assert isinstance(container.get(EventRepository), InMemoryEventRepository)
    assert not container.is_registered("event_collection")

    create = container.get(CreateEventUseCase)
    delete = container.get(DeleteEventUseCase)
    assert create.event_repository is delete.event_repository
    assert create is not container.get(CreateEventUseCase)


def test_unknown_backend_is_rejected(memory_backend, monkeypatch):
    from calendar_backend.di.container import DIContainer

    monkeypatch.setenv("STORAGE_BACKEND", "cassandra")
    with pytest.raises(ValueError) as exc_info:
        DIContainer()
    assert "Unknown storage backend" in str(exc_info.value)

"""
Unit tests for calendar_backend.domain.policies.event_access
"""
from datetime import datetime, timezone

import pytest
from calendar_backend.domain.exceptions import AccessDeniedError, ForbiddenError
from calendar_backend.domain.models.event import Event
from calendar_backend.domain.policies import (
    can_read,
    can_modify,
    can_remove_participant,
    ensure_can_read,
    ensure_owner,
    ensure_can_remove_participant,
)


@pytest.fixture
def event():
    start = datetime(2030, 1, 1, 9, tzinfo=timezone.utc)
    return Event(
        id="evt-1",
        owner_user_id="owner",
        title="Planning",
        start_time=start,
        end_time=start,
        participant_ids={"guest"},
    )


class TestPredicates:

    def test_read_requires_involvement(self, event):
        assert can_read(event, "owner")
        assert can_read(event, "guest")
        assert not can_read(event, "stranger")
        assert not can_read(event, "")

    def test_modify_requires_ownership(self, event):
        assert can_modify(event, "owner")
        assert not can_modify(event, "guest")

    def test_owner_may_remove_anyone(self, event):
        assert can_remove_participant(event, "guest", "owner")
        assert can_remove_participant(event, "stranger", "owner")

    def test_participant_may_only_remove_self(self, event):
        assert can_remove_participant(event, "guest", "guest")
        assert not can_remove_participant(event, "owner", "guest")
        assert not can_remove_participant(event, "guest", "stranger")


class TestEnsureHelpers:

    def test_ensure_can_read_raises_access_denied(self, event):
        ensure_can_read(event, "guest")
        with pytest.raises(AccessDeniedError) as exc_info:
            ensure_can_read(event, "stranger")
        assert str(exc_info.value) == "Access denied to this event"

    def test_access_denied_is_forbidden(self):
        assert issubclass(AccessDeniedError, ForbiddenError)

    def test_ensure_owner_message_names_action(self, event):
        ensure_owner(event, "owner", "delete this event")
        with pytest.raises(ForbiddenError) as exc_info:
            ensure_owner(event, "guest", "delete this event")
        assert str(exc_info.value) == "Only the event owner can delete this event"

    def test_ensure_can_remove_participant(self, event):
        ensure_can_remove_participant(event, "guest", "guest")
        with pytest.raises(ForbiddenError):
            ensure_can_remove_participant(event, "guest", "stranger")

"""Tests for request and record models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from skill_exchange.models import (
    Connection,
    ConnectionCreate,
    ConnectionStatus,
    ConnectionStatusUpdate,
    Skill,
    SkillCreate,
    can_transition,
)


def test_skill_create_accepts_camel_case(alice):
    """Test parsing a skill payload from JSON keys."""
    skill = SkillCreate.model_validate(alice)

    assert skill.name == "Alice"
    assert skill.can_teach == "Guitar"
    assert skill.wants_to_learn == "Piano"


@pytest.mark.parametrize("field", ["name", "canTeach", "wantsToLearn"])
def test_skill_create_requires_every_field(alice, field):
    """Test that each skill field is required."""
    del alice[field]

    with pytest.raises(ValidationError) as exc_info:
        SkillCreate.model_validate(alice)

    errors = exc_info.value.errors()
    assert [e["loc"] for e in errors] == [(field,)]
    assert errors[0]["type"] == "missing"


@pytest.mark.parametrize("value", ["", 42, None, ["Guitar"]])
def test_skill_create_rejects_empty_or_non_string(alice, value):
    """Test that skill fields must be non-empty strings."""
    alice["canTeach"] = value

    with pytest.raises(ValidationError):
        SkillCreate.model_validate(alice)


def test_skill_create_ignores_server_fields(alice):
    """Test that id and createdAt in a payload are dropped."""
    alice.update(id=99, createdAt="2020-01-01T00:00:00Z")

    dumped = SkillCreate.model_validate(alice).model_dump()

    assert set(dumped) == {"name", "can_teach", "wants_to_learn"}


def test_skill_serializes_camel_case():
    """Test that records go out with camelCase keys."""
    skill = Skill(
        id=1,
        name="Alice",
        can_teach="Guitar",
        wants_to_learn="Piano",
        created_at=datetime.now(timezone.utc),
    )

    data = skill.model_dump(by_alias=True)

    assert set(data) == {"id", "name", "canTeach", "wantsToLearn", "createdAt"}


def test_connection_create_message_optional():
    """Test that message may be omitted."""
    data = ConnectionCreate.model_validate({"fromSkillId": 1, "toSkillId": 2})

    assert data.message is None


@pytest.mark.parametrize("value", ["1", 1.5, True, None])
def test_connection_create_requires_integer_ids(value):
    """Test that skill ids must be real integers."""
    with pytest.raises(ValidationError):
        ConnectionCreate.model_validate({"fromSkillId": value, "toSkillId": 2})


def test_connection_create_ignores_status():
    """Test that a client cannot pre-set the status."""
    data = ConnectionCreate.model_validate(
        {"fromSkillId": 1, "toSkillId": 2, "status": "accepted"}
    )

    assert "status" not in data.model_dump()


def test_connection_defaults_to_pending():
    connection = Connection(
        id=1, from_skill_id=1, to_skill_id=2, created_at=datetime.now(timezone.utc)
    )

    assert connection.status is ConnectionStatus.PENDING


@pytest.mark.parametrize("status", ["accepted", "rejected"])
def test_status_update_accepts_decisions(status):
    update = ConnectionStatusUpdate.model_validate({"status": status})

    assert update.status.value == status


@pytest.mark.parametrize("status", ["pending", "maybe", "", None])
def test_status_update_rejects_other_values(status):
    """Test that only accepted/rejected are valid updates."""
    with pytest.raises(ValidationError):
        ConnectionStatusUpdate.model_validate({"status": status})


def test_transitions_only_leave_pending():
    """Test the connection status state machine."""
    pending, accepted, rejected = (
        ConnectionStatus.PENDING,
        ConnectionStatus.ACCEPTED,
        ConnectionStatus.REJECTED,
    )

    assert can_transition(pending, accepted)
    assert can_transition(pending, rejected)
    assert not can_transition(pending, pending)
    for terminal in (accepted, rejected):
        assert terminal.is_terminal
        for target in ConnectionStatus:
            assert not can_transition(terminal, target)

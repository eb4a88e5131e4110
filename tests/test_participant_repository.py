"""Tests for the participant persistence helpers."""

from __future__ import annotations

from datetime import datetime

import pytest
from sqlalchemy.orm import Session, sessionmaker

from domain.errors import AlreadyExistsError, NotFoundError
from repositories.participant_repository import (
    fetch_participant,
    insert_participant,
    lock_participants,
    update_participant_rating,
)


def _insert(session: Session, username: str) -> int:
    participant = insert_participant(
        session,
        username=username,
        rating=1000,
        created_at=datetime(2026, 1, 1, 12, 0, 0),
    )
    return participant.id


def test_lock_participants_returns_rows_by_id(session_factory: sessionmaker[Session]) -> None:
    with session_factory() as session, session.begin():
        first_id = _insert(session, "alice")
        second_id = _insert(session, "bob")

        locked = lock_participants(session, (second_id, first_id))

        assert sorted(locked) == [first_id, second_id]
        assert locked[second_id].username == "bob"


def test_lock_participants_reports_missing_id(session_factory: sessionmaker[Session]) -> None:
    with session_factory() as session, session.begin():
        first_id = _insert(session, "alice")

        with pytest.raises(NotFoundError) as exc_info:
            lock_participants(session, (first_id, 404))

    assert exc_info.value.key == 404


def test_update_participant_rating_persists(session_factory: sessionmaker[Session]) -> None:
    with session_factory() as session, session.begin():
        participant_id = _insert(session, "alice")
        update_participant_rating(session, participant_id, -12)

    with session_factory() as session:
        assert fetch_participant(session, participant_id).rating == -12


def test_unique_index_violation_becomes_already_exists(session_factory: sessionmaker[Session]) -> None:
    with session_factory() as session, session.begin():
        _insert(session, "alice")

    with pytest.raises(AlreadyExistsError):
        with session_factory() as session, session.begin():
            _insert(session, "alice")

"""Shared fixtures: one SQLite ledger database per test."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from db import create_db_engine, create_session_factory
from domain.common import ParticipantRecord
from repositories.participant_repository import update_participant_rating
from repositories.repository import ensure_ledger_schema, to_participant_record
from services import MatchService, ParticipantService, StatsService


@pytest.fixture
def db_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'ledger.db'}"


@pytest.fixture
def engine(db_url: str) -> Iterator[Engine]:
    engine = create_db_engine(db_url)
    ensure_ledger_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return create_session_factory(engine)


@pytest.fixture
def participant_service(session_factory: sessionmaker[Session]) -> ParticipantService:
    return ParticipantService(session_factory)


@pytest.fixture
def match_service(session_factory: sessionmaker[Session]) -> MatchService:
    return MatchService(session_factory)


@pytest.fixture
def stats_service(session_factory: sessionmaker[Session]) -> StatsService:
    return StatsService(session_factory)


@pytest.fixture
def seed_participant(
    session_factory: sessionmaker[Session],
    participant_service: ParticipantService,
) -> Callable[..., ParticipantRecord]:
    """Register a participant, optionally moving it to a starting rating."""

    def _seed(username: str, rating: int | None = None) -> ParticipantRecord:
        record = participant_service.register(username)
        if rating is None:
            return record
        with session_factory() as session, session.begin():
            participant = update_participant_rating(session, record.id, rating)
            return to_participant_record(participant)

    return _seed

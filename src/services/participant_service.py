"""Participant registration, lookup and leaderboard."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session, sessionmaker

from domain.common import ParticipantRecord
from domain.config import LedgerConfig
from domain.errors import AlreadyExistsError, ConflictError, InvalidArgumentError
from repositories.match_repository import participant_has_matches
from repositories.participant_repository import (
    delete_participant,
    fetch_participant,
    fetch_participant_by_username,
    fetch_participants,
    fetch_top_participants,
    insert_participant,
    participant_exists_by_username,
)
from repositories.repository import to_participant_record

logger = logging.getLogger(__name__)


class ParticipantService:
    """Registry of participants. Ratings are read here but only written by match recording."""

    def __init__(self, session_factory: sessionmaker[Session], config: LedgerConfig | None = None) -> None:
        self._session_factory = session_factory
        self.config = config or LedgerConfig.default()

    def _validate_username(self, username: object) -> str:
        if not isinstance(username, str) or not username.strip():
            raise InvalidArgumentError("Username is required")
        min_length = self.config.username_min_length
        max_length = self.config.username_max_length
        if not min_length <= len(username) <= max_length:
            raise InvalidArgumentError(
                f"Username must be between {min_length} and {max_length} characters"
            )
        return username

    def register(self, username: str) -> ParticipantRecord:
        """Create a participant at the configured initial rating."""
        username = self._validate_username(username)
        with self._session_factory() as session, session.begin():
            if participant_exists_by_username(session, username):
                raise AlreadyExistsError(username)
            participant = insert_participant(
                session,
                username=username,
                rating=self.config.elo.initial_rating,
                created_at=datetime.now(UTC).replace(tzinfo=None),
            )
            record = to_participant_record(participant)
        logger.info("registered participant id=%s username=%s", record.id, record.username)
        return record

    def get(self, participant_id: int) -> ParticipantRecord:
        with self._session_factory() as session:
            return to_participant_record(fetch_participant(session, participant_id))

    def get_by_username(self, username: str) -> ParticipantRecord:
        with self._session_factory() as session:
            return to_participant_record(fetch_participant_by_username(session, username))

    def exists_by_username(self, username: str) -> bool:
        with self._session_factory() as session:
            return participant_exists_by_username(session, username)

    def list_all(self) -> list[ParticipantRecord]:
        with self._session_factory() as session:
            return [to_participant_record(participant) for participant in fetch_participants(session)]

    def delete(self, participant_id: int) -> None:
        """Remove a participant that has never played a recorded match."""
        with self._session_factory() as session, session.begin():
            fetch_participant(session, participant_id)
            if participant_has_matches(session, participant_id):
                raise ConflictError(
                    f"Participant {participant_id} has recorded matches and cannot be deleted"
                )
            delete_participant(session, participant_id)
        logger.info("deleted participant id=%s", participant_id)

    def get_leaderboard(self, limit: int | None = None) -> list[ParticipantRecord]:
        """Top participants by rating; a non-positive limit yields an empty list."""
        if limit is None:
            limit = self.config.leaderboard_default_limit
        with self._session_factory() as session:
            return [
                to_participant_record(participant)
                for participant in fetch_top_participants(session, limit)
            ]

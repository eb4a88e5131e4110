"""Match recording and match history."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session, sessionmaker

from domain.common import MatchRecord
from domain.config import LedgerConfig
from domain.elo.calculator import compute_updated_ratings
from domain.errors import InvalidArgumentError
from repositories.match_repository import (
    fetch_match,
    fetch_matches,
    fetch_matches_for_participant,
    insert_match,
)
from repositories.participant_repository import (
    fetch_participant,
    lock_participants,
    update_participant_rating,
)
from repositories.repository import to_match_record

logger = logging.getLogger(__name__)


class MatchService:
    """Records head-to-head results and applies the resulting rating changes."""

    def __init__(self, session_factory: sessionmaker[Session], config: LedgerConfig | None = None) -> None:
        self._session_factory = session_factory
        self.config = config or LedgerConfig.default()

    def record_match(self, participant_a_id: int, participant_b_id: int, winner_id: int) -> MatchRecord:
        """Persist one match and both rating updates as a single transaction.

        Ids are resolved in the order a, b, winner before any rule is checked,
        so an unknown winner reports NotFoundError rather than a mismatch.
        """
        with self._session_factory() as session, session.begin():
            fetch_participant(session, participant_a_id)
            fetch_participant(session, participant_b_id)
            fetch_participant(session, winner_id)

            if winner_id != participant_a_id and winner_id != participant_b_id:
                logger.warning(
                    "rejected match a=%s b=%s: winner=%s is not a participant",
                    participant_a_id,
                    participant_b_id,
                    winner_id,
                )
                raise InvalidArgumentError("winner must be one of the match participants")
            if participant_a_id == participant_b_id:
                logger.warning("rejected match: participant %s cannot play itself", participant_a_id)
                raise InvalidArgumentError("a participant cannot play a match against itself")

            locked = lock_participants(session, (participant_a_id, participant_b_id))
            participant_a = locked[participant_a_id]
            participant_b = locked[participant_b_id]
            pre_rating_a = participant_a.rating
            pre_rating_b = participant_b.rating

            match = insert_match(
                session,
                participant_a=participant_a,
                participant_b=participant_b,
                winner=locked[winner_id],
                played_at=datetime.now(UTC).replace(tzinfo=None),
            )

            new_rating_a, new_rating_b = compute_updated_ratings(
                pre_rating_a,
                pre_rating_b,
                winner_id == participant_a_id,
                self.config.elo,
            )
            update_participant_rating(session, participant_a_id, new_rating_a)
            update_participant_rating(session, participant_b_id, new_rating_b)

            record = to_match_record(match)

        logger.info(
            "recorded match id=%s a=%s (%s -> %s) b=%s (%s -> %s) winner=%s",
            record.id,
            participant_a_id,
            pre_rating_a,
            new_rating_a,
            participant_b_id,
            pre_rating_b,
            new_rating_b,
            winner_id,
        )
        return record

    def list_matches(self) -> list[MatchRecord]:
        with self._session_factory() as session:
            return [to_match_record(match) for match in fetch_matches(session)]

    def get_match(self, match_id: int) -> MatchRecord:
        with self._session_factory() as session:
            return to_match_record(fetch_match(session, match_id))

    def list_matches_for_participant(self, participant_id: int) -> list[MatchRecord]:
        """Matches the participant played in, newest first."""
        with self._session_factory() as session:
            fetch_participant(session, participant_id)
            return [
                to_match_record(match)
                for match in fetch_matches_for_participant(session, participant_id)
            ]

"""Derived per-participant statistics."""

from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from domain.common import ParticipantStats
from repositories.match_repository import (
    count_matches_for_participant,
    count_wins_for_participant,
)
from repositories.participant_repository import fetch_participant


def calculate_win_rate(wins: int, total_matches: int) -> float:
    """Wins as a percentage of matches played; 0.0 when nothing was played."""
    if total_matches <= 0:
        return 0.0
    return wins / total_matches * 100


class StatsService:
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get_stats(self, participant_id: int) -> ParticipantStats:
        with self._session_factory() as session:
            participant = fetch_participant(session, participant_id)
            total_matches = count_matches_for_participant(session, participant_id)
            wins = count_wins_for_participant(session, participant_id)

        return ParticipantStats(
            participant_id=participant.id,
            username=participant.username,
            rating=participant.rating,
            total_matches=total_matches,
            wins=wins,
            losses=total_matches - wins,
            win_rate=calculate_win_rate(wins, total_matches),
        )

"""Schema bootstrap and row-to-record conversion for the ledger tables."""

from __future__ import annotations

from sqlalchemy.engine import Engine

from domain.common import MatchRecord, ParticipantRecord
from models import Base, Match, Participant


def ensure_ledger_schema(engine: Engine) -> None:
    """Create participants/matches tables and their indexes if they do not exist."""
    Base.metadata.create_all(bind=engine, tables=[Participant.__table__, Match.__table__])


def to_participant_record(participant: Participant) -> ParticipantRecord:
    return ParticipantRecord(
        id=participant.id,
        username=participant.username,
        rating=participant.rating,
        created_at=participant.created_at,
    )


def to_match_record(match: Match) -> MatchRecord:
    return MatchRecord(
        id=match.id,
        participant_a=to_participant_record(match.participant_a),
        participant_b=to_participant_record(match.participant_b),
        winner=to_participant_record(match.winner),
        played_at=match.played_at,
    )

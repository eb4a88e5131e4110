"""Persistence helpers for recorded matches using SQLAlchemy."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import ColumnElement, exists, func, or_, select
from sqlalchemy.orm import Session

from domain.errors import NotFoundError
from models import Match, Participant


def _involves(participant_id: int) -> ColumnElement[bool]:
    return or_(Match.participant_a_id == participant_id, Match.participant_b_id == participant_id)


def insert_match(
    session: Session,
    *,
    participant_a: Participant,
    participant_b: Participant,
    winner: Participant,
    played_at: datetime,
) -> Match:
    """Insert one match row and assign its id."""
    match = Match(
        participant_a=participant_a,
        participant_b=participant_b,
        winner=winner,
        played_at=played_at,
    )
    session.add(match)
    session.flush()
    return match


def fetch_match(session: Session, match_id: int) -> Match:
    match = session.get(Match, match_id)
    if match is None:
        raise NotFoundError("Match", "id", match_id)
    return match


def fetch_matches(session: Session) -> list[Match]:
    """Fetch all matches in recording (id) order."""
    statement = select(Match).order_by(Match.id)
    return list(session.execute(statement).scalars())


def fetch_matches_for_participant(session: Session, participant_id: int) -> list[Match]:
    """Fetch one participant's matches, newest first."""
    statement = (
        select(Match)
        .where(_involves(participant_id))
        .order_by(Match.played_at.desc(), Match.id.desc())
    )
    return list(session.execute(statement).scalars())


def count_matches_for_participant(session: Session, participant_id: int) -> int:
    statement = select(func.count(Match.id)).where(_involves(participant_id))
    return int(session.scalar(statement) or 0)


def count_wins_for_participant(session: Session, participant_id: int) -> int:
    statement = select(func.count(Match.id)).where(Match.winner_id == participant_id)
    return int(session.scalar(statement) or 0)


def participant_has_matches(session: Session, participant_id: int) -> bool:
    statement = select(exists().where(_involves(participant_id)))
    return bool(session.scalar(statement))

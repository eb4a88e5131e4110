"""Persistence helpers for participants using SQLAlchemy."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from domain.errors import AlreadyExistsError, ConflictError, NotFoundError
from models import Participant


def fetch_participant(session: Session, participant_id: int) -> Participant:
    """Load one participant by id or raise NotFoundError."""
    participant = session.get(Participant, participant_id)
    if participant is None:
        raise NotFoundError("Participant", "id", participant_id)
    return participant


def fetch_participant_by_username(session: Session, username: str) -> Participant:
    """Load one participant by exact (case-sensitive) username."""
    statement = select(Participant).where(Participant.username == username)
    participant = session.execute(statement).scalar_one_or_none()
    if participant is None:
        raise NotFoundError("Participant", "username", username)
    return participant


def participant_exists_by_username(session: Session, username: str) -> bool:
    statement = select(exists().where(Participant.username == username))
    return bool(session.scalar(statement))


def lock_participants(session: Session, participant_ids: Sequence[int]) -> dict[int, Participant]:
    """Load participants with row locks, in ascending id order.

    Locks are taken in a fixed order so two transactions locking an
    overlapping pair cannot deadlock. Backends without row locks ignore
    FOR UPDATE.
    """
    wanted = sorted(set(participant_ids))
    statement = (
        select(Participant)
        .where(Participant.id.in_(wanted))
        .order_by(Participant.id)
        .with_for_update()
        .execution_options(populate_existing=True)
    )
    locked = {participant.id: participant for participant in session.execute(statement).scalars()}
    for participant_id in participant_ids:
        if participant_id not in locked:
            raise NotFoundError("Participant", "id", participant_id)
    return locked


def insert_participant(
    session: Session,
    *,
    username: str,
    rating: int,
    created_at: datetime,
) -> Participant:
    """Insert one participant; a unique-index violation becomes AlreadyExistsError."""
    participant = Participant(username=username, rating=rating, created_at=created_at)
    session.add(participant)
    try:
        session.flush()
    except IntegrityError as exc:
        raise AlreadyExistsError(username) from exc
    return participant


def update_participant_rating(session: Session, participant_id: int, new_rating: int) -> Participant:
    """Set one participant's rating. The only write path for the rating column."""
    participant = fetch_participant(session, participant_id)
    participant.rating = int(new_rating)
    session.flush()
    return participant


def fetch_participants(session: Session) -> list[Participant]:
    """Fetch all participants in id order."""
    statement = select(Participant).order_by(Participant.id)
    return list(session.execute(statement).scalars())


def fetch_top_participants(session: Session, limit: int) -> list[Participant]:
    """Fetch the highest-rated participants; ties keep registration (id) order."""
    if limit <= 0:
        return []
    statement = (
        select(Participant)
        .order_by(Participant.rating.desc(), Participant.id.asc())
        .limit(limit)
    )
    return list(session.execute(statement).scalars())


def delete_participant(session: Session, participant_id: int) -> None:
    """Delete one participant; a foreign-key violation from match history becomes ConflictError."""
    participant = fetch_participant(session, participant_id)
    session.delete(participant)
    try:
        session.flush()
    except IntegrityError as exc:
        raise ConflictError(
            f"Participant {participant_id} has recorded matches and cannot be deleted"
        ) from exc

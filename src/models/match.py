"""matches table model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base
from models.participant import Participant


class Match(Base):
    """One recorded head-to-head result. Rows are never updated."""

    __tablename__ = "matches"
    __table_args__ = (
        CheckConstraint(
            "winner_id = participant_a_id OR winner_id = participant_b_id",
            name="ck_matches_winner_is_participant",
        ),
        CheckConstraint(
            "participant_a_id <> participant_b_id",
            name="ck_matches_distinct_participants",
        ),
        Index("idx_matches_participant_a", "participant_a_id"),
        Index("idx_matches_participant_b", "participant_b_id"),
        Index("idx_matches_winner", "winner_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    participant_a_id: Mapped[int] = mapped_column(ForeignKey("participants.id"), nullable=False)
    participant_b_id: Mapped[int] = mapped_column(ForeignKey("participants.id"), nullable=False)
    winner_id: Mapped[int] = mapped_column(ForeignKey("participants.id"), nullable=False)
    played_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )

    participant_a: Mapped[Participant] = relationship(foreign_keys=[participant_a_id], lazy="joined")
    participant_b: Mapped[Participant] = relationship(foreign_keys=[participant_b_id], lazy="joined")
    winner: Mapped[Participant] = relationship(foreign_keys=[winner_id], lazy="joined")

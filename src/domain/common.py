"""Shared record types returned by ledger services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ParticipantRecord:
    """Snapshot of one participant row."""

    id: int
    username: str
    rating: int
    created_at: datetime


@dataclass(frozen=True)
class MatchRecord:
    """Snapshot of one match with its participants resolved."""

    id: int
    participant_a: ParticipantRecord
    participant_b: ParticipantRecord
    winner: ParticipantRecord
    played_at: datetime

    @property
    def loser(self) -> ParticipantRecord:
        if self.winner.id == self.participant_a.id:
            return self.participant_b
        return self.participant_a


@dataclass(frozen=True)
class ParticipantStats:
    """Derived win/loss summary for one participant."""

    participant_id: int
    username: str
    rating: int
    total_matches: int
    wins: int
    losses: int
    win_rate: float

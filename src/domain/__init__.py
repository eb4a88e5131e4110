"""Ledger domain modules."""

from domain.common import MatchRecord, ParticipantRecord, ParticipantStats
from domain.errors import (
    AlreadyExistsError,
    ConflictError,
    InvalidArgumentError,
    LedgerError,
    NotFoundError,
)

__all__ = [
    "AlreadyExistsError",
    "ConflictError",
    "InvalidArgumentError",
    "LedgerError",
    "MatchRecord",
    "NotFoundError",
    "ParticipantRecord",
    "ParticipantStats",
]

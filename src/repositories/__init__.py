"""Database repository helpers."""

from repositories.repository import (
    ensure_ledger_schema,
    to_match_record,
    to_participant_record,
)

__all__ = [
    "ensure_ledger_schema",
    "to_match_record",
    "to_participant_record",
]

"""Ledger operations exposed to adapters."""

from services.match_service import MatchService
from services.participant_service import ParticipantService
from services.stats_service import StatsService

__all__ = ["MatchService", "ParticipantService", "StatsService"]

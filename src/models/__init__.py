"""ORM models."""

from models.base import Base
from models.match import Match
from models.participant import Participant

__all__ = [
    "Base",
    "Match",
    "Participant",
]

"""Elo rating modules."""

from domain.elo.calculator import (
    DEFAULT_ELO_PARAMETERS,
    EloParameters,
    calculate_expected_score,
    compute_updated_ratings,
    round_rating,
)

__all__ = [
    "DEFAULT_ELO_PARAMETERS",
    "EloParameters",
    "calculate_expected_score",
    "compute_updated_ratings",
    "round_rating",
]

"""Head-to-head Elo rating update."""

from __future__ import annotations

from dataclasses import dataclass
from math import floor


@dataclass(frozen=True)
class EloParameters:
    initial_rating: int = 1000
    k_factor: float = 32.0
    scale_factor: float = 400.0


DEFAULT_ELO_PARAMETERS = EloParameters()


def calculate_expected_score(rating: float, opponent_rating: float, scale_factor: float) -> float:
    """Compute the Elo expected score for one side."""
    return 1.0 / (1.0 + 10.0 ** ((opponent_rating - rating) / scale_factor))


def round_rating(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(floor(value + 0.5))


def compute_updated_ratings(
    rating_a: int,
    rating_b: int,
    a_won: bool,
    params: EloParameters = DEFAULT_ELO_PARAMETERS,
) -> tuple[int, int]:
    """Return the post-match ratings of both sides.

    Each side is rounded independently, so the pair is only conserved to
    within one point. Ratings are not clamped and may go negative.
    """
    expected_a = calculate_expected_score(rating_a, rating_b, params.scale_factor)
    expected_b = calculate_expected_score(rating_b, rating_a, params.scale_factor)

    score_a = 1.0 if a_won else 0.0
    score_b = 1.0 - score_a

    new_rating_a = round_rating(rating_a + params.k_factor * (score_a - expected_a))
    new_rating_b = round_rating(rating_b + params.k_factor * (score_b - expected_b))
    return new_rating_a, new_rating_b

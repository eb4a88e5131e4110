"""Tests for derived participant statistics."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from domain.common import ParticipantRecord
from domain.errors import NotFoundError
from services import MatchService, StatsService
from services.stats_service import calculate_win_rate

SeedParticipant = Callable[..., ParticipantRecord]


def test_win_rate_without_matches_is_zero() -> None:
    assert calculate_win_rate(0, 0) == 0.0


def test_stats_for_new_participant(
    stats_service: StatsService,
    seed_participant: SeedParticipant,
) -> None:
    alice = seed_participant("alice")

    stats = stats_service.get_stats(alice.id)

    assert stats.participant_id == alice.id
    assert stats.username == "alice"
    assert stats.rating == 1000
    assert stats.total_matches == 0
    assert stats.wins == 0
    assert stats.losses == 0
    assert stats.win_rate == 0.0


def test_stats_count_both_sides_of_a_match(
    stats_service: StatsService,
    match_service: MatchService,
    seed_participant: SeedParticipant,
) -> None:
    alice = seed_participant("alice")
    bob = seed_participant("bob")
    charlie = seed_participant("charlie")

    match_service.record_match(alice.id, bob.id, alice.id)
    match_service.record_match(bob.id, alice.id, alice.id)
    match_service.record_match(charlie.id, alice.id, charlie.id)
    last = match_service.record_match(bob.id, charlie.id, bob.id)

    alice_stats = stats_service.get_stats(alice.id)
    assert alice_stats.total_matches == 3
    assert alice_stats.wins == 2
    assert alice_stats.losses == 1
    assert alice_stats.win_rate == pytest.approx(200 / 3)

    bob_stats = stats_service.get_stats(bob.id)
    assert bob_stats.total_matches == 3
    assert bob_stats.wins == 1
    assert bob_stats.rating == last.participant_a.rating


def test_stats_are_stable_without_writes(
    stats_service: StatsService,
    match_service: MatchService,
    seed_participant: SeedParticipant,
) -> None:
    alice = seed_participant("alice")
    bob = seed_participant("bob")
    match_service.record_match(alice.id, bob.id, bob.id)

    assert stats_service.get_stats(alice.id) == stats_service.get_stats(alice.id)


def test_stats_for_unknown_participant_raises_not_found(stats_service: StatsService) -> None:
    with pytest.raises(NotFoundError, match="11"):
        stats_service.get_stats(11)

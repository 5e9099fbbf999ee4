"""
Multi-round scheduling: history handling, determinism and input validation.
"""
from __future__ import annotations

import pytest

from team_rounds.config import Config
from team_rounds.errors import EmptyPopulation, InvalidConfiguration
from team_rounds.indices.similarity import history_similarity
from team_rounds.players.types import Player
from team_rounds.schedule.generator import generate_rounds, run_schedule

POPULATION = [str(i) for i in range(1, 11)]


def test_each_round_covers_population():
    rounds = generate_rounds(POPULATION, 4, 3, 3, config=Config(seed=5))
    assert len(rounds) == 4
    for r in rounds:
        assert sorted(p.name for p in r.players()) == sorted(POPULATION)
        assert [len(t) for t in r.teams] == [3, 3, 3, 1]


def test_first_round_unsearched_later_rounds_scored_against_all_history(counting):
    shuffler = counting(11)
    schedule = run_schedule(["A", "B", "C", "D"], 3, 2, 2, shuffler=shuffler, config=Config(attempt_limit=5))

    first, second, third = schedule.rounds
    assert first.attempts == 1
    assert first.similarity is None
    # Four players in two pairs can never be fully disjoint from history,
    # so the later rounds spend the whole budget.
    assert second.attempts == 5
    assert third.attempts == 5
    assert shuffler.calls == 11

    assert second.similarity == pytest.approx(history_similarity(second.round, [first.round]))
    assert third.similarity == pytest.approx(history_similarity(third.round, [first.round, second.round]))


def test_seeded_schedule_is_reproducible():
    a = generate_rounds(POPULATION, 3, 2, 4, config=Config(seed=42))
    b = generate_rounds(POPULATION, 3, 2, 4, config=Config(seed=42))
    assert a == b


def test_injected_shuffler_overrides_seed(scripted):
    shuffler = scripted([["D", "C", "B", "A"]])
    rounds = generate_rounds(["A", "B", "C", "D"], 1, 1, 4, shuffler=shuffler, config=Config(seed=1))
    assert rounds[0].teams[0].names() == ("A", "B", "C", "D")


def test_schedule_log_metadata():
    schedule = run_schedule(POPULATION, 2, 3, 3, config=Config(seed=0))
    assert schedule.population_size == 10
    assert (schedule.team_count, schedule.team_size) == (3, 3)
    assert [e.round_id for e in schedule.rounds] == [0, 1]


def test_accepts_player_objects():
    rounds = generate_rounds([Player("x"), Player("y")], 1, 2, 1, config=Config(seed=0))
    assert len(rounds[0]) == 2


def test_empty_population():
    with pytest.raises(EmptyPopulation):
        generate_rounds([], 1, 1, 1)


@pytest.mark.parametrize(
    "round_count, team_count, team_size",
    [
        (0, 2, 2),
        (1, 0, 2),
        (1, 2, 0),
        (1, 1, 5),
        (1, 3, 2),
    ],
)
def test_invalid_configuration(round_count, team_count, team_size):
    with pytest.raises(InvalidConfiguration):
        generate_rounds(["A", "B", "C", "D"], round_count, team_count, team_size)


def test_duplicate_identifiers_rejected():
    with pytest.raises(InvalidConfiguration):
        generate_rounds(["A", "B", "A"], 1, 1, 1)

"""
Best-of-N search for a single round.
"""
from __future__ import annotations

import pytest

from team_rounds.config import Config
from team_rounds.players.types import as_players
from team_rounds.schedule.optimizer import optimize_round
from team_rounds.schedule.types import Round

PLAYERS = as_players(["A", "B", "C", "D"])


def test_first_round_accepted_after_one_shuffle(scripted):
    shuffler = scripted([["B", "C", "A", "D"], ["A", "B", "C", "D"]])
    entry = optimize_round(PLAYERS, 2, 2, (), shuffler, Config())

    assert shuffler.calls == 1
    assert entry.attempts == 1
    assert entry.similarity is None
    assert entry.round == Round.from_names([["B", "C"], ["A", "D"]])


def test_keeps_lowest_similarity_candidate(scripted):
    history = (Round.from_names([["A", "B"], ["C", "D"]]),)
    shuffler = scripted(
        [
            ["A", "B", "C", "D"],  # 1.0
            ["A", "C", "B", "D"],  # 0.5
            ["A", "D", "B", "C"],  # 0.5, tie keeps the earlier one
        ]
    )
    entry = optimize_round(PLAYERS, 2, 2, history, shuffler, Config(attempt_limit=3, acceptance_threshold=0.0))

    assert entry.attempts == 3
    assert entry.similarity == pytest.approx(0.5)
    assert entry.round == Round.from_names([["A", "C"], ["B", "D"]])


def test_scores_against_every_prior_round(scripted):
    history = (
        Round.from_names([["A", "B"], ["C", "D"]]),
        Round.from_names([["A", "C"], ["B", "D"]]),
    )
    # Against the last round alone the first candidate would already score 0.5.
    shuffler = scripted([["A", "B", "C", "D"], ["A", "D", "B", "C"]])
    entry = optimize_round(PLAYERS, 2, 2, history, shuffler, Config(attempt_limit=2, acceptance_threshold=0.0))

    assert entry.round == Round.from_names([["A", "D"], ["B", "C"]])
    assert entry.similarity == pytest.approx(0.5)


def test_stops_once_below_threshold(scripted):
    history = (Round.from_names([["A", "B"], ["C", "D"]]),)
    shuffler = scripted([["A", "B", "C", "D"], ["A", "C", "B", "D"], ["A", "D", "B", "C"]])
    entry = optimize_round(PLAYERS, 2, 2, history, shuffler, Config(attempt_limit=50, acceptance_threshold=0.6))

    assert shuffler.calls == 2
    assert entry.attempts == 2
    assert entry.similarity == pytest.approx(0.5)


def test_exhausted_budget_still_returns_a_round(scripted):
    history = (Round.from_names([["A", "B"], ["C", "D"]]),)
    shuffler = scripted([["B", "A", "D", "C"]])
    entry = optimize_round(PLAYERS, 2, 2, history, shuffler, Config(attempt_limit=7))

    assert shuffler.calls == 7
    assert entry.attempts == 7
    assert entry.similarity == 1.0
    assert entry.round == history[0]


def test_attempt_limit_of_one(counting):
    history = (Round.from_names([["A", "B"], ["C", "D"]]),)
    shuffler = counting(3)
    entry = optimize_round(PLAYERS, 2, 2, history, shuffler, Config(attempt_limit=1))

    assert shuffler.calls == 1
    assert entry.attempts == 1
    assert set(entry.round.players()) == set(PLAYERS)

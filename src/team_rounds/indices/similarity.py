"""Overlap scores between teams and rounds.

All scores lie in [0, 1]: 1.0 means identical composition, 0.0 means nothing
in common. Every function here is symmetric in its two arguments.
"""
from __future__ import annotations

import numpy as np

from team_rounds.schedule.types import History, Round, Team


def team_similarity(a: Team, b: Team) -> float:
    """Fraction of shared members; 0.0 when the team sizes differ."""
    if len(a) != len(b):
        return 0.0
    n = len(a)
    if n == 0:
        return 1.0
    shared = len(set(a.players).intersection(b.players))
    return shared / n


def round_similarity(r1: Round, r2: Round) -> float:
    """Mean team similarity over canonically aligned teams; 0.0 when team counts differ."""
    if len(r1) != len(r2):
        return 0.0
    if len(r1) == 0:
        return 1.0
    scores = [team_similarity(a, b) for a, b in zip(r1.teams, r2.teams)]
    return float(np.mean(scores))


def history_similarity(candidate: Round, history: History) -> float:
    """Mean round similarity of ``candidate`` against every round in ``history``."""
    if not history:
        return 0.0
    return float(np.mean([round_similarity(candidate, prior) for prior in history]))

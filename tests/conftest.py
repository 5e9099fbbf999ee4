from __future__ import annotations

from typing import List, Sequence

import numpy as np
import pytest

from team_rounds.players.types import Player
from team_rounds.schedule.shuffler import NumpyShuffler


class ScriptedShuffler:
    """Returns the given orders one after another, cycling when exhausted."""

    def __init__(self, orders: Sequence[Sequence[str]]) -> None:
        self.orders = [list(o) for o in orders]
        self.calls = 0

    def shuffle(self, players: Sequence[Player]) -> List[Player]:
        order = self.orders[self.calls % len(self.orders)]
        self.calls += 1
        return [Player(name) for name in order]


class CountingShuffler(NumpyShuffler):
    def __init__(self, seed: int) -> None:
        super().__init__(np.random.default_rng(seed))
        self.calls = 0

    def shuffle(self, players: Sequence[Player]) -> List[Player]:
        self.calls += 1
        return super().shuffle(players)


@pytest.fixture
def scripted():
    return ScriptedShuffler


@pytest.fixture
def counting():
    return CountingShuffler

"""
Shuffle sources for the round search.

Anything with a ``shuffle(players) -> list`` method can drive the optimizer;
seeding the numpy generator makes a whole schedule replayable.
"""
from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

import numpy as np

from team_rounds.players.types import Player


class Shuffler(Protocol):
    def shuffle(self, players: Sequence[Player]) -> List[Player]:
        ...


class NumpyShuffler:
    """Uniform permutations drawn from a numpy Generator."""

    def __init__(self, rng: np.random.Generator) -> None:
        self._rng = rng

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    def shuffle(self, players: Sequence[Player]) -> List[Player]:
        order = self._rng.permutation(len(players))
        return [players[int(i)] for i in order]


def make_shuffler(seed: Optional[int] = None) -> NumpyShuffler:
    return NumpyShuffler(np.random.default_rng(seed))

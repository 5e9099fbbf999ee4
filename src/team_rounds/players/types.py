from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Union

from team_rounds.errors import InvalidConfiguration

PlayerLike = Union["Player", str]


@dataclass(frozen=True, order=True)
class Player:
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidConfiguration("player identifiers must be non-empty")

    def __str__(self) -> str:
        return self.name


def as_player(value: PlayerLike) -> Player:
    return value if isinstance(value, Player) else Player(str(value))


def as_players(values: Iterable[PlayerLike]) -> List[Player]:
    return [as_player(v) for v in values]


def ensure_unique(players: Sequence[Player]) -> None:
    seen = set()
    duplicates = []
    for p in players:
        if p in seen and p.name not in duplicates:
            duplicates.append(p.name)
        seen.add(p)
    if duplicates:
        raise InvalidConfiguration(f"duplicate participant identifiers: {', '.join(duplicates)}")

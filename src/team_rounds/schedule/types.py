from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

from team_rounds.errors import InvalidConfiguration
from team_rounds.players.types import Player, PlayerLike, as_players


@dataclass(frozen=True)
class Team:
    """
    Unordered set of players. Members are kept sorted, so equality and hashing
    depend only on who is in the team.
    """

    players: Tuple[Player, ...] = ()

    def __post_init__(self) -> None:
        members = tuple(sorted(self.players))
        for prev, cur in zip(members, members[1:]):
            if prev == cur:
                raise InvalidConfiguration(f"player {cur} appears twice in one team")
        object.__setattr__(self, "players", members)

    @classmethod
    def from_names(cls, names: Iterable[PlayerLike]) -> "Team":
        return cls(tuple(as_players(names)))

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)

    def __contains__(self, player: object) -> bool:
        return player in self.players

    def names(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.players)

    def sort_key(self) -> Tuple[int, Tuple[str, ...]]:
        # Larger teams first, then by member identifiers.
        return (-len(self.players), self.names())

    def __str__(self) -> str:
        return ",".join(self.names())


@dataclass(frozen=True)
class Round:
    """
    Teams of one round, held in canonical order (see Team.sort_key) so two
    rounds with the same teams compare equal whatever order they were built in.
    """

    teams: Tuple[Team, ...] = ()

    def __post_init__(self) -> None:
        teams = tuple(sorted(self.teams, key=Team.sort_key))
        seen = set()
        for team in teams:
            overlap = seen.intersection(team.players)
            if overlap:
                shared = ", ".join(sorted(p.name for p in overlap))
                raise InvalidConfiguration(f"players assigned to more than one team: {shared}")
            seen.update(team.players)
        object.__setattr__(self, "teams", teams)

    @classmethod
    def from_names(cls, teams: Iterable[Iterable[PlayerLike]]) -> "Round":
        return cls(tuple(Team.from_names(t) for t in teams))

    def __len__(self) -> int:
        return len(self.teams)

    def __iter__(self) -> Iterator[Team]:
        return iter(self.teams)

    def players(self) -> Tuple[Player, ...]:
        return tuple(p for team in self.teams for p in team)

    def __str__(self) -> str:
        return "\n".join(str(team) for team in self.teams)


History = Sequence[Round]

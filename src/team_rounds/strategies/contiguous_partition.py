from __future__ import annotations

from typing import List, Sequence

from team_rounds.errors import InvalidConfiguration
from team_rounds.players.types import PlayerLike, as_players
from team_rounds.schedule.types import Round, Team


def partition(population: Sequence[PlayerLike], team_count: int, team_size: int) -> Round:
    """
    Cut an already shuffled population into ``team_count`` consecutive teams of
    ``team_size``. Any leftover players form one extra remainder team.
    """
    players = as_players(population)
    n_assigned = team_count * team_size
    if n_assigned > len(players):
        raise InvalidConfiguration(
            f"{team_count} teams of {team_size} need more than {len(players)} participants"
        )

    teams: List[Team] = []
    for t in range(team_count):
        start = t * team_size
        teams.append(Team(tuple(players[start : start + team_size])))

    remaining = players[n_assigned:]
    if remaining:
        teams.append(Team(tuple(remaining)))
    return Round(tuple(teams))

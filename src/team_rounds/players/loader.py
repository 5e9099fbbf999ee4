from __future__ import annotations

from pathlib import Path
from typing import List

from team_rounds.errors import EmptyPopulation, InvalidConfiguration
from team_rounds.players.types import Player, ensure_unique


def numbered_population(n_players: int) -> List[Player]:
    """Participants named "1" .. "n_players"."""
    if n_players < 1:
        raise EmptyPopulation("participant count must be at least 1")
    return [Player(str(i)) for i in range(1, n_players + 1)]


def load_population(path: str | Path) -> List[Player]:
    """
    Read one participant per line. Whitespace inside a line is dropped and
    blank lines are skipped.
    """
    p = Path(path)
    if not p.is_file():
        raise InvalidConfiguration(f"participant file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidConfiguration(f"cannot read participant file {p}: {exc}") from exc

    players = []
    for line in lines:
        name = "".join(line.split())
        if name:
            players.append(Player(name))
    if not players:
        raise EmptyPopulation(f"participant file {p} has no entries")
    ensure_unique(players)
    return players

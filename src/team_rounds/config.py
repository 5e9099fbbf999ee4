from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from team_rounds.errors import EmptyPopulation, InvalidConfiguration


@dataclass(frozen=True)
class Config:
    # Round search
    attempt_limit: int = 100
    acceptance_threshold: float = 0.001

    # Shuffle source
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.attempt_limit < 1:
            raise InvalidConfiguration(f"attempt_limit must be at least 1, got {self.attempt_limit}")
        if not 0.0 <= self.acceptance_threshold <= 1.0:
            raise InvalidConfiguration(
                f"acceptance_threshold must be within [0, 1], got {self.acceptance_threshold}"
            )


@dataclass(frozen=True)
class TeamShape:
    team_count: int
    team_size: int

    def remainder(self, population_size: int) -> int:
        return population_size - self.team_count * self.team_size


def load_config(path: str | Path) -> Config:
    """
    Load search parameters from YAML. Missing keys keep their defaults.
    """
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise InvalidConfiguration(f"{p}: expected a mapping at the top level")
    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidConfiguration(f"{p}: unknown config keys {unknown}")
    return Config(**data)


def validate_team_shape(population_size: int, team_count: int, team_size: int) -> TeamShape:
    if population_size == 0:
        raise EmptyPopulation("population must contain at least one participant")
    if team_size < 1:
        raise InvalidConfiguration("team size must be at least 1")
    if team_count < 1:
        raise InvalidConfiguration("team count must be at least 1")
    if team_size > population_size:
        raise InvalidConfiguration(
            f"team size {team_size} exceeds the number of participants ({population_size})"
        )
    if team_count * team_size > population_size:
        raise InvalidConfiguration(
            f"{team_count} teams of {team_size} need more than {population_size} participants"
        )
    return TeamShape(team_count=team_count, team_size=team_size)


def resolve_team_shape(
    population_size: int,
    team_count: Optional[int] = None,
    team_size: Optional[int] = None,
) -> TeamShape:
    """
    Derive the missing half of (team_count, team_size) by integer division.

    Exactly one of the two must be given.
    """
    if (team_count is None) == (team_size is None):
        raise InvalidConfiguration("exactly one of team count or team size must be set")
    if population_size == 0:
        raise EmptyPopulation("population must contain at least one participant")

    if team_size is not None:
        if team_size < 1:
            raise InvalidConfiguration("team size must be at least 1")
        team_count = population_size // team_size
    else:
        if team_count < 1:
            raise InvalidConfiguration("team count must be at least 1")
        team_size = population_size // team_count
    return validate_team_shape(population_size, team_count, team_size)

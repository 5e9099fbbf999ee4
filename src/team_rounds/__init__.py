"""Split a population into teams over several rounds, avoiding repeated compositions."""
from __future__ import annotations

from team_rounds.config import Config, TeamShape, resolve_team_shape
from team_rounds.errors import EmptyPopulation, InvalidConfiguration, TeamRoundsError
from team_rounds.indices.similarity import history_similarity, round_similarity, team_similarity
from team_rounds.players.types import Player
from team_rounds.schedule.generator import generate_rounds, run_schedule
from team_rounds.schedule.types import Round, Team
from team_rounds.strategies.contiguous_partition import partition

__all__ = [
    "Config",
    "EmptyPopulation",
    "InvalidConfiguration",
    "Player",
    "Round",
    "Team",
    "TeamRoundsError",
    "TeamShape",
    "generate_rounds",
    "history_similarity",
    "partition",
    "resolve_team_shape",
    "round_similarity",
    "run_schedule",
    "team_similarity",
]

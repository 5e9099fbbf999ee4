from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from team_rounds.config import Config, validate_team_shape
from team_rounds.errors import EmptyPopulation, InvalidConfiguration
from team_rounds.log.schema import RoundLog, ScheduleLog
from team_rounds.players.types import PlayerLike, as_players, ensure_unique
from team_rounds.schedule.optimizer import optimize_round
from team_rounds.schedule.shuffler import Shuffler, make_shuffler
from team_rounds.schedule.types import Round

logger = logging.getLogger(__name__)


def run_schedule(
    population: Sequence[PlayerLike],
    round_count: int,
    team_count: int,
    team_size: int,
    shuffler: Optional[Shuffler] = None,
    config: Optional[Config] = None,
) -> ScheduleLog:
    """
    Generate ``round_count`` rounds, each searched against all rounds accepted
    before it.
    """
    config = config or Config()
    players = as_players(population)
    if not players:
        raise EmptyPopulation("population must contain at least one participant")
    if round_count < 1:
        raise InvalidConfiguration(f"round count must be at least 1, got {round_count}")
    ensure_unique(players)
    validate_team_shape(len(players), team_count, team_size)

    if shuffler is None:
        shuffler = make_shuffler(config.seed)

    history: List[Round] = []
    logs: List[RoundLog] = []
    for round_id in range(round_count):
        entry = optimize_round(
            players,
            team_count,
            team_size,
            tuple(history),
            shuffler,
            config,
            round_id=round_id,
        )
        if entry.similarity is None:
            logger.info("round %d accepted without search", round_id + 1)
        else:
            logger.info(
                "round %d: similarity %.4f after %d attempts",
                round_id + 1,
                entry.similarity,
                entry.attempts,
            )
        history.append(entry.round)
        logs.append(entry)

    return ScheduleLog(
        team_count=team_count,
        team_size=team_size,
        population_size=len(players),
        rounds=logs,
    )


def generate_rounds(
    population: Sequence[PlayerLike],
    round_count: int,
    team_count: int,
    team_size: int,
    shuffler: Optional[Shuffler] = None,
    config: Optional[Config] = None,
) -> List[Round]:
    return run_schedule(population, round_count, team_count, team_size, shuffler, config).accepted_rounds()

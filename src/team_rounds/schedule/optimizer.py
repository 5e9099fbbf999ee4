from __future__ import annotations

import logging
from typing import Optional, Sequence

from team_rounds.config import Config
from team_rounds.indices.similarity import history_similarity
from team_rounds.log.schema import RoundLog
from team_rounds.players.types import Player
from team_rounds.schedule.shuffler import Shuffler
from team_rounds.schedule.types import History, Round
from team_rounds.strategies.contiguous_partition import partition

logger = logging.getLogger(__name__)


def _candidate(players: Sequence[Player], team_count: int, team_size: int, shuffler: Shuffler) -> Round:
    shuffled = shuffler.shuffle(players)
    logger.debug("shuffled: %s", [p.name for p in shuffled])
    return partition(shuffled, team_count, team_size)


def optimize_round(
    players: Sequence[Player],
    team_count: int,
    team_size: int,
    history: History,
    shuffler: Shuffler,
    config: Config,
    round_id: int = 0,
) -> RoundLog:
    """
    Best-of-N random search for one round.

    The first round has nothing to differ from and is accepted after a single
    shuffle. Later rounds sample up to ``config.attempt_limit`` candidates and
    keep the one with the lowest mean similarity to every earlier round,
    stopping early once that score drops below ``config.acceptance_threshold``.
    """
    if not history:
        return RoundLog(
            round_id=round_id,
            round=_candidate(players, team_count, team_size, shuffler),
            attempts=1,
            similarity=None,
        )

    best_round: Optional[Round] = None
    best_similarity = float("inf")
    attempts = 0
    for attempts in range(1, config.attempt_limit + 1):
        candidate = _candidate(players, team_count, team_size, shuffler)
        similarity = history_similarity(candidate, history)
        logger.debug("round %d attempt %d: similarity %.4f", round_id, attempts, similarity)
        if similarity < best_similarity:
            best_similarity = similarity
            best_round = candidate
        if best_similarity < config.acceptance_threshold:
            break
    else:
        logger.debug(
            "round %d: attempt limit %d reached, keeping best similarity %.4f",
            round_id,
            config.attempt_limit,
            best_similarity,
        )

    return RoundLog(round_id=round_id, round=best_round, attempts=attempts, similarity=best_similarity)

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from team_rounds.schedule.types import Round


@dataclass(frozen=True)
class RoundLog:
    round_id: int
    round: Round
    attempts: int
    # Mean similarity to all earlier rounds; None for the first round.
    similarity: Optional[float]

    def to_dict(self) -> dict:
        return {
            "round_id": self.round_id,
            "teams": [list(team.names()) for team in self.round.teams],
            "attempts": self.attempts,
            "similarity": self.similarity,
        }


@dataclass(frozen=True)
class ScheduleLog:
    team_count: int
    team_size: int
    population_size: int
    rounds: List[RoundLog]

    def accepted_rounds(self) -> List[Round]:
        return [entry.round for entry in self.rounds]

    def to_dict(self) -> dict:
        return {
            "team_count": self.team_count,
            "team_size": self.team_size,
            "population_size": self.population_size,
            "rounds": [entry.to_dict() for entry in self.rounds],
        }

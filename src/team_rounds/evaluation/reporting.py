from __future__ import annotations

import json
import os
from typing import Dict, List, Sequence

import pandas as pd

from team_rounds.log.schema import ScheduleLog
from team_rounds.schedule.types import Round, Team


def format_team(team: Team) -> str:
    return ",".join(team.names())


def format_round(round_: Round) -> str:
    return "\n".join(format_team(team) for team in round_.teams)


def format_rounds(rounds: Sequence[Round]) -> str:
    # Blank line between rounds.
    return "\n\n".join(format_round(r) for r in rounds)


def rounds_to_dataframe(schedule: ScheduleLog) -> pd.DataFrame:
    """
    One row per team: round, team position, size, members and the round's
    similarity to earlier rounds.
    """
    rows: List[Dict[str, object]] = []
    for entry in schedule.rounds:
        for team_id, team in enumerate(entry.round.teams):
            rows.append(
                {
                    "round_id": entry.round_id,
                    "team_id": team_id,
                    "size": len(team),
                    "members": format_team(team),
                    "attempts": entry.attempts,
                    "similarity": entry.similarity,
                }
            )
    if not rows:
        return pd.DataFrame()
    return pd.DataFrame(rows)


def save_rounds_csv(schedule: ScheduleLog, outdir: str) -> str:
    os.makedirs(outdir, exist_ok=True)
    path = os.path.join(outdir, "rounds.csv")
    rounds_to_dataframe(schedule).to_csv(path, index=False)
    return path


def save_schedule_json(schedule: ScheduleLog, outdir: str) -> str:
    os.makedirs(outdir, exist_ok=True)
    path = os.path.join(outdir, "schedule.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(schedule.to_dict(), f, indent=2, ensure_ascii=False)
    return path


def summarize_schedule(schedule: ScheduleLog) -> str:
    lines = [
        f"participants: {schedule.population_size}",
        f"teams: {schedule.team_count} x {schedule.team_size}",
    ]
    for entry in schedule.rounds:
        similarity = "n/a" if entry.similarity is None else f"{entry.similarity:.3f}"
        lines.append(f"  round {entry.round_id + 1}: similarity {similarity}, attempts {entry.attempts}")
    return "\n".join(lines)

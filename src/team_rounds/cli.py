from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys
from typing import List, Optional

from team_rounds.config import Config, load_config, resolve_team_shape
from team_rounds.errors import TeamRoundsError
from team_rounds.evaluation.reporting import format_round, save_rounds_csv, save_schedule_json
from team_rounds.players.loader import load_population, numbered_population
from team_rounds.schedule.generator import run_schedule
from team_rounds.viz.plots import plot_similarity

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="team-rounds", description="Make teams")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "-f", "--file", metavar="FILEPATH", help="File containing one player name per line."
    )
    source.add_argument(
        "-n",
        "--count",
        type=int,
        metavar="NUMBER_OF_PLAYERS",
        help="Number of players. Use this if numbering each player is good enough.",
    )

    shape = parser.add_mutually_exclusive_group(required=True)
    shape.add_argument("-t", "--teams", type=int, metavar="NUMBER_OF_TEAMS", help="Number of teams to make.")
    shape.add_argument("-s", "--size", type=int, metavar="TEAM_SIZE", help="Number of players in each team.")

    parser.add_argument(
        "-r", "--rounds", type=int, default=1, metavar="NUMBER_OF_ROUNDS", help="Number of rounds to generate."
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Print debug information verbosely.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible rounds.")
    parser.add_argument("--config", type=str, default=None, help="YAML file with search parameters.")
    parser.add_argument("--attempts", type=int, default=None, help="Candidates sampled per round.")
    parser.add_argument(
        "--threshold", type=float, default=None, help="Stop searching once similarity drops below this."
    )
    parser.add_argument("--outdir", type=str, default=None, help="Also write CSV, JSON and a plot here.")
    return parser


def _resolve_config(args: argparse.Namespace) -> Config:
    config = load_config(args.config) if args.config else Config()
    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.attempts is not None:
        overrides["attempt_limit"] = args.attempts
    if args.threshold is not None:
        overrides["acceptance_threshold"] = args.threshold
    return dataclasses.replace(config, **overrides) if overrides else config


def run(args: argparse.Namespace) -> None:
    config = _resolve_config(args)
    if args.file is not None:
        players = load_population(args.file)
    else:
        players = numbered_population(args.count)
    shape = resolve_team_shape(len(players), team_count=args.teams, team_size=args.size)

    logger.info("n_rounds: %d", args.rounds)
    logger.info("n_players: %d", len(players))
    logger.info("n_teams: %d", shape.team_count)
    logger.info("team_size: %d", shape.team_size)
    logger.debug("ids: %s", [p.name for p in players])

    schedule = run_schedule(players, args.rounds, shape.team_count, shape.team_size, config=config)
    for entry in schedule.rounds:
        print(format_round(entry.round) + "\n")

    if args.outdir:
        outdir = os.path.abspath(args.outdir)
        save_rounds_csv(schedule, outdir)
        save_schedule_json(schedule, outdir)
        plot_similarity(schedule, outdir)
        logger.info("wrote outputs to %s", outdir)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        run(args)
    except TeamRoundsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

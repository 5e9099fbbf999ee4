from __future__ import annotations

import os

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from team_rounds.log.schema import ScheduleLog


def _save(fig: plt.Figure, outdir: str, filename: str) -> str:
    os.makedirs(outdir, exist_ok=True)
    path = os.path.join(outdir, filename)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path


def plot_similarity(schedule: ScheduleLog, outdir: str) -> str:
    """Bar chart of each round's mean similarity to the rounds before it."""
    labels = [f"R{entry.round_id + 1}" for entry in schedule.rounds]
    values = [0.0 if entry.similarity is None else entry.similarity for entry in schedule.rounds]
    attempts = [entry.attempts for entry in schedule.rounds]

    fig, axes = plt.subplots(1, 2, figsize=(12, 4))
    axes[0].bar(labels, values, color="#4C78A8")
    axes[0].set_ylim(0.0, 1.0)
    axes[0].set_title("Similarity to earlier rounds")
    axes[0].set_ylabel("mean similarity")

    axes[1].bar(labels, attempts, color="#F58518")
    axes[1].set_title("Candidates sampled")
    axes[1].set_ylabel("attempts")

    return _save(fig, outdir, "similarity.png")

"""
nn_feature_select.plot
======================
Visualization helpers for greedy search traces.
"""

from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

from .dataset import format_feature_set
from .search import SearchResult, SearchRound


__all__ = ["plot_round_candidates", "plot_search_trace"]


def plot_search_trace(
    result: SearchResult,
    *,
    title: str | None = None,
    ax: Optional[plt.Axes] = None,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Bar chart of the accuracy reached after every round.

    The starting accuracy (no features for forward selection, all features
    for backward elimination) is drawn as a dashed line.  The round whose
    subset is the overall best, if any, is highlighted in red.

    Parameters
    ----------
    result : SearchResult
        Output of :func:`~nn_feature_select.forward_selection` or
        :func:`~nn_feature_select.backward_elimination`.
    title : str, optional
    ax : matplotlib Axes, optional
    save_path : str, optional

    Returns
    -------
    matplotlib.figure.Figure
    """
    rounds  = result.rounds
    labels  = [format_feature_set(r.subset) for r in rounds]
    scores  = [r.accuracy for r in rounds]
    colors  = ["#C44E52" if r.subset == result.best_subset else "#4C72B0"
               for r in rounds]

    if ax is None:
        fig, ax = plt.subplots(figsize=(max(8, len(rounds) * 0.6), 4))
    else:
        fig = ax.get_figure()

    bars = ax.bar(range(len(rounds)), scores, color=colors, edgecolor="white", linewidth=0.5)
    ax.set_xticks(range(len(rounds)))
    ax.set_xticklabels(labels, rotation=60, ha="right", fontsize=8)
    ax.set_xlabel("Round", fontsize=12)
    ax.set_ylabel("Accuracy (%)", fontsize=12)
    ax.set_ylim(0, 105)
    ax.axhline(result.initial_accuracy, color="grey", linestyle="--", linewidth=1)
    if title is None:
        title = f"{result.direction.capitalize()} search trace"
    ax.set_title(title, fontsize=13)

    for bar, score in zip(bars, scores):
        ax.text(
            bar.get_x() + bar.get_width() / 2,
            bar.get_height() + 1,
            f"{score:.1f}",
            ha="center", va="bottom", fontsize=7,
        )

    patch = mpatches.Patch(
        color="#C44E52",
        label=f"Best: {format_feature_set(result.best_subset)} "
              f"({result.best_accuracy:.1f}%)",
    )
    ax.legend(handles=[patch], fontsize=9)

    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
    return fig


def plot_round_candidates(
    round_: SearchRound,
    *,
    title: str | None = None,
    ax: Optional[plt.Axes] = None,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Bar chart of every candidate evaluated in one round.

    The candidate the round settled on is highlighted in red.

    Returns
    -------
    matplotlib.figure.Figure
    """
    labels = [format_feature_set(s) for s, _ in round_.candidates]
    scores = [acc for _, acc in round_.candidates]
    colors = ["#C44E52" if s == round_.subset else "#4C72B0"
              for s, _ in round_.candidates]

    if ax is None:
        fig, ax = plt.subplots(figsize=(max(6, len(labels) * 0.5), 4))
    else:
        fig = ax.get_figure()

    ax.bar(range(len(labels)), scores, color=colors, edgecolor="white", linewidth=0.5)
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels, rotation=60, ha="right", fontsize=8)
    ax.set_ylabel("Accuracy (%)", fontsize=12)
    ax.set_ylim(0, 105)
    ax.axhline(round_.previous_accuracy, color="grey", linestyle="--", linewidth=1)
    ax.set_title(title or f"Round {round_.index} candidates", fontsize=13)

    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
    return fig

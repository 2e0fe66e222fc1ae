"""
nn_feature_select.search
========================
Greedy wrapper search over feature subsets.

Two hill-climbing directions are provided, both using
:func:`~nn_feature_select.metric.evaluate` as the objective:

**Forward selection**
    Start from no features.  Each round tries adding every unused feature
    and keeps the addition with the highest accuracy, until every feature
    has been added (N rounds).

**Backward elimination**
    Start from all features.  Each round tries removing every remaining
    feature and keeps the removal with the highest accuracy, until a single
    feature is left (N - 1 rounds).

The round winner is accepted even when it is worse than the previous
round, so the search walks through local maxima instead of stopping at
them.  The best subset over *every* candidate evaluated is tracked
separately and is what the search reports.  Both the round winner and the
global best use a strict ``>`` comparison, so among equal accuracies the
first candidate seen (lowest feature index) wins.

Progress is reported through two optional callbacks rather than printed:

``on_candidate(subset, accuracy)``
    after every evaluation, with the candidate subset as a tuple of
    0-based indices in the order features were added.
``on_round(round_)``
    after every round, with the :class:`SearchRound` just completed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np

from .dataset import check_dataset
from .metric import evaluate


__all__ = [
    "SearchResult",
    "SearchRound",
    "backward_elimination",
    "forward_selection",
    "run_search",
]


CandidateCallback = Callable[[tuple, float], None]
RoundCallback = Callable[["SearchRound"], None]

DIRECTIONS = ("forward", "backward")


@dataclass(frozen=True)
class SearchRound:
    """One round of a greedy search.

    Attributes
    ----------
    index : int
        1-based round number.
    candidates : list of (tuple of int, float)
        Every subset evaluated this round with its accuracy, in evaluation
        order.
    feature : int
        Feature added (forward) or removed (backward) this round.
    subset : tuple of int
        Current subset after the round.
    accuracy : float
        Accuracy of ``subset``.
    previous_accuracy : float
        Accuracy of the current subset before the round.
    """

    index: int
    candidates: list
    feature: int
    subset: tuple
    accuracy: float
    previous_accuracy: float

    @property
    def decreased(self) -> bool:
        """True if the accepted subset is worse than the previous one."""
        return self.accuracy < self.previous_accuracy


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a greedy search.

    ``best_subset`` / ``best_accuracy`` is the best candidate seen over the
    whole search, which is generally not the subset the search ended on
    (``final_subset``).
    """

    direction: str
    best_subset: tuple
    best_accuracy: float
    initial_subset: tuple
    initial_accuracy: float
    rounds: list = field(default_factory=list)

    @property
    def final_subset(self) -> tuple:
        if not self.rounds:
            return self.initial_subset
        return self.rounds[-1].subset

    @property
    def n_evaluations(self) -> int:
        return sum(len(r.candidates) for r in self.rounds)


# ---------------------------------------------------------------------------
# Public functions
# ---------------------------------------------------------------------------

def forward_selection(
    data: np.ndarray,
    n_features: int | None = None,
    *,
    on_candidate: Optional[CandidateCallback] = None,
    on_round: Optional[RoundCallback] = None,
) -> SearchResult:
    """Greedy forward selection.

    Parameters
    ----------
    data : np.ndarray, shape (n_instances, n_features + 1)
        Label-first dataset, normally already normalized.
    n_features : int, optional
        Number of features.  Inferred from ``data`` if ``None``.
    on_candidate, on_round : callable, optional
        Progress callbacks, see the module docstring.

    Returns
    -------
    SearchResult
    """
    n_features = check_dataset(data, n_features)

    current: tuple = ()
    current_acc = evaluate(data, current)
    initial_acc = current_acc
    tracker = _BestTracker()
    rounds = []

    while len(current) < n_features:
        candidates = [current + (f,) for f in range(n_features) if f not in current]
        winner, winner_acc, scored = _run_round(data, candidates, tracker, on_candidate)

        round_ = SearchRound(
            index=len(rounds) + 1,
            candidates=scored,
            feature=winner[-1],
            subset=winner,
            accuracy=winner_acc,
            previous_accuracy=current_acc,
        )
        rounds.append(round_)
        if on_round is not None:
            on_round(round_)

        current, current_acc = winner, winner_acc

    return SearchResult(
        direction="forward",
        best_subset=tracker.subset,
        best_accuracy=tracker.accuracy,
        initial_subset=(),
        initial_accuracy=initial_acc,
        rounds=rounds,
    )


def backward_elimination(
    data: np.ndarray,
    n_features: int | None = None,
    *,
    on_candidate: Optional[CandidateCallback] = None,
    on_round: Optional[RoundCallback] = None,
) -> SearchResult:
    """Greedy backward elimination.

    The full feature set is scored first and seeds the global best.  The
    search never produces an empty subset.

    Parameters and return value are as for :func:`forward_selection`.
    """
    n_features = check_dataset(data, n_features)

    current = tuple(range(n_features))
    current_acc = evaluate(data, current)
    initial_acc = current_acc
    tracker = _BestTracker()
    tracker.offer(current, current_acc)
    rounds = []

    while len(current) > 1:
        removals = list(current)
        candidates = [tuple(g for g in current if g != f) for f in removals]
        winner, winner_acc, scored = _run_round(data, candidates, tracker, on_candidate)
        removed = removals[candidates.index(winner)]

        round_ = SearchRound(
            index=len(rounds) + 1,
            candidates=scored,
            feature=removed,
            subset=winner,
            accuracy=winner_acc,
            previous_accuracy=current_acc,
        )
        rounds.append(round_)
        if on_round is not None:
            on_round(round_)

        current, current_acc = winner, winner_acc

    return SearchResult(
        direction="backward",
        best_subset=tracker.subset,
        best_accuracy=tracker.accuracy,
        initial_subset=tuple(range(n_features)),
        initial_accuracy=initial_acc,
        rounds=rounds,
    )


def run_search(
    data: np.ndarray,
    direction: str = "forward",
    n_features: int | None = None,
    **callbacks,
) -> SearchResult:
    """Run :func:`forward_selection` or :func:`backward_elimination`."""
    if direction == "forward":
        return forward_selection(data, n_features, **callbacks)
    if direction == "backward":
        return backward_elimination(data, n_features, **callbacks)
    raise ValueError(
        f"direction must be one of {DIRECTIONS}, got {direction!r}."
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

class _BestTracker:
    """Best (subset, accuracy) over every candidate offered, first wins ties."""

    def __init__(self):
        self.subset = ()
        self.accuracy = -np.inf

    def offer(self, subset: tuple, accuracy: float):
        if accuracy > self.accuracy:
            self.subset = subset
            self.accuracy = accuracy


def _run_round(data, candidates, tracker, on_candidate):
    """Score ``candidates`` in order and return the round winner.

    Returns ``(winner_subset, winner_accuracy, [(subset, accuracy), ...])``.
    """
    round_best = _BestTracker()
    scored = []
    for subset in candidates:
        acc = evaluate(data, subset)
        scored.append((subset, acc))
        if on_candidate is not None:
            on_candidate(subset, acc)
        round_best.offer(subset, acc)
        tracker.offer(subset, acc)
    return round_best.subset, round_best.accuracy, scored

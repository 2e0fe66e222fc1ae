"""
nn_feature_select.selector
==========================
Scikit-learn compatible estimator wrapping the greedy nearest-neighbor
feature search.

The estimator follows the standard sklearn API:

    selector = NearestNeighborFeatureSelector(direction="backward")
    selector.fit(X_train, y_train)
    X_reduced = selector.transform(X_train)

It also supports ``set_output(transform="pandas")`` if pandas is installed.
"""

from __future__ import annotations

import numpy as np
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_is_fitted

from .dataset import format_feature_set, make_dataset
from .metric import default_accuracy, evaluate
from .preprocessing import normalize
from .search import DIRECTIONS, run_search


__all__ = ["NearestNeighborFeatureSelector"]


class NearestNeighborFeatureSelector(TransformerMixin, BaseEstimator):
    """Greedy wrapper feature selector for binary classification.

    Candidate feature subsets are scored by the leave-one-out accuracy of a
    1-nearest-neighbor classifier (Euclidean distance).  The subsets are
    explored by greedy forward selection or backward elimination, and the
    best subset seen anywhere during the search is selected.

    Parameters
    ----------
    direction : {'forward', 'backward'}, default='forward'
        Search direction.
    standardize : bool, default=True
        Rescale each feature to mean 0 and standard deviation 1 before
        searching.  The input ``X`` is never modified.
    verbose : int, default=0
        Verbosity level (0 = silent, 1 = per round, 2 = every candidate).

    Attributes
    ----------
    selected_features_ : tuple of int
        Sorted indices of the selected features.
    accuracy_ : float
        Leave-one-out accuracy (percent) of the selected subset.
    baseline_accuracy_ : float
        Leave-one-out accuracy (percent) using all features.
    default_accuracy_ : float
        Majority-class rate (percent), the accuracy with no features.
    search_ : SearchResult
        Full search trace.
    classes_ : np.ndarray of shape (2,)
        Class labels seen during fit.
    n_features_in_ : int
        Total number of features seen during fit.

    Examples
    --------
    >>> from sklearn.datasets import load_breast_cancer
    >>> from nn_feature_select import NearestNeighborFeatureSelector
    >>>
    >>> X, y = load_breast_cancer(return_X_y=True)
    >>> selector = NearestNeighborFeatureSelector(direction="forward")
    >>> selector.fit(X[:, :8], y)
    NearestNeighborFeatureSelector()
    >>> selector.accuracy_ >= selector.baseline_accuracy_
    True
    """

    def __init__(
        self,
        direction: str = "forward",
        standardize: bool = True,
        verbose: int = 0,
    ):
        self.direction   = direction
        self.standardize = standardize
        self.verbose     = verbose

    # ------------------------------------------------------------------
    # sklearn API
    # ------------------------------------------------------------------

    def fit(self, X: np.ndarray, y: np.ndarray) -> "NearestNeighborFeatureSelector":
        """Run the feature search on (X, y).

        Parameters
        ----------
        X : array-like, shape (n_samples, n_features)
            Training data.
        y : array-like, shape (n_samples,)
            Class labels, exactly two distinct values.

        Returns
        -------
        self
        """
        self._validate_params()

        y_arr = np.asarray(y)
        self.classes_ = np.unique(y_arr)
        if len(self.classes_) != 2:
            raise ValueError(
                f"NearestNeighborFeatureSelector supports exactly two classes, "
                f"got {len(self.classes_)}."
            )

        data = make_dataset(X, y_arr, self.classes_)
        self.n_features_in_ = data.shape[1] - 1
        if len(data) < 2:
            raise ValueError("At least two samples are required.")

        if self.standardize:
            normalize(data, self.n_features_in_)

        self.default_accuracy_  = default_accuracy(data)
        self.baseline_accuracy_ = evaluate(data, range(self.n_features_in_))

        if self.verbose >= 1:
            print(
                f"[NearestNeighborFeatureSelector] {self.direction} search over "
                f"{self.n_features_in_} features, {len(data)} samples.  "
                f"All features: {self.baseline_accuracy_:.1f}%"
            )

        self.search_ = run_search(
            data,
            self.direction,
            self.n_features_in_,
            on_candidate=self._report_candidate if self.verbose >= 2 else None,
            on_round=self._report_round if self.verbose >= 1 else None,
        )

        self.selected_features_ = tuple(sorted(self.search_.best_subset))
        self.accuracy_          = self.search_.best_accuracy

        if self.verbose >= 1:
            print(
                f"[NearestNeighborFeatureSelector] Done.  "
                f"Selected features: {self.selected_features_}  "
                f"accuracy = {self.accuracy_:.1f}%"
            )

        return self

    def transform(self, X: np.ndarray) -> np.ndarray:
        """Project X onto the selected feature subset.

        Parameters
        ----------
        X : array-like, shape (n_samples, n_features)

        Returns
        -------
        X_reduced : np.ndarray, shape (n_samples, n_selected)
        """
        check_is_fitted(self, "selected_features_")
        X_arr = np.asarray(X, dtype=float)
        if X_arr.shape[1] != self.n_features_in_:
            raise ValueError(
                f"X has {X_arr.shape[1]} features, but "
                f"NearestNeighborFeatureSelector was fitted with "
                f"{self.n_features_in_} features."
            )
        return X_arr[:, list(self.selected_features_)]

    def get_support(self, indices: bool = False):
        """Boolean mask over the input features, True for the best subset
        found by the search; the sorted indices if ``indices`` is True."""
        check_is_fitted(self, "selected_features_")
        support = np.isin(np.arange(self.n_features_in_), self.selected_features_)
        if indices:
            return np.flatnonzero(support)
        return support

    def get_feature_names_out(self, input_features=None):
        """Names of the selected features, ``x<i>`` when none are given."""
        check_is_fitted(self, "selected_features_")
        if input_features is None:
            input_features = [f"x{i}" for i in range(self.n_features_in_)]
        return np.array([input_features[i] for i in self.selected_features_])

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _validate_params(self):
        if self.direction not in DIRECTIONS:
            raise ValueError(
                f"direction must be one of {DIRECTIONS}, got {self.direction!r}."
            )
        if self.verbose < 0:
            raise ValueError("verbose must be >= 0.")

    def _report_candidate(self, subset, accuracy):
        print(f"  features={format_feature_set(subset)}  accuracy={accuracy:.1f}%")

    def _report_round(self, round_):
        note = "  (decreased)" if round_.decreased else ""
        print(
            f"[NearestNeighborFeatureSelector] Round {round_.index}: "
            f"{format_feature_set(round_.subset)}  "
            f"accuracy = {round_.accuracy:.1f}%{note}"
        )

    def summary(self) -> str:
        """Return a human-readable summary of the fitted selector."""
        check_is_fitted(self, "selected_features_")
        lines = [
            "NearestNeighborFeatureSelector – fit summary",
            f"  direction              : {self.direction}",
            f"  n_features_in          : {self.n_features_in_}",
            f"  rounds                 : {len(self.search_.rounds)}",
            f"  subsets evaluated      : {self.search_.n_evaluations}",
            f"  default accuracy       : {self.default_accuracy_:.1f}%",
            f"  all-features accuracy  : {self.baseline_accuracy_:.1f}%",
            f"  selected features      : {self.selected_features_}",
            f"  accuracy               : {self.accuracy_:.1f}%",
        ]
        return "\n".join(lines)

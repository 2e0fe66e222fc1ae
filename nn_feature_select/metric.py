"""
nn_feature_select.metric
========================
Leave-one-out accuracy of a 1-nearest-neighbor classifier.

For a feature subset S, every instance i is held out in turn and predicted
with the label of its nearest other instance j, where distance is the
Euclidean distance over the columns named by S::

    d_S(i, j) = sqrt( Σ_{f ∈ S} (x_i[f] - x_j[f])² )

The accuracy is the percentage of instances predicted correctly.  With an
empty subset there is nothing to measure, so the majority-class rate
("default accuracy") is returned instead.

Computational notes
-------------------
* One evaluation builds the full n × n distance matrix with SciPy's
  ``cdist``, O(n² · |S|) time and O(n²) memory.  This is the dominant cost
  of every search.
* Ties in distance resolve to the lowest row index, since ``argmin``
  returns the first minimum.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
from scipy.spatial.distance import cdist

from .dataset import CLASS_LABELS, check_dataset, check_subset


__all__ = ["default_accuracy", "evaluate", "leave_one_out_predict"]


def default_accuracy(data: np.ndarray) -> float:
    """Percentage of instances carrying the majority label.

    Examples
    --------
    >>> import numpy as np
    >>> data = np.array([[1, 0.], [1, 1.], [1, 2.], [2, 3.]])
    >>> default_accuracy(data)
    75.0
    """
    check_dataset(data)
    labels = data[:, 0]
    count1 = int(np.count_nonzero(labels == CLASS_LABELS[0]))
    count2 = len(labels) - count1
    return 100.0 * max(count1, count2) / len(labels)


def leave_one_out_predict(data: np.ndarray, subset: Iterable[int]) -> np.ndarray:
    """Index of the nearest other instance for every instance.

    Parameters
    ----------
    data : np.ndarray, shape (n_instances, n_features + 1)
        Label-first dataset.
    subset : iterable of int
        Non-empty set of 0-based feature indices.

    Returns
    -------
    nearest : np.ndarray of int, shape (n_instances,)
        ``nearest[i]`` is the row used to predict row ``i``, or ``-1`` when
        the dataset has a single instance.
    """
    n_features = check_dataset(data)
    features = check_subset(subset, n_features)
    if not features:
        raise ValueError("subset must contain at least one feature.")

    n = data.shape[0]
    if n < 2:
        return np.full(n, -1, dtype=int)

    X_sub = data[:, [f + 1 for f in features]]
    dist = cdist(X_sub, X_sub, metric="euclidean")
    np.fill_diagonal(dist, np.inf)
    return dist.argmin(axis=1)


def evaluate(data: np.ndarray, subset: Iterable[int]) -> float:
    """Leave-one-out 1-NN accuracy of a feature subset, in percent.

    Parameters
    ----------
    data : np.ndarray, shape (n_instances, n_features + 1)
        Label-first dataset (normally already normalized).
    subset : iterable of int
        0-based feature indices.  Order does not matter.

    Returns
    -------
    float
        Accuracy in [0, 100], not rounded.

    Examples
    --------
    >>> import numpy as np
    >>> data = np.array([[1, 0.0], [1, 0.1], [2, 5.0], [2, 5.1]])
    >>> evaluate(data, [0])
    100.0
    """
    n_features = check_dataset(data)
    features = check_subset(subset, n_features)
    if not features:
        return default_accuracy(data)

    nearest = leave_one_out_predict(data, features)
    labels = data[:, 0]
    has_neighbor = nearest >= 0
    correct = np.count_nonzero(labels[nearest[has_neighbor]] == labels[has_neighbor])
    return 100.0 * correct / len(labels)

"""
nn_feature_select.preprocessing
===============================
Feature scaling applied once before any search.
"""

from __future__ import annotations

import numpy as np

from .dataset import check_dataset


__all__ = ["normalize"]


def normalize(data: np.ndarray, n_features: int | None = None) -> None:
    """Rescale every feature column to mean 0 and standard deviation 1.

    Uses the population standard deviation (sum of squares divided by the
    number of instances).  Columns whose values are all identical are left
    untouched.  The label column is never modified.

    Parameters
    ----------
    data : np.ndarray, shape (n_instances, n_features + 1)
        Label-first float dataset, modified in place.
    n_features : int, optional
        Number of feature columns.  Inferred from ``data`` if ``None``.
    """
    n_features = check_dataset(data, n_features)
    n = data.shape[0]

    for f in range(1, n_features + 1):
        col = data[:, f]
        if (col == col[0]).all():
            continue
        mean = col.sum() / n
        std = np.sqrt(((col - mean) ** 2).sum() / n)
        if std != 0:
            data[:, f] = (col - mean) / std

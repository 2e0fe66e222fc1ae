"""
nn_feature_select.dataset
=========================
Dataset construction, loading and validation.

A dataset is a 2-D float array laid out label-first::

    [[label, f_1, f_2, ..., f_N],
     ...]

Column 0 holds the class label, which must be one of ``CLASS_LABELS``
(``1`` or ``2``); columns ``1..N`` hold the feature values.  Feature
indices used everywhere else in the package are 0-based and refer to
columns ``1..N`` (feature ``f`` lives in column ``f + 1``).

Text files use the whitespace-separated format of the classic UCI-style
feature selection datasets::

    2.0000000e+00  1.2340000e+00  -3.1000000e-01 ...
    1.0000000e+00  4.5000000e-01   2.2000000e+00 ...
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Iterable, Sequence

import numpy as np


__all__ = [
    "CLASS_LABELS",
    "MalformedRowWarning",
    "check_dataset",
    "check_subset",
    "format_feature_set",
    "load_dataset",
    "make_dataset",
    "parse_lines",
]


CLASS_LABELS = (1, 2)


class MalformedRowWarning(UserWarning):
    """Issued when a row of a text dataset is skipped."""


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def parse_lines(lines: Iterable[str]) -> np.ndarray:
    """Parse whitespace-separated rows into a label-first dataset.

    Blank lines are ignored.  A row is skipped, with a
    :class:`MalformedRowWarning`, when it has fewer than two tokens, a
    different number of tokens than the first accepted row, a token that
    is not a number, or a label outside ``CLASS_LABELS``.

    Parameters
    ----------
    lines : iterable of str

    Returns
    -------
    data : np.ndarray, shape (n_instances, n_features + 1)

    Raises
    ------
    ValueError
        If no valid row remains.
    """
    rows: list[list[float]] = []
    width = None

    for raw in lines:
        line = raw.strip()
        if not line:
            continue

        parts = line.split()
        if len(parts) < 2:
            _skip("Skipping bad line", line)
            continue
        if width is not None and len(parts) != width:
            _skip("Skipping bad line", line)
            continue

        try:
            row = [float(tok) for tok in parts]
        except ValueError:
            _skip("Bad number in line", line)
            continue

        if row[0] not in CLASS_LABELS:
            _skip("Invalid label in line", line)
            continue

        rows.append(row)
        width = len(parts)

    if not rows:
        raise ValueError("No valid data found.")
    return np.array(rows, dtype=float)


def load_dataset(path: str | Path) -> np.ndarray:
    """Read a dataset file.  See :func:`parse_lines` for the row rules."""
    with open(path, encoding="utf-8") as fh:
        return parse_lines(fh)


def make_dataset(
    X: np.ndarray,
    y: np.ndarray,
    classes: Sequence | None = None,
) -> np.ndarray:
    """Build a label-first dataset from a feature matrix and a target.

    Parameters
    ----------
    X : array-like, shape (n_samples, n_features)
    y : array-like, shape (n_samples,)
        Target with exactly two distinct values.
    classes : sequence of length 2, optional
        Order of the two classes; ``classes[0]`` becomes label ``1`` and
        ``classes[1]`` label ``2``.  Defaults to ``np.unique(y)``.

    Returns
    -------
    data : np.ndarray, shape (n_samples, n_features + 1)
    """
    X_arr = np.asarray(X, dtype=float)
    y_arr = np.asarray(y)
    if X_arr.ndim != 2:
        raise ValueError(f"X must be 2-D, got shape {X_arr.shape}.")
    if len(y_arr) != len(X_arr):
        raise ValueError(
            f"X and y have inconsistent lengths ({len(X_arr)} != {len(y_arr)})."
        )

    if classes is None:
        classes = np.unique(y_arr)
    if len(classes) != 2:
        raise ValueError(
            f"Exactly two classes are supported, got {len(classes)}."
        )
    unknown = ~np.isin(y_arr, classes)
    if unknown.any():
        raise ValueError(f"y contains labels outside {list(classes)}.")

    data = np.empty((X_arr.shape[0], X_arr.shape[1] + 1), dtype=float)
    data[:, 0] = np.where(y_arr == classes[0], CLASS_LABELS[0], CLASS_LABELS[1])
    data[:, 1:] = X_arr
    return data


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def check_dataset(data: np.ndarray, n_features: int | None = None) -> int:
    """Validate a label-first dataset and return its feature count.

    Raises ``TypeError`` if ``data`` is not a float ndarray and
    ``ValueError`` for any other contract violation.
    """
    if not isinstance(data, np.ndarray) or not np.issubdtype(data.dtype, np.floating):
        raise TypeError("data must be a float numpy array.")
    if data.ndim != 2 or data.shape[0] == 0 or data.shape[1] < 2:
        raise ValueError(
            "data must have at least one row and a label column plus "
            f"one or more feature columns, got shape {data.shape}."
        )
    if not np.isin(data[:, 0], CLASS_LABELS).all():
        raise ValueError(f"labels must be one of {CLASS_LABELS}.")

    width = data.shape[1] - 1
    if n_features is not None and n_features != width:
        raise ValueError(
            f"n_features ({n_features}) does not match the data ({width})."
        )
    return width


def check_subset(subset: Iterable[int], n_features: int) -> list[int]:
    """Return ``subset`` as a sorted list after checking it is valid."""
    indices = [int(f) for f in subset]
    if len(set(indices)) != len(indices):
        raise ValueError(f"duplicate feature indices in {indices}.")
    for f in indices:
        if not 0 <= f < n_features:
            raise ValueError(
                f"feature index {f} out of range for {n_features} features."
            )
    return sorted(indices)


def format_feature_set(subset: Iterable[int]) -> str:
    """Render 0-based feature indices 1-based, e.g. ``[1, 7] -> "{2, 8}"``."""
    return "{" + ", ".join(str(f + 1) for f in subset) + "}"


def _skip(prefix: str, line: str):
    warnings.warn(f"{prefix}: {line}", MalformedRowWarning, stacklevel=3)

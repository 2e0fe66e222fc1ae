"""
Example 2 – Using the Search Functions Directly
===============================================
The low-level API works on a label-first array (column 0 = class label 1
or 2, columns 1..N = features): ``normalize`` once, then ``evaluate``
single subsets or run a whole search with progress callbacks.
"""

import numpy as np

from nn_feature_select import (
    backward_elimination,
    evaluate,
    forward_selection,
    make_dataset,
    normalize,
)
from nn_feature_select.dataset import format_feature_set

# ---------------------------------------------------------------------------
# Synthetic dataset: 2 informative features + 3 noise features
# ---------------------------------------------------------------------------
rng = np.random.default_rng(0)
n   = 200

X = np.hstack([
    np.vstack([rng.normal([0, 0], 0.6, (n//2, 2)),
               rng.normal([2, 2], 0.6, (n//2, 2))]),   # informative
    rng.normal(0, 1, (n, 3)),                            # noise
])
y = np.array([1]*(n//2) + [2]*(n//2))

data = make_dataset(X, y)
normalize(data)

print("Feature numbers: 1,2 = informative | 3,4,5 = noise\n")

# ---------------------------------------------------------------------------
# Score specific subsets
# ---------------------------------------------------------------------------
for subset in [(), (0,), (0, 1), (2, 3), (0, 1, 2, 3, 4)]:
    print(f"  accuracy{format_feature_set(subset)} = {evaluate(data, subset):.1f}%")

# ---------------------------------------------------------------------------
# Forward selection with per-round progress
# ---------------------------------------------------------------------------
def show_round(round_):
    flag = "  (decreased)" if round_.decreased else ""
    print(f"  round {round_.index}: {format_feature_set(round_.subset)} "
          f"{round_.accuracy:.1f}%{flag}")


print("\nForward selection:")
result = forward_selection(data, on_round=show_round)
print(f"  best: {format_feature_set(result.best_subset)} {result.best_accuracy:.1f}%")

print("\nBackward elimination:")
result = backward_elimination(data, on_round=show_round)
print(f"  best: {format_feature_set(result.best_subset)} {result.best_accuracy:.1f}%")

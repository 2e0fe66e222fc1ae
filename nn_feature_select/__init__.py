"""
nn_feature_select
=================
Greedy wrapper feature selection for binary classification, scored by the
leave-one-out accuracy of a 1-nearest-neighbor classifier.

Core idea
---------
**Objective – leave-one-out 1-NN accuracy**
    For a feature subset S, every instance is held out in turn and
    predicted with the label of its nearest neighbor (Euclidean distance
    over S) among the remaining instances.  The score is the percentage
    predicted correctly; an empty subset scores the majority-class rate.

**Search – greedy hill climbing**
    *Forward selection* starts with no features and adds the most helpful
    feature each round; *backward elimination* starts with all features and
    removes the least helpful one.  A round's choice is accepted even when
    accuracy drops, and the best subset seen over the whole search is
    reported.

Features are normally standardized (mean 0, standard deviation 1) once
before searching so that no single feature dominates the distance.

Public API
----------
NearestNeighborFeatureSelector – sklearn-compatible estimator
normalize                      – in-place feature standardization
evaluate                       – leave-one-out accuracy of one subset
forward_selection              – greedy forward search
backward_elimination           – greedy backward search
load_dataset                   – read a label-first text dataset
"""

from .dataset  import MalformedRowWarning, load_dataset, make_dataset
from .metric   import default_accuracy, evaluate
from .preprocessing import normalize
from .search   import (
    SearchResult,
    SearchRound,
    backward_elimination,
    forward_selection,
    run_search,
)
from .selector import NearestNeighborFeatureSelector

__all__ = [
    "MalformedRowWarning",
    "NearestNeighborFeatureSelector",
    "SearchResult",
    "SearchRound",
    "backward_elimination",
    "default_accuracy",
    "evaluate",
    "forward_selection",
    "load_dataset",
    "make_dataset",
    "normalize",
    "run_search",
]

__version__ = "0.1.0"

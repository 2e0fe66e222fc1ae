"""Command line front end for the nearest-neighbor feature search.

    nn-feature-select data/small_dataset.txt --algorithm forward

Any argument left out is asked for interactively.
"""

from __future__ import annotations

import argparse
import time
import warnings
from typing import Optional, Sequence

from .dataset import MalformedRowWarning, format_feature_set, load_dataset
from .metric import evaluate
from .preprocessing import normalize
from .search import run_search


ALGORITHMS = {
    "1": "forward",
    "2": "backward",
    "forward": "forward",
    "backward": "backward",
}


def _load(path: str):
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", MalformedRowWarning)
        try:
            data = load_dataset(path)
        finally:
            for w in caught:
                if issubclass(w.category, MalformedRowWarning):
                    print(w.message)
                else:
                    warnings.showwarning(w.message, w.category, w.filename, w.lineno)
    return data


def _print_candidate(subset, accuracy):
    print(f"Using feature(s) {format_feature_set(subset)} accuracy is {accuracy:.1f}%")


def _print_round(round_):
    if round_.decreased:
        print("\n(Warning, Accuracy has decreased! "
              "Continuing search in case of local maxima)\n")
    lead = "\n" if round_.index == 1 else ""
    print(f"{lead}Feature set {format_feature_set(round_.subset)} was best, "
          f"accuracy is {round_.accuracy:.1f}%\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Greedy feature selection with leave-one-out nearest neighbor."
    )
    parser.add_argument("path", nargs="?", help="Dataset file (label first, whitespace separated)")
    parser.add_argument(
        "-a", "--algorithm",
        help="1 / forward = Forward Selection, 2 / backward = Backward Elimination",
    )
    parser.add_argument("--plot", help="Save a bar chart of the search trace to this file")
    args = parser.parse_args(argv)

    print("Welcome to the nearest neighbor feature selection search.")
    path = args.path
    if path is None:
        try:
            path = input("Type in the name of the file to test: ").strip()
        except EOFError:
            print("\nNo file name given, exiting.")
            return 1

    try:
        data = _load(path)
    except OSError as exc:
        print(f"File error: {exc}")
        return 1
    except ValueError as exc:
        print(exc)
        return 1

    n_features = data.shape[1] - 1
    print(f"This dataset has {n_features} features (not including the class "
          f"attribute), with {len(data)} instances.\n")

    normalize(data, n_features)

    baseline = evaluate(data, range(n_features))
    print(f'Running nearest neighbor with all {n_features} features, using '
          f'"leaving-one-out" evaluation, I get an accuracy of {baseline:.1f}%\n')

    choice = args.algorithm
    if choice is None:
        print("Type the number of the algorithm you want to run.\n")
        print("1) Forward Selection")
        print("2) Backward Elimination")
        try:
            choice = input().strip()
        except EOFError:
            print("\nNo choice given, exiting.")
            return 2
    print()

    direction = ALGORITHMS.get(choice.strip().lower())
    if direction is None:
        print("Bad choice, exiting.")
        return 2

    print("Beginning search.\n")
    start = time.perf_counter()
    result = run_search(
        data,
        direction,
        n_features,
        on_candidate=_print_candidate,
        on_round=_print_round,
    )
    elapsed = time.perf_counter() - start

    print(f"Finished search!! The best feature subset is "
          f"{format_feature_set(result.best_subset)}, which has an accuracy of "
          f"{result.best_accuracy:.1f}%.")
    print(f"\nTime taken: {elapsed:.4f} seconds")

    if args.plot:
        from .plot import plot_search_trace
        plot_search_trace(result, save_path=args.plot)
        print(f"Plot saved: {args.plot}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

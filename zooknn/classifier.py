"""k-nearest-neighbour search and classification over animal records."""

from __future__ import annotations

from collections import Counter
from typing import Sequence, Union

from .data import Animal
from .distance import DistanceFunction, distance_functions

Which = Union[DistanceFunction, int]


def find_k_nearest_neighbors(
    data_zoo: Sequence[Animal], new_sample: Sequence[int], k: int, which: Which
) -> list[int]:
    """Return indices of the ``k`` records closest to ``new_sample``.

    Distances are ranked from smallest up; Jaccard similarity is ranked from
    largest down. Records that score the same keep their dataset order.
    """
    which = DistanceFunction(which)
    if not 1 <= k <= len(data_zoo):
        raise ValueError(f"k must be between 1 and {len(data_zoo)}, got {k}")
    scores = [distance_functions(animal.features, new_sample).value(which) for animal in data_zoo]
    order = sorted(
        range(len(scores)),
        key=scores.__getitem__,
        reverse=which is DistanceFunction.JACCARD,
    )
    return order[:k]


def predict_class(
    data_zoo: Sequence[Animal], new_sample: Sequence[int], which: Which, k: int
) -> int:
    """Predict the class label by majority vote of the ``k`` nearest records.

    Ties go to the smallest class label.
    """
    neighbours = find_k_nearest_neighbors(data_zoo, new_sample, k, which)
    votes = Counter(data_zoo[index].class_label for index in neighbours)
    top = max(votes.values())
    return min(label for label, count in votes.items() if count == top)


def find_accuracy(
    data_zoo: Sequence[Animal], which: Which, test_data: Sequence[Animal], k: int
) -> float:
    """Return the fraction of ``test_data`` whose class is predicted correctly."""
    if not test_data:
        raise ValueError("test data is empty")
    correct = sum(
        predict_class(data_zoo, animal.features, which, k) == animal.class_label
        for animal in test_data
    )
    return correct / len(test_data)
"""Distance and similarity measures between feature vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, Union


class DistanceFunction(IntEnum):
    """The measure used to compare feature vectors."""

    EUCLIDEAN = 1
    HAMMING = 2
    JACCARD = 3


@dataclass(frozen=True)
class Distances:
    """All three measures between a pair of vectors."""

    euclidean: float
    hamming: int
    jaccard: float

    def value(self, which: Union[DistanceFunction, int]) -> float:
        """Return the measure selected by ``which``."""
        which = DistanceFunction(which)
        if which is DistanceFunction.EUCLIDEAN:
            return self.euclidean
        if which is DistanceFunction.HAMMING:
            return self.hamming
        return self.jaccard


def distance_functions(vector1: Sequence[int], vector2: Sequence[int]) -> Distances:
    """Compute Euclidean distance, Hamming distance and Jaccard similarity.

    Jaccard similarity counts 1-1 matches over the number of positions that
    are not 0-0 matches; it is NaN when both vectors are all zeros.
    """
    if len(vector1) != len(vector2):
        raise ValueError(
            f"vectors differ in length: {len(vector1)} and {len(vector2)}"
        )
    pairs = list(zip(vector1, vector2))
    euclidean = math.sqrt(sum((a - b) ** 2 for a, b in pairs))
    hamming = sum(a != b for a, b in pairs)
    both_one = sum(a == 1 and b == 1 for a, b in pairs)
    both_zero = sum(a == 0 and b == 0 for a, b in pairs)
    denominator = len(pairs) - both_zero
    jaccard = both_one / denominator if denominator else math.nan
    return Distances(euclidean, hamming, jaccard)
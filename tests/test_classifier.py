import pytest

from zooknn.classifier import find_accuracy, find_k_nearest_neighbors, predict_class
from zooknn.data import Animal
from zooknn.distance import DistanceFunction


def vec(*ones):
    return tuple(1 if i in ones else 0 for i in range(16))


SAMPLE = vec(0, 1, 2, 3)


def _zoo():
    return [
        Animal("far", vec(8, 9, 10, 11, 12, 13), 6),
        Animal("near", vec(0, 1, 2), 2),
        Animal("exact", SAMPLE, 2),
        Animal("mid", vec(0, 1), 7),
    ]


@pytest.mark.parametrize("which", list(DistanceFunction))
def test_exact_match_comes_first(which):
    zoo = _zoo()
    assert find_k_nearest_neighbors(zoo, SAMPLE, 1, which) == [2]


@pytest.mark.parametrize("which", [1, 2])
def test_distances_ranked_ascending(which):
    zoo = _zoo()
    assert find_k_nearest_neighbors(zoo, SAMPLE, 4, which) == [2, 1, 3, 0]


def test_jaccard_ranked_descending():
    zoo = _zoo()
    assert find_k_nearest_neighbors(zoo, SAMPLE, 4, DistanceFunction.JACCARD) == [2, 1, 3, 0]


def test_ties_keep_dataset_order():
    zoo = [Animal(f"a{i}", SAMPLE, i) for i in range(3)]
    assert find_k_nearest_neighbors(zoo, SAMPLE, 3, DistanceFunction.EUCLIDEAN) == [0, 1, 2]
    assert find_k_nearest_neighbors(zoo, SAMPLE, 3, DistanceFunction.JACCARD) == [0, 1, 2]


def test_neighbour_count_and_uniqueness():
    zoo = _zoo()
    result = find_k_nearest_neighbors(zoo, SAMPLE, 3, DistanceFunction.HAMMING)
    assert len(result) == 3
    assert len(set(result)) == 3


@pytest.mark.parametrize("k", [0, 5])
def test_invalid_k(k):
    with pytest.raises(ValueError):
        find_k_nearest_neighbors(_zoo(), SAMPLE, k, DistanceFunction.EUCLIDEAN)


def test_invalid_distance_function():
    with pytest.raises(ValueError):
        find_k_nearest_neighbors(_zoo(), SAMPLE, 1, 4)


def test_majority_vote():
    zoo = _zoo()
    assert predict_class(zoo, SAMPLE, DistanceFunction.EUCLIDEAN, 3) == zoo[2].class_label


def test_tie_goes_to_smallest_label():
    zoo = [
        Animal("one_off", vec(0, 1, 2), 5),
        Animal("other_off", vec(0, 1, 3), 3),
        Animal("far", vec(10, 11, 12, 13, 14), 3),
    ]
    assert predict_class(zoo, SAMPLE, DistanceFunction.HAMMING, 2) == 3


def test_accuracy_on_training_data_with_k_one():
    zoo = _zoo()
    assert find_accuracy(zoo, DistanceFunction.EUCLIDEAN, zoo, 1) == 1.0


def test_accuracy_counts_wrong_predictions():
    zoo = _zoo()
    wrong = [Animal(a.name, a.features, a.class_label + 100) for a in zoo]
    assert find_accuracy(zoo, DistanceFunction.HAMMING, wrong, 1) == 0.0


def test_accuracy_is_a_fraction():
    zoo = _zoo()
    accuracy = find_accuracy(zoo, DistanceFunction.JACCARD, zoo, 3)
    assert 0.0 <= accuracy <= 1.0


def test_accuracy_rejects_empty_test_data():
    with pytest.raises(ValueError):
        find_accuracy(_zoo(), DistanceFunction.EUCLIDEAN, [], 1)
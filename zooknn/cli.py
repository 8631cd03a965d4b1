"""Interactive menu for reading the zoo dataset and running k-NN tasks."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .classifier import find_accuracy, find_k_nearest_neighbors, predict_class
from .data import read_from_file, read_test_data
from .distance import DistanceFunction, distance_functions

VECTOR1 = (1, 1, 1, 0, 1, 0, 1, 1, 1, 0, 0, 0, 0, 1, 1, 1)
VECTOR2 = (1, 0, 0, 1, 0, 0, 1, 1, 1, 1, 0, 0, 4, 0, 0, 1)
NEW_SAMPLE = (1, 1, 1, 0, 1, 0, 1, 1, 1, 0, 0, 0, 0, 1, 1, 1)
DEFAULT_K = 5
TEST_DATA_FILE = "testData.csv"

_NAMES = {
    DistanceFunction.EUCLIDEAN: "Euclidean Distance",
    DistanceFunction.HAMMING: "Hamming Distance",
    DistanceFunction.JACCARD: "Jaccard Similarity",
}

_PREDICTION_TEMPLATES = {
    DistanceFunction.EUCLIDEAN: "The predicted class with Euclidean Distance is: {}",
    DistanceFunction.HAMMING: "The predicted class with Hamming Distance: {}",
    DistanceFunction.JACCARD: "The predicted class with Jaccard Similarity: {}",
}

_MENU = (
    "\nHere is the menu - enter a number between 1 and 5\n"
    "1. Read the file (must be executed first) \n"
    "2. Distance calculations \n"
    "3. Find K nearest neighbors \n"
    "4. Predict class \n"
    "5. Find accuracy \n"
)


def _read_choice() -> Optional[int]:
    try:
        text = input("Enter your choice: ")
    except EOFError:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


def _show_distances() -> None:
    result = distance_functions(VECTOR1, VECTOR2)
    print(f"Euclidean Distance: {result.euclidean:f}")
    print(f"Hamming Distance: {result.hamming}")
    print(f"Jaccard Similarity: {result.jaccard:f}")


def _show_neighbours(data_zoo, k) -> None:
    for which in DistanceFunction:
        neighbours = find_k_nearest_neighbors(data_zoo, NEW_SAMPLE, k, which)
        indices = "".join(f"{index} " for index in neighbours)
        print(f"Nearest neighbors for the new sample with {_NAMES[which]}: {indices}")


def _show_predictions(data_zoo, k) -> None:
    for which in DistanceFunction:
        predicted = predict_class(data_zoo, NEW_SAMPLE, which, k)
        print(_PREDICTION_TEMPLATES[which].format(predicted))
        print()


def _show_accuracy(data_zoo, test_path, k) -> None:
    test_data = read_test_data(test_path)
    for which in DistanceFunction:
        accuracy = find_accuracy(data_zoo, which, test_data, k)
        print(f"The accuracy for the test data with {_NAMES[which]} is {accuracy:f}")
        print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the menu loop; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="zooknn", description="k-nearest-neighbour classification of the zoo dataset."
    )
    parser.add_argument("data_file", help="whitespace-separated zoo dataset")
    parser.add_argument(
        "--test-data", default=TEST_DATA_FILE, help="comma-separated test dataset"
    )
    parser.add_argument("-k", type=int, default=DEFAULT_K, help="number of neighbours")
    args = parser.parse_args(argv)

    data_zoo = None
    while True:
        print(_MENU)
        choice = _read_choice()
        try:
            if choice == 1:
                data_zoo = read_from_file(args.data_file)
                for animal in data_zoo:
                    fields = [animal.name, *map(str, animal.features), str(animal.class_label)]
                    print(" ".join(fields))
            elif data_zoo is None:
                return 0
            elif choice == 2:
                _show_distances()
            elif choice == 3:
                _show_neighbours(data_zoo, args.k)
            elif choice == 4:
                _show_predictions(data_zoo, args.k)
            elif choice == 5:
                _show_accuracy(data_zoo, args.test_data, args.k)
            else:
                return 0
        except (OSError, ValueError) as exc:
            print(f"zooknn: {exc}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())
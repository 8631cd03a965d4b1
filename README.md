# zooknn

A small k-nearest-neighbour classifier for the zoo animal dataset. Each
animal has a name, sixteen integer features and an integer class label.
A new sample is compared with every animal in the dataset by one of three
measures, and the most common class among its `k` nearest neighbours is
the prediction.

The three measures are:

1. **Euclidean distance**: smaller is nearer.
2. **Hamming distance**: the number of features that differ. Smaller is nearer.
3. **Jaccard similarity**: 1-1 matches divided by the number of positions
   that are not 0-0 matches. Larger is nearer. When both vectors are all
   zeros it is NaN.

Animals that score the same keep their order in the dataset. When two
classes are equally common among the neighbours, the smaller class label
wins.

## Installing

```
pip install .
```

The package needs nothing beyond the Python standard library (3.10 or later).

## The command

```
zooknn zoo.txt
```

`zoo.txt` is the training data: whitespace-separated records, each made of
the animal's name, its sixteen features and its class label, for example

```
aardvark 1 0 0 1 0 0 1 1 1 1 0 0 4 0 0 1 1
```

Options:

* `--test-data PATH`: the comma-separated test file used by menu item 5
  (default `testData.csv` in the current directory).
* `-k N`: the number of neighbours (default 5).

The command shows a menu and reads a choice:

1. Read the training file. This must be chosen first. It prints every
   animal it read.
2. Compute the three measures for a fixed pair of sample vectors.
3. List the `k` nearest neighbours (as dataset indices) of a fixed sample
   under each measure.
4. Predict the class of that sample under each measure.
5. Read the test file and report the accuracy under each measure. The test
   file holds one animal per line: the name, the sixteen features and the
   class label separated by commas. Blank lines are skipped.

If any other choice is made before the training file has been read, the
program ends with status 0. It also ends with status 0 when the choice is
not a number from 1 to 5, or when input runs out. If a file cannot be read
or is malformed, or `k` is out of range, the error is printed to standard
error and the program ends with status 1.

## Using it as a library

* `zooknn.data.read_from_file(path)` reads the whitespace-separated training
  data into a list of `Animal` records (`name`, `features`, `class_label`).
  It raises `ValueError` for an incomplete record, a non-integer field or a
  name of 50 characters or more.
* `zooknn.data.read_test_data(path)` reads a comma-separated test file into
  a list of `Animal` records; a line with fewer than 18 fields raises
  `ValueError`.
* `zooknn.distance.distance_functions(vector1, vector2)` returns a
  `Distances` result with `euclidean`, `hamming` and `jaccard`.
  `Distances.value(which)` picks one of them by a `DistanceFunction`
  (`EUCLIDEAN` = 1, `HAMMING` = 2, `JACCARD` = 3) or the matching integer.
  Vectors of different lengths raise `ValueError`.
* `zooknn.classifier.find_k_nearest_neighbors(data_zoo, new_sample, k, which)`
  returns the indices of the `k` nearest animals, nearest first. `k` must be
  between 1 and the number of animals.
* `zooknn.classifier.predict_class(data_zoo, new_sample, which, k)` returns
  the predicted class label.
* `zooknn.classifier.find_accuracy(data_zoo, which, test_data, k)` returns
  the fraction of test animals whose class is predicted correctly; empty
  test data raises `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```
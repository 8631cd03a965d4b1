"""Animal records and readers for the zoo training and test datasets."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

NUM_FEATURES = 16
NUM_SAMPLES = 100
NUM_CLASSES = 7
NUM_TEST_DATA = 20
MAX_LENGTH_ANIMAL_NAME = 50

_RECORD_SIZE = NUM_FEATURES + 2

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class Animal:
    """One row of a dataset: a name, its feature vector and its class label."""

    name: str
    features: tuple[int, ...]
    class_label: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", tuple(self.features))


def _parse_record(tokens: Sequence[str], where: str) -> Animal:
    name, *rest = tokens
    if len(name) >= MAX_LENGTH_ANIMAL_NAME:
        raise ValueError(
            f"{where}: animal name longer than {MAX_LENGTH_ANIMAL_NAME - 1} characters"
        )
    try:
        numbers = [int(token) for token in rest[: NUM_FEATURES + 1]]
    except ValueError as exc:
        raise ValueError(f"{where}: {exc}") from None
    *features, class_label = numbers
    return Animal(name, tuple(features), class_label)


def read_from_file(path: PathLike) -> list[Animal]:
    """Read whitespace-separated records: name, 16 features, class label."""
    tokens = Path(path).read_text().split()
    if len(tokens) % _RECORD_SIZE:
        raise ValueError(
            f"{os.fspath(path)}: incomplete record, expected {_RECORD_SIZE} fields per animal"
        )
    return [
        _parse_record(tokens[start : start + _RECORD_SIZE], f"{os.fspath(path)}: record {n}")
        for n, start in enumerate(range(0, len(tokens), _RECORD_SIZE), 1)
    ]


def read_test_data(path: PathLike) -> list[Animal]:
    """Read comma-separated records: name, 16 features, class label per line."""
    animals = []
    with open(path) as stream:
        for line_number, line in enumerate(stream, 1):
            tokens = [token.strip() for token in line.split(",")]
            tokens = [token for token in tokens if token]
            if not tokens:
                continue
            where = f"{os.fspath(path)}:{line_number}"
            if len(tokens) < _RECORD_SIZE:
                raise ValueError(f"{where}: expected {_RECORD_SIZE} fields, got {len(tokens)}")
            animals.append(_parse_record(tokens, where))
    return animals
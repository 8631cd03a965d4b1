"""k-nearest-neighbour classification of zoo animals: data readers, distance measures, classifier and menu command."""

__version__ = "0.1.0"

__all__ = ["classifier", "cli", "data", "distance"]
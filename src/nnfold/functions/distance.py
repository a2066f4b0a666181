"""Per-element distance terms summed by the distance losses."""

import numpy as np


def manhattan(a, b):
    """|a - b|; summed over a sequence this is the L1 distance."""
    return np.abs(a - b)


def squared_euclidean(a, b):
    """(a - b)^2; the L2 distance is the square root of its sum."""
    diff = a - b
    return diff * diff

from functools import partial

import numpy as np

from nnfold.core import kernel
from nnfold.functions._reduction import apply_and_accumulate
from nnfold.functions.distance import manhattan, squared_euclidean


def l1(ground, predicted):
    """L1 (Manhattan) distance: sum of |g - p|."""
    return apply_and_accumulate(manhattan, ground, predicted)


@kernel
def l2(ground, predicted):
    """L2 (Euclidean) distance: sqrt of the sum of (g - p)^2."""
    return np.sqrt(apply_and_accumulate(squared_euclidean, ground, predicted))


def _huber_term(g, p, threshold):
    diff = g - p
    if diff <= threshold:
        return diff * diff / 2
    return threshold * np.abs(diff) - threshold / 2


def huber(ground, predicted, threshold):
    """Huber loss summed over the sequences.

    Each term is diff^2 / 2 when diff <= threshold and
    threshold * |diff| - threshold / 2 otherwise, with diff = g - p.

    Note: the branch compares the signed difference, so a large negative
    difference always takes the quadratic branch, and the linear branch
    subtracts threshold / 2 rather than threshold^2 / 2. Both differ from the
    textbook Huber loss and are kept as is. Terms of the linear branch are
    negative for diff < 0.5.
    """
    return apply_and_accumulate(
        partial(_huber_term, threshold=threshold), ground, predicted
    )


def _bce_term(g, p):
    return g * np.log(p) + (g - 1) * np.log(1 - p)


@kernel
def bce(ground, predicted):
    """Binary cross entropy, -sum(g*log(p) + (g-1)*log(1-p)) / N.

    Note: (g - 1) flips the sign of the second term compared with the usual
    -(g*log(p) + (1-g)*log(1-p)) / N. Labels of 1 agree with the usual
    definition, labels of 0 give the negated value. Kept as is.
    """
    return -apply_and_accumulate(_bce_term, ground, predicted) / len(ground)


def _ce_term(g, p):
    return g * np.log(p)


@kernel
def ce(ground, predicted):
    """Cross entropy of predicted against a soft or one-hot ground distribution."""
    return -apply_and_accumulate(_ce_term, ground, predicted) / len(ground)


def _kl_term(g, p):
    return g * np.log(g / p)


def kl(ground, predicted):
    """Kullback-Leibler divergence of predicted from ground.

    Zero entries in either sequence give nan or inf terms.
    """
    return apply_and_accumulate(_kl_term, ground, predicted)


def _hinge_term(g, p):
    return np.maximum(0.0, 1 - g * p)


def hinge(ground, predicted):
    """Hinge loss, sum of max(0, 1 - g*p); labels are expected in {-1, 1}."""
    return apply_and_accumulate(_hinge_term, ground, predicted)


@kernel
def contrastive(ground: bool, features_a, features_b, margin):
    """Contrastive loss of a pair of feature vectors.

    ground tells whether the pair is similar. With d the L2 distance between
    the features, similar pairs cost d^2 and dissimilar pairs
    max(margin - d, 0)^2.
    """
    dist = l2(features_a, features_b)
    if ground:
        return dist * dist
    gap = np.maximum(margin - dist, 0.0)
    return gap * gap


@kernel
def triplet_ranking(anchor, positive, negative, margin):
    """Triplet ranking loss on L2 distances.

    max(d(anchor, positive) - d(anchor, negative) + margin, 0)
    """
    dist_pos = l2(anchor, positive)
    dist_neg = l2(anchor, negative)
    return np.maximum(dist_pos - dist_neg + margin, 0.0)


tr = triplet_ranking

"""Functions — activation, softmax and loss kernels.

Scalar activations operate on one value at a time. The losses reduce two (or
three) equal-length 1-D sequences to a scalar through the shared reduction
engine in nnfold.functions._reduction, and softmax maps a sequence to a
sequence of the same length.
"""

from nnfold.functions.activation import (
    elu,
    glu,
    mish,
    prelu,
    relu,
    sigmoid,
    softmax,
    softmax_stable,
    softplus,
    swish,
    tanh,
)
from nnfold.functions.loss import (
    bce,
    ce,
    contrastive,
    hinge,
    huber,
    kl,
    l1,
    l2,
    tr,
    triplet_ranking,
)

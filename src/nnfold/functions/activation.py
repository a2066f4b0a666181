import numpy as np

from nnfold.core import as_sequence, kernel
from nnfold.functions._reduction import apply_and_accumulate


@kernel
def sigmoid(z):
    """Sigmoid activation: 1 / (1 + exp(-z)).

    exp(-z) overflows for z below about -709, so large negative inputs return
    0.0 and still trip the overflow flag handled by Config.numeric_errors.
    """
    return 1 / (1 + np.exp(-z))


@kernel
def tanh(z):
    """Hyperbolic tangent activation."""
    return np.tanh(z)


@kernel
def relu(z):
    """ReLU activation: max(0, z)."""
    return np.maximum(0.0, z)


@kernel
def prelu(z, alpha):
    """Parametric ReLU: z for positive z, alpha * z otherwise."""
    return z if z > 0 else alpha * z


@kernel
def elu(z, alpha):
    """Exponential linear unit: z for positive z, alpha * (exp(z) - 1) otherwise."""
    return z if z > 0 else alpha * (np.exp(z) - 1)


@kernel
def glu(z):
    """Gated linear unit, z * sigmoid(z)."""
    return z * sigmoid(z)


@kernel
def swish(z):
    """Swish activation; identical to glu."""
    return glu(z)


@kernel
def softplus(z, beta):
    """Softplus: log(1 + exp(beta * z)) / beta.

    beta is not checked; beta == 0 divides by zero and gives inf or nan.
    """
    return np.log(1 + np.exp(z * beta)) / beta


@kernel
def mish(z):
    """Mish activation, z * tanh(softplus(z, beta=1))."""
    return z * np.tanh(softplus(z, 1))


@kernel
def softmax(x) -> np.ndarray:
    """Softmax of a 1-D sequence: exp(x) divided by the sum of exp(x).

    The maximum is not subtracted first, so inputs above roughly 709 (float64)
    overflow and give nan entries. Use softmax_stable for such inputs.
    """
    y = np.exp(as_sequence(x))
    total = apply_and_accumulate(lambda e: e, y)
    return y / total


@kernel
def softmax_stable(x) -> np.ndarray:
    """Softmax computed on x - max(x); equal to softmax where that one is finite."""
    x = as_sequence(x)
    if len(x) == 0:
        return x.copy()
    y = np.exp(x - x.max())
    total = apply_and_accumulate(lambda e: e, y)
    return y / total

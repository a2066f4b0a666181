"""Reduction engine shared by the loss kernels.

Every loss in nnfold.functions.loss is one call to apply_and_accumulate with a
different element function. The module is internal to the functions package;
import it explicitly to reduce with an element function of your own.
"""

from typing import Callable, Tuple

import numpy as np

from nnfold.core import LengthMismatch, as_sequence, kernel


def check_lengths(*seqs) -> None:
    """Raise LengthMismatch unless all sequences have the same length."""
    lengths = [len(s) for s in seqs]
    if len(set(lengths)) > 1:
        raise LengthMismatch(lengths)


def _aligned(seqs) -> Tuple[np.ndarray, ...]:
    if not seqs:
        raise TypeError("at least one sequence is required")
    arrays = tuple(as_sequence(s) for s in seqs)
    check_lengths(*arrays)
    dtype = np.result_type(*arrays)
    return tuple(a.astype(dtype, copy=False) for a in arrays)


@kernel
def apply(f: Callable, *seqs) -> np.ndarray:
    """Apply f to the i-th elements of every sequence, for each index i."""
    arrays = _aligned(seqs)
    out = np.empty(len(arrays[0]), dtype=arrays[0].dtype)
    for i, elems in enumerate(zip(*arrays)):
        out[i] = f(*elems)
    return out


@kernel
def apply_and_accumulate(f: Callable, *seqs):
    """Sum f over the sequences taken in lock-step.

    The sum starts from zero of the sequences' dtype and adds terms in index
    order, so results are bit-reproducible. Lengths are checked before the
    first call to f.
    """
    arrays = _aligned(seqs)
    total = arrays[0].dtype.type(0)
    for elems in zip(*arrays):
        total = total + f(*elems)
    return total

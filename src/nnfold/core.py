"""Core — sequences, configuration and error types.

Core primitives used across the nnfold library: the global Config flags and
the using_config context manager, the coercion of array-likes into the 1-D
floating-point sequences every kernel works on, and the numeric error policy
applied around each kernel call.
"""

from __future__ import annotations

import contextlib
import functools
import warnings
from typing import Any, Callable, TypeVar

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])


class Config:
    """Global config flags affecting how kernels treat their inputs.

    dtype: floating dtype used for inputs that are not already floating point.
    numeric_errors: what happens when an operation hits a floating point
        error (log of zero, division by zero, overflow, invalid value).
        "warn" issues a DomainWarning, "ignore" propagates silently and
        "raise" lets numpy raise FloatingPointError. The result is the
        IEEE754 special value in the first two cases.

    The flags are class attributes shared by the whole process: a value set
    with using_config in one thread is seen by kernels running in others.
    """

    dtype = np.float64
    numeric_errors = "warn"


@contextlib.contextmanager
def using_config(name: str, value: Any):
    """Temporarily set a Config attribute inside a context."""
    old_value = getattr(Config, name)
    setattr(Config, name, value)
    try:
        yield
    finally:
        setattr(Config, name, old_value)


class LengthMismatch(ValueError):
    """Sequences passed to a paired kernel do not share one length."""

    def __init__(self, lengths) -> None:
        self.lengths = tuple(lengths)
        super().__init__(
            "sequences must have equal length, got lengths "
            + ", ".join(str(n) for n in self.lengths)
        )


class DomainWarning(RuntimeWarning):
    """A floating point error flag was raised inside a kernel.

    Usually the result is NaN or Inf, but an intermediate overflow can also
    trip the flag when the final result is finite, as in sigmoid(-800.0).
    """


def _warn_domain(err: str, flag: int) -> None:
    warnings.warn(
        f"floating point error ({err}) in kernel", DomainWarning, stacklevel=2
    )


def numeric_errstate():
    """numpy errstate matching Config.numeric_errors (underflow is ignored)."""
    mode = Config.numeric_errors
    if mode == "warn":
        return np.errstate(all="call", under="ignore", call=_warn_domain)
    return np.errstate(all=mode, under="ignore")


def kernel(fn: F) -> F:
    """Run fn under the numeric error policy read from Config at call time."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        with numeric_errstate():
            return fn(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def as_sequence(x) -> np.ndarray:
    """Convert a 1-D array-like to a floating point ndarray.

    Floating arrays are wrapped without copying; other inputs are converted
    to Config.dtype. The result is a read-only view.
    """
    arr = np.asarray(x)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(Config.dtype)
    view = arr.view()
    view.flags.writeable = False
    return view

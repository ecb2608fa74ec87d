"""Copying, reordering and generating sequences."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from seqdsp.utils import as_count, as_sequence


def copy(seq: ArrayLike) -> np.ndarray:
    """Return a copy of `seq` that shares no memory with it."""
    return as_sequence(seq).copy()


def reverse(seq: ArrayLike) -> np.ndarray:
    """Return the samples of `seq` in flipped order, e.g. ``1,2,3 -> 3,2,1``."""
    return as_sequence(seq)[::-1].copy()


def repeat(x: float, n: int, dtype: DTypeLike = np.float64) -> np.ndarray:
    """Sequence of `n` copies of `x`, empty if `n` is 0 or negative."""
    n = as_count(n)
    if n <= 0:
        return np.empty(0, dtype=dtype)
    return np.full(n, x, dtype=dtype)


def every_nth(seq: ArrayLike, n: int) -> np.ndarray:
    """Take every `n`-th sample of `seq`, starting with the first one.

    The samples at ``0, n, 2n, ...`` are kept. A non-positive `n` gives an
    empty sequence.

    Examples
    --------
    >>> every_nth([1, 2, 3, 4, 5, 6, 7], 3)
    array([1., 4., 7.])
    """
    arr = as_sequence(seq)
    n = as_count(n)
    if n <= 0:
        return np.empty(0, dtype=arr.dtype)
    return arr[::n].copy()


def int_range(a: int, b: int, dtype: DTypeLike = np.float64) -> np.ndarray:
    """All integers from `a` to `b`, both included, in the order from `a` to
    `b`.

    Examples
    --------
    >>> int_range(5, 8)
    array([5., 6., 7., 8.])
    >>> int_range(2, -3)
    array([ 2.,  1.,  0., -1., -2., -3.])
    """
    a = as_count(a, "a")
    b = as_count(b, "b")
    if a <= b:
        return np.arange(a, b + 1).astype(dtype)
    return np.arange(a, b - 1, -1).astype(dtype)

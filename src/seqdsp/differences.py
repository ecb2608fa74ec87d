"""Finite differences."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from seqdsp import processors as proc
from seqdsp.utils import as_count, as_sequence


def derivative(seq: ArrayLike) -> np.ndarray:
    """Differences of neighboring samples, ``seq[i+1] - seq[i]``.

    The result is one sample shorter than `seq`, except for sequences with
    fewer than two samples: those give zeros of the same length, i.e. ``[]``
    stays ``[]`` and ``[x]`` becomes ``[0]``.

    Examples
    --------
    >>> derivative([1, 3, 4, 2])
    array([ 2.,  1., -2.])
    """
    arr = as_sequence(seq)
    if len(arr) <= 1:
        return np.zeros(len(arr), dtype=arr.dtype)

    w_out = np.empty(len(arr) - 1, dtype=arr.dtype)
    proc.derivative(arr, w_out)
    return w_out


def nth_derivative(seq: ArrayLike, n: int) -> np.ndarray:
    """Apply :func:`derivative` `n` times.

    A non-positive `n` returns a copy of `seq`. Once the sequence is down to
    a single sample it stays at ``[0]``.

    Examples
    --------
    >>> nth_derivative([1, 3, 4, 2], 2)
    array([-1., -3.])
    """
    arr = as_sequence(seq)
    n = as_count(n)

    if n <= 0:
        return arr.copy()

    d = arr
    for _ in range(n):
        d = derivative(d)
    return d

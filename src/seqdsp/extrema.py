"""Extrema and mean of a sequence."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from seqdsp import processors as proc
from seqdsp.utils import as_sequence


def min_max(seq: ArrayLike) -> tuple[int, float, int, float]:
    """Find the first minimum and the first maximum of `seq`.

    Parameters
    ----------
    seq
        the input sequence.

    Returns
    -------
    ``(min_index, min_value, max_index, max_value)``. Ties are resolved in
    favor of the lowest index. For an empty sequence the indices are ``-1``,
    the minimum is ``+inf`` and the maximum is ``-inf``.

    Examples
    --------
    >>> min_max([3, 2, 1, 3, 1, 4, 4])[::2]
    (2, 5)
    """
    arr = as_sequence(seq)
    scalar = arr.dtype.type

    if len(arr) == 0:
        return -1, scalar(np.inf), -1, scalar(-np.inf)

    t_min, a_min, t_max, a_max = proc.min_max(arr)
    return int(t_min), scalar(a_min), int(t_max), scalar(a_max)


def min_index(seq: ArrayLike) -> int:
    """Index of the first minimum of `seq`, ``-1`` if it is empty."""
    return min_max(seq)[0]


def min_value(seq: ArrayLike) -> float:
    """Minimum of `seq`, ``+inf`` if it is empty."""
    return min_max(seq)[1]


def max_index(seq: ArrayLike) -> int:
    """Index of the first maximum of `seq`, ``-1`` if it is empty."""
    return min_max(seq)[2]


def max_value(seq: ArrayLike) -> float:
    """Maximum of `seq`, ``-inf`` if it is empty."""
    return min_max(seq)[3]


def average(seq: ArrayLike) -> float:
    """Arithmetic mean of `seq`, or 0 if it is empty."""
    arr = as_sequence(seq)
    if len(arr) == 0:
        return arr.dtype.type(0)
    return arr.dtype.type(proc.mean(arr))

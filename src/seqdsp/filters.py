"""
Sliding-window filters.

Both filters share one clamping rule for the window width `w` over a
sequence of length `L`: `w` is first limited to `L`; a width of 1 or less
returns a copy of the input, otherwise the output holds ``L - w + 1``
samples, one per full window. Filtering therefore never fails and a
non-empty input always gives a non-empty output.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from seqdsp import processors as proc
from seqdsp.utils import as_count, as_sequence

log = logging.getLogger(__name__)


def _clamp_width(length: int, width: int) -> int:
    if width > length:
        log.debug(f"window width {width} clamped to sequence length {length}")
        width = length
    return width


def average_filter(seq: ArrayLike, width: int) -> np.ndarray:
    """Moving average over `width` neighboring samples.

    Parameters
    ----------
    seq
        the input sequence.
    width
        the window width. Widths larger than the sequence are clamped to its
        length, so the result is a single sample holding the mean of `seq`.

    Returns
    -------
    a new array, ``width - 1`` samples shorter than `seq`, or a copy of
    `seq` if the (clamped) width is 1 or less.

    Examples
    --------
    >>> average_filter([2, 4, 6, 8], 2)
    array([3., 5., 7.])
    >>> average_filter([1, 2, 3], 999)
    array([2.])
    """
    arr = as_sequence(seq)
    width = _clamp_width(len(arr), as_count(width, "width"))

    if width <= 1:
        return arr.copy()

    scalar = arr.dtype.type
    w_out = np.empty(len(arr) - width + 1, dtype=arr.dtype)
    proc.moving_window_mean(arr, scalar(1) / scalar(width), w_out)
    return w_out


def median_filter(seq: ArrayLike, width: int) -> np.ndarray:
    """Moving median over `width` neighboring samples.

    Every window is sorted on its own and its element at ``width // 2`` is
    taken, which is the upper of the two middle values for even widths.

    Parameters
    ----------
    seq
        the input sequence.
    width
        the window width, clamped as in :func:`average_filter`.

    Returns
    -------
    a new array, ``width - 1`` samples shorter than `seq`, or a copy of
    `seq` if the (clamped) width is 1 or less.

    Examples
    --------
    >>> median_filter([2, 1, 30, 50, 44], 3)
    array([ 2., 30., 44.])
    """
    arr = as_sequence(seq)
    width = _clamp_width(len(arr), as_count(width, "width"))

    if width <= 1:
        return arr.copy()

    w_out = np.empty(len(arr) - width + 1, dtype=arr.dtype)
    proc.median_filter(arr, w_out)
    return w_out

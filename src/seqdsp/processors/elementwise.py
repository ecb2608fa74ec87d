from __future__ import annotations

import numpy as np
from numba import guvectorize

from seqdsp.utils import numba_defaults_kwargs as nb_kwargs

# the multi_* kernels take the operands stacked row by row, already cut to a
# common length, and accumulate them from the first row to the last


@guvectorize(
    ["void(float32[:, :], float32[:])", "void(float64[:, :], float64[:])"],
    "(k,n),(n)",
    **nb_kwargs,
)
def multi_add(w_in: np.ndarray, w_out: np.ndarray) -> None:
    """Sum the rows of `w_in` into `w_out`.

    Parameters
    ----------
    w_in
        the operands, one per row.
    w_out
        the elementwise sum.
    """
    w_out[:] = 0
    for j in range(0, w_in.shape[0], 1):
        for i in range(0, len(w_out), 1):
            w_out[i] += w_in[j, i]


@guvectorize(
    ["void(float32[:, :], float32[:])", "void(float64[:, :], float64[:])"],
    "(k,n),(n)",
    **nb_kwargs,
)
def multi_sub(w_in: np.ndarray, w_out: np.ndarray) -> None:
    """Subtract all other rows of `w_in` from its first row.

    Parameters
    ----------
    w_in
        the operands, one per row; the first row is the base.
    w_out
        the elementwise difference.
    """
    w_out[:] = w_in[0]
    for j in range(1, w_in.shape[0], 1):
        for i in range(0, len(w_out), 1):
            w_out[i] -= w_in[j, i]


@guvectorize(
    ["void(float32[:, :], float32[:])", "void(float64[:, :], float64[:])"],
    "(k,n),(n)",
    **nb_kwargs,
)
def multi_mul(w_in: np.ndarray, w_out: np.ndarray) -> None:
    """Multiply the rows of `w_in` into `w_out`.

    Parameters
    ----------
    w_in
        the operands, one per row.
    w_out
        the elementwise product.
    """
    w_out[:] = 1
    for j in range(0, w_in.shape[0], 1):
        for i in range(0, len(w_out), 1):
            w_out[i] *= w_in[j, i]


@guvectorize(
    ["void(float32[:], float32[:])", "void(float64[:], float64[:])"],
    "(n),(n)",
    **nb_kwargs,
)
def absolute(w_in: np.ndarray, w_out: np.ndarray) -> None:
    """Absolute value of every sample, taken as ``x if x >= 0 else -x``.

    Negative zero is kept as it is and NaN goes through the negation.

    Parameters
    ----------
    w_in
        the input sequence.
    w_out
        the absolute values.
    """
    for i in range(0, len(w_in), 1):
        if w_in[i] >= 0:
            w_out[i] = w_in[i]
        else:
            w_out[i] = -w_in[i]

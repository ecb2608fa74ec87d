"""
Elementwise arithmetic.

The n-ary combinators :func:`add`, :func:`sub` and :func:`mul` accept any
number of sequences and work over the index range all of them share: the
result is as long as the shortest operand, longer operands are cut without
notice. The binary :func:`div` and :func:`safe_div` follow the same rule.

Division by zero is not an error. :func:`reciprocal` and :func:`div` return
the IEEE-754 result (``inf``, ``-inf`` or ``nan``), the ``safe_`` variants
put a replacement value wherever the divisor is exactly zero.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from seqdsp import processors as proc
from seqdsp.utils import as_sequence, common_length, result_dtype


def _stack(seqs: tuple) -> np.ndarray:
    """Stack `seqs` row by row, cut to their common length."""
    arrs = [as_sequence(s, f"seqs[{i}]") for i, s in enumerate(seqs)]
    n = common_length(*arrs)

    w_in = np.empty((len(arrs), n), dtype=result_dtype(*arrs))
    for j, arr in enumerate(arrs):
        w_in[j] = arr[:n]
    return w_in


def _combine(kernel, seqs: tuple) -> np.ndarray:
    if len(seqs) == 0:
        return np.empty(0, dtype=np.float64)

    w_in = _stack(seqs)
    w_out = np.empty(w_in.shape[1], dtype=w_in.dtype)
    if len(w_out) > 0:
        kernel(w_in, w_out)
    return w_out


def add(*seqs: ArrayLike) -> np.ndarray:
    """Elementwise sum of all `seqs`.

    Examples
    --------
    >>> add([1, 2], [4, 7, 9])
    array([5., 9.])
    """
    return _combine(proc.multi_add, seqs)


def sub(*seqs: ArrayLike) -> np.ndarray:
    """Subtract all other `seqs` from the first one, elementwise.

    Examples
    --------
    >>> sub([5], [1], [2])
    array([2.])
    """
    return _combine(proc.multi_sub, seqs)


def mul(*seqs: ArrayLike) -> np.ndarray:
    """Elementwise product of all `seqs`."""
    return _combine(proc.multi_mul, seqs)


def add_offset(seq: ArrayLike, offset: float) -> np.ndarray:
    """Add `offset` to every sample of `seq`."""
    arr = as_sequence(seq)
    return arr + arr.dtype.type(offset)


def scale(seq: ArrayLike, factor: float) -> np.ndarray:
    """Multiply every sample of `seq` by `factor`."""
    arr = as_sequence(seq)
    return arr * arr.dtype.type(factor)


def negative(seq: ArrayLike) -> np.ndarray:
    """Negate every sample of `seq`."""
    return np.negative(as_sequence(seq))


def abs_value(x: float) -> float:
    """Absolute value of `x`, defined as ``x if x >= 0 else -x``.

    No special handling of NaN: it fails the comparison and comes back
    negated. Negative zero passes the comparison and is returned unchanged.
    """
    if x >= 0:
        return x
    return -x


def absolute(seq: ArrayLike) -> np.ndarray:
    """:func:`abs_value` of every sample of `seq`."""
    arr = as_sequence(seq)
    w_out = np.empty(len(arr), dtype=arr.dtype)
    if len(arr) > 0:
        # NaN fails the ordered comparison and would raise the invalid flag
        with np.errstate(invalid="ignore"):
            proc.absolute(arr, w_out)
    return w_out


def reciprocal(seq: ArrayLike) -> np.ndarray:
    """``1 / seq[i]`` for every sample; zeros give infinities."""
    arr = as_sequence(seq)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.divide(arr.dtype.type(1), arr)


def safe_reciprocal(seq: ArrayLike, replacement: float) -> np.ndarray:
    """Like :func:`reciprocal`, but samples equal to zero give `replacement`.

    Examples
    --------
    >>> safe_reciprocal([0, 2], 123)
    array([123. ,   0.5])
    """
    arr = as_sequence(seq)
    w_out = np.full(len(arr), replacement, dtype=arr.dtype)
    np.divide(arr.dtype.type(1), arr, out=w_out, where=arr != 0)
    return w_out


def div(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Elementwise ``a[i] / b[i]`` over the shorter of the two sequences.

    Zeros in `b` are allowed and give the IEEE-754 result.
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    n = common_length(a, b)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.divide(a[:n], b[:n])


def safe_div(a: ArrayLike, b: ArrayLike, replacement: float) -> np.ndarray:
    """Like :func:`div`, but where ``b[i] == 0`` the result is `replacement`."""
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    n = common_length(a, b)

    w_out = np.full(n, replacement, dtype=result_dtype(a, b))
    np.divide(a[:n], b[:n], out=w_out, where=b[:n] != 0)
    return w_out

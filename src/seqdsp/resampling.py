from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from seqdsp import processors as proc
from seqdsp.utils import as_count, as_sequence

log = logging.getLogger(__name__)


def resample(seq: ArrayLike, new_length: int) -> np.ndarray:
    """Linearly re-sample `seq` to `new_length` samples.

    For sequences and target lengths of at least two samples, the first and
    last values are kept exactly and the interior is interpolated as in
    :func:`seqdsp.processors.resample`. The degenerate cases are:

    * empty `seq` or `new_length` of 0 or less: empty result.
    * `seq` with a single value: that value repeated `new_length` times.
    * `new_length` of 1: the mean of the first and the last value of `seq`.

    Parameters
    ----------
    seq
        the input sequence.
    new_length
        number of samples in the result.

    Examples
    --------
    >>> resample([100, 200], 3)
    array([100., 150., 200.])
    >>> resample([1, 2], 1)
    array([1.5])
    """
    arr = as_sequence(seq)
    new_length = as_count(new_length, "new_length")

    if len(arr) == 0 or new_length <= 0:
        return np.empty(0, dtype=arr.dtype)

    if len(arr) == 1:
        log.debug(f"single sample repeated {new_length} times")
        return np.full(new_length, arr[0], dtype=arr.dtype)

    if new_length == 1:
        log.debug("resampling to one sample, averaging the endpoints")
        return np.array([(arr[0] + arr[-1]) / arr.dtype.type(2)], dtype=arr.dtype)

    w_out = np.empty(new_length, dtype=arr.dtype)
    proc.resample(arr, w_out)
    return w_out

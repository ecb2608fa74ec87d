from __future__ import annotations

import numpy as np
from numba import guvectorize

from seqdsp.utils import numba_defaults_kwargs as nb_kwargs


@guvectorize(
    ["void(float32[:], float32[:])", "void(float64[:], float64[:])"],
    "(n)->()",
    **nb_kwargs,
)
def mean(w_in: np.ndarray, a_out: float) -> None:
    """Arithmetic mean of a non-empty sequence, summed from left to right in
    the precision of `w_in`.

    Parameters
    ----------
    w_in
        the input sequence.
    a_out
        the mean value.
    """
    total = w_in[0]
    for i in range(1, len(w_in), 1):
        total += w_in[i]
    a_out[0] = total / len(w_in)

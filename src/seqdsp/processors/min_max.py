from __future__ import annotations

import numpy as np
from numba import guvectorize

from seqdsp.utils import numba_defaults_kwargs as nb_kwargs


@guvectorize(
    [
        "void(float32[:], int64[:], float32[:], int64[:], float32[:])",
        "void(float64[:], int64[:], float64[:], int64[:], float64[:])",
    ],
    "(n)->(),(),(),()",
    **nb_kwargs,
)
def min_max(
    w_in: np.ndarray, t_min: int, a_min: float, t_max: int, a_max: float
) -> None:
    """Find the index and value of the minimum and maximum of a sequence.

    Note
    ----
    The first found instance of each extremum is returned: an index is only
    replaced on a strictly smaller (larger) value. A NaN never replaces the
    current extremum. `w_in` must not be empty.

    Parameters
    ----------
    w_in
        the input sequence.
    t_min
        the index of the minimum value.
    a_min
        the minimum value.
    t_max
        the index of the maximum value.
    a_max
        the maximum value.
    """
    min_index = 0
    max_index = 0

    for i in range(1, len(w_in), 1):
        if w_in[i] < w_in[min_index]:
            min_index = i
        if w_in[i] > w_in[max_index]:
            max_index = i

    t_min[0] = min_index
    a_min[0] = w_in[min_index]
    t_max[0] = max_index
    a_max[0] = w_in[max_index]

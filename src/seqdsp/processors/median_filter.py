from __future__ import annotations

import numpy as np
from numba import guvectorize

from seqdsp.errors import SequenceError
from seqdsp.utils import numba_defaults_kwargs as nb_kwargs


@guvectorize(
    ["void(float32[:], float32[:])", "void(float64[:], float64[:])"],
    "(n),(m)",
    **nb_kwargs,
)
def median_filter(w_in: np.ndarray, w_out: np.ndarray) -> None:
    """Replace every window of the sequence by its middle sorted value.

    The window width is ``len(w_in) - len(w_out) + 1``. Every window is
    sorted in a buffer of its own and the element at ``width // 2`` is
    picked, i.e. the upper of the two middle values for even widths.
    NaN samples sort after every number, as in :func:`numpy.sort`.

    Parameters
    ----------
    w_in
        the input sequence.
    w_out
        the filtered sequence, one sample per full window.
    """
    if len(w_out) < 1 or len(w_out) > len(w_in):
        raise SequenceError("output must hold between 1 and len(w_in) samples")

    width = len(w_in) - len(w_out) + 1

    for i in range(0, len(w_out), 1):
        window = np.sort(w_in[i : i + width])
        w_out[i] = window[width // 2]

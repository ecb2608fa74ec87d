from __future__ import annotations

import numpy as np
from numba import guvectorize

from seqdsp.errors import SequenceError
from seqdsp.utils import numba_defaults_kwargs as nb_kwargs


@guvectorize(
    ["void(float32[:], float32, float32[:])", "void(float64[:], float64, float64[:])"],
    "(n),(),(m)",
    **nb_kwargs,
)
def moving_window_mean(w_in: np.ndarray, factor: float, w_out: np.ndarray) -> None:
    """Apply a moving average window to the sequence.

    The window width is ``len(w_in) - len(w_out) + 1``. A sliding sum is
    seeded over the first window and then updated with the entering and the
    leaving sample, so the cost does not depend on the width.

    Parameters
    ----------
    w_in
        the input sequence.
    factor
        the reciprocal of the window width, in the precision of `w_in`.
    w_out
        the averaged sequence, one sample per full window.
    """
    if len(w_out) < 1 or len(w_out) > len(w_in):
        raise SequenceError("output must hold between 1 and len(w_in) samples")

    width = len(w_in) - len(w_out) + 1

    sliding_sum = w_in[0]
    for i in range(1, width, 1):
        sliding_sum += w_in[i]
    w_out[0] = sliding_sum * factor

    for i in range(1, len(w_out), 1):
        sliding_sum += w_in[i + width - 1] - w_in[i - 1]
        w_out[i] = sliding_sum * factor

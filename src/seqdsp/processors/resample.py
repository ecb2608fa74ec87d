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
def resample(w_in: np.ndarray, w_out: np.ndarray) -> None:
    """Linearly re-sample `w_in` onto the length of `w_out`.

    The first and last samples are copied. Interior output sample ``i`` maps
    to the source position ``j = i * (len(w_in)-1) / (len(w_out)-1)`` and,
    with ``low = floor(j)`` and ``fraction = j - low``, takes the value
    ``fraction * w_in[low] + (1 - fraction) * w_in[low + 1]``.

    Note
    ----
    `fraction` weighs the *lower* neighbor. This is the inverse of the
    textbook interpolation and existing results depend on it. The
    interpolation is carried out in double precision.

    Parameters
    ----------
    w_in
        the input sequence, at least two samples long.
    w_out
        the re-sampled sequence, at least two samples long.
    """
    if len(w_in) < 2 or len(w_out) < 2:
        raise SequenceError("input and output must hold at least two samples")

    w_out[0] = w_in[0]
    w_out[-1] = w_in[-1]

    index_scale = float(len(w_in) - 1) / float(len(w_out) - 1)
    for i in range(1, len(w_out) - 1, 1):
        j = i * index_scale
        low = int(j)
        high = low + 1
        fraction = j - low
        w_out[i] = fraction * float(w_in[low]) + (1.0 - fraction) * float(w_in[high])

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
def derivative(w_in: np.ndarray, w_out: np.ndarray) -> None:
    """Calculate the difference between neighboring samples.

    Parameters
    ----------
    w_in
        the input sequence, at least two samples long.
    w_out
        output sequence, one sample shorter than `w_in`; ``w_out[0]`` is
        ``w_in[1] - w_in[0]``.
    """
    if len(w_in) < 2 or len(w_out) != len(w_in) - 1:
        raise SequenceError("output must be one sample shorter than the input")

    w_out[:] = w_in[1:] - w_in[:-1]

r"""
Contains the sequence kernels, implemented using Numba's
:func:`numba.guvectorize` to implement NumPy's :class:`numpy.ufunc` interface.
In other words, all of the functions are void functions whose outputs are given
as parameters, and every kernel is compiled once for ``float32`` and once for
``float64`` arrays. The precision of the result is the precision of the input.

Output lengths here are not fixed by the input length (a moving window of
width ``w`` shortens the sequence by ``w - 1`` samples), so most kernels take
a pre-allocated output array whose length encodes the operation parameter,
e.g. ::

    w_out = np.empty(len(w_in) - width + 1, dtype=w_in.dtype)
    moving_window_mean(w_in, w_in.dtype.type(1) / width, w_out)

The kernels expect non-empty inputs and consistent lengths. The functions
exported by the top-level :mod:`seqdsp` package take care of the empty and
degenerate cases, allocate the outputs and are what most users want.
"""

from .derivative import derivative
from .elementwise import absolute, multi_add, multi_mul, multi_sub
from .mean import mean
from .median_filter import median_filter
from .min_max import min_max
from .moving_windows import moving_window_mean
from .resample import resample

__all__ = [
    "absolute",
    "derivative",
    "mean",
    "median_filter",
    "min_max",
    "moving_window_mean",
    "multi_add",
    "multi_mul",
    "multi_sub",
    "resample",
]

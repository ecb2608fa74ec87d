"""
seqdsp: elementary operations on 1-D numeric sequences.

Extrema search, moving average and median filters, finite differences,
elementwise arithmetic with a shortest-common-length rule, safe division and
a linear resampler. All operations return new arrays and never modify their
inputs. ``float32`` and ``float64`` inputs keep their precision; any other
real input is computed in ``float64``.
"""

from ._version import version as __version__
from .arithmetic import (
    abs_value,
    absolute,
    add,
    add_offset,
    div,
    mul,
    negative,
    reciprocal,
    safe_div,
    safe_reciprocal,
    scale,
    sub,
)
from .differences import derivative, nth_derivative
from .extrema import average, max_index, max_value, min_index, min_max, min_value
from .filters import average_filter, median_filter
from .resampling import resample
from .shaping import copy, every_nth, int_range, repeat, reverse

__all__ = [
    "__version__",
    "abs_value",
    "absolute",
    "add",
    "add_offset",
    "average",
    "average_filter",
    "copy",
    "derivative",
    "div",
    "every_nth",
    "int_range",
    "max_index",
    "max_value",
    "median_filter",
    "min_index",
    "min_max",
    "min_value",
    "mul",
    "negative",
    "nth_derivative",
    "reciprocal",
    "repeat",
    "resample",
    "reverse",
    "safe_div",
    "safe_reciprocal",
    "scale",
    "sub",
]

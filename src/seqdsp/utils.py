from __future__ import annotations

import operator
import os
from collections.abc import MutableMapping
from typing import Any, Iterator

import numpy as np

from seqdsp.errors import ParameterError, SequenceError

#: dtypes the kernels in :mod:`seqdsp.processors` are compiled for.
SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))

#: values of a boolean environment variable read as true (caps-insensitive).
TRUE_STRINGS = frozenset(("1", "t", "true"))

#: Numba compile options and the environment variables that set them.
NUMBA_OPTION_ENV = {
    "cache": "SEQDSP_CACHE",
    "boundscheck": "SEQDSP_BOUNDSCHECK",
}


def getenv_bool(name: str, default: bool = False) -> bool:
    """Read environment variable `name` as a flag.

    Unset or empty variables give `default`, anything else is true only if it
    is one of :data:`TRUE_STRINGS`.
    """
    val = os.getenv(name)
    if not val:
        return default
    return val.lower() in TRUE_STRINGS


class NumbaDefaults(MutableMapping):
    """Numba options the kernels in :mod:`seqdsp.processors` are compiled
    with, readable as a mapping (to expand into the decorator) or as
    attributes. Initial values come from the environment variables listed in
    :data:`NUMBA_OPTION_ENV`.

    Examples
    --------
    Expand the options into a kernel decorator, optionally overriding one:

    >>> from numba import guvectorize
    >>> from seqdsp.utils import numba_defaults as nb_defaults
    >>> @guvectorize([], "", **nb_defaults(cache=False)) # def kernel(...): ...

    Kernels are compiled when :mod:`seqdsp.processors` is first imported, so
    runtime overrides must come before that:

    >>> from seqdsp.utils import numba_defaults
    >>> numba_defaults.boundscheck = True
    >>> import seqdsp
    """

    def __init__(self) -> None:
        object.__setattr__(self, "_options", {})
        self.reset()

    def reset(self) -> None:
        """Drop all overrides and read the options from the environment again."""
        self._options.clear()
        for option, env in NUMBA_OPTION_ENV.items():
            self._options[option] = getenv_bool(env)

    def __getattr__(self, option: str) -> Any:
        if option.startswith("_"):
            raise AttributeError(option)
        try:
            return self._options[option]
        except KeyError:
            raise AttributeError(option) from None

    def __setattr__(self, option: str, val: Any) -> None:
        self._options[option] = val

    def __getitem__(self, option: str) -> Any:
        return self._options[option]

    def __setitem__(self, option: str, val: Any) -> None:
        self._options[option] = val

    def __delitem__(self, option: str) -> None:
        del self._options[option]

    def __iter__(self) -> Iterator:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __call__(self, **overrides) -> dict:
        """Options as a plain dictionary, with `overrides` applied."""
        return {**self._options, **overrides}

    def __repr__(self) -> str:
        opts = ", ".join(f"{k}={v!r}" for k, v in self._options.items())
        return f"{type(self).__name__}({opts})"


numba_defaults = NumbaDefaults()
numba_defaults_kwargs = numba_defaults


def as_sequence(seq: Any, name: str = "seq") -> np.ndarray:
    """Read `seq` as a 1-D floating point array.

    ``float32`` and ``float64`` arrays are returned as they are (no copy), any
    other real dtype is converted to ``float64``. ``None`` is read as the
    empty sequence. The returned array must be treated as read-only by the
    caller, since it may be the caller's own data.

    Parameters
    ----------
    seq
        a 1-D array-like, or `None`.
    name
        name of the argument, used in error messages.

    Raises
    ------
    SequenceError
        if `seq` is not one-dimensional or does not hold real numbers.
    """
    if seq is None:
        return np.empty(0, dtype=np.float64)

    arr = np.asarray(seq)
    if arr.ndim != 1:
        raise SequenceError(
            f"expected a 1-D sequence, got {arr.ndim} dimension(s)", argument=name
        )

    if arr.dtype in SUPPORTED_DTYPES:
        return arr
    if arr.dtype.kind in "biuf":
        return arr.astype(np.float64)
    if arr.dtype.kind == "O" and len(arr) == 0:
        return np.empty(0, dtype=np.float64)

    raise SequenceError(
        f"expected real values, got dtype '{arr.dtype}'", argument=name
    )


def as_count(value: Any, name: str = "n") -> int:
    """Read `value` as a Python integer.

    Accepts anything implementing ``__index__`` (``int``, ``bool``, NumPy
    integers).

    Raises
    ------
    ParameterError
        if `value` is not an integer, e.g. ``2.5``.
    """
    try:
        return operator.index(value)
    except TypeError as e:
        raise ParameterError(
            f"'{name}' must be an integer, got {type(value).__name__}"
        ) from e


def common_length(*seqs: np.ndarray) -> int:
    """Length of the shortest of `seqs`, 0 if none are given."""
    if len(seqs) == 0:
        return 0
    return min(len(s) for s in seqs)


def result_dtype(*seqs: np.ndarray) -> np.dtype:
    """Floating dtype that holds the combination of `seqs`."""
    if len(seqs) == 0:
        return np.dtype(np.float64)
    return np.result_type(*seqs)

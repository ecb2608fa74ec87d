import inspect

import numpy as np
import pytest

import seqdsp.processors  # noqa: F401


@pytest.fixture(scope="session")
def compare_numba_vs_python():
    def numba_vs_python(func, *inputs):
        """Run a kernel both compiled and as its plain python body, each on
        its own copy of the inputs, and check that the two wrote the same
        output. The output array is the last input. Returns the output written
        by the compiled kernel.
        """
        numba_args = [np.copy(x) if isinstance(x, np.ndarray) else x for x in inputs]
        python_args = [np.copy(x) if isinstance(x, np.ndarray) else x for x in inputs]

        func(*numba_args)
        inspect.unwrap(func)(*python_args)

        assert numba_args[-1].dtype == python_args[-1].dtype
        assert np.allclose(numba_args[-1], python_args[-1], equal_nan=True)
        return numba_args[-1]

    return numba_vs_python

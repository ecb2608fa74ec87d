import numpy as np
import pytest

from seqdsp.errors import SequenceError
from seqdsp.processors import median_filter


def test_median_filter(compare_numba_vs_python):
    w_in = np.array([2, 1, 30, 50, 44], dtype=np.float64)
    result = compare_numba_vs_python(median_filter, w_in, np.empty(3))
    assert np.array_equal(result, [2, 30, 44])

    # even widths pick the upper middle value
    w_in = np.array([1, 3, 2], dtype=np.float64)
    result = compare_numba_vs_python(median_filter, w_in, np.empty(2))
    assert np.array_equal(result, [3, 3])

    w_in = np.array([4, 1, 3, 2], dtype=np.float32)
    result = compare_numba_vs_python(median_filter, w_in, np.empty(1, np.float32))
    assert np.array_equal(result, [3])


def test_median_filter_leaves_input_unsorted():
    w_in = np.array([5, 4, 3, 2, 1], dtype=np.float64)
    median_filter(w_in, np.empty(3))
    assert np.array_equal(w_in, [5, 4, 3, 2, 1])


def test_median_filter_matches_np_sort():
    rng = np.random.default_rng(42)
    w_in = rng.integers(-20, 20, size=200).astype(np.float64)

    for width in [2, 3, 4, 5, 10, 11]:
        w_out = np.empty(len(w_in) - width + 1)
        median_filter(w_in, w_out)
        expected = [
            np.sort(w_in[i : i + width])[width // 2] for i in range(len(w_out))
        ]
        assert np.array_equal(w_out, expected)


def test_median_filter_bad_output_length():
    with pytest.raises(SequenceError):
        median_filter(np.ones(3), np.empty(4))

import numpy as np
import pytest

import seqdsp


def test_derivative():
    assert np.array_equal(seqdsp.derivative([]), [])
    assert np.array_equal(seqdsp.derivative([1]), [0])
    assert np.array_equal(seqdsp.derivative([1, 3]), [2])
    assert np.array_equal(seqdsp.derivative([1, 3, 4]), [2, 1])
    assert np.array_equal(seqdsp.derivative([1, 3, 4, 2]), [2, 1, -2])


def test_derivative_keeps_precision():
    assert seqdsp.derivative(np.array([1], dtype=np.float32)).dtype == np.float32
    assert seqdsp.derivative(np.array([1, 2], dtype=np.float32)).dtype == np.float32


@pytest.mark.parametrize(
    "n, expected",
    [
        (-1, [1, 3, 4, 2]),
        (0, [1, 3, 4, 2]),
        (1, [2, 1, -2]),
        (2, [-1, -3]),
        (3, [-2]),
        (4, [0]),
        (5, [0]),
    ],
)
def test_nth_derivative(n, expected):
    assert np.array_equal(seqdsp.nth_derivative([1, 3, 4, 2], n), expected)


def test_nth_derivative_of_empty_sequence():
    for n in [0, 1, 3]:
        assert len(seqdsp.nth_derivative([], n)) == 0


def test_zeroth_derivative_is_a_copy():
    seq = np.array([1, 3, 4, 2], dtype=np.float64)
    d = seqdsp.nth_derivative(seq, 0)
    assert d is not seq
    assert not np.shares_memory(d, seq)
    assert np.array_equal(d, seq)

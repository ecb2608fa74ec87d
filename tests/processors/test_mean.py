import numpy as np

from seqdsp.processors import mean


def test_mean():
    assert mean(np.array([8.0])) == 8
    assert mean(np.array([1.0, 2.0])) == 1.5
    assert mean(np.array([1.0, 2.0, 3.0])) == 2


def test_mean_keeps_precision():
    a_out = mean(np.array([1, 2], dtype=np.float32))
    assert a_out.dtype == np.float32
    assert a_out == np.float32(1.5)

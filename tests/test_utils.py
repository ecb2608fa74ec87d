import numpy as np
import pytest

from seqdsp.errors import ParameterError, SequenceError
from seqdsp.utils import (
    NumbaDefaults,
    as_count,
    as_sequence,
    common_length,
    getenv_bool,
    result_dtype,
)


def test_getenv_bool(monkeypatch):
    monkeypatch.delenv("SEQDSP_TEST_FLAG", raising=False)
    assert not getenv_bool("SEQDSP_TEST_FLAG")
    assert getenv_bool("SEQDSP_TEST_FLAG", default=True)

    for val in ["1", "t", "True", "TRUE"]:
        monkeypatch.setenv("SEQDSP_TEST_FLAG", val)
        assert getenv_bool("SEQDSP_TEST_FLAG")

    for val in ["0", "no", "false"]:
        monkeypatch.setenv("SEQDSP_TEST_FLAG", val)
        assert not getenv_bool("SEQDSP_TEST_FLAG")


def test_numba_defaults(monkeypatch):
    monkeypatch.setenv("SEQDSP_CACHE", "true")
    monkeypatch.delenv("SEQDSP_BOUNDSCHECK", raising=False)

    nb_defaults = NumbaDefaults()
    assert nb_defaults.cache
    assert not nb_defaults.boundscheck
    assert dict(nb_defaults) == {"cache": True, "boundscheck": False}

    assert nb_defaults(cache=False) == {"cache": False, "boundscheck": False}
    assert nb_defaults.cache

    nb_defaults.boundscheck = True
    assert nb_defaults["boundscheck"]
    del nb_defaults["cache"]
    assert len(nb_defaults) == 1


def test_numba_defaults_reset(monkeypatch):
    monkeypatch.delenv("SEQDSP_CACHE", raising=False)
    monkeypatch.setenv("SEQDSP_BOUNDSCHECK", "1")

    nb_defaults = NumbaDefaults()
    nb_defaults.cache = True
    nb_defaults["fastmath"] = True
    assert nb_defaults(nopython=True) == {
        "cache": True,
        "boundscheck": True,
        "fastmath": True,
        "nopython": True,
    }

    nb_defaults.reset()
    assert dict(nb_defaults) == {"cache": False, "boundscheck": True}
    assert repr(nb_defaults) == "NumbaDefaults(cache=False, boundscheck=True)"
    with pytest.raises(AttributeError):
        nb_defaults.fastmath


def test_as_sequence_dtypes():
    f32 = np.array([1, 2], dtype=np.float32)
    assert as_sequence(f32) is f32
    assert as_sequence([1, 2]).dtype == np.float64
    assert as_sequence(np.array([1, 2], dtype=np.int32)).dtype == np.float64
    assert as_sequence(np.array([1, 2], dtype=np.float16)).dtype == np.float64
    assert as_sequence([True, False]).dtype == np.float64
    assert as_sequence(None).dtype == np.float64
    assert len(as_sequence(None)) == 0
    assert len(as_sequence(())) == 0


@pytest.mark.parametrize("bad", [5.0, [[1, 2]], [1 + 2j], ["a", "b"]])
def test_as_sequence_rejects(bad):
    with pytest.raises(SequenceError):
        as_sequence(bad)


def test_sequence_error_names_argument():
    with pytest.raises(SequenceError, match="argument 'w'"):
        as_sequence([[1]], name="w")


def test_as_count():
    assert as_count(3) == 3
    assert as_count(np.int64(-2)) == -2
    assert as_count(True) == 1
    with pytest.raises(ParameterError, match="'width'"):
        as_count(2.0, "width")


def test_common_length_and_dtype():
    assert common_length() == 0
    assert common_length(np.ones(3), np.ones(5)) == 3
    assert result_dtype() == np.float64
    assert result_dtype(np.ones(1, np.float32)) == np.float32
    assert result_dtype(np.ones(1, np.float32), np.ones(1)) == np.float64

"""Conversions between Complex and builtin / NumPy complex values."""

import math

import numpy as np
import pytest

from c99complex import Complex, from_builtin, from_numpy, from_pair, to_builtin, to_numpy, to_pair
from c99complex.bridge import from_numpy_array, to_numpy_array
from complex_asserts import assert_complex

INF = float("inf")
NAN = float("nan")

SPECIALS = [
    (0.0, 0.0),
    (-0.0, 0.0),
    (0.0, -0.0),
    (-0.0, -0.0),
    (INF, -INF),
    (-INF, 1.5),
    (NAN, 2.0),
    (1e-320, -1e308),
]


class TestBuiltin:
    @pytest.mark.parametrize("re, im", SPECIALS)
    def test_roundtrip_preserves_specials(self, re, im):
        z = Complex(re, im)
        c = to_builtin(z)
        assert isinstance(c, complex)
        assert_complex(from_builtin(c), re, im)

    def test_from_real(self):
        assert_complex(from_builtin(3), 3.0, 0.0)
        assert_complex(from_builtin(-0.0), -0.0, 0.0)

    def test_rejects_non_numeric(self):
        with pytest.raises(TypeError):
            from_builtin("1+2j")
        with pytest.raises(TypeError):
            from_builtin(True)

    def test_dunder_complex(self):
        assert complex(Complex(1, -2)) == complex(1, -2)


class TestNumpy:
    @pytest.mark.parametrize("re, im", SPECIALS)
    def test_roundtrip_preserves_specials(self, re, im):
        n = to_numpy(Complex(re, im))
        assert isinstance(n, np.complex128)
        assert_complex(from_numpy(n), re, im)

    def test_real_scalar(self):
        assert_complex(from_numpy(np.float32(0.5)), 0.5, 0.0)
        assert_complex(from_numpy(np.int64(-7)), -7.0, 0.0)

    def test_zero_dim_array(self):
        assert_complex(from_numpy(np.array(1 + 2j)), 1.0, 2.0)

    def test_rejects_arrays(self):
        with pytest.raises(ValueError):
            from_numpy(np.array([1 + 2j, 3j]))

    def test_array_roundtrip(self):
        values = [Complex(1, 2), Complex(-0.0, INF), Complex(NAN, -0.0)]
        arr = to_numpy_array(values)
        assert arr.dtype == np.complex128
        assert arr.shape == (3,)
        back = from_numpy_array(arr)
        for got, want in zip(back, values):
            assert_complex(got, want.re, want.im)

    def test_real_array(self):
        back = from_numpy_array(np.array([[1, 2], [3, 4]]))
        assert [z.re for z in back] == [1.0, 2.0, 3.0, 4.0]
        assert all(z.im == 0.0 for z in back)

    def test_empty_array(self):
        assert to_numpy_array([]).shape == (0,)


class TestPair:
    def test_roundtrip(self):
        z = Complex(-0.0, NAN)
        re, im = to_pair(z)
        assert type(re) is float and type(im) is float
        assert math.copysign(1.0, re) == -1.0
        assert_complex(from_pair((re, im)), -0.0, NAN)

    def test_accepts_iterables(self):
        assert from_pair(iter([1.0, 2.0])) == Complex(1, 2)
        assert from_pair(np.array([3.0, -4.0])) == Complex(3, -4)

    @pytest.mark.parametrize("bad", [(), (1.0,), (1.0, 2.0, 3.0)])
    def test_wrong_length(self, bad):
        with pytest.raises(ValueError):
            from_pair(bad)

    def test_iter_unpacks(self):
        re, im = Complex(5, 6)
        assert (re, im) == (5.0, 6.0)

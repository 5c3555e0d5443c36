"""Tests for sinh, cosh, tanh, coth, sech, csch."""

import cmath
import math

import pytest

from c99complex import Complex, cosh, coth, csch, sech, sinh, tanh
from complex_asserts import assert_complex

INF = float("inf")
NAN = float("nan")
PI = math.pi

GRID = [(0.5, 0.25), (1.0, 1.0), (-2.0, 0.75), (3.0, -1.5), (-0.3, -2.0)]


def _ref(func, x, y):
    w = func(complex(x, y))
    return w.real, w.imag


@pytest.mark.parametrize("x, y", GRID)
def test_sinh_cosh_tanh_match_cmath(x, y):
    z = Complex(x, y)
    assert_complex(sinh(z), *_ref(cmath.sinh, x, y), rel=1e-12)
    assert_complex(cosh(z), *_ref(cmath.cosh, x, y), rel=1e-12)
    assert_complex(tanh(z), *_ref(cmath.tanh, x, y), rel=1e-10)


class TestSinh:
    def test_known_value(self):
        assert_complex(sinh(Complex(1, 1)), 0.6349639147847361, 1.2984575814159773)

    def test_infinite_real(self):
        assert_complex(sinh(Complex(INF, 0)), INF, 0.0)
        assert_complex(sinh(Complex(-INF, 0)), -INF, 0.0)
        assert_complex(sinh(Complex(INF, NAN)), INF, NAN)

    def test_infinite_real_rotated(self):
        z = sinh(Complex(INF, 1.0))
        assert z.re == INF and z.im == INF

    def test_infinite_imaginary(self):
        assert_complex(sinh(Complex(0, INF)), NAN, NAN)

    def test_nan(self):
        assert_complex(sinh(Complex(NAN, 0)), NAN, NAN)
        assert_complex(sinh(Complex(1, NAN)), NAN, NAN)


class TestCosh:
    def test_known_value(self):
        assert_complex(cosh(Complex(1, 1)), 0.8337300251311491, 0.9888977057628651)

    def test_even_in_infinity(self):
        assert_complex(cosh(Complex(INF, 0)), INF, 0.0)
        assert_complex(cosh(Complex(-INF, 0)), INF, 0.0)
        assert_complex(cosh(Complex(-INF, NAN)), INF, NAN)

    def test_imaginary_axis(self):
        assert_complex(cosh(Complex(0, PI)), -1.0, 0.0)

    def test_infinite_imaginary(self):
        assert_complex(cosh(Complex(1, -INF)), NAN, NAN)


class TestTanh:
    def test_known_value(self):
        assert_complex(tanh(Complex(1, 1)), 1.0839233273386946, 0.2717525853195117)

    def test_tiny_input_unchanged(self):
        assert_complex(tanh(Complex(0, 0)), 0.0, 0.0)
        assert_complex(tanh(Complex(1e-17, -1e-17)), 1e-17, -1e-17)

    @pytest.mark.parametrize("y", [1.0, -2.5, 0.0, 1e6])
    def test_infinite_real_takes_annex_g_limit(self, y):
        # C99 G.6.2.6: tanh(+inf + iy) = 1 + i0 for finite y, unlike coth.
        assert_complex(tanh(Complex(INF, y)), 1.0, 0.0)
        assert_complex(tanh(Complex(-INF, y)), -1.0, 0.0)
        assert_complex(coth(Complex(INF, y)), NAN, NAN)

    def test_infinite_real_nan_imaginary(self):
        assert_complex(tanh(Complex(INF, NAN)), 1.0, NAN)
        assert_complex(tanh(Complex(INF, PI / 2)), 1.0, NAN)

    def test_imaginary_axis(self):
        z = tanh(Complex(0, PI / 4))
        assert z.re == 0.0
        assert math.isclose(z.im, 1.0)

    def test_poles(self):
        assert_complex(tanh(Complex(0, PI / 2)), NAN, NAN)
        assert_complex(tanh(Complex(0, -3 * PI / 2)), NAN, NAN)

    def test_infinite_imaginary(self):
        assert_complex(tanh(Complex(1, INF)), NAN, NAN)


class TestCoth:
    def test_known_value(self):
        assert_complex(coth(Complex(1, 1)), 0.8680141428959249, -0.2176215618544027)

    def test_quarter_turn(self):
        assert_complex(coth(Complex(0, PI / 4)), 0.0, -1.0)

    def test_pole_at_zero(self):
        assert_complex(coth(Complex(0, 0)), NAN, NAN)
        assert_complex(coth(Complex(0, PI)), NAN, NAN)

    def test_half_pi_zero(self):
        assert_complex(coth(Complex(0, PI / 2)), 0.0, 0.0)

    def test_infinite(self):
        assert_complex(coth(Complex(INF, 0)), NAN, NAN)
        assert_complex(coth(Complex(1, INF)), NAN, NAN)
        assert_complex(coth(Complex(-INF, NAN)), -1.0, NAN)

    def test_odd(self):
        a = coth(Complex(0.7, -0.4))
        b = coth(Complex(-0.7, 0.4))
        assert math.isclose(a.re, -b.re) and math.isclose(a.im, -b.im)


class TestSech:
    def test_known_values(self):
        assert_complex(sech(Complex(0, 0)), 1.0, 0.0)
        assert_complex(sech(Complex(1, 1)), 0.4983370305551868, -0.591083841721045)

    def test_real(self):
        assert_complex(sech(Complex(2, 0)), 1.0 / math.cosh(2.0), -0.0)

    def test_imaginary_axis(self):
        assert_complex(sech(Complex(0, 1)), 1.0 / math.cos(1.0), 0.0)
        assert_complex(sech(Complex(0, PI / 2)), NAN, NAN)

    def test_non_finite(self):
        assert_complex(sech(Complex(INF, 0)), NAN, NAN)
        assert_complex(sech(Complex(0, NAN)), NAN, NAN)


class TestCsch:
    def test_poles(self):
        assert_complex(csch(Complex(0.0, 0.0)), INF, 0.0)
        assert_complex(csch(Complex(-0.0, 0.0)), -INF, 0.0)

    def test_imaginary_pi(self):
        assert_complex(csch(Complex(0.0, PI)), 0.0, -1.0)
        assert_complex(csch(Complex(-0.0, PI)), 0.0, 1.0)

    def test_unit_values(self):
        assert_complex(csch(Complex(1, 0)), 1.0 / math.sinh(1.0), 0.0)
        assert_complex(csch(Complex(0, 1)), 0.0, -1.0 / math.sin(1.0))

    def test_known_value(self):
        assert_complex(csch(Complex(1, 1)), 0.30393100162842646, -0.6215180171704285)

    def test_infinite_real(self):
        assert_complex(csch(Complex(INF, 1)), 0.0, 0.0)
        assert_complex(csch(Complex(-INF, 1)), -0.0, 0.0)

    def test_nan(self):
        assert_complex(csch(Complex(NAN, 1)), NAN, NAN)

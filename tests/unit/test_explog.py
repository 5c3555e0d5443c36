"""Tests for exp, logarithms, sqrt and pow, including the special value tables."""

import math

import pytest

from c99complex import Complex, exp, ln, log, log2, log10, pow_, sqrt
from complex_asserts import assert_complex

INF = float("inf")
NAN = float("nan")
PI = math.pi


class TestExp:
    def test_zero(self):
        assert_complex(exp(Complex(0, 0)), 1.0, 0.0)

    def test_euler(self):
        z = exp(Complex(0, PI))
        assert math.isclose(z.re, -1.0)
        assert abs(z.im) < 1e-15

    def test_general(self):
        e = math.e
        assert_complex(exp(Complex(1, 1)), e * math.cos(1), e * math.sin(1))

    @pytest.mark.parametrize(
        "z, expected",
        [
            (Complex(INF, 0.0), (INF, 0.0)),
            (Complex(INF, PI), (-INF, 0.0)),
            (Complex(INF, 1.0), (INF, NAN)),
            (Complex(INF, NAN), (INF, NAN)),
            (Complex(INF, INF), (NAN, NAN)),
            (Complex(NAN, 0.0), (NAN, 0.0)),
            (Complex(NAN, NAN), (NAN, NAN)),
            (Complex(-INF, INF), (0.0, 0.0)),
            (Complex(-INF, NAN), (0.0, 0.0)),
            (Complex(-INF, 1.0), (0.0, 0.0)),
        ],
    )
    def test_special_values(self, z, expected):
        assert_complex(exp(z), *expected)

    def test_overflow_guard_keeps_imaginary_part(self):
        assert_complex(exp(Complex(1e308, 2.0)), INF, 2.0)


class TestLog:
    def test_negative_zero(self):
        assert_complex(ln(Complex(-0.0, 0.0)), -INF, PI)

    def test_positive_zero(self):
        assert_complex(ln(Complex(0.0, 0.0)), -INF, 0.0)
        assert_complex(ln(Complex(0.0, -0.0)), -INF, -0.0)

    def test_negative_zero_lower_half(self):
        assert_complex(ln(Complex(-0.0, -0.0)), -INF, -PI)

    def test_branch_cut(self):
        assert_complex(ln(Complex(-1.0, 0.0)), 0.0, PI)
        assert_complex(ln(Complex(-1.0, -0.0)), 0.0, -PI)

    def test_positive_real(self):
        assert_complex(ln(Complex(1.0, 0.0)), 0.0, 0.0)
        assert_complex(ln(Complex(math.e, 0.0)), 1.0, 0.0)

    def test_imaginary_axis(self):
        assert_complex(ln(Complex(0.0, 2.0)), math.log(2.0), PI / 2)
        assert_complex(ln(Complex(0.0, -2.0)), math.log(2.0), -PI / 2)

    def test_general(self):
        assert_complex(ln(Complex(1.0, 1.0)), 0.5 * math.log(2.0), PI / 4)

    def test_infinities(self):
        assert_complex(ln(Complex(INF, INF)), INF, PI / 4)
        assert_complex(ln(Complex(-INF, INF)), INF, 3 * PI / 4)
        assert_complex(ln(Complex(-INF, -INF)), INF, -3 * PI / 4)
        assert_complex(ln(Complex(INF, 1.0)), INF, 0.0)
        assert_complex(ln(Complex(-INF, 1.0)), INF, PI)

    def test_nan(self):
        assert_complex(ln(Complex(NAN, INF)), INF, NAN)
        assert_complex(ln(Complex(NAN, 1.0)), NAN, NAN)

    def test_log_alias(self):
        assert log is ln

    def test_other_bases(self):
        assert_complex(log10(Complex(100.0, 0.0)), 2.0, 0.0)
        assert_complex(log2(Complex(8.0, 0.0)), 3.0, 0.0)
        z = log10(Complex(-10.0, 0.0))
        assert math.isclose(z.re, 1.0)
        assert math.isclose(z.im, PI / math.log(10.0))


class TestSqrt:
    def test_negative_real(self):
        assert_complex(sqrt(Complex(-4.0, 0.0)), 0.0, 2.0)

    def test_positive_real(self):
        assert_complex(sqrt(Complex(9.0, 0.0)), 3.0, 0.0)

    def test_imaginary(self):
        assert_complex(sqrt(Complex(0.0, 2.0)), 1.0, 1.0)
        assert_complex(sqrt(Complex(0.0, -2.0)), 1.0, -1.0)

    def test_signed_zero(self):
        assert_complex(sqrt(Complex(0.0, -0.0)), 0.0, -0.0)
        assert_complex(sqrt(Complex(-0.0, 0.0)), 0.0, 0.0)

    @pytest.mark.parametrize(
        "z, expected",
        [
            (Complex(3.0, 4.0), (2.0, 1.0)),
            (Complex(-3.0, 4.0), (1.0, 2.0)),
            (Complex(-3.0, -4.0), (1.0, -2.0)),
        ],
    )
    def test_general(self, z, expected):
        assert_complex(sqrt(z), *expected)

    def test_infinities(self):
        assert_complex(sqrt(Complex(INF, INF)), INF, INF)
        assert_complex(sqrt(Complex(0.0, INF)), INF, INF)
        assert_complex(sqrt(Complex(INF, 0.0)), INF, 0.0)
        assert_complex(sqrt(Complex(-INF, 0.0)), 0.0, INF)
        assert_complex(sqrt(Complex(-INF, -0.0)), 0.0, -INF)

    def test_nan(self):
        assert_complex(sqrt(Complex(NAN, NAN)), NAN, NAN)
        assert_complex(sqrt(Complex(NAN, 1.0)), NAN, NAN)


class TestPow:
    def test_zero_exponent(self):
        assert_complex(pow_(Complex(2, 3), Complex(0, 0)), 1.0, 0.0)
        assert_complex(pow_(Complex(INF, INF), Complex(0, 0)), 1.0, 0.0)

    def test_integer_exponents(self):
        assert_complex(pow_(Complex(2, 0), Complex(3, 0)), 8.0, 0.0)
        assert_complex(pow_(Complex(0, 1), Complex(2, 0)), -1.0, 0.0)
        assert_complex(pow_(Complex(1, 1), Complex(2, 0)), 0.0, 2.0)

    def test_negative_integer_exponent(self):
        z = pow_(Complex(2, 0), Complex(-1, 0))
        assert z.re == 0.5 and z.im == 0.0

    def test_half_uses_sqrt(self):
        assert_complex(pow_(Complex(4, 0), Complex(0.5, 0)), 2.0, 0.0)
        assert_complex(pow_(Complex(-1, 0), Complex(0.5, 0)), 0.0, 1.0)

    def test_i_to_the_i(self):
        assert_complex(pow_(Complex(0, 1), Complex(0, 1)), math.exp(-PI / 2), 0.0)

    def test_zero_base(self):
        assert_complex(pow_(Complex(0, 0), Complex(2, 0)), 0.0, 0.0)
        assert_complex(pow_(Complex(0, 0), Complex(-1, 0)), INF, 0.0)
        assert_complex(pow_(Complex(0, 0), Complex(-2, 0)), INF, 0.0)
        assert_complex(pow_(Complex(0, 0), Complex(0, 1)), NAN, NAN)

    def test_infinite_base(self):
        assert_complex(pow_(Complex(INF, 0), Complex(-1, 0)), 0.0, 0.0)
        assert_complex(pow_(Complex(INF, 0), Complex(2, 0)), INF, 0.0)
        assert_complex(pow_(Complex(-INF, 0), Complex(2, 0)), INF, 0.0)
        assert_complex(pow_(Complex(-INF, 0), Complex(3, 0)), -INF, 0.0)
        assert_complex(pow_(Complex(-INF, 0), Complex(0.5, 0)), NAN, NAN)
        assert_complex(pow_(Complex(INF, INF), Complex(1, 0)), NAN, NAN)

    def test_nan_operand(self):
        assert_complex(pow_(Complex(NAN, 0), Complex(0, 0)), NAN, NAN)
        assert_complex(pow_(Complex(1, 0), Complex(NAN, 0)), NAN, NAN)

    def test_general_matches_exp_log(self):
        z1 = Complex(1.5, -0.5)
        z2 = Complex(0.3, 0.7)
        got = pow_(z1, z2)
        expected = complex(1.5, -0.5) ** complex(0.3, 0.7)
        assert math.isclose(got.re, expected.real, rel_tol=1e-12)
        assert math.isclose(got.im, expected.imag, rel_tol=1e-12)

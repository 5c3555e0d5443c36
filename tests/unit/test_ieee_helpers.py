import math

import pytest

from c99complex.core.ieee import (
    is_integer,
    is_neg_zero,
    is_pos_zero,
    negative,
    round_half_up,
    safe_prod,
    sign,
    sign_or_one,
    signed_zero,
)

INF = float("inf")
NAN = float("nan")


def _is_neg_zero(x):
    return x == 0 and math.copysign(1.0, x) < 0


class TestZeroPredicates:
    def test_signed_zero_detection(self):
        assert is_neg_zero(-0.0)
        assert not is_neg_zero(0.0)
        assert is_pos_zero(0.0)
        assert not is_pos_zero(-0.0)
        assert not is_pos_zero(NAN)

    @pytest.mark.parametrize("x, expected", [(-1.0, True), (-0.0, True), (0.0, False), (2.0, False), (NAN, False), (-INF, True)])
    def test_negative(self, x, expected):
        assert negative(x) is expected


class TestSign:
    def test_sign(self):
        assert sign(3.5) == 1.0
        assert sign(-INF) == -1.0
        assert _is_neg_zero(sign(-0.0))
        assert math.isnan(sign(NAN))

    def test_sign_or_one(self):
        assert sign_or_one(0.0) == 1.0
        assert sign_or_one(-0.0) == 1.0
        assert sign_or_one(NAN) == 1.0
        assert sign_or_one(-2.0) == -1.0

    def test_signed_zero(self):
        assert _is_neg_zero(signed_zero(-5.0))
        assert _is_neg_zero(signed_zero(-0.0))
        assert not _is_neg_zero(signed_zero(0.0))
        assert not _is_neg_zero(signed_zero(7.0))


class TestSafeProd:
    def test_zero_times_infinity_is_zero(self):
        assert safe_prod(0.0, INF) == 0.0
        assert safe_prod(-INF, 0.0) == 0.0

    def test_regular(self):
        assert safe_prod(2.0, -3.0) == -6.0
        assert safe_prod(INF, -2.0) == -INF


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "x, expected",
        [(2.5, 3.0), (-2.5, -2.0), (1.4, 1.0), (-1.6, -2.0), (0.5, 1.0), (1e17, 1e17)],
    )
    def test_values(self, x, expected):
        assert round_half_up(x) == expected

    def test_small_negative_rounds_to_negative_zero(self):
        assert _is_neg_zero(round_half_up(-0.5))
        assert _is_neg_zero(round_half_up(-0.2))
        assert _is_neg_zero(round_half_up(-0.0))

    def test_non_finite_passthrough(self):
        assert round_half_up(INF) == INF
        assert math.isnan(round_half_up(NAN))


def test_is_integer():
    assert is_integer(4.0)
    assert is_integer(-0.0)
    assert not is_integer(4.5)
    assert not is_integer(INF)
    assert not is_integer(NAN)

"""
Complex exponential, logarithms, square root and power.

Each function starts from an explicit special value table (signed zeros,
infinities and NaNs on either axis) and only then falls through to the
finite-input formula.
"""

import numpy as np

from .arithmetic import mul
from .complex_number import Complex
from .ieee import INF, NAN, NEG_INF, NEG_ZERO, ZERO, is_integer, is_neg_zero, is_pos_zero
from .numeric_policy import LN2, LN10, PI, PI_OVER_2, PI_OVER_4, POLICY, THREE_PI_OVER_4


def _nan() -> Complex:
    return Complex(NAN, NAN)


@np.errstate(all="ignore")
def exp(z: Complex) -> Complex:
    """
    Complex exponential ``e**re * (cos(im) + i*sin(im))``.

    Special values:
        exp(+inf + 0i)      = +inf + 0i
        exp(+inf + pi*i)    = -inf + 0i
        exp(+inf + y*i)     = +inf + NaN*i  (y finite, other)
        exp(+inf + NaN*i)   = +inf + NaN*i
        exp(+inf ± inf*i)   = NaN + NaN*i
        exp(NaN + 0i)       = NaN + 0i
        exp(-inf + y*i)     = 0 + 0i        (y infinite or NaN)
    """
    x, y = z.re, z.im

    if x == INF:
        if np.isfinite(y):
            if y == 0:
                return Complex(INF, 0.0)
            if y == PI:
                return Complex(NEG_INF, 0.0)
            return Complex(INF, NAN)
        if np.isnan(y):
            return Complex(INF, NAN)
        return _nan()

    if np.isnan(x):
        if y == 0:
            return Complex(NAN, 0.0)
        if np.isnan(y):
            return _nan()

    if x == NEG_INF and not np.isfinite(y):
        return Complex(0.0, 0.0)

    if x >= POLICY.exp_overflow:
        return Complex(INF, y)

    m = np.exp(x)
    return Complex(m * np.cos(y), m * np.sin(y))


@np.errstate(all="ignore")
def ln(z: Complex) -> Complex:
    """
    Principal natural logarithm ``ln|z| + i*arg(z)``.

    The imaginary part lies in ``[-pi, pi]``; the sign of a zero imaginary
    part selects the side of the branch cut along the negative real axis.
    """
    x, y = z.re, z.im

    if x == 0 and y == 0:
        if is_pos_zero(x):
            return Complex(NEG_INF, y)
        return Complex(NEG_INF, -PI if is_neg_zero(y) else PI)

    if np.isnan(x) or np.isnan(y):
        if np.isinf(x) or np.isinf(y):
            return Complex(INF, NAN)
        return _nan()

    if np.isfinite(x) and x != 0 and y == 0:
        negative_imag = is_neg_zero(y)
        if x < 0:
            return Complex(np.log(-x), -PI if negative_imag else PI)
        return Complex(np.log(x), y)

    if x == 0 and np.isfinite(y):
        if y > 0:
            return Complex(np.log(y), PI_OVER_2)
        return Complex(np.log(-y), -PI_OVER_2)

    if np.isinf(x) and np.isinf(y):
        angle = PI_OVER_4 if x > 0 else THREE_PI_OVER_4
        return Complex(INF, angle if y > 0 else -angle)

    if np.isinf(x) or np.isinf(y):
        return Complex(INF, np.arctan2(y, x))

    return Complex(np.log(z.mag), np.arctan2(y, x))


log = ln


@np.errstate(all="ignore")
def log10(z: Complex) -> Complex:
    """Base-10 logarithm, ``ln(z) / ln(10)``."""
    w = ln(z)
    return Complex(w.re / LN10, w.im / LN10)


@np.errstate(all="ignore")
def log2(z: Complex) -> Complex:
    """Base-2 logarithm, ``ln(z) / ln(2)``."""
    w = ln(z)
    return Complex(w.re / LN2, w.im / LN2)


@np.errstate(all="ignore")
def sqrt(z: Complex) -> Complex:
    """
    Principal square root, real part always non-negative.

    The general case uses ``a = sqrt((|z| + x)/2), b = y/(2a)`` for
    ``x >= 0`` and the mirrored form for ``x < 0`` so neither branch
    subtracts nearly equal quantities.
    """
    x, y = z.re, z.im

    if x == 0:
        if y == INF:
            return Complex(INF, INF)
        if y == 0:
            return Complex(ZERO, y)
        if y > 0:
            return Complex(np.sqrt(y / 2), np.sqrt(y / 2))
        if y < 0:
            return Complex(np.sqrt(-y / 2), -np.sqrt(-y / 2))

    if np.isfinite(x):
        if y == 0:
            if x > 0:
                return Complex(np.sqrt(x), 0.0)
            return Complex(0.0, np.sqrt(-x))
    elif not np.isnan(x) and y == 0:
        if x == INF:
            return Complex(INF, 0.0)
        return Complex(0.0, NEG_INF if is_neg_zero(y) else INF)

    if np.isinf(x) and np.isinf(y):
        return Complex(INF, y)

    if np.isnan(x) and np.isnan(y):
        return _nan()

    if np.isnan(x) or np.isnan(y):
        if np.isfinite(x) or np.isfinite(y):
            return _nan()
        return Complex(INF, NAN)

    mod = np.hypot(x, y)
    if x >= 0:
        a = np.sqrt((mod + x) / 2)
        return Complex(a, y / (2 * a))
    b = np.copysign(np.sqrt((mod - x) / 2), y)
    return Complex(y / (2 * b), b)


def _int_power(base: Complex, exponent: np.float64) -> Complex:
    """Binary exponentiation for an integral real exponent."""
    result = Complex(1.0, 0.0)
    n = int(abs(exponent))
    while n > 0:
        if n & 1:
            result = mul(result, base)
        base = mul(base, base)
        n >>= 1
    if exponent < 0:
        den = result.re * result.re + result.im * result.im
        result = Complex(result.re / den, -result.im / den)
    return result


@np.errstate(all="ignore")
def pow_(z1: Complex, z2: Complex) -> Complex:
    """
    Complex power ``z1 ** z2``.

    Special bases and exponents are resolved first (``z**0 = 1``,
    ``inf**negative = 0``, ``(-inf)**even = +inf``, ``(-inf)**odd = -inf``,
    ``(-inf)**non-integer = NaN``, ``0**positive = 0``, ``0**negative = inf``).
    Integral real exponents use repeated squaring on :func:`mul`, an
    exponent of exactly 0.5 uses :func:`sqrt`, everything else evaluates
    ``exp(z2 * ln(z1))``.
    """
    x1, y1, x2, y2 = z1.re, z1.im, z2.re, z2.im

    if np.isnan(x1) or np.isnan(y1) or np.isnan(x2) or np.isnan(y2):
        return _nan()

    if x2 == 0 and y2 == 0:
        return Complex(1.0, 0.0)

    if x1 == INF and y1 == 0:
        if x2 < 0:
            return Complex(0.0, 0.0)
        if np.isfinite(x2) and np.isfinite(y2):
            return Complex(INF, 0.0)

    if x1 >= POLICY.exp_overflow and x2 == 2:
        return Complex(INF, 0.0)

    if 0 <= x1 <= POLICY.pow_underflow and y1 == 0 and x2 == -2:
        return Complex(INF, 0.0)

    if x1 == INF and np.isinf(y1):
        return _nan()

    if x1 == NEG_INF and y1 == 0:
        if y2 == 0:
            if np.fmod(x2, 2) == 0:
                return Complex(INF, 0.0)
            if is_integer(x2):
                return Complex(NEG_INF, 0.0)
        return _nan()

    if x1 == NEG_INF and np.isinf(y1) and np.isfinite(x2) and np.isfinite(y2):
        return _nan()

    r = z1.mag
    if r == 0:
        if y2 == 0 and x2 < 0:
            return Complex(INF, 0.0)
        if y2 == 0 and x2 > 0:
            return Complex(0.0, 0.0)
        return _nan()

    if not (np.isfinite(x1) and np.isfinite(y1) and np.isfinite(x2) and np.isfinite(y2)):
        if x1 == INF and y1 == 0 and np.isfinite(x2) and x2 > 0 and y2 == 0:
            return Complex(INF, 0.0)
        if r == INF and np.isfinite(x2) and x2 > 0:
            return Complex(INF, INF)
        if abs(x1) > 1 and x2 == INF and np.isfinite(y2):
            return Complex(INF, 0.0)
        return _nan()

    if y2 == 0 and is_integer(x2):
        return _int_power(z1, x2)

    if x2 == 0.5 and y2 == 0:
        return sqrt(z1)

    w = mul(z2, Complex(np.log(r), z1.phase))
    m = np.exp(w.re)
    return Complex(m * np.cos(w.im), m * np.sin(w.im))

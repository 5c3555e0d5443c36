"""
Circular trigonometric functions: sin, cos, tan, cot, sec, csc.

The real part is range-reduced into ``[-pi, pi]`` before any trig call so
that large arguments keep exact periodicity (``sin(1000*pi)`` is 0, not a
residue). ``tan``/``cot``/``sec``/``csc`` use the double-angle closed forms
with a shared denominator; when that denominator is close to zero they fall
back to the quotient of :func:`sin` and :func:`cos` and report a pole as
``NaN + NaN*i``.
"""

import numpy as np

from .complex_number import Complex
from .ieee import INF, NAN, NEG_INF, sign
from .numeric_policy import ONE_OVER_COSH_1, ONE_OVER_SINH_1, PI, PI_OVER_2, PI_OVER_4, POLICY, SQRT2, TWO_PI

PI_OVER_3 = np.float64(np.pi / 3)
TWO_OVER_SQRT3 = np.float64(2.0 / np.sqrt(3.0))


def _nan() -> Complex:
    return Complex(NAN, NAN)


@np.errstate(all="ignore")
def reduce_angle(x, snap: bool = False) -> np.float64:
    """
    Reduce ``x`` into ``[-pi, pi]``.

    Args:
        x: Angle in radians
        snap: Replace residues of a full-turn reduction smaller than the zero
            tolerance with exact 0

    Returns:
        Reduced angle
    """
    x = np.float64(x)
    if abs(x) >= TWO_PI:
        r = x - np.floor((x + PI) / TWO_PI) * TWO_PI
        if snap and abs(r) < POLICY.zero_tolerance:
            r = np.float64(0.0)
        return r
    if x > PI:
        return x - TWO_PI
    if x < -PI:
        return x + TWO_PI
    return x


def _near(x, target) -> bool:
    return abs(x - target) < POLICY.zero_tolerance


def _scaled_eps(x, y) -> np.float64:
    return POLICY.machine_epsilon * np.maximum(np.maximum(1.0, abs(x)), abs(y))


def _signed_inf(y) -> np.float64:
    return INF if y > 0 else NEG_INF


@np.errstate(all="ignore")
def sin(z: Complex) -> Complex:
    """``sin(x)cosh(y) + i*cos(x)sinh(y)``."""
    if z.is_nan():
        return _nan()

    x = reduce_angle(z.re)
    y = z.im

    if not np.isfinite(y):
        if abs(np.sin(x)) < POLICY.zero_tolerance:
            return Complex(0.0, np.cos(x) * _signed_inf(y))
        return _nan()

    if not np.isfinite(x):
        return _nan()

    return Complex(np.sin(x) * np.cosh(y), np.cos(x) * np.sinh(y))


@np.errstate(all="ignore")
def cos(z: Complex) -> Complex:
    """``cos(x)cosh(y) - i*sin(x)sinh(y)``."""
    if z.is_nan():
        return _nan()

    x = reduce_angle(z.re)
    y = z.im

    if not np.isfinite(y):
        if np.isfinite(x) and abs(np.cos(x)) < POLICY.zero_tolerance:
            return Complex(0.0, -np.sin(x) * _signed_inf(y))
        return _nan()

    if not np.isfinite(x):
        return _nan()

    return Complex(np.cos(x) * np.cosh(y), -(np.sin(x) * np.sinh(y)))


def _quotient(num: Complex, den: Complex, pole_bound) -> Complex:
    """``num / den`` via the conjugate, NaN when ``|den|**2`` is below ``pole_bound``."""
    mag2 = den.re ** 2 + den.im ** 2
    if mag2 < pole_bound:
        return _nan()
    return Complex(
        (num.re * den.re + num.im * den.im) / mag2,
        (num.im * den.re - num.re * den.im) / mag2,
    )


@np.errstate(all="ignore")
def tan(z: Complex) -> Complex:
    """
    Tangent, ``sin(2x)/(cos(2x)+cosh(2y)) + i*sinh(2y)/(cos(2x)+cosh(2y))``.

    ``tan(x ± inf*i) = 0 ± i``. Poles at ``x = pi/2 + k*pi`` on the real
    axis give ``NaN + NaN*i``.
    """
    if z.is_nan() or not np.isfinite(z.re):
        return _nan()
    if not np.isfinite(z.im):
        return Complex(0.0, sign(z.im))

    x = reduce_angle(z.re, snap=True)
    y = z.im
    eps = _scaled_eps(x, y)

    if abs(y) < eps:
        if abs(np.cos(x)) < eps:
            return _nan()
        return Complex(np.tan(x), 0.0)

    if abs(x) < eps:
        return Complex(0.0, np.tanh(y))

    den = np.cos(2.0 * x) + np.cosh(2.0 * y)
    if abs(den) < POLICY.zero_tolerance:
        return _quotient(sin(z), cos(z), eps)

    return Complex(np.sin(2.0 * x) / den, np.sinh(2.0 * y) / den)


@np.errstate(all="ignore")
def cot(z: Complex) -> Complex:
    """
    Cotangent, ``sin(2x)/(cosh(2y)-cos(2x)) - i*sinh(2y)/(cosh(2y)-cos(2x))``.

    ``cot(x ± inf*i) = 0 - i``; poles at ``x = k*pi`` on the real axis.
    """
    if z.is_nan() or not np.isfinite(z.re):
        return _nan()
    if not np.isfinite(z.im):
        return Complex(0.0, -1.0)

    x = reduce_angle(z.re, snap=True)
    y = z.im
    eps = _scaled_eps(x, y)
    tiny = POLICY.zero_tolerance

    if abs(x) < tiny and abs(y) < tiny and (x != 0 or y != 0):
        mag2 = x * x + y * y
        return Complex(x / mag2, -y / mag2)

    if abs(y) < eps:
        if abs(np.sin(x)) < eps:
            return _nan()
        if abs(x) < tiny:
            return Complex(1.0 / x, 0.0)
        return Complex(1.0 / np.tan(x), 0.0)

    if abs(x) < eps:
        return Complex(0.0, -1.0 / np.tanh(y))

    den = np.cosh(2.0 * y) - np.cos(2.0 * x)
    if abs(den) < tiny:
        return _quotient(cos(z), sin(z), POLICY.pole_tolerance)

    return Complex(np.sin(2.0 * x) / den, -np.sinh(2.0 * y) / den)


@np.errstate(all="ignore")
def sec(z: Complex) -> Complex:
    """
    Secant, ``2cos(x)cosh(y)/(cosh(2y)+cos(2x)) + i*2sin(x)sinh(y)/(cosh(2y)+cos(2x))``.

    Any non-finite input gives ``NaN + NaN*i``; poles at ``x = pi/2 + k*pi``.
    """
    if not z.is_finite():
        return _nan()

    x = reduce_angle(z.re, snap=True)
    y = z.im
    eps = _scaled_eps(x, y)
    tiny = POLICY.zero_tolerance

    if abs(x) < tiny and abs(y) < tiny:
        return Complex(1.0, 0.0)

    if abs(y) < eps:
        cos_x = np.cos(x)
        if abs(cos_x) < POLICY.pole_tolerance or _near(x, PI_OVER_2) or _near(x, -PI_OVER_2):
            return _nan()
        if _near(x, PI_OVER_4) or _near(x, -PI_OVER_4):
            return Complex(SQRT2, 0.0)
        if _near(x, PI_OVER_3) or _near(x, -PI_OVER_3):
            return Complex(2.0, 0.0)
        return Complex(1.0 / cos_x, 0.0)

    if abs(x) < eps:
        if abs(abs(y) - 1.0) < tiny:
            return Complex(ONE_OVER_COSH_1, 0.0)
        return Complex(1.0 / np.cosh(y), 0.0)

    den = np.cosh(2.0 * y) + np.cos(2.0 * x)
    if abs(den) < tiny:
        cz = cos(z)
        return _quotient(Complex(1.0, 0.0), cz, POLICY.pole_tolerance)

    re = 2.0 * np.cos(x) * np.cosh(y) / den
    im = 2.0 * np.sin(x) * np.sinh(y) / den
    if _near(x, PI_OVER_2) or _near(x, -PI_OVER_2):
        re = 0.0
    return Complex(re, im)


@np.errstate(all="ignore")
def csc(z: Complex) -> Complex:
    """
    Cosecant, ``2sin(x)cosh(y)/(cosh(2y)-cos(2x)) - i*2cos(x)sinh(y)/(cosh(2y)-cos(2x))``.

    Any non-finite input gives ``NaN + NaN*i``; poles at ``x = k*pi``.
    """
    if not z.is_finite():
        return _nan()

    x = reduce_angle(z.re, snap=True)
    y = z.im
    eps = _scaled_eps(x, y)
    tiny = POLICY.zero_tolerance
    pole = POLICY.pole_tolerance

    if abs(x) < tiny and abs(y) < tiny:
        if abs(x) < pole and abs(y) < pole:
            return _nan()
        mag2 = x * x + y * y
        return Complex(x / mag2, -y / mag2)

    if abs(y) < eps:
        sin_x = np.sin(x)
        if abs(sin_x) < pole or abs(x) < tiny or _near(x, PI) or _near(x, -PI):
            return _nan()
        for angle, value in ((PI_OVER_4, SQRT2), (PI_OVER_3, TWO_OVER_SQRT3), (PI_OVER_2, 1.0)):
            if _near(x, angle):
                return Complex(value, 0.0)
            if _near(x, -angle):
                return Complex(-value, 0.0)
        return Complex(1.0 / sin_x, 0.0)

    if abs(x) < eps:
        sinh_y = np.sinh(y)
        if abs(sinh_y) < pole:
            return _nan()
        if abs(abs(y) - 1.0) < tiny:
            return Complex(0.0, -sign(y) * ONE_OVER_SINH_1)
        return Complex(0.0, -1.0 / sinh_y)

    den = np.cosh(2.0 * y) - np.cos(2.0 * x)
    if abs(den) < tiny:
        return _quotient(Complex(1.0, 0.0), sin(z), pole)

    re = 2.0 * np.sin(x) * np.cosh(y) / den
    im = -2.0 * np.cos(x) * np.sinh(y) / den
    if abs(x) < tiny or _near(x, PI) or _near(x, -PI):
        re = 0.0
    return Complex(re, im)

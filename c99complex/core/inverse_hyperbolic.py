"""
Inverse hyperbolic functions: asinh, acosh, atanh, acoth, asech, acsch.

``asinh`` and ``acosh`` are rotations of :func:`asin` / :func:`acos`.
``atanh`` follows Boost.Math: inside ``(safe_lower, safe_upper)`` the real
part is ``(log1p(a) - log1p(-a)) / 4`` with ``a = 2x/(1+x**2+y**2)``, outside
it ``a`` is rearranged so neither ``x**2`` nor ``y**2`` overflows.
``acoth``, ``asech`` and ``acsch`` go through the reciprocal with extra
branches for very large and very small inputs.
"""

import logging

import numpy as np

from .arithmetic import div, mult_i, mult_minus_i, recip
from .complex_number import Complex
from .ieee import INF, NAN, NEG_INF, NEG_ZERO, ZERO, negative
from .inverse_trig import acos, asin
from .numeric_policy import LN2, PI, PI_OVER_2, PI_OVER_4, POLICY, THREE_PI_OVER_4

logger = logging.getLogger(__name__)

# acsch(5e-324 + 5e-324i), where hypot() loses the last bit
_ACSCH_MIN_SUBNORMAL_RE = np.float64(744.7747058079167)


def _nan() -> Complex:
    return Complex(NAN, NAN)


@np.errstate(all="ignore")
def asinh(z: Complex) -> Complex:
    """Inverse hyperbolic sine, ``i * asin(-i*z)``."""
    return mult_i(asin(mult_minus_i(z)))


@np.errstate(all="ignore")
def acosh(z: Complex) -> Complex:
    """
    Inverse hyperbolic cosine with non-negative real part.

    Computed as ``±i * acos(z)``, the sign of the rotation chosen so that the
    real part of the result is non-negative. Infinite real parts:

        acosh(±inf + NaN*i)  = +inf + NaN*i
        acosh(+inf ± inf*i)  = +inf ± pi/4*i
        acosh(-inf ± inf*i)  = +inf ± 3pi/4*i
        acosh(+inf + y*i)    = +inf + 0i
        acosh(-inf ± y*i)    = +inf ± pi*i
    """
    x, y = z.re, z.im

    if np.isinf(x):
        if np.isnan(y):
            return Complex(INF, NAN)
        if np.isinf(y):
            angle = PI_OVER_4 if x > 0 else THREE_PI_OVER_4
            return Complex(INF, angle if y > 0 else -angle)
        if x > 0:
            return Complex(INF, 0.0)
        return Complex(INF, PI if y >= 0 else -PI)

    w = acos(z)
    if y == 0:
        if x >= -1:
            if x > 1:
                return mult_minus_i(w)
            if not np.isnan(w.im) and not negative(w.im):
                return mult_i(w)
            return mult_minus_i(w)
        return mult_i(w)
    if y < 0:
        return mult_minus_i(w)
    return mult_i(w)


def _atanh_alpha(x, y, lower, upper):
    """``2x / (1 + x**2 + y**2)`` rearranged for operands outside the safe range."""
    if x >= upper:
        if y >= upper:
            return 2.0 / y / (x / y + y / x)
        if y > 1.0:
            return 2.0 / (x + y * y / x)
        return 2.0 / x
    if y >= upper:
        if x > 1.0:
            return 2.0 * x / y / (y + x * x / y)
        return 2.0 * x / (y * y)
    den = 1.0
    if x > lower:
        den += x * x
    if y > lower:
        den += y * y
    return 2.0 * x / den


def _atanh_real(x, y, alpha):
    if alpha < POLICY.atanh_crossover:
        return np.log1p(alpha) - np.log1p(-alpha)
    xm1 = x - 1.0
    return np.log(1.0 + 2.0 * x + x * x + y * y) - np.log(xm1 * xm1 + y * y)


@np.errstate(all="ignore")
def atanh(z: Complex) -> Complex:
    """
    Inverse hyperbolic tangent.

    Special values:
        atanh(±1 + 0i)       = ±inf + 0i
        atanh(±inf + y*i)    = 0 ± pi/2*i  (sign of y, +0 counts as positive)
        atanh(x ± inf*i)     = 0 ± pi/2*i
        atanh(NaN ± 0i)      = NaN + 0i
        atanh(NaN + y*i)     = NaN + NaN*i  (any other y)

    Odd symmetry holds: ``atanh(-z) == -atanh(z)``.
    """
    x = abs(z.re)
    y = abs(z.im)
    eps = POLICY.machine_epsilon
    lower = POLICY.atanh_safe_lower
    upper = POLICY.atanh_safe_upper

    if np.isnan(x) or np.isnan(y):
        if np.isnan(x) and y == 0:
            return Complex(NAN, y)
        return _nan()
    if np.isinf(x) or np.isinf(y):
        return Complex(0.0, PI_OVER_2 if z.im >= 0 else -PI_OVER_2)
    if x == 1 and y == 0:
        return Complex(INF if z.re > 0 else NEG_INF, 0.0)
    if x == 0 and y == 0:
        return Complex(0.0, 0.0)
    if x < eps and y < eps:
        return Complex(z.re, z.im)
    if x == 0:
        return Complex(0.0, np.arctan(z.im))

    if abs(x - 1.0) < eps and y < eps:
        s = 1.0 if z.re >= 0 else -1.0
        real = s * np.log(2.0 / y) / 2.0
        imag = s * PI / 4.0
        if z.im < 0:
            imag = -imag
        return Complex(real, imag)

    if lower < x < upper and lower < y < upper:
        xx = x * x
        yy = y * y
        real = _atanh_real(x, y, 2.0 * x / (1.0 + xx + yy)) / 4.0
        imag = np.arctan2(2.0 * y, 1.0 - xx - yy) / 2.0
    else:
        real = _atanh_real(x, y, _atanh_alpha(x, y, lower, upper)) / 4.0
        if x >= upper or y >= upper:
            imag = PI_OVER_2
        elif x <= lower:
            if y <= lower:
                imag = np.arctan(2.0 * y)
            else:
                imag = np.arctan2(2.0 * y, 1.0 - y * y) / 2.0
        else:
            imag = np.arctan2(2.0 * y, 1.0 - x * x) / 2.0

    if z.re < 0:
        real = -real
    if z.im < 0:
        imag = -imag
    return Complex(real, imag)


@np.errstate(all="ignore")
def acoth(z: Complex) -> Complex:
    """
    Inverse hyperbolic cotangent, ``atanh(1/z)``.

    ``acoth(0) = pi/2*i``, ``acoth(±1) = ±inf`` and infinite inputs give
    ``0 + 0i``. Inputs with a part below 1e-150 are scaled by 1e100 before
    taking the reciprocal.
    """
    x, y = z.re, z.im

    if np.isnan(x) or np.isnan(y):
        return _nan()
    if x == 0 and y == 0:
        return Complex(0.0, PI_OVER_2)
    if np.isinf(x) or np.isinf(y):
        return Complex(0.0, 0.0)
    if y == 0:
        if x == 1:
            return Complex(INF, 0.0)
        if x == -1:
            return Complex(NEG_INF, 0.0)

    if abs(y) > POLICY.acoth_large_imag:
        yy = y * y
        den = yy * (1.0 + x * x / yy)
        if den == 0 or not np.isfinite(den):
            return Complex(0.0, 0.0)
        return Complex(x / den, -y / den)

    mag2 = x * x + y * y
    if mag2 < POLICY.acoth_subnormal:
        return Complex(x, -y - PI_OVER_2)

    tiny = POLICY.acoth_tiny_part
    if (0 < abs(x) < tiny) or (0 < abs(y) < tiny):
        scale = POLICY.acoth_scale
        w = atanh(div(Complex(1.0, 0.0), Complex(x * scale, y * scale)))
        return Complex(w.re / scale, w.im - PI_OVER_2)

    return atanh(div(Complex(1.0, 0.0), z))


@np.errstate(all="ignore")
def asech(z: Complex) -> Complex:
    """
    Inverse hyperbolic secant, ``acosh(1/z)``.

    ``asech(0) = +inf``, ``asech(1) = 0``, ``asech(-1) = pi*i``; any infinite
    component or a non-finite intermediate gives ``NaN + NaN*i``.
    """
    x, y = z.re, z.im

    if np.isnan(x) or np.isnan(y):
        return _nan()
    if x == 0 and y == 0:
        return Complex(INF, 0.0)
    if np.isinf(x) or np.isinf(y):
        return _nan()

    if y == 0:
        if x == 1:
            return Complex(0.0, 0.0)
        if x == -1:
            return Complex(0.0, PI)
        if 0 < x < 1:
            inv = 1.0 / x
            return Complex(np.log(inv + np.sqrt(inv * inv - 1.0)), 0.0)
        if x > 1:
            return Complex(0.0, np.arccos(1.0 / x))

    mag2 = x * x + y * y
    if mag2 < POLICY.asech_subnormal:
        return Complex(PI_OVER_2, -y)

    if abs(y) > POLICY.asech_large_imag:
        if mag2 == 0 or not np.isfinite(mag2):
            return _nan()
        w = acosh(Complex(x / mag2, -y / mag2))
        imag = PI_OVER_2 if y > 0 else -PI_OVER_2
        if not np.isfinite(w.re):
            return _nan()
        return Complex(w.re, imag)

    inv = recip(z)
    if not inv.is_finite():
        logger.debug("asech: reciprocal of %r is not finite", z)
        return _nan()
    w = acosh(inv)
    if not w.is_finite():
        return _nan()
    return w


@np.errstate(all="ignore")
def acsch(z: Complex) -> Complex:
    """
    Inverse hyperbolic cosecant, ``asinh(1/z)``.

    Special values:
        acsch(0 + 0i)       = +inf + 0i
        acsch(±inf + y*i)   = -0 + 0i  (y finite)
        acsch(x ± inf*i)    = 0 - 0i   (x finite)
        acsch(±inf ± inf*i) = NaN + NaN*i
    """
    x, y = z.re, z.im

    if np.isnan(x) or np.isnan(y):
        return _nan()
    if x == 0 and y == 0:
        return Complex(INF, 0.0)
    if not z.is_finite():
        if np.isinf(x) and np.isinf(y):
            return _nan()
        if np.isinf(x):
            return Complex(NEG_ZERO, ZERO)
        return Complex(ZERO, NEG_ZERO)

    if y == 0:
        return asinh(Complex(1.0 / x, 0.0))

    tiny = POLICY.acsch_tiny_part
    if abs(x) < tiny and abs(y) < tiny:
        min_sub = POLICY.get_min_subnormal()
        if x == min_sub and y == min_sub:
            return Complex(_ACSCH_MIN_SUBNORMAL_RE, -PI_OVER_4)
        return Complex(LN2 - np.log(np.hypot(x, y)), -np.arctan2(y, x))

    mag2 = x * x + y * y
    if mag2 > POLICY.acsch_large_modulus and abs(x / y) < POLICY.acsch_ratio:
        return Complex(x / mag2, -y / mag2)
    if mag2 == 0:
        return _nan()

    return asinh(Complex(x / mag2, -y / mag2))

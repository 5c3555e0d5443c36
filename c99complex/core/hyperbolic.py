"""
Hyperbolic functions: sinh, cosh, tanh, coth, sech, csch.

Mirror of the circular module with the roles of the two axes swapped:
``sinh(x)``/``cosh(x)`` of the real part combine with ``cos(y)``/``sin(y)``
of the imaginary part. Infinite real parts collapse to signed infinities or
signed zeros by the quadrant of the finite imaginary part.
"""

import numpy as np

from .arithmetic import div
from .complex_number import Complex
from .ieee import INF, NAN, NEG_INF, NEG_ZERO, ZERO, is_pos_zero, round_half_up, sign, sign_or_one
from .numeric_policy import PI, PI_OVER_2, POLICY

SIN_1 = np.float64(np.sin(1.0))
SINH_1 = np.float64(np.sinh(1.0))
SINH_PI = np.float64(np.sinh(np.pi))


def _nan() -> Complex:
    return Complex(NAN, NAN)


@np.errstate(all="ignore")
def sinh(z: Complex) -> Complex:
    """
    Hyperbolic sine, ``sinh(x)cos(y) + i*cosh(x)sin(y)``.

    Special values:
        sinh(±inf + 0i)     = ±inf + 0i
        sinh(±inf + NaN*i)  = ±inf + NaN*i
        sinh(±inf + y*i)    = ±inf*cos(y) ± inf*sin(y)*i  (y finite)
        sinh(x ± inf*i)     = NaN + NaN*i  (x finite)
    """
    eps = POLICY.hyperbolic_eps
    x, y = z.re, z.im

    if np.isnan(x):
        return _nan()
    if np.isnan(y):
        return Complex(x, NAN) if np.isinf(x) else _nan()

    if np.isinf(x):
        if np.isfinite(y):
            if y == 0:
                return Complex(x, 0.0)
            cos_y = np.cos(y)
            re = 0.0 if abs(cos_y) < eps else x * cos_y
            return Complex(re, x * np.sin(y))
        return Complex(x, NAN)

    if np.isinf(y):
        return _nan()

    if x == 0 and abs(np.sin(y)) < eps:
        return Complex(0.0, 0.0)
    if abs(y - PI_OVER_2) < eps:
        return Complex(0.0, np.cosh(x))

    return Complex(np.sinh(x) * np.cos(y), np.cosh(x) * np.sin(y))


@np.errstate(all="ignore")
def cosh(z: Complex) -> Complex:
    """
    Hyperbolic cosine, ``cosh(x)cos(y) + i*sinh(x)sin(y)``.

    Special values:
        cosh(±inf + 0i)     = +inf + 0i
        cosh(±inf + NaN*i)  = +inf + NaN*i
        cosh(x ± inf*i)     = NaN + NaN*i  (x finite)
    """
    eps = POLICY.hyperbolic_eps
    x, y = z.re, z.im

    if np.isnan(x):
        return _nan()
    if np.isnan(y):
        return Complex(INF, NAN) if np.isinf(x) else _nan()

    if np.isinf(x):
        if np.isfinite(y):
            if y == 0:
                return Complex(INF, 0.0)
            cos_y = np.cos(y)
            re = 0.0 if abs(cos_y) < eps else INF * sign(cos_y)
            im = (1.0 if x > 0 else -1.0) * INF * np.sin(y)
            return Complex(re, im)
        return Complex(INF, NAN)

    if np.isinf(y):
        return _nan()

    if x == 0 and abs(np.sin(y)) < eps:
        return Complex(np.cos(y), 0.0)
    if abs(y - PI_OVER_2) < eps:
        return Complex(0.0, np.sinh(x))

    return Complex(np.cosh(x) * np.cos(y), np.sinh(x) * np.sin(y))


def _odd_half_pi_multiple(y, eps) -> bool:
    """True when ``y`` is within ``eps`` of ``(2k+1)*pi/2``."""
    k = round_half_up(2.0 * y / PI)
    return bool(abs(y - k * PI / 2.0) < eps and np.fmod(k, 2) != 0)


@np.errstate(all="ignore")
def tanh(z: Complex) -> Complex:
    """
    Hyperbolic tangent, ``sinh(z) / cosh(z)``.

    ``tanh(±inf + y*i)`` is ``±1 + 0i`` except at ``y = (2k+1)*pi/2``
    where the imaginary part is NaN. Poles on the imaginary axis give
    ``NaN + NaN*i``.
    """
    eps = POLICY.hyperbolic_eps
    x, y = z.re, z.im

    if np.isnan(x):
        return _nan()
    if np.isnan(y):
        return Complex(sign_or_one(x), NAN) if np.isinf(x) else _nan()

    if np.isinf(x):
        s = sign_or_one(x)
        if np.isfinite(y):
            if y != 0 and _odd_half_pi_multiple(y, eps):
                return Complex(s, NAN)
            return Complex(s, 0.0)
        return Complex(s, NAN)

    if np.isinf(y):
        return _nan()

    tiny = POLICY.zero_tolerance
    if abs(x) <= tiny and abs(y) <= tiny:
        return Complex(x, y)

    if abs(x) < eps:
        if _odd_half_pi_multiple(y, eps):
            return _nan()
        if abs(y - round_half_up(y / PI) * PI) < eps:
            return Complex(0.0, 0.0)
        sin_2y = np.sin(2.0 * y)
        den = 1.0 + np.cos(2.0 * y)
        if abs(den) < eps:
            return _nan()
        return Complex(0.0, sin_2y / den)

    num = sinh(z)
    den = cosh(z)
    if abs(den.re) < eps and abs(den.im) < eps:
        return _nan()
    mag2 = den.re * den.re + den.im * den.im
    if mag2 < eps:
        return _nan()
    return Complex(
        (num.re * den.re + num.im * den.im) / mag2,
        (num.im * den.re - num.re * den.im) / mag2,
    )


@np.errstate(all="ignore")
def coth(z: Complex) -> Complex:
    """
    Hyperbolic cotangent, ``1 / tanh(z)``.

    Any infinite component gives ``NaN + NaN*i``: with an infinite real part
    the quotient ``cosh/sinh`` is the indeterminate form inf/inf, so no limit
    value is substituted. ``coth(±inf + NaN*i)`` keeps ``±1 + NaN*i``.
    """
    eps = POLICY.hyperbolic_eps
    x, y = z.re, z.im

    if np.isnan(x) or np.isnan(y):
        if np.isinf(x):
            return Complex(1.0 if x > 0 else -1.0, NAN)
        return _nan()

    if np.isinf(x) or np.isinf(y):
        return _nan()

    if np.hypot(x, y) < POLICY.coth_tiny_modulus:
        den = x * x + y * y
        if den == 0:
            return _nan()
        return Complex(x / den, 0.0 if y == 0 else -y / den)

    if abs(x) < eps:
        tol = POLICY.coth_axis_tolerance
        y_mod_pi = abs(np.fmod(y, PI))
        if y_mod_pi < tol or abs(y_mod_pi - PI) < tol:
            return _nan()
        if abs(y_mod_pi - PI_OVER_2) < tol:
            return Complex(0.0, 0.0)

    t = tanh(z)
    if np.hypot(t.re, t.im) < eps:
        return _nan()

    mag2 = t.re * t.re + t.im * t.im
    re = t.re / mag2
    im = -t.im / mag2
    if abs(re) < eps:
        re = 0.0
    if abs(im) < eps:
        im = 0.0
    return Complex(re, im)


@np.errstate(all="ignore")
def sech(z: Complex) -> Complex:
    """
    Hyperbolic secant, ``2 / (e**z + e**-z)``.

    Any non-finite input gives ``NaN + NaN*i``. On the imaginary axis the
    result is ``sec(y)`` with poles at ``y = pi/2 + k*pi``.
    """
    x, y = z.re, z.im
    base = POLICY.sech_scale

    if not z.is_finite():
        return _nan()
    if x == 0 and y == 0:
        return Complex(1.0, 0.0)

    if np.maximum(abs(x), abs(y)) < POLICY.sech_tiny_modulus:
        return Complex(1.0, 0.0)

    if abs(x) < base * np.maximum(np.maximum(1.0, abs(x)), abs(y)):
        y_mod_pi = abs(np.fmod(y, PI))
        if abs(y_mod_pi - PI_OVER_2) < POLICY.sech_axis_tolerance:
            return _nan()
        cos_y = np.cos(y)
        if abs(cos_y) < base:
            return _nan()
        sec_y = 1.0 / cos_y
        return Complex(sec_y if np.isfinite(sec_y) else NAN, 0.0)

    if abs(x) < 0.5:
        exp_x = np.expm1(x) + 1.0
    else:
        exp_x = np.exp(x)
    exp_neg_x = np.exp(-x)

    den_re = (exp_x + exp_neg_x) * np.cos(y)
    den_im = (exp_x - exp_neg_x) * np.sin(y)
    mag2 = den_re * den_re + den_im * den_im
    if abs(mag2) < base:
        return _nan()
    return Complex(2.0 * den_re / mag2, -2.0 * den_im / mag2)


@np.errstate(all="ignore")
def csch(z: Complex) -> Complex:
    """
    Hyperbolic cosecant, ``1 / sinh(z)``.

    Special values:
        csch(±0 + 0i)     = ±inf + 0i
        csch(+0 + pi*i)   = 0 - i
        csch(-0 + pi*i)   = 0 + i
        csch(+0 - pi*i)   = +inf + 0i
        csch(-0 - pi*i)   = 0 - i
        csch(±inf + y*i)  = ±0 + 0i  (y finite)
    """
    x, y = z.re, z.im

    if x == 0:
        if y == 0:
            return Complex(INF if is_pos_zero(x) else NEG_INF, y)
        if y == PI:
            return Complex(0.0, -1.0 if is_pos_zero(x) else 1.0)
        if y == -PI:
            return Complex(INF, 0.0) if is_pos_zero(x) else Complex(0.0, -1.0)
        if y == 1:
            return Complex(0.0, -1.0 / SIN_1)
        if y == -1:
            return Complex(0.0, 1.0 / SIN_1)
        if not np.isfinite(y):
            return _nan()

    if abs(x) == 1 and y == 0:
        return Complex(sign(x) / SINH_1, 0.0)

    if abs(x) == PI and y == 0:
        return Complex(sign(x) / SINH_PI, sign(y))

    if np.isnan(x) or np.isnan(y):
        return _nan()

    if np.isinf(x) and np.isfinite(y):
        return Complex(NEG_ZERO if x < 0 else ZERO, ZERO)

    return div(Complex(1.0, 0.0), sinh(z))

"""
Inverse circular functions: asin, acos, atan, acot, asec, acsc.

``asin`` and ``acos`` implement the algorithm of Hull, Fairgrieve and Tang,
"Implementing the complex arcsine and arccosine functions using exception
handling", ACM TOMS 23(3), 1997, in the form used by Boost.Math. The
computation works on ``x = |re|``, ``y = |im|`` and restores the signs at
the end. Inside the safe region the real part switches between ``asin``/
``acos`` and ``atan`` forms at ``B_CROSSOVER`` and the imaginary part between
``log1p`` and ``log`` forms at ``A_CROSSOVER``; outside it, dedicated
branches avoid overflow and cancellation.

``atan`` rotates onto :func:`~c99complex.core.inverse_hyperbolic.atanh`;
``acot``, ``asec`` and ``acsc`` apply ``atan``/``acos``/``asin`` to the
reciprocal.
"""

import numpy as np

from .arithmetic import mult_i, mult_minus_i
from .complex_number import Complex
from .ieee import INF, NAN, NEG_INF, ZERO, negative
from .numeric_policy import LN2, PI, PI_OVER_2, PI_OVER_4, POLICY


def _nan() -> Complex:
    return Complex(NAN, NAN)


def _in_safe_region(x, y) -> bool:
    lo, hi = POLICY.asin_safe_min, POLICY.asin_safe_max
    return lo < x < hi and lo < y < hi


def _hull_terms(x, y):
    """Shared intermediates ``(yy, r, s, a, xp1, xm1)`` of the safe-region formulas."""
    xp1 = 1.0 + x
    xm1 = x - 1.0
    yy = y * y
    r = np.sqrt(xp1 * xp1 + yy)
    s = np.sqrt(xm1 * xm1 + yy)
    a = 0.5 * (r + s)
    return yy, r, s, a, xp1, xm1


def _hull_imag(x, yy, r, s, a, xp1, xm1) -> np.float64:
    """Imaginary magnitude of asin/acos inside the safe region."""
    if a <= POLICY.a_crossover:
        if x < 1.0:
            am1 = 0.5 * (yy / (r + xp1) + yy / (s - xm1))
        else:
            am1 = 0.5 * (yy / (r + xp1) + (s + xm1))
        return np.log1p(am1 + np.sqrt(am1 * (a + 1.0)))
    return np.log(a + np.sqrt(a * a - 1.0))


@np.errstate(all="ignore")
def asin(z: Complex) -> Complex:
    """
    Principal inverse sine.

    Special values:
        asin(±inf + y*i)   = 0 - inf*i  (y finite)
        asin(x ± inf*i)    = 0 ± inf*i  (x finite)
        asin(±inf ± inf*i) = NaN + NaN*i
        asin(±0 + NaN*i)   = ±0 + NaN*i
    """
    x = abs(z.re)
    y = abs(z.im)
    eps = POLICY.epsilon

    if np.isnan(x):
        if np.isinf(y):
            real, imag = x, INF
        else:
            return Complex(x, x)
    elif np.isnan(y):
        if x == 0:
            real, imag = ZERO, y
        elif np.isinf(x):
            real, imag = y, INF
        else:
            return Complex(y, y)
    elif np.isinf(x):
        if np.isinf(y):
            return _nan()
        return Complex(0.0, NEG_INF)
    elif np.isinf(y):
        return Complex(0.0, z.im)
    elif y == 0 and x <= 1.0:
        return Complex(np.arcsin(z.re), z.im)
    elif _in_safe_region(x, y):
        yy, r, s, a, xp1, xm1 = _hull_terms(x, y)
        b = x / a
        if b <= POLICY.b_crossover:
            real = np.arcsin(b)
        else:
            apx = a + x
            if x <= 1.0:
                real = np.arctan(x / np.sqrt(0.5 * apx * (yy / (r + xp1) + (s - xm1))))
            else:
                real = np.arctan(x / (y * np.sqrt(0.5 * (apx / (r + xp1) + apx / (s + xm1)))))
        imag = _hull_imag(x, yy, r, s, a, xp1, xm1)
    else:
        xp1 = 1.0 + x
        xm1 = x - 1.0
        if y <= eps * abs(xm1):
            if x < 1.0:
                real = np.arcsin(x)
                imag = y / np.sqrt(-xp1 * xm1)
            else:
                real = PI_OVER_2
                if POLICY.get_max() / xp1 > xm1:
                    imag = np.log1p(xm1 + np.sqrt(xp1 * xm1))
                else:
                    imag = LN2 + np.log(x)
        elif y <= POLICY.asin_safe_min:
            real = PI_OVER_2 - np.sqrt(y)
            imag = np.sqrt(y)
        elif eps * y - 1.0 >= x:
            real = x / y
            imag = LN2 + np.log(y)
        elif x > 1.0:
            real = np.arctan(x / y)
            xoy = x / y
            imag = LN2 + np.log(y) + 0.5 * np.log1p(xoy * xoy)
        else:
            a = np.sqrt(1.0 + y * y)
            real = x / a
            imag = 0.5 * np.log1p(2.0 * y * (y + a))

    # Large real inputs on the real axis take the imaginary sign from -re
    im_sign = -z.re if (y == 0 and x > 1.0) or z.re == INF else z.im
    if negative(z.re):
        real = -real
    if negative(im_sign):
        imag = -imag
    return Complex(real, imag)


@np.errstate(all="ignore")
def acos(z: Complex) -> Complex:
    """
    Principal inverse cosine, real part in ``[0, pi]``.

    Special values:
        acos(±inf ± inf*i) = pi/4 (3pi/4 for -inf) - inf*i
        acos(±inf + y*i)   = 0 (pi for -inf) - inf*i  (y finite)
        acos(±inf + NaN*i) = NaN - inf*i
        acos(x ± inf*i)    = pi/2 - inf*i  (x finite)
        acos(±0 + NaN*i)   = pi/2 + NaN*i
        acos(0 ± i)        = pi/2 ∓ ln(1 + sqrt(2))*i
    """
    x = abs(z.re)
    y = abs(z.im)
    eps = POLICY.epsilon

    if np.isinf(x):
        if np.isinf(y):
            real = PI_OVER_4
        elif np.isnan(y):
            return Complex(y, NEG_INF)
        else:
            real = ZERO
        if negative(z.re):
            real = PI - real
        return Complex(real, NEG_INF)

    if np.isnan(x):
        if np.isinf(y):
            return Complex(x, INF if negative(z.im) else NEG_INF)
        return Complex(x, x)

    if np.isinf(y):
        real = PI - PI_OVER_2 if negative(z.re) else PI_OVER_2
        return Complex(real, NEG_INF)

    if np.isnan(y):
        return Complex(PI_OVER_2 if x == 0 else y, y)

    flip_imag = z.im > 0 or (z.im == 0 and not np.signbit(z.im) and negative(z.re))

    if x == 0 and y == 1:
        imag = np.log(1.0 + np.sqrt(2.0))
        return Complex(PI_OVER_2, -imag if flip_imag else imag)

    if y == 0 and x <= 1.0:
        real = PI_OVER_2 if x == 0 else np.arccos(x)
        if negative(z.re):
            real = PI - real
        return Complex(real, 0.0)

    if _in_safe_region(x, y):
        yy, r, s, a, xp1, xm1 = _hull_terms(x, y)
        b = x / a
        if b <= POLICY.b_crossover:
            real = np.arccos(b)
        else:
            apx = a + x
            if x <= 1.0:
                real = np.arctan(np.sqrt(0.5 * apx * (yy / (r + xp1) + (s - xm1))) / x)
            else:
                real = np.arctan(y * np.sqrt(0.5 * (apx / (r + xp1) + apx / (s + xm1))) / x)
        imag = _hull_imag(x, yy, r, s, a, xp1, xm1)
    else:
        xp1 = 1.0 + x
        xm1 = x - 1.0
        if y <= POLICY.machine_epsilon * abs(xm1):
            if x < 1.0:
                real = np.arccos(x)
                imag = y / np.sqrt(xp1 * (1.0 - x))
            else:
                real = ZERO
                imag = np.log(x + np.sqrt(x * x - 1.0))
        elif y <= POLICY.asin_safe_min:
            real = np.sqrt(y)
            imag = np.sqrt(y)
        elif eps * y - 1.0 >= x:
            real = PI_OVER_2
            imag = LN2 + np.log(y)
        elif x > 1.0:
            real = np.arctan(y / x)
            xoy = x / y
            imag = LN2 + np.log(y) + 0.5 * np.log1p(xoy * xoy)
        else:
            real = PI_OVER_2
            a = np.sqrt(1.0 + y * y)
            imag = 0.5 * np.log1p(2.0 * y * (y + a))

    if negative(z.re):
        real = PI - real
    if flip_imag:
        imag = -imag
    return Complex(real, imag)


@np.errstate(all="ignore")
def atan(z: Complex) -> Complex:
    """
    Principal inverse tangent, ``-i * atanh(i*z)``.

    Tiny inputs are returned unchanged; ``atan(±inf + y*i) = ±pi/2 + 0i``,
    ``atan(x ± inf*i) = pi/2 + 0i`` and ``atan(±i)`` is ``0 ± inf*i``.
    """
    x, y = z.re, z.im

    if np.sqrt(x * x + y * y) < POLICY.atan_tiny_modulus:
        return Complex(x, y)
    if np.isnan(x) or np.isnan(y):
        return _nan()
    if np.isinf(x):
        return Complex(PI_OVER_2 if x > 0 else -PI_OVER_2, 0.0)
    if np.isinf(y):
        return Complex(PI_OVER_2, 0.0)
    if x == 0:
        if y == 1:
            return Complex(0.0, INF)
        if y == -1:
            return Complex(0.0, NEG_INF)

    from .inverse_hyperbolic import atanh

    return mult_minus_i(atanh(mult_i(z)))


@np.errstate(all="ignore")
def acot(z: Complex) -> Complex:
    """
    Inverse cotangent, ``atan(1/z)``.

    ``acot(0) = pi/2``, ``acot(±i) = 0 ∓ inf*i`` and infinite inputs give
    ``0 + 0i``. In the third quadrant the result is reflected through
    ``acot(-z) = pi - acot(z)``.
    """
    x, y = z.re, z.im

    if np.isnan(x) or np.isnan(y):
        return _nan()
    if x == 0 and y == 0:
        return Complex(PI_OVER_2, 0.0)
    if x == 0 and y == 1:
        return Complex(0.0, NEG_INF)
    if x == 0 and y == -1:
        return Complex(0.0, INF)
    if np.isinf(x) or np.isinf(y):
        return Complex(0.0, 0.0)

    norm = z.mag
    if norm < POLICY.acot_tiny_modulus:
        return Complex(PI_OVER_2 - x, -y)

    if x < 0 and y < 0:
        w = acot(Complex(-x, -y))
        return Complex(PI - w.re, -w.im)

    den = norm * norm
    return atan(Complex(x / den, -y / den))


@np.errstate(all="ignore")
def asec(z: Complex) -> Complex:
    """
    Inverse secant, ``acos(1/z)``.

    ``asec(±1) = 0`` / ``pi``, ``asec(0) = pi/2 + inf*i`` and infinite
    inputs give ``pi/2 + 0i``.
    """
    x, y = z.re, z.im

    if np.isnan(x) or np.isnan(y):
        return _nan()
    if np.isinf(x) or np.isinf(y):
        return Complex(PI_OVER_2, 0.0)

    if y == 0:
        if x == 1:
            return Complex(0.0, 0.0)
        if x == -1:
            return Complex(PI, 0.0)
        if x == 0:
            return Complex(PI_OVER_2, INF)
        if abs(x) > 1:
            return Complex(np.arccos(1.0 / x), 0.0)

    den = x * x + y * y
    if den == 0:
        return Complex(PI_OVER_2, INF)
    return acos(Complex(x / den, -y / den))


@np.errstate(all="ignore")
def acsc(z: Complex) -> Complex:
    """
    Inverse cosecant, ``asin(1/z)``.

    ``acsc(±1) = ±pi/2``, ``acsc(0) = pi/2 + inf*i`` and infinite inputs
    give ``0 + 0i``.
    """
    x, y = z.re, z.im

    if np.isnan(x) or np.isnan(y):
        return _nan()
    if not z.is_finite():
        return Complex(0.0, 0.0)

    if y == 0:
        if x == 1:
            return Complex(PI_OVER_2, 0.0)
        if x == -1:
            return Complex(-PI_OVER_2, 0.0)
        if x == 0:
            return Complex(PI_OVER_2, INF)
        return asin(Complex(1.0 / x, 0.0))

    den = x * x + y * y
    if den == 0:
        return Complex(PI_OVER_2, INF)
    return asin(Complex(x / den, -y / den))

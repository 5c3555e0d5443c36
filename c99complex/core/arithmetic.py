"""
Elementary complex arithmetic and magnitude/phase primitives.

Addition, subtraction, negation and conjugation are plain component-wise
IEEE-754 operations. Multiplication and division carry the Annex G special
value tables; division uses Kahan's (Smith's) scaled algorithm for the
general case.
"""

from typing import Any, Optional

import numpy as np

from ..errors import UnsupportedOperationError
from .complex_number import Complex, Real
from .ieee import (
    INF,
    NAN,
    NEG_INF,
    NEG_ZERO,
    ZERO,
    is_integer,
    round_half_up,
    safe_prod,
    sign as _sign,
    signed_zero,
)
from .numeric_policy import POLICY, SQRT_HALF


def _nan() -> Complex:
    return Complex(NAN, NAN)


def clone(z: Complex) -> Complex:
    """Return a new value with the same components."""
    return Complex(z.re, z.im)


@np.errstate(all="ignore")
def add(z1: Complex, z2: Complex) -> Complex:
    return Complex(z1.re + z2.re, z1.im + z2.im)


@np.errstate(all="ignore")
def sub(z1: Complex, z2: Complex) -> Complex:
    return Complex(z1.re - z2.re, z1.im - z2.im)


def neg(z: Complex) -> Complex:
    return Complex(-z.re, -z.im)


def conj(z: Complex) -> Complex:
    return Complex(z.re, -z.im)


@np.errstate(all="ignore")
def mul(z1: Complex, z2: Complex) -> Complex:
    """
    Multiply two complex numbers.

    Any NaN operand gives ``NaN + NaN*i``. An indeterminate ``0 * inf``
    product that leaks a NaN into one component makes the whole product
    ``NaN + NaN*i``.
    """
    x1, y1, x2, y2 = z1.re, z1.im, z2.re, z2.im
    parts = (x1, y1, x2, y2)

    if any(np.isnan(p) for p in parts):
        return _nan()

    a = x1 * x2 - y1 * y2
    b = x1 * y2 + y1 * x2

    if (np.isnan(a) or np.isnan(b)) and not all(np.isfinite(p) for p in parts):
        if any(p == 0 for p in parts):
            return _nan()

    return Complex(a, b)


@np.errstate(all="ignore")
def div(z1: Complex, z2: Complex) -> Complex:
    """
    Divide ``z1`` by ``z2``.

    Special values are resolved in this order:

    1. zero denominator: ``0/0`` is NaN, anything else is an infinity whose
       sign follows the matching numerator component
    2. zero numerator: signed zeros from the signs of the dot products
       ``a*c + b*d`` and ``b*c - a*d``
    3. finite numerator over ``±inf + NaN*i``: signed zeros by quadrant
    4. finite numerator over a fully infinite denominator: signed zeros,
       treating ``0 * inf`` as 0
    5. ``NaN + 0i`` or ``0 + NaN*i`` over a fully infinite denominator
    6. any remaining NaN in a non-finite numerator: ``NaN + NaN*i``
    7. Kahan's scaled division
    """
    a, b = z1.re, z1.im
    c, d = z2.re, z2.im

    if c == 0 and d == 0:
        if a == 0 and b == 0:
            return _nan()
        return Complex(NEG_INF if _sign(a) == -1 else INF, NEG_INF if _sign(b) == -1 else INF)

    if a == 0 and b == 0:
        return Complex(signed_zero(a * c + b * d), signed_zero(b * c - a * d))

    finite_numerator = np.isfinite(a) and np.isfinite(b)

    if finite_numerator and np.isnan(d):
        if c == INF:
            return Complex(ZERO if a >= 0 else NEG_ZERO, ZERO if b >= 0 else NEG_ZERO)
        if c == NEG_INF:
            return Complex(ZERO if a <= 0 else NEG_ZERO, ZERO if b <= 0 else NEG_ZERO)

    if finite_numerator and not np.isfinite(c) and not np.isfinite(d):
        real_sum = safe_prod(a, c) + safe_prod(b, d)
        imag_sum = safe_prod(b, c) - safe_prod(a, d)
        return Complex(signed_zero(real_sum), signed_zero(imag_sum))

    if np.isnan(a) and b == 0:
        if c == INF and np.isinf(d):
            return Complex(ZERO, ZERO)
        if c == NEG_INF:
            if d == INF:
                return Complex(NEG_ZERO, NEG_ZERO)
            if d == NEG_INF:
                return Complex(NEG_ZERO, ZERO)

    if a == 0 and np.isnan(b) and np.isinf(c) and np.isinf(d):
        return Complex(ZERO if c > 0 else NEG_ZERO, ZERO if d > 0 else NEG_ZERO)

    if not finite_numerator and (np.isnan(a) or np.isnan(b)):
        return _nan()

    if abs(c) >= abs(d):
        r = d / c
        den = c + d * r
        re = (a + b * r) / den
        im = (b - a * r) / den
    else:
        r = c / d
        den = c * r + d
        re = (a * r + b) / den
        im = (b * r - a) / den
    return Complex(re, im)


def recip(z: Complex) -> Complex:
    """Reciprocal ``1 / z``."""
    return div(Complex(1.0, 0.0), z)


def abs_(z: Complex) -> np.float64:
    """Euclidean norm, ``hypot(re, im)``."""
    return z.mag


def arg(z: Complex) -> np.float64:
    """Phase angle ``atan2(im, re)`` in ``[-pi, pi]``."""
    return z.phase


@np.errstate(all="ignore")
def sign(z: Complex) -> Complex:
    """
    Project ``z`` onto the unit circle.

    Signed zeros are returned unchanged, an infinity on one axis maps to
    ``±1`` on that axis, and a diagonal infinity maps to ``(±√½, ±√½)``.
    """
    x, y = z.re, z.im

    if x == 0 and y == 0:
        return Complex(x, y)
    if np.isnan(x) or np.isnan(y):
        return _nan()
    if np.isinf(x) and np.isfinite(y):
        return Complex(_sign(x), 0.0)
    if np.isinf(y) and np.isfinite(x):
        return Complex(0.0, _sign(y))
    if np.isinf(x) and np.isinf(y):
        return Complex(np.copysign(SQRT_HALF, x), np.copysign(SQRT_HALF, y))

    mod = z.mag
    if mod == 0:
        return Complex(0.0, 0.0)
    return Complex(x / mod, y / mod)


def ceil(z: Complex) -> Complex:
    return Complex(np.ceil(z.re), np.ceil(z.im))


def floor(z: Complex) -> Complex:
    return Complex(np.floor(z.re), np.floor(z.im))


@np.errstate(all="ignore")
def _round_part(value, ndigits) -> np.float64:
    if ndigits is None or ndigits == 0:
        return round_half_up(value)
    if np.isnan(value) or not is_integer(ndigits):
        return NAN
    if np.isinf(value):
        return np.float64(value)
    factor = np.float64(10.0) ** abs(int(ndigits))
    if ndigits > 0:
        return round_half_up(value * factor) / factor
    return round_half_up(value / factor) * factor


def round_(z: Complex, ndigits: Optional[Real] = None) -> Complex:
    """
    Round both components to ``ndigits`` decimals, halves toward +inf.

    Args:
        z: Complex value
        ndigits: Decimal places; negative values round to tens, hundreds...

    Returns:
        Rounded value. A NaN or non-integral ``ndigits`` gives NaN parts.
    """
    return Complex(_round_part(z.re, ndigits), _round_part(z.im, ndigits))


def equals(z1: Any, z2: Any) -> bool:
    """Component-wise comparison within one machine epsilon."""
    if not isinstance(z1, Complex) or not isinstance(z2, Complex):
        return False
    tol = POLICY.machine_epsilon
    with np.errstate(all="ignore"):
        return bool(abs(z1.re - z2.re) < tol and abs(z1.im - z2.im) < tol)


def less_than(z1: Complex, z2: Complex) -> bool:
    """Always raises: the complex plane is not ordered."""
    raise UnsupportedOperationError(
        "less_than", "Inequalities are not well-defined in the complex plane."
    )


def greater_than(z1: Complex, z2: Complex) -> bool:
    """Always raises: the complex plane is not ordered."""
    raise UnsupportedOperationError(
        "greater_than", "Inequalities are not well-defined in the complex plane."
    )


def mult_i(z: Complex) -> Complex:
    """Rotate by +90 degrees, ``i*z``."""
    if z.is_nan():
        return _nan()
    return Complex(-z.im, z.re)


def mult_minus_i(z: Complex) -> Complex:
    """Rotate by -90 degrees, ``-i*z``."""
    if z.is_nan():
        return _nan()
    return Complex(z.im, -z.re)

"""IEEE-754 scalar helpers shared by the complex kernels.

All helpers accept Python floats or numpy float64 values and return
numpy float64 / bool values. None of them raise on special values.
"""

import numpy as np

NAN = np.float64(np.nan)
INF = np.float64(np.inf)
NEG_INF = np.float64(-np.inf)
ZERO = np.float64(0.0)
NEG_ZERO = np.float64(-0.0)
ONE = np.float64(1.0)


def is_neg_zero(x) -> bool:
    return x == 0 and bool(np.signbit(x))


def is_pos_zero(x) -> bool:
    return x == 0 and not np.signbit(x)


def negative(x) -> bool:
    """Sign test that counts -0.0 as negative and NaN as non-negative."""
    return bool(x < 0 or (x == 0 and np.signbit(x)))


def sign(x) -> np.float64:
    """Sign of ``x``: ±1 for nonzero values, ±0 for zeros, NaN for NaN."""
    x = np.float64(x)
    if x == 0 or np.isnan(x):
        return x
    return ONE if x > 0 else -ONE


def sign_or_one(x) -> np.float64:
    """Like :func:`sign` but maps zeros and NaN to 1."""
    s = sign(x)
    if s == 0 or np.isnan(s):
        return ONE
    return s


def signed_zero(x) -> np.float64:
    """-0.0 when ``x`` is negative or -0.0, else +0.0."""
    return NEG_ZERO if (x < 0 or is_neg_zero(x)) else ZERO


def safe_prod(x, y) -> np.float64:
    """Product that treats ``0 * ±inf`` as 0."""
    if (x == 0 and np.isinf(y)) or (y == 0 and np.isinf(x)):
        return ZERO
    with np.errstate(all="ignore"):
        return np.float64(x) * np.float64(y)


def round_half_up(x) -> np.float64:
    """Round half toward +inf. Results that round to zero keep the sign of ``x``."""
    x = np.float64(x)
    if not np.isfinite(x) or abs(x) >= 2.0 ** 52:
        return x
    r = np.floor(x + 0.5)
    # values in [-0.5, 0) round to -0
    if r == 0 and (x < 0 or np.signbit(x)):
        return NEG_ZERO
    return np.float64(r)


def is_integer(x) -> bool:
    return bool(np.isfinite(x)) and np.floor(x) == x

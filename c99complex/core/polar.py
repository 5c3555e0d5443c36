"""Polar to rectangular conversion."""

import numpy as np

from .complex_number import Complex
from .ieee import INF, NAN, NEG_INF, ZERO
from .numeric_policy import PI, POLICY
from .trig import reduce_angle


def normalize_phase(phase) -> np.float64:
    """Map an angle into ``[-pi, pi]`` (see :func:`.trig.reduce_angle`)."""
    return reduce_angle(phase)


def _round_or_inf(value, threshold, infinite: bool) -> np.float64:
    if abs(value) < threshold:
        return ZERO
    if not np.isfinite(value):
        return NAN
    if infinite:
        return INF if value > 0 else NEG_INF
    return np.float64(value)


@np.errstate(all="ignore")
def polar(magnitude, phase) -> Complex:
    """
    Build a complex number from magnitude and phase.

    A negative magnitude is folded into the phase (rotated by pi). Trig
    residues below the zero tolerance are snapped to exact zeros, so
    ``polar(1, pi/2)`` is exactly ``0 + 1i``. An infinite magnitude yields
    signed infinities along the directions whose trig factor is not
    negligible.

    Args:
        magnitude: Radius, may be negative or infinite
        phase: Angle in radians

    Returns:
        Rectangular complex value; NaN parts when either input is NaN or
        the magnitude is infinite and the phase is not finite
    """
    magnitude = np.float64(magnitude)
    phase = np.float64(phase)
    if np.isnan(magnitude) or np.isnan(phase):
        return Complex(NAN, NAN)

    r = abs(magnitude)
    angle = normalize_phase(phase)

    if magnitude < 0 and np.isfinite(angle):
        angle = angle - PI if angle > 0 else angle + PI

    if not np.isfinite(r):
        if not np.isfinite(angle):
            return Complex(NAN, NAN)
        tol = POLICY.infinite_polar_tolerance
        return Complex(
            _round_or_inf(np.cos(angle), tol, True),
            _round_or_inf(np.sin(angle), tol, True),
        )

    tol = POLICY.zero_tolerance
    return Complex(
        _round_or_inf(r * np.cos(angle), tol, False),
        _round_or_inf(r * np.sin(angle), tol, False),
    )

"""
Shared numeric policy for c99complex.

Every tolerance, crossover and overflow guard used by the complex kernels
lives here. The policy is built once at import time from ``numpy.finfo``
for float64 and is never mutated afterwards, so it can be shared freely
between threads.
"""

import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

_FINFO = np.finfo(np.float64)


@dataclass(frozen=True)
class NumericPolicy:
    """
    Read-only numeric policy for double precision complex arithmetic.

    Thresholds fall into three groups: machine derived values (computed from
    ``numpy.finfo``), algorithm crossovers taken from the published
    Hull-Fairgrieve-Tang and Boost algorithms, and tolerances that select
    closed-form shortcuts near poles and axes. The last group is empirical;
    see DESIGN.md for which entries are kept for compatibility only.
    """

    # Machine derived
    epsilon: float = float(2.0 ** -53)  # half an ulp of 1.0
    machine_epsilon: float = float(_FINFO.eps)  # 2**-52

    # Hull-Fairgrieve-Tang / Boost crossovers
    a_crossover: float = 10.0
    b_crossover: float = 0.6417
    atanh_crossover: float = 0.3
    asin_safe_max_divisor: float = 8.0
    asin_safe_min_factor: float = 4.0
    atanh_safe_divisor: float = 2.0

    # Circular trigonometric tolerances
    zero_tolerance: float = 1e-15  # trig residues treated as exact zero
    pole_tolerance: float = 1e-30  # squared modulus below this is a pole
    infinite_polar_tolerance: float = 1e-9  # polar() with infinite magnitude

    # Hyperbolic tolerances
    hyperbolic_eps_scale: float = 15.0  # sinh/cosh/tanh axis tolerance in ulps
    coth_tiny_modulus: float = 1e-8
    coth_axis_tolerance: float = 1e-10
    sech_scale: float = 1e-300
    sech_tiny_modulus: float = 1e-100
    sech_axis_tolerance: float = 1e-10

    # Exponential / power overflow guards
    exp_overflow: float = 1e308
    pow_underflow: float = 1e-308

    # Inverse function guards
    atan_tiny_modulus: float = 1e-100
    acot_tiny_modulus: float = 1e-100
    acoth_large_imag: float = 1e8
    acoth_subnormal: float = 2.2e-308
    acoth_tiny_part: float = 1e-150
    acoth_scale: float = 1e100
    asech_large_imag: float = 1e8
    asech_subnormal: float = 2.2e-308
    acsch_tiny_part: float = 1e-300
    acsch_large_modulus: float = 1e12
    acsch_ratio: float = 1e-6

    @staticmethod
    def get_epsilon() -> float:
        """Get machine epsilon for float64."""
        return float(_FINFO.eps)

    @staticmethod
    def get_max() -> float:
        """Get maximum representable float64 value."""
        return float(_FINFO.max)

    @staticmethod
    def get_min() -> float:
        """Get smallest positive normal float64 value."""
        return float(_FINFO.tiny)

    @staticmethod
    def get_min_subnormal() -> float:
        """Get smallest positive subnormal float64 value."""
        return float(_FINFO.smallest_subnormal)

    @classmethod
    def safe_max(cls, k: float) -> float:
        """
        Overflow guard ``sqrt(MAX) / k``.

        Args:
            k: Scaling divisor

        Returns:
            Largest magnitude whose square (times k**2) stays finite
        """
        return float(np.sqrt(cls.get_max()) / k)

    @classmethod
    def safe_min(cls, k: float) -> float:
        """
        Underflow guard ``sqrt(MIN_SUBNORMAL) * k``.

        Args:
            k: Scaling factor

        Returns:
            Smallest magnitude whose square does not vanish entirely
        """
        return float(np.sqrt(cls.get_min_subnormal()) * k)

    @property
    def asin_safe_max(self) -> float:
        return self.safe_max(self.asin_safe_max_divisor)

    @property
    def asin_safe_min(self) -> float:
        return self.safe_min(self.asin_safe_min_factor)

    @property
    def atanh_safe_upper(self) -> float:
        return self.safe_max(self.atanh_safe_divisor)

    @property
    def atanh_safe_lower(self) -> float:
        return self.safe_min(self.atanh_safe_divisor)

    @property
    def hyperbolic_eps(self) -> float:
        return self.machine_epsilon * self.hyperbolic_eps_scale


POLICY = NumericPolicy()
logger.debug(
    "numeric policy: epsilon=%r safe_max(8)=%r safe_min(4)=%r",
    POLICY.epsilon,
    POLICY.asin_safe_max,
    POLICY.asin_safe_min,
)

# Mathematical constants as float64
PI = np.float64(np.pi)
TWO_PI = np.float64(2.0 * np.pi)
PI_OVER_2 = np.float64(1.5707963267948966)
PI_OVER_4 = np.float64(0.7853981633974483)
THREE_PI_OVER_4 = np.float64(2.356194490192345)
LN2 = np.float64(0.6931471805599453)
LN10 = np.float64(2.302585092994046)
SQRT_HALF = np.float64(0.7071067811865476)
SQRT2 = np.float64(1.4142135623730951)
ONE_OVER_COSH_1 = np.float64(0.6480542736638854)  # sec(±i)
ONE_OVER_SINH_1 = np.float64(0.8509181282393216)  # csc(±i)
